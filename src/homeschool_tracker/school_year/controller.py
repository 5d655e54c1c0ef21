from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import to_date
from ..common.responses import error_response, json_body, ok
from ..container import Container
from ..core.exceptions import DomainError
from .model import SchoolYear


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/school-year", methods=["GET"], endpoint="get_school_year")
    def get_school_year():
        try:
            school_year = store.get_school_year()
            return ok(school_year=school_year.to_dict() if school_year else None)
        except DomainError as e:
            return error_response(e)

    @app.route("/api/school-year", methods=["PUT"], endpoint="update_school_year")
    def update_school_year():
        try:
            body = json_body()
            store.update_school_year(
                SchoolYear(
                    start_date=to_date(body.get("start_date"), "start_date"),
                    end_date=to_date(body.get("end_date"), "end_date"),
                )
            )
            return ok(school_year=store.get_school_year().to_dict())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/data/clear", methods=["POST"], endpoint="clear_data")
    def clear_data():
        """Wipe everything and restore the seeded defaults.

        The client is responsible for asking the user to confirm first.
        """
        try:
            store.clear()
            return ok(
                children=[c.to_dict() for c in store.list_children()],
                subjects=[s.to_dict() for s in store.list_subjects()],
                school_year=store.get_school_year().to_dict(),
            )
        except DomainError as e:
            return error_response(e)

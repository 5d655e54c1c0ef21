from __future__ import annotations

from flask import Flask

from ..common.responses import error_response, json_body, ok
from ..container import Container
from ..core.exceptions import DomainError
from .model import Child, Subject


def register(app: Flask, container: Container) -> None:
    store = container.store

    # ----- children -----

    @app.route("/api/children", methods=["GET"], endpoint="list_children")
    def list_children():
        try:
            return ok(children=[c.to_dict() for c in store.list_children()])
        except DomainError as e:
            return error_response(e)

    @app.route("/api/children", methods=["POST"], endpoint="add_child")
    def add_child():
        try:
            child_id = store.add_child(json_body().get("name", ""))
            return ok(201, id=child_id, child=store.get_child(child_id).to_dict())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/children/<child_id>", methods=["PUT"], endpoint="update_child")
    def update_child(child_id: str):
        try:
            body = json_body()
            current = store.get_child(child_id)
            store.update_child(
                Child(id=child_id, name=body.get("name", current.name), order=body.get("order", current.order))
            )
            return ok(child=store.get_child(child_id).to_dict())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/children/<child_id>", methods=["DELETE"], endpoint="delete_child")
    def delete_child(child_id: str):
        try:
            store.delete_child(child_id)
            return ok()
        except DomainError as e:
            return error_response(e)

    # ----- subjects -----

    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        try:
            return ok(subjects=[s.to_dict() for s in store.list_subjects()])
        except DomainError as e:
            return error_response(e)

    @app.route("/api/subjects", methods=["POST"], endpoint="add_subject")
    def add_subject():
        try:
            subject_id = store.add_subject(json_body().get("name", ""))
            return ok(201, id=subject_id, subject=store.get_subject(subject_id).to_dict())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/subjects/<subject_id>", methods=["PUT"], endpoint="update_subject")
    def update_subject(subject_id: str):
        try:
            body = json_body()
            current = store.get_subject(subject_id)
            store.update_subject(
                Subject(id=subject_id, name=body.get("name", current.name), order=body.get("order", current.order))
            )
            return ok(subject=store.get_subject(subject_id).to_dict())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/subjects/<subject_id>", methods=["DELETE"], endpoint="delete_subject")
    def delete_subject(subject_id: str):
        try:
            store.delete_subject(subject_id)
            return ok()
        except DomainError as e:
            return error_response(e)

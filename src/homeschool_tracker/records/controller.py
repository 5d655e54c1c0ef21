from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import today_local
from ..common.responses import error_response, json_body, ok
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from .model import DayOverview


def _overview_to_dict(overview: DayOverview) -> dict:
    return {
        "date": overview.record_date.strftime("%Y-%m-%d"),
        "total_subjects": overview.total_subjects,
        "children_active": overview.children_active,
        "total_completed": overview.total_completed,
        "completion_percent": overview.completion_percent,
        "children": [
            {
                "child_id": c.child_id,
                "child_name": c.child_name,
                "completed_subject_ids": list(c.completed_subject_ids),
                "completed_count": c.completed_count,
                "progress_percent": c.progress_percent,
                "status": "Present" if c.present else "Absent",
            }
            for c in overview.children
        ],
    }


def register(app: Flask, container: Container) -> None:
    progress = container.daily_progress_service

    @app.route("/api/days/today", methods=["GET"], endpoint="day_today")
    def day_today():
        try:
            return ok(day=_overview_to_dict(progress.day_overview(today_local())))
        except DomainError as e:
            return error_response(e)

    @app.route("/api/days/<day>", methods=["GET"], endpoint="day_overview")
    def day_overview(day: str):
        try:
            return ok(day=_overview_to_dict(progress.day_overview(day)))
        except DomainError as e:
            return error_response(e)

    @app.route("/api/records/toggle", methods=["POST"], endpoint="toggle_record")
    def toggle_record():
        try:
            body = json_body()
            child_id = body.get("child_id")
            subject_id = body.get("subject_id")
            if not child_id or not subject_id:
                raise ValidationError("child_id and subject_id are required")
            completed = progress.toggle(body.get("date") or today_local(), str(child_id), str(subject_id))
            return ok(completed=completed)
        except DomainError as e:
            return error_response(e)

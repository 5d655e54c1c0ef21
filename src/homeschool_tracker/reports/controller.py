from __future__ import annotations

import io
from datetime import timedelta

from flask import Flask, request, send_file

from ..common.datetime_utils import format_iso_date, to_date, today_local
from ..common.responses import error_response, ok
from ..container import Container
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import DomainError
from .presets import days_in_range, preset_ranges
from .service import build_subject_summary


def register(app: Flask, container: Container) -> None:
    store = container.store

    def _range_from_args():
        today = today_local()
        default_days = int(app.config.get("REPORT_DEFAULT_DAYS", DEFAULT_REPORT_DAYS))
        start = to_date(request.args.get("start") or today - timedelta(days=default_days), "start")
        end = to_date(request.args.get("end") or today, "end")
        return start, end

    @app.route("/api/reports/summary", methods=["GET"], endpoint="report_summary")
    def report_summary():
        try:
            start, end = _range_from_args()
            summaries = container.summary_service.summarize(start, end)
            return ok(
                start=format_iso_date(start),
                end=format_iso_date(end),
                days=days_in_range(start, end),
                subjects=[s.to_dict() for s in store.list_subjects()],
                summary=[cs.to_dict() for cs in summaries],
            )
        except DomainError as e:
            return error_response(e)

    @app.route("/api/reports/subjects", methods=["GET"], endpoint="report_subjects")
    def report_subjects():
        try:
            start, end = _range_from_args()
            pivot = build_subject_summary(container.summary_service.summarize(start, end), store.list_subjects())
            return ok(
                start=format_iso_date(start),
                end=format_iso_date(end),
                children=pivot.child_names,
                rows=[
                    {"subject_id": r.subject_id, "subject_name": r.subject_name, "counts": r.counts, "total": r.total}
                    for r in pivot.rows
                ],
                total_school_days=pivot.total_school_days,
                average_days_per_child=round(pivot.average_days_per_child, 1),
            )
        except DomainError as e:
            return error_response(e)

    @app.route("/api/reports/presets", methods=["GET"], endpoint="report_presets")
    def report_presets():
        try:
            presets = preset_ranges(today_local(), school_year=store.get_school_year())
            return ok(presets=[p.to_dict() for p in presets])
        except DomainError as e:
            return error_response(e)

    @app.route("/reports/<kind>.<fmt>", methods=["GET"], endpoint="report_export")
    def report_export(kind: str, fmt: str):
        try:
            start, end = _range_from_args()
            exported = container.export_service.export(kind, fmt, start, end)
        except DomainError as e:
            return error_response(e)

        return send_file(
            io.BytesIO(exported.data),
            mimetype=exported.content_type,
            as_attachment=True,
            download_name=exported.filename,
        )

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import DateLike, now_local, to_date
from ..core.enums import ExportFormat, ReportKind
from ..core.exceptions import ValidationError
from ..store.entity_store import EntityStore
from .exporters.base import ReportExporter
from .exporters.csv_exporter import MatrixCsvExporter
from .exporters.excel_exporter import MatrixExcelExporter
from .exporters.pdf_exporter import (
    AttendanceSummaryPdfExporter,
    DetailedReportPdfExporter,
    SubjectSummaryPdfExporter,
)
from .model import ReportDocument
from .service import AttendanceSummaryService

logger = logging.getLogger(__name__)

_TITLES = {
    ReportKind.ATTENDANCE: ("Attendance Summary", "attendance-summary"),
    ReportKind.SUBJECTS: ("Subject Summary", "subject-summary"),
    ReportKind.DETAILED: ("Detailed Report", "detailed-report"),
    ReportKind.MATRIX: ("Attendance Matrix", "attendance-matrix"),
}


def default_exporters() -> dict[tuple[ReportKind, ExportFormat], ReportExporter]:
    return {
        (ReportKind.ATTENDANCE, ExportFormat.PDF): AttendanceSummaryPdfExporter(),
        (ReportKind.SUBJECTS, ExportFormat.PDF): SubjectSummaryPdfExporter(),
        (ReportKind.DETAILED, ExportFormat.PDF): DetailedReportPdfExporter(),
        (ReportKind.MATRIX, ExportFormat.CSV): MatrixCsvExporter(),
        (ReportKind.MATRIX, ExportFormat.XLSX): MatrixExcelExporter(),
    }


@dataclass(frozen=True)
class ExportedFile:
    filename: str
    content_type: str
    data: bytes


class ReportExportService:
    """Use case: turn a summarized date range into a downloadable document."""

    def __init__(
        self,
        store: EntityStore,
        summaries: AttendanceSummaryService,
        *,
        exporters: Optional[dict[tuple[ReportKind, ExportFormat], ReportExporter]] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self._store = store
        self._summaries = summaries
        self._exporters = exporters if exporters is not None else default_exporters()
        self._now = now or now_local

    def available(self) -> list[tuple[ReportKind, ExportFormat]]:
        return list(self._exporters)

    def build_document(self, kind: ReportKind, start: DateLike, end: DateLike) -> ReportDocument:
        start_d = to_date(start, "start")
        end_d = to_date(end, "end")
        summaries = self._summaries.summarize(start_d, end_d)
        return ReportDocument(
            title=_TITLES[kind][0],
            start_date=start_d,
            end_date=end_d,
            exported_at=self._now(),
            summaries=summaries,
            subjects=self._store.list_subjects(),
        )

    def export(self, kind: str | ReportKind, fmt: str | ExportFormat, start: DateLike, end: DateLike) -> ExportedFile:
        try:
            kind = ReportKind(kind)
            fmt = ExportFormat(fmt)
        except ValueError as e:
            raise ValidationError(f"Unknown report {kind!s}.{fmt!s}") from e

        exporter = self._exporters.get((kind, fmt))
        if exporter is None:
            raise ValidationError(f"Report {kind.value} is not available as {fmt.value}")

        document = self.build_document(kind, start, end)
        data = exporter.render(document)
        filename = f"{_TITLES[kind][1]}-{document.exported_at.strftime('%Y-%m-%d-%H%M')}.{exporter.extension}"
        logger.info("Exported %s (%d bytes)", filename, len(data))
        return ExportedFile(filename=filename, content_type=exporter.content_type, data=data)

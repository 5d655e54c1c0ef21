from __future__ import annotations

import io
from abc import abstractmethod
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...common.datetime_utils import format_display_date
from ..model import ReportDocument
from ..service import build_subject_summary
from .base import ReportExporter

HEADER_BLUE = colors.Color(59 / 255, 130 / 255, 246 / 255)
HEADER_GRAY = colors.Color(107 / 255, 114 / 255, 128 / 255)


def _grid_table(data: list[list], *, header_color, font_size: int = 10, bold_first_column: bool = False) -> Table:
    table = Table(data, repeatRows=1, hAlign="LEFT")
    style = [
        ("BACKGROUND", (0, 0), (-1, 0), header_color),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.HexColor("#d1d5db")),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    if bold_first_column:
        style.append(("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"))
    table.setStyle(TableStyle(style))
    return table


class PdfReportExporter(ReportExporter):
    """Shared page setup and header; subclasses supply the body flowables."""

    content_type = "application/pdf"
    extension = "pdf"

    def __init__(self):
        self._styles = getSampleStyleSheet()

    def _header(self, document: ReportDocument) -> list:
        date_range = f"{format_display_date(document.start_date)} - {format_display_date(document.end_date)}"
        return [
            Paragraph(f"HomeSchool Tracker - {escape(document.title)}", self._styles["Title"]),
            Paragraph(f"Date Range: {date_range}", self._styles["Normal"]),
            Paragraph(f"Exported: {document.exported_at.strftime('%Y-%m-%d %H:%M')}", self._styles["Normal"]),
            Spacer(1, 8 * mm),
        ]

    @abstractmethod
    def _body(self, document: ReportDocument) -> list:
        raise NotImplementedError

    def render(self, document: ReportDocument) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=20 * mm,
            rightMargin=20 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"HomeSchool Tracker - {document.title}",
        )
        doc.build(self._header(document) + self._body(document))
        return buffer.getvalue()


class AttendanceSummaryPdfExporter(PdfReportExporter):
    """Total attendance days per child, then a child/subject breakdown."""

    def _body(self, document: ReportDocument) -> list:
        totals = [["Child", "Total Attendance Days"]]
        totals += [[cs.child_name, str(cs.total_days)] for cs in document.summaries]

        breakdown = [["Child", "Subject", "Days Completed"]]
        for cs in document.summaries:
            for s in document.subjects:
                breakdown.append([cs.child_name, s.name, str(cs.subject_totals.get(s.id, 0))])

        return [
            _grid_table(totals, header_color=HEADER_BLUE),
            Spacer(1, 10 * mm),
            _grid_table(breakdown, header_color=HEADER_BLUE, font_size=9),
        ]


class SubjectSummaryPdfExporter(PdfReportExporter):
    """One row per subject with a column per child and a total."""

    def _body(self, document: ReportDocument) -> list:
        pivot = build_subject_summary(document.summaries, document.subjects)
        data = [["Subject", *pivot.child_names, "Total"]]
        data += [[row.subject_name, *[str(n) for n in row.counts], str(row.total)] for row in pivot.rows]

        return [
            _grid_table(data, header_color=HEADER_BLUE, bold_first_column=True),
            Spacer(1, 10 * mm),
            Paragraph(f"Total School Days: {pivot.total_school_days}", self._styles["Normal"]),
            Paragraph(f"Average Days per Child: {pivot.average_days_per_child:.1f}", self._styles["Normal"]),
        ]


class DetailedReportPdfExporter(PdfReportExporter):
    """A section per child; sections are kept whole across page breaks."""

    def _body(self, document: ReportDocument) -> list:
        flowables: list = []
        for cs in document.summaries:
            data = [["Subject", "Days Completed"]]
            data += [[s.name, str(cs.subject_totals.get(s.id, 0))] for s in document.subjects]
            flowables.append(
                KeepTogether(
                    [
                        Paragraph(f"{escape(cs.child_name)} - Summary", self._styles["Heading2"]),
                        Paragraph(f"Total Attendance Days: {cs.total_days}", self._styles["Normal"]),
                        Spacer(1, 4 * mm),
                        _grid_table(data, header_color=HEADER_GRAY),
                    ]
                )
            )
            flowables.append(Spacer(1, 8 * mm))
        return flowables

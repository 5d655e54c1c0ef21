from __future__ import annotations

from enum import Enum


class ReportKind(str, Enum):
    """Printable report layouts."""

    ATTENDANCE = "attendance"
    SUBJECTS = "subjects"
    DETAILED = "detailed"
    MATRIX = "matrix"


class ExportFormat(str, Enum):
    PDF = "pdf"
    CSV = "csv"
    XLSX = "xlsx"

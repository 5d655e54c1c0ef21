from __future__ import annotations

import csv
import io

from ..model import ReportDocument
from .base import ReportExporter, matrix_columns, matrix_rows


class MatrixCsvExporter(ReportExporter):
    """Child x subject matrix as CSV (BOM-prefixed so spreadsheet apps detect UTF-8)."""

    content_type = "text/csv"
    extension = "csv"

    def render(self, document: ReportDocument) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(matrix_columns(document))
        writer.writerows(matrix_rows(document))
        return out.getvalue().encode("utf-8-sig")

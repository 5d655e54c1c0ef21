from __future__ import annotations

import io

import pandas as pd

from ..model import ReportDocument
from ..service import build_subject_summary
from .base import ReportExporter, matrix_columns, matrix_rows


class MatrixExcelExporter(ReportExporter):
    """Workbook with a per-child sheet and a per-subject sheet."""

    content_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    extension = "xlsx"

    def render(self, document: ReportDocument) -> bytes:
        children_df = pd.DataFrame(matrix_rows(document), columns=matrix_columns(document))

        pivot = build_subject_summary(document.summaries, document.subjects)
        subjects_df = pd.DataFrame(
            [[row.subject_name, *row.counts, row.total] for row in pivot.rows],
            columns=["Subject", *pivot.child_names, "Total"],
        )

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            children_df.to_excel(writer, sheet_name="Children", index=False)
            subjects_df.to_excel(writer, sheet_name="Subjects", index=False)
        return out.getvalue()

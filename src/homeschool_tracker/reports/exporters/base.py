from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import ReportDocument


class ReportExporter(ABC):
    """Exporter interface (Strategy Pattern for report output formats)."""

    content_type: str = "application/octet-stream"
    extension: str = ""

    @abstractmethod
    def render(self, document: ReportDocument) -> bytes:
        raise NotImplementedError


def matrix_columns(document: ReportDocument) -> list[str]:
    return ["Child", "Total Days", *[s.name for s in document.subjects]]


def matrix_rows(document: ReportDocument) -> list[list]:
    """One row per child: name, total days, then a count per subject.

    Lists rather than dicts: two children (or subjects) may share a display name.
    """
    return [
        [cs.child_name, cs.total_days, *[int(cs.subject_totals.get(s.id, 0)) for s in document.subjects]]
        for cs in document.summaries
    ]

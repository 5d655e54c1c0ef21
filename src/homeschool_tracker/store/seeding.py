from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.constants import (
    DEFAULT_CHILDREN,
    DEFAULT_SUBJECTS,
    SCHOOL_YEAR_END_DAY,
    SCHOOL_YEAR_END_MONTH,
    SCHOOL_YEAR_START_DAY,
    SCHOOL_YEAR_START_MONTH,
)
from ..roster.model import Child, Subject
from ..school_year.model import SchoolYear
from .backend import StorageBackend

logger = logging.getLogger(__name__)


def default_school_year(today: date) -> SchoolYear:
    """Sep 1 of today's calendar year through Jun 30 of the next one."""
    return SchoolYear(
        start_date=date(today.year, SCHOOL_YEAR_START_MONTH, SCHOOL_YEAR_START_DAY),
        end_date=date(today.year + 1, SCHOOL_YEAR_END_MONTH, SCHOOL_YEAR_END_DAY),
    )


@dataclass(frozen=True)
class SeedResult:
    children: bool = False
    subjects: bool = False
    school_year: bool = False

    @property
    def any(self) -> bool:
        return self.children or self.subjects or self.school_year


class DefaultSeedingPolicy:
    """Populate each empty collection with its canonical defaults.

    Collections that already hold data are left alone, so calling this
    repeatedly is safe.
    """

    def __init__(
        self,
        *,
        children: Sequence[tuple[str, str]] = DEFAULT_CHILDREN,
        subjects: Sequence[tuple[str, str]] = DEFAULT_SUBJECTS,
        today: Optional[Callable[[], date]] = None,
    ):
        self._children = tuple(children)
        self._subjects = tuple(subjects)
        self._today = today or today_local

    def ensure_defaults(self, backend: StorageBackend) -> SeedResult:
        seeded_children = False
        seeded_subjects = False
        seeded_year = False

        if backend.children.count() == 0:
            for order, (child_id, name) in enumerate(self._children):
                backend.children.insert(Child(id=child_id, name=name, order=order))
            seeded_children = True

        if backend.subjects.count() == 0:
            for order, (subject_id, name) in enumerate(self._subjects):
                backend.subjects.insert(Subject(id=subject_id, name=name, order=order))
            seeded_subjects = True

        if backend.school_year.count() == 0:
            backend.school_year.upsert(default_school_year(self._today()))
            seeded_year = True

        result = SeedResult(children=seeded_children, subjects=seeded_subjects, school_year=seeded_year)
        if result.any:
            logger.info(
                "Seeded defaults (children=%s, subjects=%s, school_year=%s)",
                seeded_children,
                seeded_subjects,
                seeded_year,
            )
        return result


def subjects_from_names(names: Sequence[str]) -> tuple[tuple[str, str], ...]:
    """Build (id, name) pairs from display names, e.g. 'Social Studies' -> 'social-studies'."""
    out: list[tuple[str, str]] = []
    seen: set[str] = set()
    for raw in names:
        name = raw.strip()
        if not name:
            continue
        slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "subject"
        base, n = slug, 2
        while slug in seen:
            slug = f"{base}-{n}"
            n += 1
        seen.add(slug)
        out.append((slug, name))
    return tuple(out)

from __future__ import annotations

from typing import Optional, Protocol

from .model import SchoolYear


class SchoolYearRepository(Protocol):
    def get(self) -> Optional[SchoolYear]:
        raise NotImplementedError

    def upsert(self, school_year: SchoolYear) -> None:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

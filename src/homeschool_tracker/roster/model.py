from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RosterEntry:
    """Named, ordered entity shared by children and subjects.

    `order` drives display sequence; it need not be unique or contiguous.
    """

    id: str
    name: str
    order: int

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "order": self.order}


@dataclass(frozen=True)
class Child(RosterEntry):
    pass


@dataclass(frozen=True)
class Subject(RosterEntry):
    pass

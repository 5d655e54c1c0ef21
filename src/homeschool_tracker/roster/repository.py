from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    """Repository interface shared by the children and subjects collections.

    The service layer depends on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[RosterEntry]:
        """Return every entry in insertion order."""

        raise NotImplementedError

    def get_by_id(self, entry_id: str) -> Optional[RosterEntry]:
        raise NotImplementedError

    def insert(self, entry: RosterEntry) -> None:
        raise NotImplementedError

    def update(self, entry: RosterEntry) -> bool:
        raise NotImplementedError

    def delete(self, entry_id: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

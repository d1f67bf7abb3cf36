# hexdirectory/services/sources/in_memory.py
from __future__ import annotations

from typing import Iterable, List

from hexdirectory.domain.entities.person import RawPerson


class InMemoryPersonSource:
    """Fixed snapshot of records; every load() hands out a fresh list."""

    def __init__(self, records: Iterable[RawPerson] = ()) -> None:
        self._records = tuple(records)

    def load(self) -> List[RawPerson]:
        return list(self._records)

# hexdirectory/domain/entities/search_entry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from hexdirectory.domain.entities.person import RawPerson


@dataclass(frozen=True)
class NormalizedName:
    """Display form plus the two lowercase sort keys derived from a raw name."""
    display: str = ""
    last_key: str = ""
    first_key: str = ""


@dataclass(frozen=True, eq=False)
class SearchEntry:
    """
    A RawPerson annotated with its normalized name. Two entries are the same
    entry when they wrap the same person id.
    """
    person: RawPerson
    label: str
    last_key: str
    first_key: str

    @property
    def id(self) -> int:
        return self.person.id

    def sort_key(self) -> Tuple[str, str]:
        return (self.last_key, self.first_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchEntry):
            return NotImplemented
        return self.person.id == other.person.id

    def __hash__(self) -> int:
        return hash(self.person.id)

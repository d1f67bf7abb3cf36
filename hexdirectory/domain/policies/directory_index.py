# hexdirectory/domain/policies/directory_index.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from hexdirectory.common.logging import get_logger
from hexdirectory.common.strings.splitters import includes_ignore_case, trim
from hexdirectory.domain.entities.person import RawPerson
from hexdirectory.domain.entities.search_entry import SearchEntry
from hexdirectory.domain.policies.name_normalizer import normalize

logger = get_logger(__name__)


def make_entry(person: RawPerson) -> SearchEntry:
    n = normalize(person.name)
    return SearchEntry(person=person, label=n.display, last_key=n.last_key, first_key=n.first_key)


def sort_entries(entries: Iterable[SearchEntry]) -> List[SearchEntry]:
    """Order by (last_key, first_key). sorted() is stable, so exact ties keep input order."""
    return sorted(entries, key=SearchEntry.sort_key)


def filter_entries(entries: Iterable[SearchEntry], query: str) -> List[SearchEntry]:
    q = trim(query)
    if not q:
        return list(entries)
    return [e for e in entries if includes_ignore_case(e.label, q)]


def build_view(records: Iterable[RawPerson], query: str) -> List[SearchEntry]:
    """
    The directory as it should be shown for `query`:

      1. normalize every record into a SearchEntry
      2. stable sort by (last_key, first_key)
      3. keep entries whose label contains the trimmed query, ignoring case
         (a blank query keeps everything)

    Always returns a new list; `records` is left untouched.
    """
    ordered = sort_entries(make_entry(p) for p in records)
    view = filter_entries(ordered, query)
    logger.debug("directory view: %d of %d entries for query %r", len(view), len(ordered), query)
    return view


def find_by_id(view: Sequence[SearchEntry], person_id: int) -> Optional[SearchEntry]:
    """
    Resolve a previously selected person back to its entry in `view`.
    None if the person is gone or filtered out; clearing the stale
    selection is up to the caller.
    """
    for entry in view:
        if entry.person.id == person_id:
            return entry
    return None

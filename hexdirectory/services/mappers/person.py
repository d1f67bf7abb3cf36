# hexdirectory/services/mappers/person.py
from __future__ import annotations

from typing import Any, Mapping

from hexdirectory.domain.entities.person import RawPerson
from hexdirectory.domain.entities.search_entry import SearchEntry
from hexdirectory.services.schemas.people import PersonRecordIn, PersonRead, SearchEntryRead


def to_domain_from_record(data: Mapping[str, Any]) -> RawPerson:
    """Validate one source record and split it into id/name plus pass-through extras."""
    rec = PersonRecordIn.model_validate(data)
    return RawPerson(id=rec.id, name=rec.name, extra=dict(rec.model_extra or {}))


def to_read_schema(entry: SearchEntry) -> SearchEntryRead:
    return SearchEntryRead(
        id=entry.person.id,
        label=entry.label,
        last_key=entry.last_key,
        first_key=entry.first_key,
        person=PersonRead.model_validate(entry.person.as_dict()),
    )

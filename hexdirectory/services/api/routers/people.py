# hexdirectory/services/api/routers/people.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Path

from hexdirectory.common.settings import get_settings
from hexdirectory.domain.entities.person import RawPerson
from hexdirectory.domain.policies.directory_index import build_view, find_by_id
from hexdirectory.domain.ports.person_source import PersonSourceError, PersonSourcePort
from hexdirectory.services.api.deps import get_person_source
from hexdirectory.services.mappers.person import to_read_schema
from hexdirectory.services.schemas.people import SearchEntryRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/people", tags=["people"])


# ---- helpers ----

def _load_or_503(source: PersonSourcePort) -> List[RawPerson]:
    try:
        return source.load()
    except PersonSourceError as exc:
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail=str(exc)) from exc


# ---- search ----

@router.get("", response_model=List[SearchEntryRead])
def search_people(
    q: str = Query("", description="Case-insensitive substring matched against the display label"),
    source: PersonSourcePort = Depends(get_person_source),
) -> List[SearchEntryRead]:
    view = build_view(_load_or_503(source), q)
    return [to_read_schema(e) for e in view]


@router.get("/{person_id}", response_model=SearchEntryRead)
def get_person(
    person_id: int = Path(...),
    q: str = Query("", description="Active search; the person must still match it"),
    source: PersonSourcePort = Depends(get_person_source),
) -> SearchEntryRead:
    entry = find_by_id(build_view(_load_or_503(source), q), person_id)
    if entry is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Person not found")
    return to_read_schema(entry)

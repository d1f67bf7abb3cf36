# hexdirectory/services/schemas/people.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ---------- Source records ----------

class PersonRecordIn(BaseModel):
    """One record as delivered by a person source; unknown keys are kept."""
    model_config = ConfigDict(extra="allow")

    id: int
    name: str


# ---------- Directory ----------

class PersonRead(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str


class SearchEntryRead(BaseModel):
    id: int
    label: str
    last_key: str
    first_key: str
    person: PersonRead

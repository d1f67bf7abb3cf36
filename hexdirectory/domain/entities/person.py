# hexdirectory/domain/entities/person.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class RawPerson:
    """
    A person record exactly as the data source delivered it.

    Only `id` and `name` are understood by the directory; everything else
    (email, phone, address, company, ...) rides along in `extra` for display
    and is never validated or rewritten here.
    """
    id: int
    name: str
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # read-only view so the record can't be mutated through `extra`
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def as_dict(self) -> Dict[str, Any]:
        out = dict(self.extra)
        out.update(id=self.id, name=self.name)
        return out

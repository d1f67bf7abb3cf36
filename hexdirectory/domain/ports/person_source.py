from __future__ import annotations
from typing import List, Protocol

from hexdirectory.domain.entities.person import RawPerson


class PersonSourceError(RuntimeError):
    """The person list could not be loaded or did not have the expected shape."""


class PersonSourcePort(Protocol):
    def load(self) -> List[RawPerson]: ...

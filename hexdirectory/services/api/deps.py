# hexdirectory/services/api/deps.py
from __future__ import annotations

from hexdirectory.common.settings import get_settings
from hexdirectory.domain.ports.person_source import PersonSourcePort
from hexdirectory.services.sources.json_file import JsonFilePersonSource


def get_person_source() -> PersonSourcePort:
    """
    Provide a PersonSourcePort implementation via DI.
    Tests override this with an InMemoryPersonSource.
    """
    return JsonFilePersonSource(get_settings().source.people_file)

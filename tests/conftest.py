# tests/conftest.py
from __future__ import annotations

import pytest

from hexdirectory.common import settings as s
from hexdirectory.domain.entities.person import RawPerson


@pytest.fixture(autouse=True)
def _fresh_settings():
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


@pytest.fixture()
def people():
    """Small directory in deliberately unsorted order."""
    return [
        RawPerson(id=1, name="John Smith Jr.", extra={"email": "john@example.com"}),
        RawPerson(id=2, name="Dr. Jane Smith", extra={"email": "jane@example.com"}),
        RawPerson(id=3, name="Madonna"),
        RawPerson(id=4, name="  alice   Brown "),
        RawPerson(id=5, name="Bob Adams"),
        RawPerson(id=6, name="Mary Ann Smith"),
        RawPerson(id=7, name="   "),
    ]

# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from hexdirectory.services.api.app import create_app
from hexdirectory.services.api.deps import get_person_source
from hexdirectory.services.sources.in_memory import InMemoryPersonSource


@pytest.fixture()
def source(people):
    return InMemoryPersonSource(people)


@pytest.fixture()
def api_client(source):
    """
    A TestClient whose `get_person_source` dependency is overridden to serve
    the `people` fixture from memory instead of the configured JSON file.
    """
    app = create_app()
    app.dependency_overrides[get_person_source] = lambda: source

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()

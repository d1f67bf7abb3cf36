# tests/services/test_person_sources.py
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from hexdirectory.domain.entities.person import RawPerson
from hexdirectory.domain.ports.person_source import PersonSourceError
from hexdirectory.services.sources.in_memory import InMemoryPersonSource
from hexdirectory.services.sources.json_file import JsonFilePersonSource


def _write(tmp_path, payload) -> str:
    p = tmp_path / "people.json"
    p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return str(p)


def test_json_source_loads_records_and_keeps_extras(tmp_path):
    path = _write(tmp_path, [
        {"id": 1, "name": "Leanne Graham", "email": "Sincere@april.biz", "company": {"name": "Romaguera-Crona"}},
        {"id": "2", "name": "Ervin Howell"},
    ])
    people = JsonFilePersonSource(path).load()

    assert [p.id for p in people] == [1, 2]
    assert people[0].name == "Leanne Graham"
    assert people[0].extra["email"] == "Sincere@april.biz"
    assert people[0].extra["company"] == {"name": "Romaguera-Crona"}
    assert dict(people[1].extra) == {}


def test_json_source_empty_array(tmp_path):
    assert JsonFilePersonSource(_write(tmp_path, [])).load() == []


def test_json_source_missing_file(tmp_path):
    with pytest.raises(PersonSourceError, match="not found"):
        JsonFilePersonSource(tmp_path / "nope.json").load()


def test_json_source_bad_json(tmp_path):
    with pytest.raises(PersonSourceError, match="not valid JSON"):
        JsonFilePersonSource(_write(tmp_path, "[{")).load()


def test_json_source_requires_array(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="hexdirectory"):
        with pytest.raises(PersonSourceError, match="JSON array"):
            JsonFilePersonSource(_write(tmp_path, {"id": 1, "name": "x"})).load()
    assert "not an array" in caplog.text


def test_json_source_not_utf8(tmp_path):
    p = tmp_path / "people.json"
    p.write_bytes(b'[{"id": 1, "name": "Jos\xe9 Garcia"}]')
    with pytest.raises(PersonSourceError, match="UTF-8") as ei:
        JsonFilePersonSource(p).load()
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)


def test_json_source_path_is_directory(tmp_path):
    with pytest.raises(PersonSourceError, match="could not be read") as ei:
        JsonFilePersonSource(tmp_path).load()
    assert isinstance(ei.value.__cause__, OSError)


@pytest.mark.parametrize("record", [{"name": "No Id"}, {"id": 3}, {"id": 3, "name": 42}, "Jane"])
def test_json_source_rejects_invalid_records(tmp_path, record):
    path = _write(tmp_path, [{"id": 1, "name": "Ok Person"}, record])
    with pytest.raises(PersonSourceError, match="index 1") as ei:
        JsonFilePersonSource(path).load()
    assert ei.value.__cause__ is not None


def test_bundled_people_file_loads():
    people = JsonFilePersonSource(Path(__file__).resolve().parents[2] / "data" / "people.json").load()
    assert len(people) == 10
    assert len({p.id for p in people}) == 10


def test_in_memory_source_returns_fresh_lists():
    src = InMemoryPersonSource([RawPerson(id=1, name="A B")])
    first = src.load()
    first.clear()
    assert len(src.load()) == 1


def test_bundled_people_file_builds_a_directory():
    from hexdirectory.domain.policies.directory_index import build_view

    people = JsonFilePersonSource(Path(__file__).resolve().parents[2] / "data" / "people.json").load()
    labels = [e.label for e in build_view(people, "")]
    assert labels[0] == "Bauch, Clementine"
    assert "Schulist, Dennis (Mrs.)" in labels
    assert "Runolfsdottir V, Nicholas" in labels

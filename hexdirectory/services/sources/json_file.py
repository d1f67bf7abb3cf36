# hexdirectory/services/sources/json_file.py
from __future__ import annotations

import json
from pathlib import Path
from typing import List

from pydantic import ValidationError

from hexdirectory.common.logging import get_logger
from hexdirectory.domain.entities.person import RawPerson
from hexdirectory.domain.ports.person_source import PersonSourceError
from hexdirectory.services.mappers.person import to_domain_from_record

logger = get_logger(__name__)


class JsonFilePersonSource:
    """
    Reads the directory from a JSON file holding an array of person objects:

        [{"id": 1, "name": "Leanne Graham", "email": "...", ...}, ...]

    The file is re-read on every load() so edits show up without a restart.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> List[RawPerson]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            logger.error("people file not found: %s", self.path)
            raise PersonSourceError(f"people file not found: {self.path}") from exc
        except OSError as exc:
            logger.error("people file could not be read: %s (%s)", self.path, exc)
            raise PersonSourceError(f"people file could not be read: {self.path}") from exc
        except UnicodeDecodeError as exc:
            logger.error("people file is not valid UTF-8: %s (%s)", self.path, exc)
            raise PersonSourceError(f"people file is not valid UTF-8: {self.path}") from exc
        except json.JSONDecodeError as exc:
            logger.error("people file is not valid JSON: %s (%s)", self.path, exc)
            raise PersonSourceError(f"people file is not valid JSON: {self.path}") from exc

        if not isinstance(raw, list):
            logger.error("people file %s holds a %s, not an array", self.path, type(raw).__name__)
            raise PersonSourceError(f"people file must hold a JSON array, got {type(raw).__name__}")

        people: List[RawPerson] = []
        for i, item in enumerate(raw):
            try:
                people.append(to_domain_from_record(item))
            except ValidationError as exc:
                logger.error("invalid person record at index %d in %s", i, self.path)
                raise PersonSourceError(f"invalid person record at index {i}: {exc}") from exc

        logger.info("loaded %d people from %s", len(people), self.path)
        return people

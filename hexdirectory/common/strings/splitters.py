# hexdirectory/common/strings/splitters.py
from __future__ import annotations

import re
from typing import List

# \s plus the byte order mark, which Python does not count as whitespace
_ws_re = re.compile(r"[\s\ufeff]+")
_edge_ws_re = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def trim(text: str | None) -> str:
    if not text:
        return ""
    return _edge_ws_re.sub("", text)


def collapse_whitespace(text: str | None) -> str:
    """Trim and squeeze every whitespace run down to a single space."""
    return _ws_re.sub(" ", trim(text))


def includes_ignore_case(haystack: str, needle: str) -> bool:
    # needle is trimmed, haystack is not
    return trim(needle).lower() in haystack.lower()

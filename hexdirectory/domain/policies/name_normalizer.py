# hexdirectory/domain/policies/name_normalizer.py
from __future__ import annotations

import re
from typing import List, Optional

from hexdirectory.common.strings.splitters import collapse_whitespace
from hexdirectory.domain.entities.search_entry import NormalizedName

# Closed sets, never mutated after import.
TITLES = frozenset({"Mr.", "Mrs.", "Ms.", "Dr.", "Prof."})
SUFFIX_RE = re.compile(r"^(Jr\.|Sr\.|II|III|IV|V|VI|VII|VIII|IX|X)$")


def _pop_title(tokens: List[str]) -> Optional[str]:
    # only strip when something is left to be the name
    if len(tokens) > 1 and tokens[0] in TITLES:
        return tokens.pop(0)
    return None


def _pop_suffix(tokens: List[str]) -> Optional[str]:
    if len(tokens) > 1 and SUFFIX_RE.match(tokens[-1]):
        return tokens.pop()
    return None


def normalize(raw_name: str) -> NormalizedName:
    """
    Turn a free-form "First Last" style name into a directory form:

        "Dr. Jane Smith"  -> "Smith, Jane (Dr.)"   keys ("smith", "jane")
        "John Smith Jr."  -> "Smith Jr., John"     keys ("smith jr.", "john")
        "Madonna"         -> "Madonna"             keys ("madonna", "")

    Leading honorifics (Mr./Mrs./Ms./Dr./Prof.) become a parenthesised
    title and generational suffixes (Jr./Sr./II..X) stay glued to the
    surname. The last remaining token is the surname, anything before it
    is the given name(s).

    Never raises: blank input gives an all-empty result, and a name that
    reduces to one token is shown as-is with an empty first key. A title
    on its own ("Dr.") is kept as the name rather than stripped.
    """
    cleaned = collapse_whitespace(raw_name)
    if not cleaned:
        return NormalizedName()

    tokens = cleaned.split(" ")
    title = _pop_title(tokens)
    suffix = _pop_suffix(tokens)

    if len(tokens) == 1:
        only = tokens[0]
        display = f"{only} ({title})" if title else only
        return NormalizedName(display=display, last_key=only.lower(), first_key="")

    surname = tokens[-1]
    given = " ".join(tokens[:-1])
    last = f"{surname} {suffix}" if suffix else surname
    display = f"{last}, {given}"
    if title:
        display += f" ({title})"

    return NormalizedName(display=display, last_key=last.lower(), first_key=given.lower())

"""Identifier policies for DOT documents.

Two policies are supported:

* ``strict`` rejects anything outside ``[A-Za-z0-9_-]`` when the
  identifier is created and emits it verbatim afterwards.
* ``permissive`` accepts any string and quotes it at render time unless
  it is already a valid unquoted DOT ID.
"""

from __future__ import annotations

import json
import re
from enum import Enum


class IdPolicy(str, Enum):
    """How identifiers are checked and emitted."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


STRICT_ID_GRAMMAR = r"^[A-Za-z0-9_-]*$"

ALPHA_ID = r"[A-Za-z_][A-Za-z_0-9]*"
NUMERAL_ID = r"-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)"

_STRICT_ID = re.compile(STRICT_ID_GRAMMAR)
_UNQUOTED_ID = re.compile(rf"{ALPHA_ID}|{NUMERAL_ID}")


class InvalidIdentifierError(ValueError):
    """Raised when a string is not a valid strict identifier."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid identifier {value!r}: must match {STRICT_ID_GRAMMAR}",
        )


def validate_strict(value: str) -> str:
    """Return ``value`` unchanged if it matches the strict grammar.

    Raises:
        InvalidIdentifierError: If ``value`` contains any character
            outside ``[A-Za-z0-9_-]``.
    """
    if not _STRICT_ID.fullmatch(value):
        raise InvalidIdentifierError(value)
    return value


def is_unquoted_id(value: str) -> bool:
    """Check whether ``value`` can appear unquoted in a DOT document."""
    return _UNQUOTED_ID.fullmatch(value) is not None


def maybe_escaped(value: str) -> str:
    """Add double quotes around ``value`` if needed to form a valid DOT ID.

    Unquoted IDs are kept as-is so documents stay readable. Anything else
    is wrapped in double quotes with embedded quotes and backslashes
    escaped.
    """
    if is_unquoted_id(value):
        return value
    return json.dumps(value, ensure_ascii=False)

"""
Identifier classification.

Requested identifiers come in two formats: the legacy ten digit Monday.com
item id and the ``TBUS-<digits>`` key stored in a column of the newer board.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

NUMERIC_ID_PATTERN = re.compile(r'[0-9]{10}')
PREFIXED_ID_PATTERN = re.compile(r'TBUS-[0-9]+', re.IGNORECASE)


class IdentifierKind(str, Enum):
    """Identifier formats understood by the lookup."""
    NUMERIC = "NUMERIC"
    PREFIXED = "PREFIXED"


def identifier_text(value: Any) -> Optional[str]:
    """Return the text form of a requested identifier, or None for unsupported types.

    JSON numbers are accepted so ``[1234567890]`` behaves like ``["1234567890"]``.
    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def classify_identifier(value: Any) -> Optional[IdentifierKind]:
    """Return the identifier kind, or None when the value matches neither format."""
    text = identifier_text(value)
    if text is None:
        return None
    if NUMERIC_ID_PATTERN.fullmatch(text):
        return IdentifierKind.NUMERIC
    if PREFIXED_ID_PATTERN.fullmatch(text):
        return IdentifierKind.PREFIXED
    return None


@dataclass
class ClassifiedIds:
    """Identifiers partitioned by kind, each list in request order."""

    numeric_ids: List[str] = field(default_factory=list)
    prefixed_ids: List[str] = field(default_factory=list)
    dropped: List[Any] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)


def classify_identifiers(values: Iterable[Any]) -> ClassifiedIds:
    classified = ClassifiedIds()
    for value in values:
        kind = classify_identifier(value)
        if kind is IdentifierKind.NUMERIC:
            classified.numeric_ids.append(identifier_text(value))
        elif kind is IdentifierKind.PREFIXED:
            classified.prefixed_ids.append(identifier_text(value))
        else:
            classified.dropped.append(value)
    return classified

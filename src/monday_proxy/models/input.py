"""
Input models for request validation using Pydantic.

This module defines the model for the ``itemIds`` query parameter: a
URL-encoded JSON array of identifier strings.
"""

import json
import re
from typing import Annotated, Any
from urllib.parse import unquote

from pydantic import BaseModel, Field

ITEM_IDS_PARAMETER = 'itemIds'

# A '%' must start a complete two digit hex escape
MALFORMED_ESCAPE_PATTERN = re.compile(r'%(?![0-9A-Fa-f]{2})')


def _reject_constant(constant: str) -> Any:
    raise ValueError(f'Unsupported JSON constant: {constant}')


def decode_item_ids(raw_item_ids: str) -> Any:
    """
    Percent-decode and JSON-decode the raw parameter value.

    Malformed escapes, escapes that do not form valid UTF-8, and the
    non-standard JSON constants NaN, Infinity and -Infinity are rejected.

    Raises:
        ValueError: If the value cannot be decoded
    """
    if MALFORMED_ESCAPE_PATTERN.search(raw_item_ids):
        raise ValueError('Malformed percent-encoding')
    decoded = unquote(raw_item_ids, errors='strict')
    return json.loads(decoded, parse_constant=_reject_constant)


class LookupRequest(BaseModel):
    """Request model for looking up items by identifier."""

    item_ids: Annotated[list[Any], Field(
        description='Requested identifiers in caller order; entries that are not '
                    'well-formed identifiers are dropped during classification',
        examples=[['1234567890', 'TBUS-42']]
    )]

    @classmethod
    def from_query_parameter(cls, raw_item_ids: str) -> 'LookupRequest':
        """
        Build a request from the raw ``itemIds`` query string value.

        Args:
            raw_item_ids: URL-encoded JSON array

        Returns:
            Validated request

        Raises:
            ValueError: If the value is not percent-encoded JSON
            pydantic.ValidationError: If the JSON is not an array
        """
        return cls.model_validate({'item_ids': decode_item_ids(raw_item_ids)})

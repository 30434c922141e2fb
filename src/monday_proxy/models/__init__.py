"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including the request model, the upstream item shapes, and the response models.
"""

from .input import ITEM_IDS_PARAMETER, LookupRequest
from .item import ClassifiedIds, IdentifierKind, classify_identifier, classify_identifiers
from .output import (
    ColumnValueOutput,
    ErrorOutput,
    LookupItemsData,
    LookupItemsOutput,
    NormalizedItem,
)
from .upstream import (
    UpstreamBoardItem,
    UpstreamColumn,
    UpstreamColumnValue,
    UpstreamItem,
    UpstreamTextColumnValue,
)

__all__ = [
    # Input models
    "ITEM_IDS_PARAMETER",
    "LookupRequest",

    # Identifier classification
    "ClassifiedIds",
    "IdentifierKind",
    "classify_identifier",
    "classify_identifiers",

    # Upstream models
    "UpstreamBoardItem",
    "UpstreamColumn",
    "UpstreamColumnValue",
    "UpstreamItem",
    "UpstreamTextColumnValue",

    # Output models
    "ColumnValueOutput",
    "ErrorOutput",
    "LookupItemsData",
    "LookupItemsOutput",
    "NormalizedItem",
]

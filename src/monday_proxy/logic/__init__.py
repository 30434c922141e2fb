"""
Business Logic Layer Module.

This module contains the lookup logic: identifier classification, the two
upstream fetch branches, and the reshaping of upstream items into the
response shape. It sits between the Lambda handler and the data access layer.
"""

from monday_proxy.logic.item_lookup import (
    ItemLookupService,
    LookupResult,
    normalize_board_item,
    normalize_item,
)

__all__ = [
    "ItemLookupService",
    "LookupResult",
    "normalize_board_item",
    "normalize_item",
]

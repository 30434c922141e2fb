"""
Output models for API responses using Pydantic.

Items from both boards are returned in one shape: an identifier, a name and
the raw-encoded column values.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field


class ColumnValueOutput(BaseModel):
    """Column value in raw Monday.com encoding."""

    value: Annotated[Optional[str], Field(
        description='JSON encoded column value, or null when the cell is empty',
        examples=['"42"', None]
    )]


class NormalizedItem(BaseModel):
    """Item in the shape expected by the frontend."""

    id: Annotated[str, Field(
        description='Requested identifier for prefixed ids, Monday.com item id otherwise',
        examples=['1234567890', 'TBUS-42']
    )]

    name: Annotated[str, Field(
        description='Item display name',
        examples=['Design review']
    )]

    column_values: Annotated[list[ColumnValueOutput], Field(
        default_factory=list,
        description='Column values in upstream order'
    )]


class LookupItemsData(BaseModel):
    """Payload wrapper holding the merged items."""

    items: list[NormalizedItem] = Field(default_factory=list)


class LookupItemsOutput(BaseModel):
    """Successful lookup response body."""

    data: LookupItemsData

    @classmethod
    def from_items(cls, items: list[NormalizedItem]) -> 'LookupItemsOutput':
        return cls(data=LookupItemsData(items=items))


class ErrorOutput(BaseModel):
    """Error response body."""

    error: Annotated[str, Field(
        description='Human readable error message',
        examples=['Missing itemIds parameter']
    )]

"""
Models for the item shapes returned by the Monday.com API.

The legacy board is queried by item id and exposes raw column values; the
newer board is searched by column value and exposes display text together
with the column title.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field


class UpstreamColumnValue(BaseModel):
    """Raw column value from the legacy board."""

    model_config = ConfigDict(extra='ignore')

    value: Annotated[Optional[str], Field(
        default=None,
        description='JSON encoded column value as stored by Monday.com',
        examples=['"42"']
    )] = None


class UpstreamItem(BaseModel):
    """Item returned by an ``items(ids: ...)`` query."""

    model_config = ConfigDict(extra='ignore', coerce_numbers_to_str=True)

    id: Annotated[str, Field(description='Monday.com item id', examples=['1234567890'])]
    name: Annotated[str, Field(description='Item display name')]
    column_values: Annotated[list[UpstreamColumnValue], Field(default_factory=list)]


class UpstreamColumn(BaseModel):
    """Column metadata attached to a text column value."""

    model_config = ConfigDict(extra='ignore')

    title: Optional[str] = None


class UpstreamTextColumnValue(BaseModel):
    """Display text of a column on the newer board."""

    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = None
    text: Optional[str] = None
    column: Optional[UpstreamColumn] = None


class UpstreamBoardItem(BaseModel):
    """Item returned by an ``items_page_by_column_values`` query."""

    model_config = ConfigDict(extra='ignore', coerce_numbers_to_str=True)

    id: Annotated[str, Field(description='Monday.com item id')]
    name: Annotated[str, Field(description='Item display name')]
    column_values: Annotated[list[UpstreamTextColumnValue], Field(default_factory=list)]

"""
Data Access Layer (DAL) for the Monday.com API.

This module provides the data access layer interface used by the lookup logic.
Implementations fetch items from the upstream boards and return them as
validated upstream models.
"""

from abc import ABC, abstractmethod
from typing import Protocol, Sequence, runtime_checkable

from monday_proxy.models.upstream import UpstreamBoardItem, UpstreamItem


@runtime_checkable
class ItemsHandler(Protocol):
    """Protocol defining the upstream items interface."""

    def get_items_by_ids(self, item_ids: Sequence[str]) -> list[UpstreamItem]:
        """Fetch legacy board items by their Monday.com ids."""
        ...

    def find_board_items(self, board_id: str, column_id: str, column_value: str) -> list[UpstreamBoardItem]:
        """Find at most one board item whose column equals the given value."""
        ...


class BaseItemsHandler(ABC):
    """Abstract base class for upstream items implementations."""

    def __init__(self, numbers_column: str = 'numbers', estimation_column: str = 'task_estimation') -> None:
        """
        Initialize the items handler.

        Args:
            numbers_column: Column selected for legacy board items
            estimation_column: Column selected for board items found by column value
        """
        self.numbers_column = numbers_column
        self.estimation_column = estimation_column

    @abstractmethod
    def get_items_by_ids(self, item_ids: Sequence[str]) -> list[UpstreamItem]:
        """Fetch legacy board items by their Monday.com ids."""
        pass

    @abstractmethod
    def find_board_items(self, board_id: str, column_id: str, column_value: str) -> list[UpstreamBoardItem]:
        """Find at most one board item whose column equals the given value."""
        pass

    def close(self) -> None:
        """Release any held resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = [
    'ItemsHandler',
    'BaseItemsHandler',
]

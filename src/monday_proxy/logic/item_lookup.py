"""
Business Logic Layer for item lookups.

This module classifies requested identifiers, fetches them from the two
upstream boards and reshapes the results into the uniform response shape.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from aws_lambda_powertools.metrics import MetricUnit

from monday_proxy.dal import ItemsHandler
from monday_proxy.handlers.utils.errors import ErrorContext
from monday_proxy.handlers.utils.observability import logger, metrics, tracer
from monday_proxy.models.item import classify_identifiers
from monday_proxy.models.output import ColumnValueOutput, NormalizedItem
from monday_proxy.models.upstream import UpstreamBoardItem, UpstreamItem

DEFAULT_BOARD_ID = '5088989923'
DEFAULT_ITEM_ID_COLUMN = 'item_id'


@dataclass
class LookupResult:
    """Outcome of a lookup request."""

    items: List[NormalizedItem] = field(default_factory=list)
    dropped_count: int = 0
    upstream_calls: int = 0


def normalize_item(item: UpstreamItem) -> NormalizedItem:
    """Legacy board items already carry raw values and pass through unchanged."""
    return NormalizedItem(
        id=item.id,
        name=item.name,
        column_values=[ColumnValueOutput(value=column_value.value) for column_value in item.column_values],
    )


def normalize_board_item(requested_id: str, item: UpstreamBoardItem) -> NormalizedItem:
    """
    Reshape a board item found by column value.

    The requested identifier replaces the upstream item id and each cell's
    text is wrapped in double quotes to match the raw value encoding.
    """
    return NormalizedItem(
        id=requested_id,
        name=item.name,
        column_values=[
            ColumnValueOutput(value=f'"{column_value.text}"' if column_value.text else None)
            for column_value in item.column_values
        ],
    )


class ItemLookupService:
    """Business logic service for item lookups."""

    def __init__(
        self,
        items_handler: ItemsHandler,
        board_id: str = DEFAULT_BOARD_ID,
        item_id_column: str = DEFAULT_ITEM_ID_COLUMN,
        max_workers: int = 1,
    ):
        """
        Initialize the lookup service.

        Args:
            items_handler: Upstream data access handler
            board_id: Board searched for prefixed identifiers
            item_id_column: Column holding the prefixed identifier
            max_workers: Upper bound on concurrent prefixed lookups
        """
        if max_workers < 1:
            raise ValueError('max_workers must be at least 1')
        self.items_handler = items_handler
        self.board_id = board_id
        self.item_id_column = item_id_column
        self.max_workers = max_workers

    @tracer.capture_method
    def lookup_items(self, item_ids: Sequence[Any], context: Optional[ErrorContext] = None) -> LookupResult:
        """
        Look up the requested identifiers on both boards.

        Args:
            item_ids: Requested identifiers in caller order
            context: Error context for tracing

        Returns:
            Numeric board items followed by prefixed board items

        Raises:
            UpstreamError: If any upstream call fails; no partial result is returned
        """
        classified = classify_identifiers(item_ids)

        tracer.put_annotation("numeric_id_count", len(classified.numeric_ids))
        tracer.put_annotation("prefixed_id_count", len(classified.prefixed_ids))

        if classified.dropped_count:
            logger.warning("Dropping identifiers that match no known format", extra={
                "dropped_count": classified.dropped_count,
                "request_id": context.request_id if context else None,
            })
        metrics.add_metric(name="DroppedIdentifiers", unit=MetricUnit.Count, value=classified.dropped_count)

        result = LookupResult(dropped_count=classified.dropped_count)

        if classified.numeric_ids:
            result.items.extend(self._fetch_numeric_items(classified.numeric_ids))
            result.upstream_calls += 1

        if classified.prefixed_ids:
            result.items.extend(self._fetch_prefixed_items(classified.prefixed_ids))
            result.upstream_calls += len(classified.prefixed_ids)

        metrics.add_metric(name="UpstreamCalls", unit=MetricUnit.Count, value=result.upstream_calls)

        logger.info("Items looked up", extra={
            "requested_count": len(item_ids),
            "numeric_id_count": len(classified.numeric_ids),
            "prefixed_id_count": len(classified.prefixed_ids),
            "item_count": len(result.items),
        })

        return result

    @tracer.capture_method
    def _fetch_numeric_items(self, numeric_ids: List[str]) -> List[NormalizedItem]:
        upstream_items = self.items_handler.get_items_by_ids(numeric_ids)
        return [normalize_item(item) for item in upstream_items]

    def _fetch_prefixed_item(self, prefixed_id: str) -> List[NormalizedItem]:
        board_items = self.items_handler.find_board_items(
            board_id=self.board_id,
            column_id=self.item_id_column,
            column_value=prefixed_id,
        )
        return [normalize_board_item(prefixed_id, item) for item in board_items]

    @tracer.capture_method
    def _fetch_prefixed_items(self, prefixed_ids: List[str]) -> List[NormalizedItem]:
        """
        Fetch one board item per prefixed identifier on a bounded worker pool.

        Results keep request order. The first failure cancels the lookups that
        have not started yet and propagates once in-flight lookups finish.
        """
        results: List[List[NormalizedItem]] = [[] for _ in prefixed_ids]
        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(prefixed_ids)))
        try:
            future_to_index = {
                executor.submit(self._fetch_prefixed_item, prefixed_id): index
                for index, prefixed_id in enumerate(prefixed_ids)
            }
            for future in as_completed(future_to_index):
                results[future_to_index[future]] = future.result()
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

        return [item for items in results for item in items]

"""
Monday.com implementation of the Data Access Layer (DAL).

This module provides a concrete implementation of the items interface that
posts GraphQL queries to the Monday.com API over a shared httpx client.
"""

from typing import Any, Dict, Optional, Sequence

import httpx
from pydantic import ValidationError

from monday_proxy.dal import BaseItemsHandler
from monday_proxy.dal.queries import ITEMS_BY_COLUMN_VALUE_QUERY, ITEMS_BY_IDS_QUERY
from monday_proxy.handlers.utils.errors import UpstreamError
from monday_proxy.handlers.utils.observability import logger, tracer
from monday_proxy.models.upstream import UpstreamBoardItem, UpstreamItem

MONDAY_API_URL = 'https://api.monday.com/v2'
PARSE_FAILURE_MESSAGE = 'Failed to parse response'


def _get_object(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return ``payload[key]`` when it is a JSON object; anything else counts as absent."""
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


class MondayHandler(BaseItemsHandler):
    """Monday.com GraphQL implementation of the items handler."""

    def __init__(
        self,
        api_key: str,
        api_url: str = MONDAY_API_URL,
        timeout_seconds: float = 5.0,
        numbers_column: str = 'numbers',
        estimation_column: str = 'task_estimation',
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the Monday.com handler.

        Args:
            api_key: API token, sent verbatim as the Authorization header
            api_url: GraphQL endpoint
            timeout_seconds: Timeout applied to every call
            numbers_column: Column selected for legacy board items
            estimation_column: Column selected for board items found by column value
            transport: Optional httpx transport, used to fake the API in tests
        """
        super().__init__(numbers_column=numbers_column, estimation_column=estimation_column)
        self.api_url = api_url
        self.client = httpx.Client(
            headers={
                'Authorization': api_key,
                'Content-Type': 'application/json',
            },
            timeout=timeout_seconds,
            transport=transport,
        )
        logger.debug('Monday.com handler initialized', extra={'api_url': api_url})

    def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Post a GraphQL query and return the decoded response body.

        Args:
            query: GraphQL document
            variables: Values for the document's variables

        Returns:
            Decoded JSON object

        Raises:
            UpstreamError: If the call fails or the body is not a JSON object
        """
        try:
            response = self.client.post(self.api_url, json={'query': query, 'variables': variables or {}})
        except httpx.HTTPError as exc:
            logger.error('Monday.com request failed', extra={'error': str(exc), 'api_url': self.api_url})
            raise UpstreamError(message=str(exc), original_error=exc) from exc

        if response.is_error:
            logger.warning('Monday.com returned an error status', extra={'status_code': response.status_code})

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error('Monday.com response is not JSON', extra={'status_code': response.status_code})
            raise UpstreamError(message=PARSE_FAILURE_MESSAGE, original_error=exc) from exc

        if not isinstance(payload, dict):
            raise UpstreamError(message=PARSE_FAILURE_MESSAGE)

        if payload.get('errors'):
            logger.warning('Monday.com reported query errors', extra={'errors': payload['errors']})

        return payload

    @tracer.capture_method
    def get_items_by_ids(self, item_ids: Sequence[str]) -> list[UpstreamItem]:
        """
        Fetch legacy board items in a single call.

        Args:
            item_ids: Ten digit Monday.com item ids

        Returns:
            Items in upstream order, empty when the response lacks ``data.items``
        """
        payload = self.execute(
            ITEMS_BY_IDS_QUERY,
            {'itemIds': list(item_ids), 'columnIds': [self.numbers_column]},
        )
        raw_items = _get_object(payload, 'data').get('items')
        if not raw_items:
            return []

        try:
            return [UpstreamItem.model_validate(raw_item) for raw_item in raw_items]
        except ValidationError as exc:
            logger.error('Unexpected item shape from Monday.com', extra={'error': str(exc)})
            raise UpstreamError(message=PARSE_FAILURE_MESSAGE, original_error=exc) from exc

    def find_board_items(self, board_id: str, column_id: str, column_value: str) -> list[UpstreamBoardItem]:
        """
        Find the board item whose indexed column equals ``column_value``.

        Args:
            board_id: Board to search
            column_id: Indexed column compared against the value
            column_value: Value to match

        Returns:
            At most one item, empty when the response lacks the items page
        """
        payload = self.execute(
            ITEMS_BY_COLUMN_VALUE_QUERY,
            {
                'boardId': board_id,
                'columnId': column_id,
                'columnValue': column_value,
                'columnIds': [self.estimation_column],
            },
        )
        items_page = _get_object(_get_object(payload, 'data'), 'items_page_by_column_values')
        raw_items = items_page.get('items')
        if not raw_items:
            return []

        try:
            return [UpstreamBoardItem.model_validate(raw_item) for raw_item in raw_items]
        except ValidationError as exc:
            logger.error('Unexpected board item shape from Monday.com', extra={'error': str(exc)})
            raise UpstreamError(message=PARSE_FAILURE_MESSAGE, original_error=exc) from exc

    def close(self) -> None:
        self.client.close()

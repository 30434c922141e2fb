"""
Pytest configuration and shared fixtures for the Monday.com lookup proxy.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import Mock

import httpx
import pytest

# Set before the service modules are imported so Powertools picks them up
os.environ.update({
    "POWERTOOLS_SERVICE_NAME": "test-monday-proxy",
    "POWERTOOLS_METRICS_NAMESPACE": "TestMondayProxy",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LOG_LEVEL": "DEBUG",
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
})

from monday_proxy.handlers.models.env_vars import LookupHandlerEnvVars  # noqa: E402


# Configuration fixtures
@pytest.fixture
def env_vars() -> LookupHandlerEnvVars:
    """Configuration with an API key and sequential prefixed lookups."""
    return LookupHandlerEnvVars(
        MONDAY_API_KEY="test-api-key",
        MONDAY_MAX_WORKERS=1,
    )


@pytest.fixture
def env_vars_without_key() -> LookupHandlerEnvVars:
    """Configuration with no API key."""
    return LookupHandlerEnvVars()


# Event fixtures
@pytest.fixture
def make_api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway events carrying an optional itemIds parameter."""

    def _make(item_ids: Optional[List[Any]] = None, raw_item_ids: Optional[str] = None) -> Dict[str, Any]:
        if raw_item_ids is None and item_ids is not None:
            raw_item_ids = json.dumps(item_ids)
        query_params = {"itemIds": raw_item_ids} if raw_item_ids is not None else None
        return {
            "resource": "/monday",
            "path": "/monday",
            "httpMethod": "GET",
            "headers": {"Accept": "application/json", "User-Agent": "pytest/test-agent"},
            "multiValueHeaders": {},
            "queryStringParameters": query_params,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-12345",
                "stage": "test",
                "resourcePath": "/monday",
                "httpMethod": "GET",
                "accountId": "123456789012",
            },
            "body": None,
            "isBase64Encoded": False,
        }

    return _make


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-monday-proxy"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-monday-proxy"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-lambda-request-id"
    context.log_group_name = "/aws/lambda/test-monday-proxy"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


# Upstream payload fixtures
@pytest.fixture
def numeric_items_payload() -> Dict[str, Any]:
    """Response to an items-by-ids query."""
    return {
        "data": {
            "items": [
                {"id": "1234567890", "name": "Legacy task", "column_values": [{"value": "\"8\""}]},
            ]
        }
    }


def board_items_payload(name: str, text: Optional[str], item_id: str = "9876543210") -> Dict[str, Any]:
    """Response to an items-by-column-value query with a single match."""
    return {
        "data": {
            "items_page_by_column_values": {
                "items": [
                    {
                        "id": item_id,
                        "name": name,
                        "column_values": [
                            {"id": "task_estimation", "text": text, "column": {"title": "Task Estimation"}},
                        ],
                    }
                ]
            }
        }
    }


class FakeMondayApi:
    """In-memory stand-in for the Monday.com GraphQL endpoint."""

    def __init__(self, numeric_items: Optional[List[Dict[str, Any]]] = None,
                 board_items: Optional[Dict[str, Dict[str, Any]]] = None):
        self.numeric_items = numeric_items or []
        self.board_items = board_items or {}
        self.requests: List[httpx.Request] = []
        self.fail_on: Optional[str] = None

    @property
    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content)
        variables = body.get("variables", {})

        if "columnValue" in variables:
            column_value = variables["columnValue"]
            if column_value == self.fail_on:
                raise httpx.ConnectError("connection refused", request=request)
            match = self.board_items.get(column_value)
            if match is None:
                return httpx.Response(200, json={"data": {"items_page_by_column_values": {"items": []}}})
            return httpx.Response(200, json=board_items_payload(**match))

        requested = set(variables.get("itemIds", []))
        items = [item for item in self.numeric_items if item["id"] in requested]
        return httpx.Response(200, json={"data": {"items": items}})


@pytest.fixture
def fake_monday_api() -> FakeMondayApi:
    """Fake Monday.com API with one legacy item and one board item."""
    return FakeMondayApi(
        numeric_items=[
            {"id": "1234567890", "name": "Legacy task", "column_values": [{"value": "\"8\""}]},
        ],
        board_items={
            "TBUS-7": {"name": "New board task", "text": "5"},
        },
    )


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)

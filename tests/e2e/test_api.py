"""
End-to-end tests for the deployed lookup endpoint.

These tests call a real deployment and are skipped unless API_BASE_URL is
set. LOOKUP_PATH overrides the endpoint path (defaults to /monday).
"""

import json
import os

import httpx
import pytest

API_BASE_URL = os.environ.get("API_BASE_URL")
LOOKUP_PATH = os.environ.get("LOOKUP_PATH", "/monday")

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(not API_BASE_URL, reason="API_BASE_URL is not set"),
]


@pytest.fixture
def integration_client():
    """HTTP client for the deployed API."""
    with httpx.Client(base_url=API_BASE_URL, timeout=30.0) as client:
        yield client


class TestLookupAPI:
    """End-to-end tests for the lookup API."""

    def test_missing_item_ids(self, integration_client: httpx.Client):
        """Test that a request without itemIds is rejected."""
        response = integration_client.get(LOOKUP_PATH)

        assert response.status_code == 400
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.json() == {"error": "Missing itemIds parameter"}

    def test_malformed_item_ids(self, integration_client: httpx.Client):
        """Test that a non-JSON itemIds value is rejected."""
        response = integration_client.get(LOOKUP_PATH, params={"itemIds": "not-json"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid itemIds format"}

    def test_unknown_identifiers_return_no_items(self, integration_client: httpx.Client):
        """Test that identifiers matching no format produce an empty list."""
        response = integration_client.get(LOOKUP_PATH, params={"itemIds": json.dumps(["bogus"])})

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.json() == {"data": {"items": []}}

    def test_response_shape(self, integration_client: httpx.Client):
        """Test that looked up items have the normalized shape."""
        response = integration_client.get(
            LOOKUP_PATH,
            params={"itemIds": json.dumps(["0000000000", "TBUS-0"])},
        )

        assert response.status_code == 200
        items = response.json()["data"]["items"]
        for item in items:
            assert set(item) == {"id", "name", "column_values"}
            for column_value in item["column_values"]:
                assert set(column_value) == {"value"}

import pytest

from rest_framework.test import APIClient

from modules.customers.repositories.memory_repository import get_customer_repository


@pytest.fixture(autouse=True)
def _reset_customer_store():
    """Start and finish every test with an empty customer store."""
    get_customer_repository().clear()
    yield
    get_customer_repository().clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid

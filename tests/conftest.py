"""Shared fixtures for the item registry tests."""

import pytest
from fastapi.testclient import TestClient

from main import app
from services.inventory_service import Inventory


@pytest.fixture
def inventory():
    """Give the app a fresh, empty inventory."""
    app.state.inventory = Inventory()
    return app.state.inventory


@pytest.fixture
def client(inventory):
    """HTTP client bound to the app with an empty inventory."""
    with TestClient(app) as test_client:
        yield test_client

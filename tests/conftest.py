"""Pytest configuration and shared fixtures."""

import pytest

from src.api.service import RewardsService
from src.helpers.config import ClientConfig

from tests.factories import ENDPOINT


@pytest.fixture
def client_config() -> ClientConfig:
    """Client settings pointing at the mocked node.

    Returns:
        ClientConfig: Endpoint shared by the beacon API and JSON-RPC
    """
    return ClientConfig(endpoint=ENDPOINT, timeout=10.0)


@pytest.fixture
def service(client_config: ClientConfig) -> RewardsService:
    """Query service wired to the mocked node.

    Returns:
        RewardsService: Service under test
    """
    return RewardsService(client_config)

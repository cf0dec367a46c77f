"""DockerHub connector testing utilities.

Provides a mock client and fixtures for testing code that drives the
synchronizers.
"""

from dockerhub_sync.testing.fixtures import (
    create_acme_client,
    create_mock_repository,
    create_mock_team,
    create_mock_user,
)
from dockerhub_sync.testing.mock import MockCall, MockDockerHubClient, MockResponse

__all__ = [
    # Mock client
    "MockDockerHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_user",
    "create_mock_team",
    "create_mock_repository",
    "create_acme_client",
]

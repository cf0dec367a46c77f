"""
Pytest plugin for DockerHub connector testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your top-level conftest.py:

    pytest_plugins = ["dockerhub_sync.testing.conftest"]

Or import the fixtures directly:

    from dockerhub_sync.testing.fixtures import acme_client, mock_client
"""

from dockerhub_sync.testing.fixtures import (
    acme_client,
    acme_org,
    acme_org_id,
    infra_team,
    mock_client,
    web_repository,
)

__all__ = [
    "mock_client",
    "acme_client",
    "acme_org_id",
    "acme_org",
    "infra_team",
    "web_repository",
]

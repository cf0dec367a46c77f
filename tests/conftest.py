"""Shared fixtures for the test suite."""

from dockerhub_sync.testing.conftest import (  # noqa: F401
    acme_client,
    acme_org,
    acme_org_id,
    infra_team,
    mock_client,
    web_repository,
)

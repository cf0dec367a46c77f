"""
Pytest fixtures for DockerHub connector testing.

Provides seeded mock clients and resources for testing code that uses the
connector.
"""

from collections.abc import Generator
from typing import Any

import pytest

from dockerhub_sync.connector.mapper import (
    organization_resource,
    repository_resource,
    team_resource,
)
from dockerhub_sync.testing.mock import MockDockerHubClient
from dockerhub_sync.types.orgs import Organization
from dockerhub_sync.types.repos import Repository, RepositoryPermission
from dockerhub_sync.types.resources import Resource, ResourceId
from dockerhub_sync.types.teams import Team
from dockerhub_sync.types.users import User


# ============================================================================
# Factories
# ============================================================================


def create_mock_user(
    user_id: str = "test-user-id",
    username: str = "test-user",
    **kwargs: Any,
) -> User:
    """
    Create a User with customizable fields.

    Args:
        user_id: User ID
        username: Username
        **kwargs: Additional fields to override (full_name, email, role)

    Returns:
        User object
    """
    defaults = {
        "full_name": "Test User",
        "email": f"{username}@example.com",
        "role": "member",
    }
    defaults.update(kwargs)
    return User(id=user_id, username=username, **defaults)


def create_mock_team(team_id: int = 1, name: str = "test-team", **kwargs: Any) -> Team:
    """Create a Team with customizable fields."""
    defaults = {"description": f"{name} team"}
    defaults.update(kwargs)
    return Team(id=team_id, name=name, **defaults)


def create_mock_repository(
    name: str = "test-repo",
    namespace: str = "test-org",
    **kwargs: Any,
) -> Repository:
    """Create a Repository with customizable fields."""
    defaults = {"description": f"{name} repository"}
    defaults.update(kwargs)
    return Repository(name=name, namespace=namespace, **defaults)


def create_acme_client(page_size: int | None = None) -> MockDockerHubClient:
    """
    Build the reference organization.

    "acme" has members alice and bob, one team "infra" (id 7) whose only
    member is alice, and one repository "web" on which infra has write
    access.
    """
    alice = create_mock_user("alice-id", "alice", full_name="Alice Liddell")
    bob = create_mock_user("bob-id", "bob", full_name="Bob")

    client = MockDockerHubClient(username="alice", page_size=page_size)
    client.add_organization("acme")
    client.add_member("acme", alice)
    client.add_member("acme", bob)
    client.add_team(
        "acme",
        create_mock_team(7, "infra", description="Infrastructure"),
        members=[alice],
    )
    client.add_repository(
        "acme",
        create_mock_repository("web", "acme", description="Web frontend"),
        permissions=[RepositoryPermission(team_id=7, team_name="infra", permission="write")],
    )
    return client


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockDockerHubClient, None, None]:
    """
    Provide an empty MockDockerHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.add_organization("acme")
            result = my_function(mock_client)
            assert mock_client.was_called("orgs.list_organizations")
        ```
    """
    client = MockDockerHubClient()
    yield client
    client.reset()


@pytest.fixture
def acme_client() -> Generator[MockDockerHubClient, None, None]:
    """Provide a MockDockerHubClient seeded with the acme organization."""
    client = create_acme_client()
    yield client
    client.reset()


# ============================================================================
# Resource Fixtures
# ============================================================================


@pytest.fixture
def acme_org_id() -> ResourceId:
    """Provide the resource id of the acme organization."""
    return ResourceId(resource_type="org", resource="acme")


@pytest.fixture
def acme_org() -> Resource:
    """Provide the acme organization resource."""
    return organization_resource(Organization(id="acme-id", name="acme"))


@pytest.fixture
def infra_team(acme_org_id: ResourceId) -> Resource:
    """Provide the infra team resource as listed under acme."""
    return team_resource(create_mock_team(7, "infra", description="Infrastructure"), acme_org_id)


@pytest.fixture
def web_repository(acme_org_id: ResourceId) -> Resource:
    """Provide the web repository resource as listed under acme."""
    return repository_resource(
        create_mock_repository("web", "acme", description="Web frontend"), acme_org_id
    )


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "acme_client",
    "acme_org_id",
    "acme_org",
    "infra_team",
    "web_repository",
    # Helper functions
    "create_mock_user",
    "create_mock_team",
    "create_mock_repository",
    "create_acme_client",
]

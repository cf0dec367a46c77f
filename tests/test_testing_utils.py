"""
Tests for connector testing utilities.

Verifies that MockDockerHubClient and fixtures work correctly.
"""

import pytest

from dockerhub_sync.clients.base import PaginationVars
from dockerhub_sync.exceptions import NotFoundError
from dockerhub_sync.testing import (
    MockDockerHubClient,
    create_acme_client,
    create_mock_repository,
    create_mock_team,
    create_mock_user,
)
from dockerhub_sync.types.teams import Team


class TestMockDockerHubClient:
    """Tests for MockDockerHubClient."""

    def test_default_responses(self) -> None:
        """Test that mock client serves seeded data."""
        mock = MockDockerHubClient(username="alice")
        mock.add_organization("acme")

        orgs, next_page = mock.orgs.list_organizations()
        assert [o.name for o in orgs] == ["acme"]
        assert next_page == ""

        assert mock.users.get_current_user().username == "alice"
        assert mock.teams.list_teams("acme") == ([], "")

    def test_unknown_org_not_found(self) -> None:
        mock = MockDockerHubClient()

        with pytest.raises(NotFoundError):
            mock.users.list_users("nope")
        with pytest.raises(NotFoundError):
            mock.teams.get_team("nope", "infra")

    def test_configured_responses(self) -> None:
        """Test that configured responses are returned."""
        mock = MockDockerHubClient()
        mock.teams.configure("get_team", response=Team(id=99, name="custom"))

        assert mock.teams.get_team("acme", "anything").id == 99

    def test_configured_errors(self) -> None:
        """Test that configured errors are raised."""
        mock = create_acme_client()
        mock.repos.configure("list_repositories", error=NotFoundError("NOT_FOUND", "gone"))

        with pytest.raises(NotFoundError) as exc_info:
            mock.repos.list_repositories("acme")

        assert exc_info.value.code == "NOT_FOUND"

    def test_pages(self) -> None:
        mock = create_acme_client()

        first = mock.users.list_users("acme", PaginationVars(size=1))
        second = mock.users.list_users("acme", PaginationVars(size=1, page=2))

        assert [u.username for u in first[0]] == ["alice"]
        assert first[1] == "2"
        assert [u.username for u in second[0]] == ["bob"]
        assert second[1] == ""

    def test_page_size_override(self) -> None:
        mock = create_acme_client(page_size=1)

        users, next_page = mock.users.list_users("acme", PaginationVars(size=50))

        assert len(users) == 1
        assert next_page == "2"

    def test_call_tracking(self) -> None:
        """Test that method calls are tracked."""
        mock = create_acme_client()

        mock.teams.get_team("acme", "infra")
        mock.teams.get_team("acme", "infra")
        mock.repos.list_repositories("acme")

        assert mock.was_called("teams.get_team")
        assert mock.call_count("teams.get_team") == 2
        assert mock.call_count("repos.list_repositories") == 1
        assert not mock.was_called("teams.list_teams")

    def test_get_calls(self) -> None:
        """Test that call details can be retrieved."""
        mock = create_acme_client()
        pagination = PaginationVars(size=50)

        mock.repos.list_repository_permissions("acme", "web", pagination)

        calls = mock.get_calls("repos.list_repository_permissions")
        assert len(calls) == 1
        assert calls[0].args == ("acme", "web")
        assert calls[0].kwargs["pagination"] == pagination

    def test_reset(self) -> None:
        """Test that reset clears calls and responses but keeps data."""
        mock = create_acme_client()
        mock.teams.configure("get_team", error=NotFoundError("NOT_FOUND", "gone"))
        with pytest.raises(NotFoundError):
            mock.teams.get_team("acme", "infra")

        mock.reset()

        assert not mock.was_called("teams.get_team")
        assert mock.teams.get_team("acme", "infra").id == 7

    def test_context_manager(self) -> None:
        """Test that mock client works as context manager."""
        with MockDockerHubClient() as mock:
            assert mock.credentials.token == "mock-token"


class TestHelperFunctions:
    """Tests for helper functions."""

    def test_create_mock_user(self) -> None:
        user = create_mock_user("u1", "carol", role="owner")

        assert user.id == "u1"
        assert user.username == "carol"
        assert user.email == "carol@example.com"
        assert user.full_name == "Test User"  # Default
        assert user.role == "owner"

    def test_create_mock_team(self) -> None:
        team = create_mock_team(3, "ops")

        assert team.id == 3
        assert team.description == "ops team"

    def test_create_mock_repository(self) -> None:
        repo = create_mock_repository("api", "acme", description="API")

        assert (repo.name, repo.namespace, repo.description) == ("api", "acme", "API")

    def test_acme_client(self) -> None:
        mock = create_acme_client()

        members, _ = mock.teams.list_team_members("acme", "infra")
        permissions, _ = mock.repos.list_repository_permissions("acme", "web")

        assert [m.username for m in members] == ["alice"]
        assert [(p.team_name, p.permission) for p in permissions] == [("infra", "write")]

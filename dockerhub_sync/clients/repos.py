"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub_sync.clients.base import PaginationVars, list_page, require
from dockerhub_sync.types.repos import Repository, RepositoryPermission

if TYPE_CHECKING:
    from dockerhub_sync.transport import HTTPTransport

REPOSITORIES_ENDPOINT = "/v2/repositories/{namespace}"
REPOSITORY_GROUPS_ENDPOINT = REPOSITORIES_ENDPOINT + "/{repo}/groups"


def _parse_repository(data: dict[str, Any]) -> Repository:
    return Repository(
        name=require(data, "name"),
        namespace=data.get("namespace") or "",
        description=data.get("description") or "",
    )


def _parse_permission(data: dict[str, Any]) -> RepositoryPermission:
    return RepositoryPermission(
        team_id=int(data.get("group_id") or 0),
        team_name=require(data, "group_name"),
        permission=require(data, "permission"),
    )


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_repositories(
        self, namespace: str, pagination: PaginationVars | None = None
    ) -> tuple[list[Repository], str]:
        """
        List repositories in a namespace.

        Args:
            namespace: Organization slug
            pagination: Page size and page number

        Returns:
            Repositories on this page and the next page marker
        """
        return list_page(
            self.transport,
            REPOSITORIES_ENDPOINT.format(namespace=namespace),
            _parse_repository,
            pagination,
        )

    def list_repository_permissions(
        self,
        namespace: str,
        repo: str,
        pagination: PaginationVars | None = None,
    ) -> tuple[list[RepositoryPermission], str]:
        """
        List team permissions on a repository.

        Records identify the team by name; callers resolve the durable team
        id with TeamsClient.get_team.

        Args:
            namespace: Organization slug
            repo: Repository name
            pagination: Page size and page number

        Returns:
            Permission records on this page and the next page marker
        """
        return list_page(
            self.transport,
            REPOSITORY_GROUPS_ENDPOINT.format(namespace=namespace, repo=repo),
            _parse_permission,
            pagination,
        )

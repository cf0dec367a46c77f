"""Repository synchronizer."""

from dockerhub_sync.connector.base import ResourceSyncer, logger
from dockerhub_sync.connector.mapper import (
    new_grant,
    repository_entitlement,
    repository_resource,
    team_member_expansion,
)
from dockerhub_sync.connector.resource_types import (
    REPOSITORY_PERMISSIONS,
    RESOURCE_TYPE_REPOSITORY,
    RESOURCE_TYPE_TEAM,
)
from dockerhub_sync.exceptions import DockerHubError, MissingContextError
from dockerhub_sync.types.resources import Entitlement, Grant, Resource, ResourceId
from dockerhub_sync.types.teams import Team


class RepositorySyncer(ResourceSyncer):
    """
    Organization repositories.

    Repositories expose read, write and admin entitlements, granted to
    teams only. Every grant is expandable into the team's members.
    """

    resource_type = RESOURCE_TYPE_REPOSITORY

    def entitlements(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Entitlement], str]:
        return [repository_entitlement(resource, p) for p in REPOSITORY_PERMISSIONS], ""

    def grants(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Grant], str]:
        """
        Grants of repository permissions to teams.

        Permission records name the team but do not carry its durable id,
        so each team is looked up once per page. A failed lookup fails the
        whole page.
        """
        if resource.parent_resource_id is None:
            raise MissingContextError(
                f"repository {resource.id.resource} has no parent organization"
            )

        org = resource.parent_resource_id.resource
        repo = resource.id.resource
        bag, pagination = self._start_page(page_token, resource.id)

        try:
            permissions, next_page = self.client.repos.list_repository_permissions(
                org, repo, pagination
            )
        except DockerHubError as exc:
            logger.error("failed to list permissions of %s/%s: %s", org, repo, exc)
            raise

        next_token = bag.next_token(next_page)

        teams: dict[str, Team] = {}
        grants: list[Grant] = []
        for permission in permissions:
            team = teams.get(permission.team_name)
            if team is None:
                try:
                    team = self.client.teams.get_team(org, permission.team_name)
                except DockerHubError as exc:
                    logger.error(
                        "failed to resolve team %s/%s for %s: %s",
                        org, permission.team_name, repo, exc,
                    )
                    raise
                teams[permission.team_name] = team

            grants.append(
                new_grant(
                    resource,
                    permission.permission,
                    ResourceId(resource_type=RESOURCE_TYPE_TEAM.id, resource=str(team.id)),
                    expandable=team_member_expansion(team.id),
                )
            )

        return grants, next_token

    # Keep last: in the class body the name shadows the builtin for later annotations
    def list(
        self, parent_id: ResourceId | None, page_token: str = ""
    ) -> tuple[list[Resource], str]:
        if parent_id is None:
            return [], ""

        bag, pagination = self._start_page(page_token, self._list_position(parent_id))

        try:
            repositories, next_page = self.client.repos.list_repositories(
                parent_id.resource, pagination
            )
        except DockerHubError as exc:
            logger.error("failed to list repositories of %s: %s", parent_id.resource, exc)
            raise

        next_token = bag.next_token(next_page)
        return [repository_resource(repo, parent_id) for repo in repositories], next_token

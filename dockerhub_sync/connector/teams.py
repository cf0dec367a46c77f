"""Team synchronizer."""

from dockerhub_sync.connector.base import ResourceSyncer, logger
from dockerhub_sync.connector.mapper import (
    new_grant,
    team_membership_entitlement,
    team_resource,
    user_resource,
)
from dockerhub_sync.connector.resource_types import RESOURCE_TYPE_TEAM, TEAM_MEMBERSHIP
from dockerhub_sync.exceptions import DockerHubError, MissingContextError
from dockerhub_sync.types.resources import Entitlement, Grant, Resource, ResourceId


class TeamSyncer(ResourceSyncer):
    """
    Organization teams.

    Each team has a single "member" entitlement. Its grants point at users
    directly and are never expanded further.
    """

    resource_type = RESOURCE_TYPE_TEAM

    def entitlements(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Entitlement], str]:
        return [team_membership_entitlement(resource)], ""

    def grants(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Grant], str]:
        if resource.group_trait is None:
            raise MissingContextError(
                f"team {resource.id.resource} has no team profile"
            )
        if resource.parent_resource_id is None:
            raise MissingContextError(
                f"team {resource.id.resource} has no parent organization"
            )

        org = resource.parent_resource_id.resource
        team_name = resource.group_trait.team_name
        bag, pagination = self._start_page(page_token, resource.id)

        try:
            members, next_page = self.client.teams.list_team_members(
                org, team_name, pagination
            )
        except DockerHubError as exc:
            logger.error("failed to list members of team %s/%s: %s", org, team_name, exc)
            raise

        next_token = bag.next_token(next_page)

        grants = [
            new_grant(resource, TEAM_MEMBERSHIP, user_resource(member, resource.id).id)
            for member in members
        ]
        return grants, next_token

    # Keep last: in the class body the name shadows the builtin for later annotations
    def list(
        self, parent_id: ResourceId | None, page_token: str = ""
    ) -> tuple[list[Resource], str]:
        if parent_id is None:
            return [], ""

        bag, pagination = self._start_page(page_token, self._list_position(parent_id))

        try:
            teams, next_page = self.client.teams.list_teams(parent_id.resource, pagination)
        except DockerHubError as exc:
            logger.error("failed to list teams of %s: %s", parent_id.resource, exc)
            raise

        next_token = bag.next_token(next_page)
        return [team_resource(team, parent_id) for team in teams], next_token

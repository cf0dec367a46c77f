"""Teams resource client.

DockerHub calls teams "groups"; the endpoints keep that name.
"""

from typing import TYPE_CHECKING, Any

from dockerhub_sync.clients.base import PaginationVars, list_page, parse_record, require
from dockerhub_sync.clients.users import parse_user
from dockerhub_sync.types.teams import Team
from dockerhub_sync.types.users import User

if TYPE_CHECKING:
    from dockerhub_sync.transport import HTTPTransport

TEAMS_ENDPOINT = "/v2/orgs/{org}/groups"
TEAM_DETAIL_ENDPOINT = TEAMS_ENDPOINT + "/{team}"
TEAM_MEMBERS_ENDPOINT = TEAM_DETAIL_ENDPOINT + "/members"


def _parse_team(data: dict[str, Any]) -> Team:
    return Team(
        id=int(require(data, "id")),
        name=require(data, "name"),
        description=data.get("description") or "",
    )


class TeamsClient:
    """Client for team-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the teams client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_teams(
        self, org: str, pagination: PaginationVars | None = None
    ) -> tuple[list[Team], str]:
        """
        List teams of an organization.

        Args:
            org: Organization slug
            pagination: Page size and page number

        Returns:
            Teams on this page and the next page marker
        """
        return list_page(
            self.transport,
            TEAMS_ENDPOINT.format(org=org),
            _parse_team,
            pagination,
        )

    def get_team(self, org: str, team_name: str) -> Team:
        """
        Get a team by name.

        Args:
            org: Organization slug
            team_name: Team name as it appears in permission records

        Returns:
            Team with its numeric id

        Raises:
            NotFoundError: If the team does not exist
            UnexpectedResponseError: If the team record is malformed
        """
        path = TEAM_DETAIL_ENDPOINT.format(org=org, team=team_name)
        return parse_record(_parse_team, self.transport.get(path), path)

    def list_team_members(
        self,
        org: str,
        team_name: str,
        pagination: PaginationVars | None = None,
    ) -> tuple[list[User], str]:
        """
        List members of a team.

        Args:
            org: Organization slug
            team_name: Team name
            pagination: Page size and page number

        Returns:
            Members on this page and the next page marker
        """
        return list_page(
            self.transport,
            TEAM_MEMBERS_ENDPOINT.format(org=org, team=team_name),
            parse_user,
            pagination,
        )

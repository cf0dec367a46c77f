"""Users resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub_sync.clients.base import PaginationVars, list_page, parse_record, require
from dockerhub_sync.types.users import User

if TYPE_CHECKING:
    from dockerhub_sync.transport import HTTPTransport

CURRENT_USER_ENDPOINT = "/v2/user"
ORG_MEMBERS_ENDPOINT = "/v2/orgs/{org}/members"


def parse_user(data: dict[str, Any]) -> User:
    """Parse a member record; null text fields become empty strings."""
    return User(
        id=str(require(data, "id")),
        username=require(data, "username"),
        full_name=data.get("full_name") or "",
        email=data.get("email") or "",
        role=data.get("role") or "",
    )


class UsersClient:
    """Client for user-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the users client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get_current_user(self) -> User:
        """
        Get the authenticated user.

        Returns:
            The user the bearer token belongs to

        Raises:
            AuthenticationError: If the token is rejected
        """
        response = self.transport.get(CURRENT_USER_ENDPOINT)
        return parse_record(parse_user, response, CURRENT_USER_ENDPOINT)

    def list_users(
        self, org: str, pagination: PaginationVars | None = None
    ) -> tuple[list[User], str]:
        """
        List members of an organization.

        Args:
            org: Organization slug
            pagination: Page size and page number

        Returns:
            Members on this page and the next page marker

        Raises:
            NotFoundError: If the organization does not exist
        """
        return list_page(
            self.transport,
            ORG_MEMBERS_ENDPOINT.format(org=org),
            parse_user,
            pagination,
        )

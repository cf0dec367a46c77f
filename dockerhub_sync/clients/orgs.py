"""Organizations resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub_sync.clients.base import PaginationVars, list_page, require
from dockerhub_sync.types.orgs import Organization

if TYPE_CHECKING:
    from dockerhub_sync.transport import HTTPTransport

USER_ORGS_ENDPOINT = "/v2/user/orgs"


def _parse_organization(data: dict[str, Any]) -> Organization:
    return Organization(
        id=str(data.get("id", "")),
        name=require(data, "orgname"),
    )


class OrgsClient:
    """Client for organization-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the orgs client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_organizations(
        self, pagination: PaginationVars | None = None
    ) -> tuple[list[Organization], str]:
        """
        List organizations the authenticated user belongs to.

        Args:
            pagination: Page size and page number

        Returns:
            Organizations on this page and the next page marker
        """
        return list_page(
            self.transport, USER_ORGS_ENDPOINT, _parse_organization, pagination
        )

"""Organization synchronizer."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from dockerhub_sync.connector.base import ResourceSyncer, logger
from dockerhub_sync.connector.mapper import organization_resource
from dockerhub_sync.connector.resource_types import RESOURCE_TYPE_ORG
from dockerhub_sync.exceptions import DockerHubError
from dockerhub_sync.types.resources import Entitlement, Grant, Resource, ResourceId

if TYPE_CHECKING:
    from dockerhub_sync.client import DockerHubClient


class OrgSyncer(ResourceSyncer):
    """
    Root of the hierarchy: organizations of the authenticated user.

    Organizations are containers only and carry no entitlements or grants.
    """

    resource_type = RESOURCE_TYPE_ORG

    def __init__(
        self, client: "DockerHubClient", orgs: Iterable[str] | None = None
    ) -> None:
        """
        Args:
            client: DockerHub API client
            orgs: Organization names to keep; empty keeps all of them
        """
        super().__init__(client)
        self.orgs = frozenset(orgs or ())

    def entitlements(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Entitlement], str]:
        return [], ""

    def grants(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Grant], str]:
        return [], ""

    # Keep last: in the class body the name shadows the builtin for later annotations
    def list(
        self, parent_id: ResourceId | None = None, page_token: str = ""
    ) -> tuple[list[Resource], str]:
        bag, pagination = self._start_page(page_token, self._list_position(None))

        try:
            orgs, next_page = self.client.orgs.list_organizations(pagination)
        except DockerHubError as exc:
            logger.error("failed to list organizations: %s", exc)
            raise

        next_token = bag.next_token(next_page)

        resources = [
            organization_resource(org)
            for org in orgs
            if not self.orgs or org.name in self.orgs
        ]
        return resources, next_token

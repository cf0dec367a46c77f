"""Common interface of the resource synchronizers."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from dockerhub_sync.clients.base import PaginationVars
from dockerhub_sync.connector.resource_types import RESOURCES_PAGE_SIZE
from dockerhub_sync.logging import get_logger
from dockerhub_sync.pagination import Bag, parse_page_token
from dockerhub_sync.types.resources import (
    Entitlement,
    Grant,
    Resource,
    ResourceId,
    ResourceType,
)

if TYPE_CHECKING:
    from dockerhub_sync.client import DockerHubClient

logger = get_logger("connector")


class ResourceSyncer(ABC):
    """
    Lists one kind of resource and the entitlements and grants on it.

    Every call is a pure function of its arguments: the position of an
    enumeration lives only in the page token handed back to the caller.
    Each method returns one page and the token for the next ("" when done).
    """

    resource_type: ResourceType

    def __init__(self, client: "DockerHubClient") -> None:
        self.client = client

    @abstractmethod
    def entitlements(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Entitlement], str]:
        """List what can be granted on a resource."""

    @abstractmethod
    def grants(
        self, resource: Resource, page_token: str = ""
    ) -> tuple[list[Grant], str]:
        """List who holds entitlements on a resource."""

    def _start_page(
        self, page_token: str, resource_id: ResourceId
    ) -> tuple[Bag, PaginationVars]:
        bag, page = parse_page_token(page_token, resource_id)
        return bag, PaginationVars(size=RESOURCES_PAGE_SIZE, page=page)

    def _list_position(self, parent_id: ResourceId | None) -> ResourceId:
        # List tokens are scoped to the resource type and the parent
        return ResourceId(
            resource_type=self.resource_type.id,
            resource=parent_id.resource if parent_id is not None else "",
        )

    # Keep last: in the class body the name shadows the builtin for later annotations
    @abstractmethod
    def list(
        self, parent_id: ResourceId | None, page_token: str = ""
    ) -> tuple[list[Resource], str]:
        """List resources under a parent."""

"""User synchronizer."""

from dockerhub_sync.connector.base import ResourceSyncer, logger
from dockerhub_sync.connector.mapper import user_resource
from dockerhub_sync.connector.resource_types import RESOURCE_TYPE_USER
from dockerhub_sync.exceptions import DockerHubError
from dockerhub_sync.types.resources import Entitlement, Grant, Resource, ResourceId


class UserSyncer(ResourceSyncer):
    """Organization members. Users are principals only."""

    resource_type = RESOURCE_TYPE_USER

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
        self, parent_id: ResourceId | None, page_token: str = ""
    ) -> tuple[list[Resource], str]:
        if parent_id is None:
            return [], ""

        bag, pagination = self._start_page(page_token, self._list_position(parent_id))

        try:
            users, next_page = self.client.users.list_users(parent_id.resource, pagination)
        except DockerHubError as exc:
            logger.error("failed to list members of %s: %s", parent_id.resource, exc)
            raise

        next_token = bag.next_token(next_page)
        return [user_resource(user, parent_id) for user in users], next_token

"""DockerHub connector: synchronizers, metadata and credential validation."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

import httpx

from dockerhub_sync.client import DockerHubClient
from dockerhub_sync.connector.base import ResourceSyncer, logger
from dockerhub_sync.connector.orgs import OrgSyncer
from dockerhub_sync.connector.repositories import RepositorySyncer
from dockerhub_sync.connector.teams import TeamSyncer
from dockerhub_sync.connector.users import UserSyncer
from dockerhub_sync.exceptions import DockerHubError
from dockerhub_sync.types.resources import ConnectorMetadata

if TYPE_CHECKING:
    from dockerhub_sync.config import ConnectorConfig

DISPLAY_NAME = "DockerHub"
DESCRIPTION = (
    "Connector syncing DockerHub organization members, their teams, "
    "and repository permissions"
)


def connector_metadata() -> ConnectorMetadata:
    return ConnectorMetadata(display_name=DISPLAY_NAME, description=DESCRIPTION)


class DockerHubConnector:
    """Entry point used by the sync driver."""

    def __init__(
        self, client: DockerHubClient, orgs: Iterable[str] | None = None
    ) -> None:
        """
        Args:
            client: Authenticated DockerHub client (or a compatible mock)
            orgs: Organization allow-list; empty syncs every organization
        """
        self.client = client
        self.orgs = list(orgs or [])

    @classmethod
    def new(
        cls,
        config: "ConnectorConfig",
        http_transport: httpx.BaseTransport | None = None,
    ) -> "DockerHubConnector":
        """
        Log in, check the issued token, and build the connector.

        Raises:
            ConfigurationError: If the configuration is invalid
            AuthenticationError: If login or validation fails
        """
        config.validate()
        client = DockerHubClient.login(
            config.username,
            config.secret,
            base_url=config.base_url,
            http_transport=http_transport,
        )
        connector = cls(client, config.orgs)
        try:
            connector.validate()
        except DockerHubError:
            client.close()
            raise
        return connector

    def resource_syncers(self) -> list[ResourceSyncer]:
        return [
            OrgSyncer(self.client, self.orgs),
            RepositorySyncer(self.client),
            UserSyncer(self.client),
            TeamSyncer(self.client),
        ]

    def metadata(self) -> ConnectorMetadata:
        return connector_metadata()

    def validate(self) -> None:
        """
        Exercise the credentials with one cheap read.

        Raises:
            DockerHubError: If the current user cannot be fetched
        """
        try:
            user = self.client.users.get_current_user()
        except DockerHubError as exc:
            logger.error("failed to get current user: %s", exc)
            raise
        logger.info("validated credentials for %s", user.username)

    def close(self) -> None:
        self.client.close()

"""Resource synchronizers and the connector built from them."""

from dockerhub_sync.connector.base import ResourceSyncer
from dockerhub_sync.connector.connector import DockerHubConnector
from dockerhub_sync.connector.orgs import OrgSyncer
from dockerhub_sync.connector.repositories import RepositorySyncer
from dockerhub_sync.connector.sync import SyncDriver, SyncResult, drain
from dockerhub_sync.connector.teams import TeamSyncer
from dockerhub_sync.connector.users import UserSyncer

__all__ = [
    "ResourceSyncer",
    "OrgSyncer",
    "UserSyncer",
    "TeamSyncer",
    "RepositorySyncer",
    "DockerHubConnector",
    "SyncDriver",
    "SyncResult",
    "drain",
]

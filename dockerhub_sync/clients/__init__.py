"""DockerHub resource clients."""

from dockerhub_sync.clients.base import PaginationVars
from dockerhub_sync.clients.orgs import OrgsClient
from dockerhub_sync.clients.repos import ReposClient
from dockerhub_sync.clients.teams import TeamsClient
from dockerhub_sync.clients.users import UsersClient

__all__ = [
    "PaginationVars",
    "OrgsClient",
    "UsersClient",
    "TeamsClient",
    "ReposClient",
]

"""DockerHub sync type definitions.

This module exports the vendor record types and the normalized
resource/entitlement/grant model.
"""

from dockerhub_sync.types.orgs import Organization
from dockerhub_sync.types.repos import Repository, RepositoryPermission
from dockerhub_sync.types.resources import (
    ConnectorMetadata,
    Entitlement,
    Grant,
    GrantExpandable,
    GroupTrait,
    Resource,
    ResourceId,
    ResourceType,
    UserTrait,
)
from dockerhub_sync.types.teams import Team
from dockerhub_sync.types.users import User

__all__ = [
    # DockerHub records
    "Organization",
    "User",
    "Team",
    "Repository",
    "RepositoryPermission",
    # Normalized model
    "ResourceType",
    "ResourceId",
    "Resource",
    "UserTrait",
    "GroupTrait",
    "Entitlement",
    "Grant",
    "GrantExpandable",
    "ConnectorMetadata",
]

"""Repository-related data models."""

from dataclasses import dataclass


@dataclass
class Repository:
    """Repository information."""

    name: str
    namespace: str
    description: str = ""


@dataclass
class RepositoryPermission:
    """A team's access level on a repository."""

    team_id: int
    team_name: str
    permission: str  # "read", "write", "admin"

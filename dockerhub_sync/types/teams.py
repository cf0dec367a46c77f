"""Team (DockerHub "group") data models."""

from dataclasses import dataclass


@dataclass
class Team:
    """A group within an organization."""

    id: int
    name: str
    description: str = ""

"""User data models."""

from dataclasses import dataclass


@dataclass
class User:
    """An organization member, team member, or the authenticated user."""

    id: str
    username: str
    full_name: str = ""
    email: str = ""
    role: str = ""

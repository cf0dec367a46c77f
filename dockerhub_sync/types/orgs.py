"""Organization data models."""

from dataclasses import dataclass


@dataclass
class Organization:
    """An organization the authenticated user belongs to."""

    id: str
    name: str  # "orgname"; used as the slug in every org-scoped endpoint

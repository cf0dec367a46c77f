"""
Normalized resource, entitlement and grant models.

These are the shapes handed to the governance platform. All of them are
frozen: a value is built from one API response, returned, and dropped.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResourceType:
    """A kind of resource the connector can enumerate."""

    id: str
    display_name: str
    traits: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResourceId:
    """Typed identifier of a resource."""

    resource_type: str
    resource: str


@dataclass(frozen=True)
class UserTrait:
    """Profile of a resource that is a user."""

    login: str
    user_id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: str = "enabled"


@dataclass(frozen=True)
class GroupTrait:
    """Profile of a resource that is a team."""

    team_id: int
    team_name: str


@dataclass(frozen=True)
class Resource:
    """A synced resource."""

    id: ResourceId
    display_name: str
    parent_resource_id: ResourceId | None = None
    description: str = ""
    user_trait: UserTrait | None = None
    group_trait: GroupTrait | None = None
    child_resource_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class Entitlement:
    """A grantable capability on a resource."""

    id: str
    resource: Resource
    slug: str
    purpose: str = ""  # "permission" or "assignment"
    display_name: str = ""
    description: str = ""
    grantable_to: tuple[str, ...] = ()


@dataclass(frozen=True)
class GrantExpandable:
    """
    Grant annotation asking the platform to resolve further grants.

    The platform follows each listed entitlement and adds its grants for
    principals of the listed resource types. Shallow expansion stops after
    one hop.
    """

    entitlement_ids: tuple[str, ...]
    shallow: bool = False
    resource_type_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class Grant:
    """An entitlement held by a principal."""

    id: str
    entitlement: Entitlement
    principal: ResourceId
    annotations: tuple[GrantExpandable, ...] = field(default=())

    @property
    def expandable(self) -> GrantExpandable | None:
        for annotation in self.annotations:
            if isinstance(annotation, GrantExpandable):
                return annotation
        return None


@dataclass(frozen=True)
class ConnectorMetadata:
    """Static description of the connector."""

    display_name: str
    description: str

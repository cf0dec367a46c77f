"""
Mapping from DockerHub records to resources, entitlements and grants.

Everything here is pure: no I/O, same output for the same input.
"""

from dockerhub_sync.connector.resource_types import (
    PERMISSION_LABELS,
    RESOURCE_TYPE_ORG,
    RESOURCE_TYPE_REPOSITORY,
    RESOURCE_TYPE_TEAM,
    RESOURCE_TYPE_USER,
    TEAM_MEMBERSHIP,
)
from dockerhub_sync.types.orgs import Organization
from dockerhub_sync.types.repos import Repository
from dockerhub_sync.types.resources import (
    Entitlement,
    Grant,
    GrantExpandable,
    GroupTrait,
    Resource,
    ResourceId,
    UserTrait,
)
from dockerhub_sync.types.teams import Team
from dockerhub_sync.types.users import User


def title_case(value: str) -> str:
    """Upper-case the first letter of every space separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in value.split(" "))


def split_full_name(full_name: str) -> tuple[str, str]:
    """
    Split a full name into first and last name.

    The first word is the first name and the rest is the last name.

    >>> split_full_name("Ada King Lovelace")
    ('Ada', 'King Lovelace')
    """
    parts = full_name.split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def entitlement_id(resource_id: ResourceId, slug: str) -> str:
    return f"{resource_id.resource_type}:{resource_id.resource}:{slug}"


def grant_id(entitlement: Entitlement, principal: ResourceId) -> str:
    return f"{entitlement.id}:{principal.resource_type}:{principal.resource}"


def organization_resource(org: Organization) -> Resource:
    return Resource(
        id=ResourceId(resource_type=RESOURCE_TYPE_ORG.id, resource=org.name),
        display_name=org.name,
        child_resource_types=(
            RESOURCE_TYPE_USER.id,
            RESOURCE_TYPE_TEAM.id,
            RESOURCE_TYPE_REPOSITORY.id,
        ),
    )


def user_resource(user: User, parent_id: ResourceId | None) -> Resource:
    first_name, last_name = split_full_name(user.full_name)
    return Resource(
        id=ResourceId(resource_type=RESOURCE_TYPE_USER.id, resource=user.id),
        display_name=user.username,
        parent_resource_id=parent_id,
        user_trait=UserTrait(
            login=user.username,
            user_id=user.id,
            first_name=first_name,
            last_name=last_name,
            email=user.email,
        ),
    )


def team_resource(team: Team, parent_id: ResourceId | None) -> Resource:
    return Resource(
        id=ResourceId(resource_type=RESOURCE_TYPE_TEAM.id, resource=str(team.id)),
        display_name=team.name,
        parent_resource_id=parent_id,
        description=team.description,
        group_trait=GroupTrait(team_id=team.id, team_name=team.name),
    )


def repository_resource(repository: Repository, parent_id: ResourceId | None) -> Resource:
    return Resource(
        id=ResourceId(resource_type=RESOURCE_TYPE_REPOSITORY.id, resource=repository.name),
        display_name=title_case(repository.name),
        parent_resource_id=parent_id,
        description=repository.description,
    )


def repository_entitlement(resource: Resource, permission: str) -> Entitlement:
    """Permission entitlement on a repository, grantable to teams."""
    label = PERMISSION_LABELS.get(permission, permission)
    return Entitlement(
        id=entitlement_id(resource.id, permission),
        resource=resource,
        slug=permission,
        purpose="permission",
        display_name=f"{resource.display_name} Repository {permission}",
        description=f"{title_case(label)} access to {resource.display_name} repository in DockerHub",
        grantable_to=(RESOURCE_TYPE_TEAM.id,),
    )


def team_membership_entitlement(resource: Resource) -> Entitlement:
    """Membership entitlement on a team, grantable to users."""
    return Entitlement(
        id=entitlement_id(resource.id, TEAM_MEMBERSHIP),
        resource=resource,
        slug=TEAM_MEMBERSHIP,
        purpose="assignment",
        display_name=f"{resource.display_name} Team {TEAM_MEMBERSHIP}",
        description=f"Access to {resource.display_name} team in DockerHub",
        grantable_to=(RESOURCE_TYPE_USER.id,),
    )


def team_member_expansion(team_id: int) -> GrantExpandable:
    """Expand a grant held by a team into grants for its users, one hop deep."""
    team = ResourceId(resource_type=RESOURCE_TYPE_TEAM.id, resource=str(team_id))
    return GrantExpandable(
        entitlement_ids=(entitlement_id(team, TEAM_MEMBERSHIP),),
        shallow=True,
        resource_type_ids=(RESOURCE_TYPE_USER.id,),
    )


def new_grant(
    resource: Resource,
    slug: str,
    principal: ResourceId,
    expandable: GrantExpandable | None = None,
) -> Grant:
    entitlement = Entitlement(
        id=entitlement_id(resource.id, slug),
        resource=resource,
        slug=slug,
    )
    return Grant(
        id=grant_id(entitlement, principal),
        entitlement=entitlement,
        principal=principal,
        annotations=(expandable,) if expandable is not None else (),
    )

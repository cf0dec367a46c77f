"""Resource types and entitlement slugs exposed by the connector."""

from dockerhub_sync.types.resources import ResourceType

RESOURCE_TYPE_ORG = ResourceType(id="org", display_name="Organization")
RESOURCE_TYPE_USER = ResourceType(id="user", display_name="User", traits=("user",))
RESOURCE_TYPE_TEAM = ResourceType(id="team", display_name="Team", traits=("group",))
RESOURCE_TYPE_REPOSITORY = ResourceType(id="repository", display_name="Repository")

# Page size requested from every list endpoint
RESOURCES_PAGE_SIZE = 50

TEAM_MEMBERSHIP = "member"

READ_PERMISSION = "read"
READ_AND_WRITE_PERMISSION = "write"
ADMIN_PERMISSION = "admin"

REPOSITORY_PERMISSIONS = (READ_PERMISSION, READ_AND_WRITE_PERMISSION, ADMIN_PERMISSION)

PERMISSION_LABELS = {
    READ_PERMISSION: "read",
    READ_AND_WRITE_PERMISSION: "read and write",
    ADMIN_PERMISSION: "admin",
}

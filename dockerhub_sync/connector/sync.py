"""
Sequential sync driver.

Plays the role of the governance platform: walks the hierarchy from the
root and keeps calling each synchronizer with the token it returned until
the token comes back empty.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from dockerhub_sync.connector.base import ResourceSyncer, logger
from dockerhub_sync.connector.connector import DockerHubConnector
from dockerhub_sync.connector.resource_types import RESOURCE_TYPE_ORG
from dockerhub_sync.types.resources import Entitlement, Grant, Resource

T = TypeVar("T")


@dataclass
class SyncResult:
    """Everything collected by one pass."""

    resources: list[Resource] = field(default_factory=list)
    entitlements: list[Entitlement] = field(default_factory=list)
    grants: list[Grant] = field(default_factory=list)


def drain(fetch: Callable[[str], tuple[list[T], str]]) -> list[T]:
    """Call fetch with successive page tokens until it returns an empty one."""
    items: list[T] = []
    token = ""
    while True:
        page, token = fetch(token)
        items.extend(page)
        if not token:
            return items


class SyncDriver:
    """Runs a full, stateless pass over a connector."""

    def __init__(self, connector: DockerHubConnector) -> None:
        self.connector = connector
        self.syncers: dict[str, ResourceSyncer] = {
            syncer.resource_type.id: syncer for syncer in connector.resource_syncers()
        }

    def run(self) -> SyncResult:
        result = SyncResult()

        orgs = drain(lambda token: self.syncers[RESOURCE_TYPE_ORG.id].list(None, token))
        result.resources.extend(orgs)

        for org in orgs:
            for child_type in org.child_resource_types:
                syncer = self.syncers[child_type]
                children = drain(lambda token: syncer.list(org.id, token))
                logger.info(
                    "listed %d %s resources in %s", len(children), child_type, org.id.resource
                )
                result.resources.extend(children)

        for resource in result.resources:
            syncer = self.syncers[resource.id.resource_type]
            result.entitlements.extend(
                drain(lambda token: syncer.entitlements(resource, token))
            )
            result.grants.extend(drain(lambda token: syncer.grants(resource, token)))

        logger.info(
            "sync complete: %d resources, %d entitlements, %d grants",
            len(result.resources), len(result.entitlements), len(result.grants),
        )
        return result

"""
Opaque, resumable page tokens.

A token is a serialized stack of page states, one per enclosing
enumeration, so a nested walk ("teams page 3, members page 2 of the third
team") can be resumed from a single string held by the caller. Each state
records which resource type and resource it belongs to, and a token
presented for a different one is rejected rather than replayed.

Callers must treat tokens as opaque; the encoding may change between
versions.
"""

import json
from dataclasses import asdict, dataclass
from typing import Any

from dockerhub_sync.exceptions import PageTokenError
from dockerhub_sync.types.resources import ResourceId


@dataclass
class PageState:
    """Position of one enumeration."""

    resource_type_id: str
    resource_id: str = ""
    token: str = ""


class Bag:
    """Stack of page states with the innermost enumeration on top."""

    def __init__(self) -> None:
        self._states: list[PageState] = []
        self._current: PageState | None = None

    def push(self, state: PageState) -> None:
        if self._current is not None:
            self._states.append(self._current)
        self._current = state

    def pop(self) -> PageState | None:
        popped = self._current
        self._current = self._states.pop() if self._states else None
        return popped

    def current(self) -> PageState | None:
        return self._current

    def page_token(self) -> str:
        if self._current is None:
            return ""
        return self._current.token

    def next(self, page_token: str) -> None:
        """Record the next page of the current enumeration, or pop it when exhausted."""
        if not page_token:
            self.pop()
            return
        if self._current is None:
            raise PageTokenError("no enumeration in progress")
        self._current.token = page_token

    def next_token(self, page_token: str) -> str:
        """
        Advance the current enumeration and serialize the stack.

        Returns "" once every enumeration in the stack is exhausted.
        """
        self.next(page_token)
        return self.marshal()

    def marshal(self) -> str:
        if self._current is None:
            return ""
        return json.dumps(
            {
                "states": [asdict(state) for state in self._states],
                "current_state": asdict(self._current),
            },
            sort_keys=True,
            separators=(",", ":"),
        )

    @classmethod
    def unmarshal(cls, token: str) -> "Bag":
        """
        Rebuild a bag from a token.

        Raises:
            PageTokenError: If a non-empty token cannot be decoded
        """
        bag = cls()
        if not token:
            return bag

        try:
            data = json.loads(token)
        except ValueError as e:
            raise PageTokenError(f"page token is not valid: {e}") from e

        if not isinstance(data, dict):
            raise PageTokenError("page token is not valid: expected an object")

        states = data.get("states", [])
        if not isinstance(states, list):
            raise PageTokenError("page token is not valid: 'states' is not a list")

        for raw in states:
            bag._states.append(_parse_state(raw))

        current = data.get("current_state")
        if current is not None:
            bag._current = _parse_state(current)
        elif bag._states:
            raise PageTokenError("page token is not valid: missing current state")

        return bag


def _parse_state(raw: Any) -> PageState:
    if not isinstance(raw, dict):
        raise PageTokenError("page token is not valid: page state is not an object")
    resource_type_id = raw.get("resource_type_id")
    resource_id = raw.get("resource_id", "")
    token = raw.get("token", "")
    if not isinstance(resource_type_id, str) or not resource_type_id:
        raise PageTokenError("page token is not valid: page state has no resource type")
    if not isinstance(resource_id, str) or not isinstance(token, str):
        raise PageTokenError("page token is not valid: malformed page state")
    return PageState(
        resource_type_id=resource_type_id,
        resource_id=resource_id,
        token=token,
    )


def page_number(marker: str) -> int:
    """Convert a page marker to the vendor's page number; "" is the first page (0)."""
    if not marker:
        return 0
    try:
        page = int(marker)
    except ValueError as e:
        raise PageTokenError(f"page token is not valid: bad page {marker!r}") from e
    if page < 0:
        raise PageTokenError(f"page token is not valid: bad page {marker!r}")
    return page


def parse_page_token(token: str, resource_id: ResourceId) -> tuple[Bag, int]:
    """
    Decode a caller's token for the enumeration identified by resource_id.

    An empty token starts a fresh enumeration at the first page.

    Args:
        token: Opaque token from a previous call, or ""
        resource_id: Resource type (and resource) being enumerated

    Returns:
        The bag to advance with ``next_token`` and the page number to fetch

    Raises:
        PageTokenError: If the token is malformed or was issued for a
            different enumeration
    """
    bag = Bag.unmarshal(token)
    current = bag.current()

    if current is None:
        bag.push(
            PageState(
                resource_type_id=resource_id.resource_type,
                resource_id=resource_id.resource,
            )
        )
    elif (
        current.resource_type_id != resource_id.resource_type
        or current.resource_id != resource_id.resource
    ):
        raise PageTokenError(
            f"page token was issued for {current.resource_type_id}:{current.resource_id}, "
            f"not {resource_id.resource_type}:{resource_id.resource}"
        )

    return bag, page_number(bag.page_token())

"""Shared pagination handling for list endpoints."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from dockerhub_sync.exceptions import UnexpectedResponseError

if TYPE_CHECKING:
    from dockerhub_sync.transport import HTTPTransport

T = TypeVar("T")


@dataclass
class PaginationVars:
    """Page request for a list endpoint. Zero leaves a parameter unset."""

    size: int = 0
    page: int = 0

    def to_params(self) -> dict[str, int]:
        params: dict[str, int] = {}
        if self.size:
            params["page_size"] = self.size
        if self.page:
            params["page"] = self.page
        return params


def next_page_from_url(next_url: str | None) -> str:
    """
    Extract the page marker from a DockerHub "next" link.

    Only the ``page`` query parameter survives; the rest of the URL is
    dropped. Returns "" when there is no next page.
    """
    if not next_url:
        return ""
    return httpx.URL(next_url).params.get("page", "")


def require(data: dict[str, Any], key: str) -> Any:
    """Return a required record field; a missing or null field is a KeyError."""
    value = data[key]
    if value is None:
        raise KeyError(key)
    return value


def parse_record(
    parse: Callable[[Any], T], data: Any, path: str, method: str = "GET"
) -> T:
    """
    Parse one vendor record.

    Raises:
        UnexpectedResponseError: If a required field is missing or has the
            wrong type (code DECODE_ERROR)
    """
    try:
        return parse(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise UnexpectedResponseError(
            "DECODE_ERROR",
            f"{method} {path}: malformed record ({type(e).__name__}: {e})",
        ) from e


def list_page(
    transport: "HTTPTransport",
    path: str,
    parse: Callable[[dict[str, Any]], T],
    pagination: PaginationVars | None = None,
) -> tuple[list[T], str]:
    """
    Fetch one page of a ``{count, next, results}`` list response.

    Returns:
        The parsed results and the next page marker ("" when exhausted)
    """
    params = pagination.to_params() if pagination else None
    response = transport.get(path, params=params or None)

    results = response.get("results")
    if results is None:
        results = []
    if not isinstance(results, list):
        raise UnexpectedResponseError(
            "DECODE_ERROR", f"GET {path}: 'results' is not a list"
        )

    items = [parse_record(parse, item, path) for item in results]
    return items, next_page_from_url(response.get("next"))

"""
HTTP Transport for the DockerHub connector.

Handles HTTP communication with bearer authentication, automatic retry
logic, and error handling.
"""

import copy
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from dockerhub_sync.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DockerHubError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    UnexpectedResponseError,
    ValidationError,
)
from dockerhub_sync.logging import log_http_request, log_http_response

if TYPE_CHECKING:
    from dockerhub_sync.auth import Credentials


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503, 504])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport layer with bearer authentication and retry logic.

    Handles:
    - Authorization header from an immutable Credentials value
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions

    A transport never changes its credentials; logging in again means
    building a new transport, or deriving one with with_credentials.
    """

    def __init__(
        self,
        base_url: str,
        credentials: "Credentials | None" = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://hub.docker.com")
            credentials: Bearer credentials; None for unauthenticated calls
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            http_transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=http_transport,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    def with_credentials(self, credentials: "Credentials") -> "HTTPTransport":
        """
        Derive a transport that sends the given credentials.

        The derived transport shares this one's connection pool, so closing
        either closes both.
        """
        derived = copy.copy(self)
        derived.credentials = credentials
        return derived

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Make an authenticated GET request.

        Args:
            path: API path (e.g., "/v2/orgs/acme/members")
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            DockerHubError: On API errors
        """
        return self.request("GET", path, params=params)

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make a request with automatic retry.

        Args:
            method: HTTP method
            path: API path
            params: Query parameters
            body: Request body (for POST/PUT)

        Returns:
            Parsed JSON response

        Raises:
            DockerHubError: On API errors
        """
        headers = self._auth_headers()

        def make_request() -> httpx.Response:
            log_http_request(method, f"{self.base_url}{path}", headers, params, body)
            started = time.monotonic()
            response = self._client.request(
                method, path, params=params, json=body, headers=headers
            )
            log_http_response(
                response.status_code,
                f"{self.base_url}{path}",
                (time.monotonic() - started) * 1000,
            )
            return response

        return self._execute_with_retry(make_request, method, path)

    def _auth_headers(self) -> dict[str, str]:
        if self.credentials is None:
            return {}
        return self.credentials.authorization_header()

    def _execute_with_retry(
        self,
        request_fn: Callable[[], httpx.Response],
        method: str,
        path: str,
    ) -> dict[str, Any]:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request
            method: HTTP method, for error context
            path: API path, for error context

        Returns:
            Parsed JSON response

        Raises:
            DockerHubError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()
            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError(
                        "CONNECTION_ERROR", f"{method} {path}: {e}"
                    ) from e

                last_error = e
                time.sleep(self._get_backoff_time(attempt, None))
                continue

            if response.status_code < 300:
                return self._decode(response, method, path)

            error = self._parse_error_response(response, method, path)

            if not self._should_retry(response.status_code, attempt):
                raise error

            last_error = error
            retry_after = response.headers.get("Retry-After")
            time.sleep(self._get_backoff_time(attempt, retry_after))

        if last_error:
            if isinstance(last_error, DockerHubError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _decode(
        self, response: httpx.Response, method: str, path: str
    ) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedResponseError(
                "DECODE_ERROR",
                f"{method} {path}: response body is not valid JSON",
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise UnexpectedResponseError(
                "DECODE_ERROR",
                f"{method} {path}: expected a JSON object",
                status_code=response.status_code,
            )
        return data

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds, never negative and never above max_backoff
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return max(0.0, min(float(retry_after), self.retry_config.max_backoff))
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(
        self, response: httpx.Response, method: str, path: str
    ) -> DockerHubError:
        """
        Parse an error response into a typed exception.

        DockerHub reports errors as {"message": ...} or {"detail": ...};
        the message is prefixed with the method and path that failed.

        Args:
            response: HTTP response with error status
            method: HTTP method of the request
            path: API path of the request

        Returns:
            Appropriate DockerHubError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        detail = data.get("message") or data.get("detail") or f"HTTP {status_code}"
        message = f"{method} {path}: {detail}"
        code = str(data.get("code") or _default_code(status_code))
        request_id = response.headers.get("X-Request-Id")

        if status_code == 401:
            return AuthenticationError(code, message, request_id, status_code)
        elif status_code == 403:
            return AuthorizationError(code, message, request_id, status_code)
        elif status_code == 404:
            return NotFoundError(code, message, request_id, status_code)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(code, message, retry_after, request_id, status_code)
        elif status_code >= 500:
            return ServerError(code, message, request_id, status_code)
        elif status_code >= 400:
            return ValidationError(code, message, request_id, status_code)
        else:
            return UnexpectedResponseError(code, message, request_id, status_code)


def _default_code(status_code: int) -> str:
    return {
        401: "UNAUTHORIZED",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        429: "RATE_LIMITED",
    }.get(status_code, f"HTTP_{status_code}")

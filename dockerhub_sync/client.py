"""
DockerHub connector API client.

Provides the primary interface for reading organizations, members, teams
and repository permissions from the DockerHub API.
"""

import os
from typing import Any

import httpx

from dockerhub_sync.auth import AuthClient, Credentials
from dockerhub_sync.clients import OrgsClient, ReposClient, TeamsClient, UsersClient
from dockerhub_sync.exceptions import ConfigurationError
from dockerhub_sync.transport import HTTPTransport, RetryConfig


class DockerHubClient:
    """
    Main client for the DockerHub API.

    Aggregates all resource clients over one authenticated transport. The
    credentials are fixed for the lifetime of the client, so a single
    instance can be shared by concurrent callers.

    Example:
        ```python
        from dockerhub_sync import DockerHubClient
        from dockerhub_sync.clients import PaginationVars

        with DockerHubClient.login("alice", "dckr_pat_...") as client:
            teams, next_page = client.teams.list_teams(
                "acme", PaginationVars(size=50)
            )
        ```
    """

    DEFAULT_BASE_URL = "https://hub.docker.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
        transport: HTTPTransport | None = None,
    ) -> None:
        """
        Initialize the DockerHub client.

        Args:
            credentials: Session tokens from a login exchange
            base_url: Base URL for API requests (default: https://hub.docker.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            http_transport: httpx transport override, mainly for tests
            transport: Ready-made transport already carrying the credentials;
                the client takes ownership and closes it
        """
        self.credentials = credentials
        self.base_url = base_url
        self.timeout = timeout

        self._transport = transport or HTTPTransport(
            base_url=base_url,
            credentials=credentials,
            timeout=timeout,
            retry_config=retry_config,
            http_transport=http_transport,
        )

        self.orgs = OrgsClient(self._transport)
        self.users = UsersClient(self._transport)
        self.teams = TeamsClient(self._transport)
        self.repos = ReposClient(self._transport)

    @classmethod
    def login(
        cls,
        username: str,
        secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> "DockerHubClient":
        """
        Log in and build a client around the issued tokens.

        Args:
            username: DockerHub username
            secret: Password or personal access token
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior (optional)
            http_transport: httpx transport override, mainly for tests

        Returns:
            Authenticated DockerHubClient

        Raises:
            AuthenticationError: If the login exchange fails
        """
        transport = HTTPTransport(
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            http_transport=http_transport,
        )
        try:
            credentials = AuthClient(transport).login(username, secret)
        except Exception:
            transport.close()
            raise

        # The session keeps the login connection pool
        return cls(
            credentials=credentials,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            transport=transport.with_credentials(credentials),
        )

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "DockerHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            DOCKERHUB_TOKEN: Existing session token (used when set)
            DOCKERHUB_REFRESH_TOKEN: Refresh token paired with DOCKERHUB_TOKEN
            DOCKERHUB_USERNAME: Username for the login exchange
            DOCKERHUB_ACCESS_TOKEN / DOCKERHUB_PASSWORD: Secret for the login exchange
            DOCKERHUB_BASE_URL: Base URL for API (optional)

        Raises:
            ConfigurationError: If neither a token nor login details are set
        """
        base_url = os.environ.get("DOCKERHUB_BASE_URL", cls.DEFAULT_BASE_URL)

        if os.environ.get("DOCKERHUB_TOKEN"):
            return cls(
                credentials=Credentials.from_env(),
                base_url=base_url,
                timeout=timeout,
                retry_config=retry_config,
            )

        username = os.environ.get("DOCKERHUB_USERNAME")
        secret = os.environ.get("DOCKERHUB_ACCESS_TOKEN") or os.environ.get(
            "DOCKERHUB_PASSWORD"
        )
        if not username or not secret:
            raise ConfigurationError(
                "Set DOCKERHUB_TOKEN, or DOCKERHUB_USERNAME with "
                "DOCKERHUB_ACCESS_TOKEN or DOCKERHUB_PASSWORD"
            )

        return cls.login(
            username,
            secret,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "DockerHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()

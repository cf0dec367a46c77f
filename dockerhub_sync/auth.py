"""Bearer credentials and the DockerHub login exchange."""

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dockerhub_sync.exceptions import AuthenticationError, ConfigurationError

if TYPE_CHECKING:
    from dockerhub_sync.transport import HTTPTransport

LOGIN_ENDPOINT = "/v2/users/login"


@dataclass(frozen=True)
class Credentials:
    """
    Session tokens issued by the login exchange.

    Set once when a client is built and shared read-only afterwards. The
    refresh token is carried but never used during a sync pass.
    """

    token: str = field(repr=False)
    refresh_token: str = field(default="", repr=False)

    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    @classmethod
    def from_env(cls) -> "Credentials":
        """
        Load an existing token pair from the environment.

        Environment variables:
            DOCKERHUB_TOKEN: Session token (required)
            DOCKERHUB_REFRESH_TOKEN: Refresh token (optional)

        Raises:
            ConfigurationError: If DOCKERHUB_TOKEN is not set
        """
        token = os.environ.get("DOCKERHUB_TOKEN")
        if not token:
            raise ConfigurationError("DOCKERHUB_TOKEN environment variable not set")
        return cls(
            token=token,
            refresh_token=os.environ.get("DOCKERHUB_REFRESH_TOKEN", ""),
        )


class AuthClient:
    """Client for the username/password login exchange."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the auth client.

        Args:
            transport: Unauthenticated HTTP transport
        """
        self.transport = transport

    def login(self, username: str, secret: str) -> Credentials:
        """
        Exchange a username and password (or personal access token) for
        session tokens.

        Args:
            username: DockerHub username
            secret: Password or personal access token

        Returns:
            Credentials holding the session and refresh tokens

        Raises:
            AuthenticationError: If the credentials are rejected or the
                response carries no token
        """
        response = self.transport.request(
            "POST",
            LOGIN_ENDPOINT,
            body={"username": username, "password": secret},
        )

        token = response.get("token")
        if not token:
            raise AuthenticationError(
                "INVALID_LOGIN_RESPONSE",
                f"POST {LOGIN_ENDPOINT}: login response did not include a token",
            )

        return Credentials(
            token=token,
            refresh_token=response.get("refresh_token") or "",
        )

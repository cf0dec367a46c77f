"""Connector configuration from environment variables (and a .env file)."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from dockerhub_sync.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://hub.docker.com"


@dataclass(frozen=True)
class ConnectorConfig:
    username: str
    password: str | None = field(default=None, repr=False)
    access_token: str | None = field(default=None, repr=False)
    orgs: list[str] = field(default_factory=list)
    base_url: str = DEFAULT_BASE_URL

    def validate(self) -> None:
        """
        Check the credential fields.

        Raises:
            ConfigurationError: If the username is missing, or if not exactly
                one of password and access token is set
        """
        if not self.username:
            raise ConfigurationError("username is required")
        if self.password and self.access_token:
            raise ConfigurationError("password and access token are mutually exclusive")
        if not self.password and not self.access_token:
            raise ConfigurationError("either a password or an access token is required")

    @property
    def secret(self) -> str:
        return self.access_token or self.password or ""


def parse_orgs(raw: str) -> list[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


def load_config() -> ConnectorConfig:
    """Load configuration from environment variables. Validation is left to the caller."""
    load_dotenv()

    return ConnectorConfig(
        username=os.environ.get("DOCKERHUB_USERNAME", ""),
        password=os.environ.get("DOCKERHUB_PASSWORD") or None,
        access_token=os.environ.get("DOCKERHUB_ACCESS_TOKEN") or None,
        orgs=parse_orgs(os.environ.get("DOCKERHUB_ORGS", "")),
        base_url=os.environ.get("DOCKERHUB_BASE_URL", DEFAULT_BASE_URL),
    )

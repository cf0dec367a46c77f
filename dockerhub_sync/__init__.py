"""DockerHub sync - identity and access connector for DockerHub organizations."""

from dockerhub_sync.auth import AuthClient, Credentials
from dockerhub_sync.client import DockerHubClient
from dockerhub_sync.clients import PaginationVars
from dockerhub_sync.config import ConnectorConfig, load_config
from dockerhub_sync.connector import (
    DockerHubConnector,
    OrgSyncer,
    RepositorySyncer,
    ResourceSyncer,
    SyncDriver,
    SyncResult,
    TeamSyncer,
    UserSyncer,
)
from dockerhub_sync.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DockerHubError,
    MissingContextError,
    NotFoundError,
    PageTokenError,
    RateLimitedError,
    ServerError,
    UnexpectedResponseError,
    ValidationError,
)
from dockerhub_sync.logging import configure_logging, get_logger
from dockerhub_sync.pagination import Bag, parse_page_token
from dockerhub_sync.transport import HTTPTransport, RetryConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # API client
    "DockerHubClient",
    "PaginationVars",
    "AuthClient",
    "Credentials",
    # Connector
    "DockerHubConnector",
    "ResourceSyncer",
    "OrgSyncer",
    "UserSyncer",
    "TeamSyncer",
    "RepositorySyncer",
    "SyncDriver",
    "SyncResult",
    # Pagination
    "Bag",
    "parse_page_token",
    # Configuration
    "ConnectorConfig",
    "load_config",
    # Exceptions
    "DockerHubError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "UnexpectedResponseError",
    "ConfigurationError",
    "PageTokenError",
    "MissingContextError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]

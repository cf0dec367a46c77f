"""DockerHub sync exception classes."""


class DockerHubError(Exception):
    """Base exception for all DockerHub connector errors."""

    def __init__(
        self,
        code: str,
        message: str,
        request_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class ConfigurationError(DockerHubError):
    """Raised when connector configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(DockerHubError):
    """Raised when credentials are rejected or a login yields no token."""

    pass


class AuthorizationError(DockerHubError):
    """Raised when access is denied."""

    pass


class NotFoundError(DockerHubError):
    """Raised when a resource is not found."""

    pass


class RateLimitedError(DockerHubError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
        status_code: int | None = 429,
    ) -> None:
        super().__init__(code, message, request_id, status_code)
        self.retry_after = retry_after


class ValidationError(DockerHubError):
    """Raised on other client errors (4xx)."""

    pass


class ServerError(DockerHubError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class UnexpectedResponseError(DockerHubError):
    """Raised on redirects and on response bodies that are not JSON."""

    pass


class PageTokenError(DockerHubError):
    """Raised when an opaque page token cannot be used."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_PAGE_TOKEN", message)


class MissingContextError(DockerHubError):
    """Raised when a resource lacks a field the operation depends on."""

    def __init__(self, message: str) -> None:
        super().__init__("MISSING_CONTEXT", message)

"""Custom exceptions for external service clients."""


class ClientError(Exception):
    """Base exception for all service client errors.

    The search session catches this at its boundary and turns it into a
    user-facing message; it never escapes a dashboard action.
    """

    user_message = "The service could not be reached. Please try again."


class ClientHTTPError(ClientError):
    """Service answered with a non-success status, or the connection failed.

    A status_code of 0 means no HTTP response was received.
    """

    def __init__(self, message: str, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url

    @property
    def user_message(self) -> str:
        if self.status_code:
            return f"Service returned an error (status {self.status_code})."
        return "The service could not be reached. Please try again."


class ClientTimeoutError(ClientError):
    """Request did not complete within the configured timeout."""

    user_message = "The service took too long to respond. Please try again."

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class ClientResponseError(ClientError):
    """Response arrived but could not be parsed or lacked the expected payload."""

    @property
    def user_message(self) -> str:
        return str(self)


class ClientConfigurationError(ClientError):
    """Client was given invalid settings (bad URL, timeout out of range)."""

"""Errors raised by the FRED client."""


class FredError(Exception):
    """Base class for every error raised by fred_graph."""


class ConfigurationError(FredError, ValueError):
    """The client was configured with a missing or blank API key."""


class TransportError(FredError):
    """
    Network or HTTP failure reported by the transport.

    Attributes:
        url: The URL that was requested (API key included, as sent).
        status_code: HTTP status, or None when no response was received.
        body: Raw response body, empty when unavailable.
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body


class ServiceError(FredError):
    """The service answered with an error document carrying a message."""

    def __init__(self, message: str, transport_error: TransportError) -> None:
        super().__init__(message)
        self.message = message
        self.transport_error = transport_error

    @property
    def status_code(self) -> int | None:
        return self.transport_error.status_code


class ParseError(FredError, ValueError):
    """A response or wire token did not match the documented format."""

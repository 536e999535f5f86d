"""Exceptions shared by the demo services."""


class PlaygroundError(Exception):
    """Base exception for demo failures."""

    retryable = False


class InputValidationError(PlaygroundError):
    """Raised when user-supplied input is rejected before any request is made."""


class UpstreamError(PlaygroundError):
    """Raised when an external API fails at the transport, HTTP or payload level."""

    retryable = True

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

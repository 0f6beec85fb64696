from typing import Optional


class SlimTimerClientError(Exception):
    """Base exception for all SlimTimer client errors."""
    pass


class NotLoggedInError(SlimTimerClientError):
    """Raised when an operation needing an access token is called before login."""
    pass


class ServiceError(SlimTimerClientError):
    """
    Raised when a call to the SlimTimer service fails.

    Args:
        context: What the client was trying to do, e.g. "Failed to find the task 7".
        status_code: HTTP status of the response, if one was received.
        status_line: Status code and reason phrase, or the transport error text.
    """

    def __init__(self, context: str, status_code: Optional[int] = None, status_line: Optional[str] = None):
        self.context = context
        self.status_code = status_code
        self.status_line = status_line
        message = f"{context}: {status_line}" if status_line else context
        super().__init__(message)


class TransportError(ServiceError):
    """Raised when the request never produced an HTTP response."""
    pass


class UnauthorizedError(ServiceError):
    """Raised when the service rejects the credentials (401/403)."""
    pass


class NotFoundError(ServiceError):
    """Raised when the requested task or time entry does not exist."""
    pass


class InvalidResponseError(ServiceError):
    """Raised when a response body cannot be decoded into the expected record."""
    pass

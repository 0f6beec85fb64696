from .base import (
    SlimTimerClientError,
    NotLoggedInError,
    ServiceError,
    TransportError,
    UnauthorizedError,
    NotFoundError,
    InvalidResponseError,
)

__all__ = [
    "SlimTimerClientError",
    "NotLoggedInError",
    "ServiceError",
    "TransportError",
    "UnauthorizedError",
    "NotFoundError",
    "InvalidResponseError",
]

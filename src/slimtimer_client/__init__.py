"""Client library for the SlimTimer time tracking web service."""

from .user_client import SlimTimerClient, AuthenticatedClient
from .config import ClientConfig
from .services import Task, TimeEntry
from .exceptions import (
    SlimTimerClientError,
    NotLoggedInError,
    ServiceError,
    TransportError,
    UnauthorizedError,
    NotFoundError,
    InvalidResponseError,
)

__version__ = "0.1.0"

__all__ = [
    "SlimTimerClient",
    "AuthenticatedClient",
    "ClientConfig",
    "Task",
    "TimeEntry",
    "SlimTimerClientError",
    "NotLoggedInError",
    "ServiceError",
    "TransportError",
    "UnauthorizedError",
    "NotFoundError",
    "InvalidResponseError",
]

"""SlimTimer time entries resource."""

from .api_service import TimeEntriesApiService
from .types import TimeEntry

__all__ = [
    # Service layer
    "TimeEntriesApiService",

    # Data types
    "TimeEntry",
]

"""SlimTimer tasks resource."""

from .api_service import TasksApiService
from .types import Task

__all__ = [
    # Service layer
    "TasksApiService",

    # Data types
    "Task",
]

from .tasks import TasksApiService, Task
from .time_entries import TimeEntriesApiService, TimeEntry

__all__ = [
    "TasksApiService",
    "Task",
    "TimeEntriesApiService",
    "TimeEntry",
]

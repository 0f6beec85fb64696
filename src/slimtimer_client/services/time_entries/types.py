from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TimeEntry:
    """
    Represents a span of time spent on a SlimTimer task.
    Args:
        id: Unique identifier of the entry.
        task_id: Id of the task the time was spent on.
        task_name: Name of that task, only known when the service embeds it.
        start_time: When the work started.
        end_time: When the work ended.
        created_at: Creation time.
        updated_at: Last modification time.
        duration: Length of the entry in seconds.
        comments: Free-form comments.
        in_progress: Whether the timer is still running.
    """
    id: int
    task_id: int
    start_time: datetime
    end_time: datetime
    created_at: datetime
    updated_at: datetime
    duration: int
    in_progress: bool
    task_name: Optional[str] = None
    comments: Optional[str] = None

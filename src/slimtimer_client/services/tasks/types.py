from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Task:
    """
    Represents a SlimTimer task.

    Tasks are not created directly but returned by the client, always built
    from the service's response.
    Args:
        id: Unique identifier of the task.
        name: The name of the task.
        created_at: Creation time.
        updated_at: Last modification time.
        hours: Total hours tracked against the task.
        completed_on: Completion time, None while the task is open.
    """
    id: int
    name: str
    created_at: datetime
    updated_at: datetime
    hours: float
    completed_on: Optional[datetime] = None

    def __repr__(self):
        return (
            f"Task(id={self.id!r}, name={self.name!r}, hours={self.hours!r}, "
            f"completed_on={self.completed_on.isoformat() if self.completed_on else None})"
        )

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from ..base import BaseApiService
from ..tasks.constants import TASKS_PATH
from ...exceptions import InvalidResponseError
from ...utils.datetime import current_datetime_local_timezone, format_timestamp
from .types import TimeEntry
from . import utils
from .constants import TIME_ENTRIES_PATH

logger = logging.getLogger(__name__)


class TimeEntriesApiService(BaseApiService):
    """
    Service layer for time entry operations of the logged in user.
    """

    def entries_url(self, entry_id: Optional[int] = None) -> str:
        """Returns the time entries collection URL, or the URL of one entry."""
        if entry_id is None:
            return self._user_url(TIME_ENTRIES_PATH)
        return self._user_url(TIME_ENTRIES_PATH, entry_id)

    def task_entries_url(self, task_id: int) -> str:
        return self._user_url(TASKS_PATH, task_id, TIME_ENTRIES_PATH)

    def _list_entries(
            self,
            task_id: Optional[int],
            start: Optional[datetime],
            end: Optional[datetime]
    ) -> List[TimeEntry]:
        url = self.entries_url() if task_id is None else self.task_entries_url(task_id)

        params: Dict[str, Any] = {}
        if start is not None:
            params['range_start'] = format_timestamp(start)
        if end is not None:
            params['range_end'] = format_timestamp(end)

        entries_data = self._get(url, error="Failed to get the entries list", params=params)
        if entries_data is None:
            entries_data = []
        if not isinstance(entries_data, list):
            raise InvalidResponseError(
                f"Invalid time entries list: expected a sequence, got {type(entries_data).__name__}"
            )

        entries = [utils.from_slimtimer_time_entry(entry_data) for entry_data in entries_data]
        logger.info("Retrieved %d time entries", len(entries))
        return entries

    def list_entries(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[TimeEntry]:
        """
        Fetches the time entries of the logged in user.

        Args:
            start: Only return entries beginning after this time.
            end: Only return entries ending before this time.

        Returns:
            A list of TimeEntry objects in the order the service returned them.
        """
        logger.info("Fetching time entries, start=%s, end=%s", start, end)
        return self._list_entries(None, start, end)

    def list_task_entries(
            self,
            task_id: int,
            start: Optional[datetime] = None,
            end: Optional[datetime] = None
    ) -> List[TimeEntry]:
        """
        Fetches the time entries of one task.

        Accepts the same optional start and end bounds as list_entries.
        """
        logger.info("Fetching time entries of task %s, start=%s, end=%s", task_id, start, end)
        return self._list_entries(task_id, start, end)

    def get_entry(self, entry_id: int) -> TimeEntry:
        """
        Retrieves a time entry by its id.

        Raises:
            NotFoundError: If there is no such entry.
        """
        logger.info("Retrieving time entry with ID: %s", entry_id)
        entry_data = self._get(self.entries_url(entry_id), error=f"Failed to get the entry {entry_id}")
        return utils.from_slimtimer_time_entry(entry_data)

    def create_entry(self, task_id: int, start: datetime, end: Optional[datetime] = None) -> TimeEntry:
        """
        Creates a new time entry.

        Timestamps should normally be in UTC. Naive datetimes are taken to be UTC.

        Args:
            task_id: The task the time was spent on.
            start: When the work started.
            end: When the work ended, defaults to now in UTC.

        Returns:
            The TimeEntry created by the service.
        """
        if end is None:
            end = current_datetime_local_timezone().astimezone(timezone.utc)

        logger.info("Creating time entry for task %s", task_id)
        created = self._post(
            self.entries_url(),
            utils.time_entry_body(task_id, start, end),
            error=f"Failed to create new entry for task {task_id}"
        )

        entry = utils.from_slimtimer_time_entry(created)
        logger.info("Time entry created successfully with ID: %s", entry.id)
        return entry

    def update_entry(self, entry_id: int, task_id: int, start: datetime, end: datetime) -> None:
        """Changes the task and times of an existing time entry."""
        logger.info("Updating time entry %s", entry_id)
        self._put(
            self.entries_url(entry_id),
            utils.time_entry_body(task_id, start, end),
            error=f"Failed to update the entry {entry_id}"
        )

    def delete_entry(self, entry_id: int) -> None:
        """Deletes a time entry."""
        logger.info("Deleting time entry with ID: %s", entry_id)
        self._delete(self.entries_url(entry_id), error=f"Failed to delete the entry {entry_id}")
        logger.info("Time entry deleted successfully")

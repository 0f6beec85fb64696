from datetime import datetime
from typing import List, Optional
import logging

from ..base import BaseApiService
from ...exceptions import InvalidResponseError
from .types import Task
from . import utils
from .constants import TASKS_PATH

logger = logging.getLogger(__name__)


class TasksApiService(BaseApiService):
    """
    Service layer for task operations of the logged in user.
    """

    def tasks_url(self, task_id: Optional[int] = None) -> str:
        """Returns the tasks collection URL, or the URL of one task."""
        if task_id is None:
            return self._user_url(TASKS_PATH)
        return self._user_url(TASKS_PATH, task_id)

    def list_tasks(self) -> List[Task]:
        """
        Fetches all tasks involving the logged in user, completed or not.

        Returns:
            A list of Task objects in the order the service returned them.
        """
        logger.info("Fetching tasks")

        tasks_data = self._get(self.tasks_url(), error="Failed to get the tasks list")
        if tasks_data is None:
            tasks_data = []
        if not isinstance(tasks_data, list):
            raise InvalidResponseError(
                f"Invalid tasks list: expected a sequence, got {type(tasks_data).__name__}"
            )

        tasks = [utils.from_slimtimer_task(task_data) for task_data in tasks_data]
        logger.info("Retrieved %d tasks", len(tasks))
        return tasks

    def create_task(self, name: str) -> Task:
        """
        Creates a new task.

        Args:
            name: The name of the task.

        Returns:
            The Task created by the service.
        """
        body = utils.create_task_body(name)
        logger.info("Creating task: %s", name)

        created = self._post(self.tasks_url(), body, error=f'Failed to create task "{name}"')

        task = utils.from_slimtimer_task(created)
        logger.info("Task created successfully with ID: %s", task.id)
        return task

    def delete_task(self, task_id: int) -> None:
        """Deletes the task with the given id."""
        logger.info("Deleting task with ID: %s", task_id)
        self._delete(self.tasks_url(task_id), error=f"Failed to delete the task {task_id}")
        logger.info("Task deleted successfully")

    def get_task(self, task_id: int) -> Task:
        """
        Retrieves a task by its id.

        Raises:
            NotFoundError: If there is no such task.
        """
        logger.info("Retrieving task with ID: %s", task_id)
        task_data = self._get(self.tasks_url(task_id), error=f"Failed to find the task {task_id}")
        return utils.from_slimtimer_task(task_data)

    def complete_task(self, task_id: int, completed_on: datetime) -> None:
        """
        Marks the task as completed.

        Args:
            task_id: The task to complete.
            completed_on: When the task was completed.
        """
        logger.info("Completing task %s on %s", task_id, completed_on)
        self._put(
            self.tasks_url(task_id),
            utils.complete_task_body(completed_on),
            error=f"Failed to mark the task {task_id} as completed"
        )

import logging
from datetime import datetime
from typing import Any, Dict

from .types import Task
from .constants import TASK_ROOT, RECORD_NAME
from .. import fields
from ...exceptions import InvalidResponseError
from ...utils.datetime import format_timestamp

logger = logging.getLogger(__name__)


def from_slimtimer_task(data: Any) -> Task:
    """
    Create a Task instance from a decoded SlimTimer response.

    Args:
        data: Mapping decoded from the YAML response body

    Returns:
        Task instance populated with the data from the mapping

    Raises:
        InvalidResponseError: If a required field is missing or has the wrong type
    """
    data = fields.require_mapping(data, RECORD_NAME)
    try:
        return Task(
            id=fields.get_int(data, 'id', RECORD_NAME),
            name=fields.get_str(data, 'name', RECORD_NAME),
            created_at=fields.get_timestamp(data, 'created_at', RECORD_NAME),
            updated_at=fields.get_timestamp(data, 'updated_at', RECORD_NAME),
            hours=fields.get_float(data, 'hours', RECORD_NAME),
            completed_on=fields.get_optional_timestamp(data, 'completed_on', RECORD_NAME),
        )
    except InvalidResponseError:
        logger.debug("Task data: %s", str(data)[:500])
        raise


def create_task_body(name: str) -> Dict[str, Any]:
    """Create the request body for a new task."""
    return {TASK_ROOT: {'name': name}}


def complete_task_body(completed_on: datetime) -> Dict[str, Any]:
    """Create the request body marking a task completed at the given time."""
    return {TASK_ROOT: {'completed_on': format_timestamp(completed_on)}}

import logging
from datetime import datetime
from typing import Any, Dict

from .types import TimeEntry
from .constants import TIME_ENTRY_ROOT, RECORD_NAME, WIRE_DURATION
from .. import fields
from ...exceptions import InvalidResponseError
from ...utils.datetime import format_timestamp, epoch_seconds

logger = logging.getLogger(__name__)


def normalize_time_entry(data: Any) -> Dict[str, Any]:
    """
    Bring both response shapes of a time entry into one canonical mapping.

    The service names the duration 'duration_in_seconds' and either gives a
    flat 'task_id' or embeds the whole task as a nested 'task' mapping. The
    canonical shape has 'duration', 'task_id' and, when the task was
    embedded, 'task_name'.

    Args:
        data: Mapping decoded from the YAML response body

    Returns:
        A new mapping; the input is left untouched
    """
    data = fields.require_mapping(data, RECORD_NAME)
    normalized = dict(data)

    if WIRE_DURATION in normalized:
        normalized['duration'] = normalized.pop(WIRE_DURATION)

    if 'task' in normalized:
        task = fields.require_mapping(normalized.pop('task'), "embedded task")
        normalized['task_id'] = task.get('id')
        normalized['task_name'] = task.get('name')

    return normalized


def from_slimtimer_time_entry(data: Any) -> TimeEntry:
    """
    Create a TimeEntry instance from a decoded SlimTimer response.

    Args:
        data: Mapping decoded from the YAML response body, in either shape

    Returns:
        TimeEntry instance populated with the data from the mapping

    Raises:
        InvalidResponseError: If a required field is missing or has the wrong type
    """
    entry = normalize_time_entry(data)
    try:
        return TimeEntry(
            id=fields.get_int(entry, 'id', RECORD_NAME),
            task_id=fields.get_int(entry, 'task_id', RECORD_NAME),
            task_name=fields.get_optional_str(entry, 'task_name', RECORD_NAME),
            start_time=fields.get_timestamp(entry, 'start_time', RECORD_NAME),
            end_time=fields.get_timestamp(entry, 'end_time', RECORD_NAME),
            created_at=fields.get_timestamp(entry, 'created_at', RECORD_NAME),
            updated_at=fields.get_timestamp(entry, 'updated_at', RECORD_NAME),
            duration=fields.get_int(entry, 'duration', RECORD_NAME),
            comments=fields.get_optional_str(entry, 'comments', RECORD_NAME),
            in_progress=fields.get_bool(entry, 'in_progress', RECORD_NAME),
        )
    except InvalidResponseError:
        logger.debug("Time entry data: %s", str(data)[:500])
        raise


def time_entry_body(task_id: int, start: datetime, end: datetime) -> Dict[str, Any]:
    """
    Create the request body for creating or updating a time entry.

    The duration is derived from the two timestamps. An end before the start
    is passed through as a negative duration.
    """
    duration = epoch_seconds(end) - epoch_seconds(start)
    if duration < 0:
        logger.warning("Time entry for task %s ends before it starts (%d seconds)", task_id, duration)

    return {
        TIME_ENTRY_ROOT: {
            'task_id': task_id,
            'start_time': format_timestamp(start),
            'end_time': format_timestamp(end),
            WIRE_DURATION: duration,
        }
    }

from datetime import datetime, date, time, timezone
from typing import Optional, Union
import tzlocal


TimestampLike = Union[str, datetime, date]


def current_datetime_local_timezone() -> datetime:
    """
    Returns the current date and time in the local timezone.

    Returns:
        A datetime object representing the current date and time.
    """
    return datetime.now(tzlocal.get_localzone())


def ensure_timezone(date_time: datetime) -> datetime:
    """
    Makes a datetime timezone-aware, taking naive values to be in UTC.

    Args:
        date_time: The datetime object to be converted.

    Returns:
        The same instant as an aware datetime.
    """
    if date_time.tzinfo is None:
        return date_time.replace(tzinfo=timezone.utc)
    return date_time


def format_timestamp(date_time: datetime) -> str:
    """
    Converts a datetime to the RFC 3339 text used on the wire.

    Sub-second precision is dropped and a UTC offset is rendered as 'Z'.

    Args:
        date_time: The datetime object to be converted. Naive values are
            taken to be in UTC.

    Returns:
        The RFC 3339 formatted string, e.g. '2011-03-14T09:30:00Z'.
    """
    text = ensure_timezone(date_time).isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def parse_timestamp(text: str) -> datetime:
    """
    Parses RFC 3339 / ISO 8601 timestamp text into an aware datetime.

    Accepts 'T' or space between date and time and a 'Z', ' Z' or numeric
    offset. Text without an offset is taken to be in UTC.

    Args:
        text: The timestamp string.

    Returns:
        A timezone-aware datetime.

    Raises:
        ValueError: If the text is not a recognizable timestamp.
    """
    value = text.strip()
    if value.endswith("Z"):
        value = value[:-1].rstrip() + "+00:00"
    return ensure_timezone(datetime.fromisoformat(value))


def coerce_timestamp(value: TimestampLike) -> datetime:
    """
    Converts a decoded field into an aware datetime.

    The YAML loader already turns unquoted timestamps into datetime objects,
    so both shapes are accepted. Coercing a datetime is a no-op apart from
    attaching UTC to naive values.
    """
    if isinstance(value, datetime):
        return ensure_timezone(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        return parse_timestamp(value)
    raise ValueError(f"Cannot interpret {value!r} as a timestamp")


def parse_optional_timestamp(value: Optional[TimestampLike]) -> Optional[datetime]:
    """Same as coerce_timestamp but maps a missing value to None."""
    if value is None or value == "":
        return None
    return coerce_timestamp(value)


def epoch_seconds(date_time: datetime) -> int:
    """Whole seconds since the POSIX epoch; naive values are taken as UTC."""
    return int(ensure_timezone(date_time).timestamp())

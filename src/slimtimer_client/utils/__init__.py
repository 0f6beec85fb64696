from .datetime import (
    current_datetime_local_timezone,
    format_timestamp,
    parse_timestamp,
    coerce_timestamp,
    parse_optional_timestamp,
    epoch_seconds,
)

__all__ = [
    "current_datetime_local_timezone",
    "format_timestamp",
    "parse_timestamp",
    "coerce_timestamp",
    "parse_optional_timestamp",
    "epoch_seconds",
]

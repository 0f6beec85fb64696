"""
Strict readers lifting decoded YAML fields into typed record attributes.

Each reader fails with an InvalidResponseError naming the record and the
field instead of substituting a default.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from ..exceptions import InvalidResponseError
from ..utils.datetime import coerce_timestamp, parse_optional_timestamp

_MISSING = object()


def _invalid(record: str, field: str, problem: str) -> InvalidResponseError:
    return InvalidResponseError(f"Invalid {record} data: field '{field}' {problem}")


def require_mapping(data: Any, record: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise InvalidResponseError(
            f"Invalid {record} data: expected a mapping, got {type(data).__name__}"
        )
    return data


def _required(data: Dict[str, Any], field: str, record: str) -> Any:
    value = data.get(field, _MISSING)
    if value is _MISSING or value is None:
        raise _invalid(record, field, "is missing")
    return value


def get_int(data: Dict[str, Any], field: str, record: str) -> int:
    value = _required(data, field, record)
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(record, field, f"must be an integer, got {value!r}")
    return value


def get_float(data: Dict[str, Any], field: str, record: str) -> float:
    value = _required(data, field, record)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid(record, field, f"must be a number, got {value!r}")
    return float(value)


def get_bool(data: Dict[str, Any], field: str, record: str) -> bool:
    value = _required(data, field, record)
    if not isinstance(value, bool):
        raise _invalid(record, field, f"must be a boolean, got {value!r}")
    return value


def get_str(data: Dict[str, Any], field: str, record: str) -> str:
    value = _required(data, field, record)
    if not isinstance(value, str):
        raise _invalid(record, field, f"must be a string, got {value!r}")
    return value


def get_optional_str(data: Dict[str, Any], field: str, record: str) -> Optional[str]:
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _invalid(record, field, f"must be a string, got {value!r}")
    return value


def get_timestamp(data: Dict[str, Any], field: str, record: str) -> datetime:
    value = _required(data, field, record)
    try:
        return coerce_timestamp(value)
    except ValueError as e:
        raise _invalid(record, field, f"is not a timestamp ({e})") from e


def get_optional_timestamp(data: Dict[str, Any], field: str, record: str) -> Optional[datetime]:
    try:
        return parse_optional_timestamp(data.get(field))
    except ValueError as e:
        raise _invalid(record, field, f"is not a timestamp ({e})") from e

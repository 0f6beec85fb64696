"""YAML encoding of request bodies and decoding of response bodies."""

from typing import Any, Mapping, Union

import yaml


CONTENT_TYPE = "application/x-yaml"


def encode(params: Mapping[str, Any]) -> bytes:
    """Serialize a nested mapping as a UTF-8 YAML document."""
    return yaml.safe_dump(
        dict(params), default_flow_style=False, sort_keys=False, allow_unicode=True
    ).encode("utf-8")


def decode(body: Union[bytes, str]) -> Any:
    """
    Parse a YAML document into plain dicts, lists and scalars.

    An empty body decodes to None.

    Raises:
        yaml.YAMLError: If the body is not valid YAML.
    """
    if not body:
        return None
    return yaml.safe_load(body)

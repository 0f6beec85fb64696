import logging
from typing import Any, Dict, Mapping, Optional

import requests

from ..auth.credentials import ApiCredentials
from ..utils.log_sanitizer import sanitize_params
from . import codec

logger = logging.getLogger(__name__)

QUERY_METHODS = ("GET", "DELETE")
BODY_METHODS = ("POST", "PUT")


def _auth_params(credentials: ApiCredentials) -> Dict[str, Any]:
    params = {'api_key': credentials.api_key}
    # login is a POST made before there is a token
    if credentials.is_logged_in:
        params['access_token'] = credentials.access_token
    return params


def build_query_request(
        method: str,
        url: str,
        credentials: ApiCredentials,
        params: Optional[Mapping[str, Any]] = None
) -> requests.Request:
    """
    Builds a GET or DELETE request carrying all parameters in the query string.

    Args:
        method: 'GET' or 'DELETE'.
        url: Absolute resource URL.
        credentials: Supplies api_key and, once logged in, access_token.
        params: Extra query parameters, e.g. range_start.

    Returns:
        A request for ResponseHandler to prepare through its session.
    """
    method = method.upper()
    if method not in QUERY_METHODS:
        raise ValueError(f"Query requests must use one of {QUERY_METHODS}, got {method}")

    query = dict(params or {})
    query.update(_auth_params(credentials))

    logger.debug("About to %s %s with %s", method, url, sanitize_params(query))

    return requests.Request(
        method,
        url,
        params=query,
        headers={'Accept': codec.CONTENT_TYPE},
    )


def build_body_request(
        method: str,
        url: str,
        params: Mapping[str, Any],
        credentials: ApiCredentials
) -> requests.Request:
    """
    Builds a POST or PUT request with the parameters encoded as a YAML body.

    The caller's mapping is copied, not modified.

    Args:
        method: 'POST' or 'PUT'.
        url: Absolute resource URL.
        params: Body parameters, typically a single resource-named mapping
            such as {'task': {'name': ...}}.
        credentials: Supplies api_key and, once logged in, access_token.

    Returns:
        A request for ResponseHandler to prepare through its session.
    """
    method = method.upper()
    if method not in BODY_METHODS:
        raise ValueError(f"Body requests must use one of {BODY_METHODS}, got {method}")

    body = dict(params)
    body.update(_auth_params(credentials))

    logger.debug("About to %s %s with %s", method, url, sanitize_params(body))

    return requests.Request(
        method,
        url,
        data=codec.encode(body),
        headers={
            'Accept': codec.CONTENT_TYPE,
            'Content-Type': codec.CONTENT_TYPE,
        },
    )

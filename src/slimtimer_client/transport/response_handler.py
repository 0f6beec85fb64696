import logging
from typing import Any, Optional

import requests
import yaml

from ..config import DEFAULT_TIMEOUT
from ..exceptions import (
    ServiceError, TransportError, UnauthorizedError, NotFoundError, InvalidResponseError
)
from . import codec

logger = logging.getLogger(__name__)


class ResponseHandler:
    """
    Sends requests and turns responses into decoded YAML data.

    Every failure surfaces as a ServiceError carrying the caller's context
    string, so "Failed to find the task 7" reads as
    "Failed to find the task 7: 404 Not Found".
    """

    def __init__(self, session: requests.Session, timeout: float = DEFAULT_TIMEOUT, debug: bool = False):
        """
        Args:
            session: The transport used to send requests.
            timeout: Seconds to wait for each response.
            debug: Log raw response bodies.
        """
        self._session = session
        self._timeout = timeout
        self._debug = debug

    @property
    def session(self) -> requests.Session:
        return self._session

    def submit(self, request: requests.Request, error: str, log_context: Optional[str] = None) -> Any:
        """
        Prepares the request through the session, sends it and decodes the
        response body.

        Args:
            request: The request; session headers, auth and cookies are merged in.
            error: Context for the error message if the call fails.
            log_context: Logged in place of error, for contexts that carry
                personal data. Defaults to error.

        Returns:
            The decoded body: dicts, lists and scalars, or None for an empty body.

        Raises:
            TransportError: No HTTP response was received.
            UnauthorizedError: The service answered 401 or 403.
            NotFoundError: The service answered 404.
            ServiceError: Any other non-2xx status.
            InvalidResponseError: The body is not valid YAML.
        """
        log_context = log_context or error
        prepared = self._session.prepare_request(request)
        try:
            response = self._session.send(prepared, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error("%s: %s", log_context, e)
            raise TransportError(error, status_line=str(e)) from e

        if self._debug:
            logger.debug("Received %s", response.text)

        if not 200 <= response.status_code < 300:
            status_line = _status_line(response.status_code, response.reason)
            logger.warning("%s: %s", log_context, status_line)
            raise _error_for_status(error, response.status_code, status_line)

        try:
            return codec.decode(response.content)
        except yaml.YAMLError as e:
            raise InvalidResponseError(error, response.status_code, f"malformed response body ({e})") from e

    def close(self):
        self._session.close()


def _status_line(status_code: int, reason: Optional[str]) -> str:
    return f"{status_code} {reason}" if reason else str(status_code)


def _error_for_status(error: str, status_code: int, status_line: str) -> ServiceError:
    if status_code in (401, 403):
        return UnauthorizedError(error, status_code, status_line)
    elif status_code == 404:
        return NotFoundError(error, status_code, status_line)
    return ServiceError(error, status_code, status_line)

from typing import Any, Mapping, Optional

from ..auth.credentials import AuthenticatedCredentials
from ..config import ClientConfig
from ..transport.request_builder import build_query_request, build_body_request
from ..transport.response_handler import ResponseHandler


class BaseApiService:
    """
    Shared plumbing of the per-resource service layers.

    Builds URLs below /users/{user_id} and routes GET/DELETE through the
    query builder and POST/PUT through the body builder.
    """

    def __init__(self, handler: ResponseHandler, credentials: AuthenticatedCredentials, config: ClientConfig):
        """
        Args:
            handler: Sends requests and decodes responses.
            credentials: The logged in user's credentials.
            config: Supplies the service base URL.
        """
        self._handler = handler
        self._credentials = credentials.require_login()
        self._config = config

    def _user_url(self, *segments: Any) -> str:
        path = "/".join(str(segment) for segment in segments)
        return f"{self._config.base_url}/users/{self._credentials.user_id}/{path}"

    def _get(self, url: str, error: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        request = build_query_request('GET', url, self._credentials, params)
        return self._handler.submit(request, error)

    def _delete(self, url: str, error: str) -> Any:
        request = build_query_request('DELETE', url, self._credentials)
        return self._handler.submit(request, error)

    def _post(self, url: str, params: Mapping[str, Any], error: str) -> Any:
        request = build_body_request('POST', url, params, self._credentials)
        return self._handler.submit(request, error)

    def _put(self, url: str, params: Mapping[str, Any], error: str) -> Any:
        request = build_body_request('PUT', url, params, self._credentials)
        return self._handler.submit(request, error)

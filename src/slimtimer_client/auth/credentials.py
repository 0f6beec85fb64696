"""
Credentials attached to every SlimTimer request.

The service needs the application's API key on every call and, once the user
has logged in, the access token returned by the login call. The two states
are separate types so that code holding AuthenticatedCredentials never has to
check whether the token is there.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import InvalidResponseError, NotLoggedInError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiCredentials:
    """
    Credentials of a client that has not logged in yet.
    Args:
        api_key: The API key issued by SlimTimer for the application.
    """
    api_key: str

    def __post_init__(self):
        if not self.api_key or not isinstance(self.api_key, str):
            raise ValueError("A non-empty API key is required")

    @property
    def is_logged_in(self) -> bool:
        return False

    @property
    def user_id(self) -> Optional[int]:
        return None

    @property
    def access_token(self) -> Optional[str]:
        return None

    def require_login(self) -> "AuthenticatedCredentials":
        """Return these credentials as authenticated ones or fail fast."""
        raise NotLoggedInError("Not logged in: call login() before using this operation")

    def __repr__(self):
        return "ApiCredentials(api_key=***)"


@dataclass(frozen=True)
class AuthenticatedCredentials(ApiCredentials):
    """
    Credentials of a logged in user.
    Args:
        api_key: The API key issued by SlimTimer for the application.
        user_id: Id of the logged in user, part of every resource URL.
        access_token: Token returned by the login call.
    """
    # Declared as fields here, overriding the properties of the base class.
    user_id: int = None
    access_token: str = None

    def __post_init__(self):
        super().__post_init__()
        if self.user_id is None or self.access_token is None:
            raise ValueError("Authenticated credentials need both user_id and access_token")

    @property
    def is_logged_in(self) -> bool:
        return True

    def require_login(self) -> "AuthenticatedCredentials":
        return self

    @classmethod
    def from_login_response(cls, api_key: str, response: Any) -> "AuthenticatedCredentials":
        """
        Creates credentials from the decoded body of a successful login call.
        Args:
            api_key: The API key the login was made with.
            response: The decoded mapping, expected to hold user_id and access_token.
        Returns:
            AuthenticatedCredentials for the logged in user.
        """
        if not isinstance(response, dict):
            raise InvalidResponseError(f"Login response must be a mapping, got {type(response).__name__}")

        user_id = response.get('user_id')
        access_token = response.get('access_token')
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise InvalidResponseError(f"Login response has no valid 'user_id': {user_id!r}")
        if not isinstance(access_token, str) or not access_token:
            raise InvalidResponseError("Login response has no valid 'access_token'")

        return cls(api_key=api_key, user_id=user_id, access_token=access_token)

    def __repr__(self):
        return f"AuthenticatedCredentials(api_key=***, user_id={self.user_id!r}, access_token=***)"

"""
User-centric SlimTimer client.

A client starts out anonymous, holding only the application's API key.
Logging in returns a separate, authenticated client value; the anonymous one
is left as it was. Every task and time entry operation needs the
authenticated client and fails with NotLoggedInError on the anonymous one
before any request is made.

Usage Examples:
    client = SlimTimerClient("my-api-key")
    user = client.login("me@example.com", "secret")

    for task in user.list_tasks():
        print(task.name, task.hours)

    task = user.create_task("Write report")
    entry = user.create_entry(task.id, start=datetime(2011, 3, 14, 9, 0, tzinfo=timezone.utc))
"""

import logging
import os
from datetime import datetime
from typing import List, Optional

import requests

from .auth.credentials import ApiCredentials, AuthenticatedCredentials
from .config import ClientConfig, API_KEY_ENV
from .exceptions import NotLoggedInError
from .services.tasks import TasksApiService, Task
from .services.time_entries import TimeEntriesApiService, TimeEntry
from .transport.request_builder import build_body_request
from .transport.response_handler import ResponseHandler
from .utils.log_sanitizer import sanitize_for_logging

logger = logging.getLogger(__name__)

LOGIN_PATH = "users/token"


class SlimTimerClient:
    """
    Client of the SlimTimer service for a user who has not logged in yet.
    """

    def __init__(
            self,
            api_key: str,
            config: Optional[ClientConfig] = None,
            session: Optional[requests.Session] = None
    ):
        """
        Initialize the client with the application's API key.

        Args:
            api_key: API key obtained by registering an application with SlimTimer.
            config: Service settings, defaults to ClientConfig().
            session: Transport to send requests with. A new requests.Session
                is created (and owned by the client) when omitted.
        """
        self._credentials = ApiCredentials(api_key)
        self._config = config or ClientConfig()
        self._owns_session = session is None
        self._handler = ResponseHandler(
            session if session is not None else requests.Session(),
            timeout=self._config.timeout,
            debug=self._config.debug,
        )

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "SlimTimerClient":
        """
        Create a client from SLIMTIMER_API_KEY and the other SLIMTIMER_*
        environment variables.
        """
        api_key = os.getenv(API_KEY_ENV)
        if not api_key:
            raise ValueError(f"{API_KEY_ENV} is not set")
        return cls(api_key, config=ClientConfig.from_env(), session=session)

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_logged_in(self) -> bool:
        return self._credentials.is_logged_in

    @property
    def user_id(self) -> Optional[int]:
        return self._credentials.user_id

    @property
    def access_token(self) -> Optional[str]:
        return self._credentials.access_token

    def login(self, email: str, password: str) -> "AuthenticatedClient":
        """
        Logs in to SlimTimer with the given email and password.

        Returns:
            A new AuthenticatedClient sharing this client's configuration and
            transport. This client is not modified.

        Raises:
            UnauthorizedError: If the service rejects the credentials.
            ServiceError: If the login call fails for any other reason.
        """
        sanitized = sanitize_for_logging(email=email)
        logger.info("Logging in as %s", sanitized['email'])

        request = build_body_request(
            'POST',
            f"{self._config.base_url}/{LOGIN_PATH}",
            {'user': {'email': email, 'password': password}},
            self._credentials,
        )
        response = self._handler.submit(
            request,
            error=f'Failed to login as "{email}"',
            log_context=f'Failed to login as "{sanitized["email"]}"',
        )

        credentials = AuthenticatedCredentials.from_login_response(self.api_key, response)
        logger.info("Logged in as user %s", credentials.user_id)
        return AuthenticatedClient(credentials, self._config, self._handler, self._owns_session)

    @property
    def tasks(self) -> TasksApiService:
        """Task operations; only available after login."""
        raise NotLoggedInError("Not logged in: call login() before using tasks")

    @property
    def time_entries(self) -> TimeEntriesApiService:
        """Time entry operations; only available after login."""
        raise NotLoggedInError("Not logged in: call login() before using time entries")

    # Task operations
    def list_tasks(self) -> List[Task]:
        """Returns all tasks involving the logged in user, completed or not."""
        return self.tasks.list_tasks()

    def create_task(self, name: str) -> Task:
        """Creates a new task with the given name."""
        return self.tasks.create_task(name)

    def delete_task(self, task_id: int) -> None:
        """Deletes the task with the given id."""
        self.tasks.delete_task(task_id)

    def get_task(self, task_id: int) -> Task:
        """Finds a task by its id."""
        return self.tasks.get_task(task_id)

    def complete_task(self, task_id: int, completed_on: datetime) -> None:
        """Marks the task with the given id as completed."""
        self.tasks.complete_task(task_id, completed_on)

    # Time entry operations
    def list_entries(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[TimeEntry]:
        """Returns the time entries, optionally restricted to a time range."""
        return self.time_entries.list_entries(start, end)

    def list_task_entries(
            self,
            task_id: int,
            start: Optional[datetime] = None,
            end: Optional[datetime] = None
    ) -> List[TimeEntry]:
        """Returns the time entries of one task, optionally restricted to a time range."""
        return self.time_entries.list_task_entries(task_id, start, end)

    def get_entry(self, entry_id: int) -> TimeEntry:
        """Finds a time entry by its id."""
        return self.time_entries.get_entry(entry_id)

    def create_entry(self, task_id: int, start: datetime, end: Optional[datetime] = None) -> TimeEntry:
        """Creates a new time entry; end defaults to now."""
        return self.time_entries.create_entry(task_id, start, end)

    def update_entry(self, entry_id: int, task_id: int, start: datetime, end: datetime) -> None:
        """Changes an existing time entry."""
        self.time_entries.update_entry(entry_id, task_id, start, end)

    def delete_entry(self, entry_id: int) -> None:
        """Deletes a time entry."""
        self.time_entries.delete_entry(entry_id)

    def close(self):
        """Close the transport if this client created it."""
        if self._owns_session:
            self._handler.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self):
        return f"{type(self).__name__}(user_id={self.user_id!r}, base_url={self._config.base_url!r})"


class AuthenticatedClient(SlimTimerClient):
    """
    Client of the SlimTimer service for a logged in user.

    Obtained from SlimTimerClient.login(), never constructed directly.
    """

    def __init__(
            self,
            credentials: AuthenticatedCredentials,
            config: ClientConfig,
            handler: ResponseHandler,
            owns_session: bool = False
    ):
        self._credentials = credentials.require_login()
        self._config = config
        self._handler = handler
        self._owns_session = owns_session
        self._tasks = TasksApiService(handler, self._credentials, config)
        self._time_entries = TimeEntriesApiService(handler, self._credentials, config)

    @property
    def tasks(self) -> TasksApiService:
        return self._tasks

    @property
    def time_entries(self) -> TimeEntriesApiService:
        return self._time_entries

import pytest
import sys
from datetime import datetime, timezone
from http import HTTPStatus
from pathlib import Path
from unittest.mock import Mock
from urllib.parse import urlsplit, parse_qsl

import requests
import yaml

# Add the source directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from slimtimer_client.auth.credentials import AuthenticatedCredentials
from slimtimer_client.config import ClientConfig
from slimtimer_client.transport.response_handler import ResponseHandler
from slimtimer_client.user_client import SlimTimerClient, AuthenticatedClient

API_KEY = "test-api-key-123"
USER_ID = 42
ACCESS_TOKEN = "tok"
BASE_URL = "http://slimtimer.com"


def make_response(status_code=200, body=None, reason=None):
    """Build a real requests.Response carrying a YAML body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason if reason is not None else HTTPStatus(status_code).phrase
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = yaml.safe_dump(body).encode("utf-8")
    response._content = content
    response.encoding = "utf-8"
    return response


def sent_request(mock_session, index=-1):
    """The PreparedRequest passed to session.send."""
    return mock_session.send.call_args_list[index][0][0]


def query_params(request):
    """Query string of a prepared request as a plain dict."""
    return dict(parse_qsl(urlsplit(request.url).query))


def request_path(request):
    return urlsplit(request.url).path


def body_params(request):
    return yaml.safe_load(request.body)


@pytest.fixture
def mock_session():
    """Mock transport for testing."""
    session = Mock(spec=requests.Session)
    # real session settings so prepare_request merges them like requests does
    defaults = requests.Session()
    session.headers = defaults.headers
    session.cookies = defaults.cookies
    session.auth = None
    session.params = {}
    session.hooks = defaults.hooks
    session.trust_env = False
    session.prepare_request.side_effect = lambda request: requests.Session.prepare_request(session, request)
    session.send.return_value = make_response(200)
    return session


@pytest.fixture
def client(mock_session):
    """Anonymous client sending through the mock transport."""
    return SlimTimerClient(API_KEY, session=mock_session)


@pytest.fixture
def credentials():
    return AuthenticatedCredentials(api_key=API_KEY, user_id=USER_ID, access_token=ACCESS_TOKEN)


@pytest.fixture
def authenticated_client(mock_session, credentials):
    """Logged in client sending through the mock transport."""
    return AuthenticatedClient(credentials, ClientConfig(), ResponseHandler(mock_session))


@pytest.fixture
def sample_datetime():
    """Sample timezone-aware datetime for testing."""
    return datetime(2011, 3, 14, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_task_response():
    """Sample SlimTimer task response."""
    return {
        "id": 7,
        "name": "X",
        "created_at": "2011-03-01T10:00:00Z",
        "updated_at": "2011-03-02T11:30:00Z",
        "hours": 3.5,
        "completed_on": None,
        "role": "owner",
        "tags": "",
    }


@pytest.fixture
def sample_entry_response():
    """Sample SlimTimer time entry response with the task embedded."""
    return {
        "id": 1001,
        "start_time": "2011-03-14T09:00:00Z",
        "end_time": "2011-03-14T09:02:00Z",
        "created_at": "2011-03-14T09:02:01Z",
        "updated_at": "2011-03-14T09:02:01Z",
        "duration_in_seconds": 120,
        "comments": None,
        "in_progress": False,
        "tags": "",
        "task": {"id": 9, "name": "Proj", "hours": 12.25},
    }


@pytest.fixture
def sample_flat_entry_response():
    """Sample SlimTimer time entry response with a flat task_id."""
    return {
        "id": 1002,
        "task_id": 7,
        "start_time": "2011-03-14T10:00:00Z",
        "end_time": "2011-03-14T11:00:00Z",
        "created_at": "2011-03-14T11:00:00Z",
        "updated_at": "2011-03-14T11:00:00Z",
        "duration_in_seconds": 3600,
        "comments": "Reviewed the draft",
        "in_progress": False,
    }

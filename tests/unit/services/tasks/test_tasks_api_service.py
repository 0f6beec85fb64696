import pytest

from slimtimer_client.exceptions import InvalidResponseError, NotFoundError, ServiceError
from slimtimer_client.services.tasks import Task

from conftest import (
    API_KEY, ACCESS_TOKEN, make_response, sent_request, query_params, request_path, body_params
)


@pytest.mark.unit
@pytest.mark.tasks
class TestTasksApiService:
    """Test cases for task operations."""

    def test_tasks_url(self, authenticated_client):
        tasks = authenticated_client.tasks
        assert tasks.tasks_url() == "http://slimtimer.com/users/42/tasks"
        assert tasks.tasks_url(7) == "http://slimtimer.com/users/42/tasks/7"

    def test_list_tasks(self, authenticated_client, mock_session, sample_task_response):
        second = dict(sample_task_response, id=8, name="Y", hours=0)
        mock_session.send.return_value = make_response(200, [sample_task_response, second])

        tasks = authenticated_client.list_tasks()

        assert [task.id for task in tasks] == [7, 8]
        assert all(isinstance(task, Task) for task in tasks)
        assert tasks[0].hours == 3.5

        request = sent_request(mock_session)
        assert request.method == 'GET'
        assert request_path(request) == "/users/42/tasks"
        assert query_params(request) == {'api_key': API_KEY, 'access_token': ACCESS_TOKEN}

    def test_list_tasks_empty(self, authenticated_client, mock_session):
        mock_session.send.return_value = make_response(200, [])
        assert authenticated_client.list_tasks() == []

    def test_list_tasks_empty_body(self, authenticated_client, mock_session):
        mock_session.send.return_value = make_response(200)
        assert authenticated_client.list_tasks() == []

    def test_list_tasks_not_a_sequence(self, authenticated_client, mock_session, sample_task_response):
        mock_session.send.return_value = make_response(200, sample_task_response)
        with pytest.raises(InvalidResponseError, match="expected a sequence"):
            authenticated_client.list_tasks()

    def test_list_tasks_invalid_element(self, authenticated_client, mock_session, sample_task_response):
        del sample_task_response['name']
        mock_session.send.return_value = make_response(200, [sample_task_response])
        with pytest.raises(InvalidResponseError, match="'name'"):
            authenticated_client.list_tasks()

    def test_list_tasks_failure(self, authenticated_client, mock_session):
        mock_session.send.return_value = make_response(500)
        with pytest.raises(ServiceError, match="Failed to get the tasks list: 500"):
            authenticated_client.list_tasks()

    def test_create_task(self, authenticated_client, mock_session, sample_task_response):
        sample_task_response['name'] = "Write report"
        mock_session.send.return_value = make_response(201, sample_task_response)

        task = authenticated_client.create_task("Write report")

        assert task.id == 7
        assert task.name == "Write report"

        request = sent_request(mock_session)
        assert request.method == 'POST'
        assert request_path(request) == "/users/42/tasks"
        assert body_params(request) == {
            'task': {'name': 'Write report'},
            'api_key': API_KEY,
            'access_token': ACCESS_TOKEN,
        }

    def test_create_task_uses_response(self, authenticated_client, mock_session, sample_task_response):
        """The returned task reflects what the service stored."""
        sample_task_response['name'] = "Write report (2)"
        mock_session.send.return_value = make_response(201, sample_task_response)

        task = authenticated_client.create_task("Write report")

        assert task.name == "Write report (2)"

    def test_create_task_empty_name_is_left_to_the_service(self, authenticated_client, mock_session):
        mock_session.send.return_value = make_response(422)

        with pytest.raises(ServiceError, match='Failed to create task "": 422'):
            authenticated_client.create_task("")

        assert body_params(sent_request(mock_session))['task'] == {'name': ''}

    def test_delete_task(self, authenticated_client, mock_session):
        assert authenticated_client.delete_task(7) is None

        request = sent_request(mock_session)
        assert request.method == 'DELETE'
        assert request_path(request) == "/users/42/tasks/7"
        assert query_params(request) == {'api_key': API_KEY, 'access_token': ACCESS_TOKEN}

    def test_delete_missing_task(self, authenticated_client, mock_session):
        mock_session.send.return_value = make_response(404)
        with pytest.raises(NotFoundError, match="Failed to delete the task 7"):
            authenticated_client.delete_task(7)

    def test_get_task(self, authenticated_client, mock_session, sample_task_response):
        mock_session.send.return_value = make_response(200, sample_task_response)

        task = authenticated_client.get_task(7)

        assert task.id == 7
        request = sent_request(mock_session)
        assert request.method == 'GET'
        assert request_path(request) == "/users/42/tasks/7"

    def test_get_missing_task(self, authenticated_client, mock_session):
        mock_session.send.return_value = make_response(404)

        with pytest.raises(ServiceError) as exc_info:
            authenticated_client.get_task(99)

        assert isinstance(exc_info.value, NotFoundError)
        assert str(exc_info.value) == "Failed to find the task 99: 404 Not Found"

    def test_complete_task(self, authenticated_client, mock_session, sample_datetime):
        assert authenticated_client.complete_task(7, sample_datetime) is None

        request = sent_request(mock_session)
        assert request.method == 'PUT'
        assert request_path(request) == "/users/42/tasks/7"
        assert body_params(request) == {
            'task': {'completed_on': '2011-03-14T09:00:00Z'},
            'api_key': API_KEY,
            'access_token': ACCESS_TOKEN,
        }

    def test_complete_task_failure(self, authenticated_client, mock_session, sample_datetime):
        mock_session.send.return_value = make_response(422, reason="Unprocessable Entity")
        with pytest.raises(ServiceError, match="Failed to mark the task 7 as completed: 422"):
            authenticated_client.complete_task(7, sample_datetime)

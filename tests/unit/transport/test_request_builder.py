import pytest
import yaml

from slimtimer_client.auth.credentials import ApiCredentials
from slimtimer_client.transport.request_builder import build_query_request, build_body_request

from conftest import API_KEY, ACCESS_TOKEN, query_params

URL = "http://slimtimer.com/users/42/time_entries"


@pytest.mark.unit
class TestBuildQueryRequest:
    """Test cases for GET/DELETE requests."""

    def test_anonymous_carries_only_api_key(self):
        request = build_query_request('GET', URL, ApiCredentials(API_KEY)).prepare()
        assert query_params(request) == {'api_key': API_KEY}

    def test_logged_in_carries_access_token(self, credentials):
        request = build_query_request('GET', URL, credentials).prepare()
        assert query_params(request) == {'api_key': API_KEY, 'access_token': ACCESS_TOKEN}

    def test_caller_params_are_merged(self, credentials):
        request = build_query_request(
            'GET', URL, credentials, {'range_start': '2011-03-14T09:00:00Z'}
        ).prepare()
        params = query_params(request)
        assert params['range_start'] == '2011-03-14T09:00:00Z'
        assert params['access_token'] == ACCESS_TOKEN

    def test_auth_params_cannot_be_overridden(self, credentials):
        request = build_query_request('GET', URL, credentials, {'api_key': 'other'}).prepare()
        assert query_params(request)['api_key'] == API_KEY

    def test_method_url_and_headers(self, credentials):
        request = build_query_request('delete', URL, credentials).prepare()
        assert request.method == 'DELETE'
        assert request.url.startswith(URL + "?")
        assert request.headers['Accept'] == 'application/x-yaml'
        assert request.body is None

    def test_body_methods_are_rejected(self, credentials):
        with pytest.raises(ValueError, match="Query requests"):
            build_query_request('POST', URL, credentials)


@pytest.mark.unit
class TestBuildBodyRequest:
    """Test cases for POST/PUT requests."""

    def test_anonymous_body_has_no_access_token(self):
        params = {'user': {'email': 'me@example.com', 'password': 'secret'}}
        request = build_body_request('POST', URL, params, ApiCredentials(API_KEY)).prepare()

        body = yaml.safe_load(request.body)
        assert body == {
            'user': {'email': 'me@example.com', 'password': 'secret'},
            'api_key': API_KEY,
        }

    def test_logged_in_body_has_access_token(self, credentials):
        request = build_body_request('PUT', URL, {'task': {'name': 'Report'}}, credentials).prepare()

        body = yaml.safe_load(request.body)
        assert body['api_key'] == API_KEY
        assert body['access_token'] == ACCESS_TOKEN
        assert body['task'] == {'name': 'Report'}

    def test_caller_params_are_not_modified(self, credentials):
        params = {'task': {'name': 'Report'}}
        build_body_request('POST', URL, params, credentials)
        assert params == {'task': {'name': 'Report'}}

    def test_headers_and_url(self, credentials):
        request = build_body_request('post', URL, {}, credentials).prepare()
        assert request.method == 'POST'
        assert request.url == URL
        assert request.headers['Accept'] == 'application/x-yaml'
        assert request.headers['Content-Type'] == 'application/x-yaml'

    def test_timestamps_stay_strings(self, credentials):
        params = {'task': {'completed_on': '2011-03-14T09:00:00Z'}}
        request = build_body_request('PUT', URL, params, credentials).prepare()
        assert yaml.safe_load(request.body)['task']['completed_on'] == '2011-03-14T09:00:00Z'

    def test_query_methods_are_rejected(self, credentials):
        with pytest.raises(ValueError, match="Body requests"):
            build_body_request('GET', URL, {}, credentials)

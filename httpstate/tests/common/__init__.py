from unittest.mock import MagicMock

from ...plugins.module_utils.resource import (
    HttpDetails,
    Mapping,
    Payload,
    RequestResource,
    ResourceStatus,
)
from ...plugins.module_utils.transport import HttpClient

BASE_URL = 'https://api.example.com/users'


def get_resource(mappings=None, response_body='{"id": "1"}', status_code=200,
                 method='POST', payload_body=None) -> RequestResource:
    if mappings is None:
        mappings = [
            Mapping('GET', '{{ payload.baseUrl }}/{{ response.body.id }}'),
            Mapping('PUT', '{{ payload.baseUrl }}/{{ response.body.id }}',
                    body={'username': '{{ payload.body.username }}'}),
        ]
    if payload_body is None:
        payload_body = {'username': 'jdoe'}

    return RequestResource(
        name='user',
        mappings=mappings,
        payload=Payload(BASE_URL, payload_body),
        status=ResourceStatus(
            HttpDetails(status_code, response_body, {}), method),
    )


def get_mock_http_client(status_code=200, body='', error=None) -> HttpClient:
    client = HttpClient()
    client.send_request = MagicMock(
        return_value=(HttpDetails(status_code, body, {}), error))
    return client

import json
import unittest

from ....common import BASE_URL, get_resource
from .....plugins.module_utils.errors import ErrorKind, ObserveError
from .....plugins.module_utils.requestgen import (
    desired_state,
    get_mapping_by_method,
    is_request_valid,
    request_details,
)
from .....plugins.module_utils.resource import Mapping, RequestDetails


class RequestGenTester(unittest.TestCase):

    def test_get_mapping_by_method(self):
        resource = get_resource()
        assert get_mapping_by_method(resource, 'GET').method == 'GET'
        assert get_mapping_by_method(resource, 'put').method == 'PUT'
        assert get_mapping_by_method(resource, 'DELETE') is None

    def test_render_get(self):
        details = request_details(get_resource(), 'GET')
        assert details.url == f"{BASE_URL}/1"
        assert details.body == ''

    def test_render_structured_body(self):
        details = request_details(get_resource(), 'PUT')
        assert json.loads(details.body) == {'username': 'jdoe'}
        assert desired_state(get_resource()) == details.body

    def test_render_string_body(self):
        resource = get_resource(mappings=[
            Mapping('PUT', '{{ payload.baseUrl }}',
                    body='{"username": "{{ payload.body.username }}"}'),
        ])
        assert desired_state(resource) == '{"username": "jdoe"}'

    def test_render_headers(self):
        resource = get_resource(mappings=[
            Mapping('GET', BASE_URL, headers={
                'Authorization': 'Bearer {{ payload.body.username }}',
                'Accept': ['application/json', 'text/plain'],
            }),
        ])
        resource.headers = {'X-Static': ['1']}
        details = request_details(resource, 'GET')
        assert details.headers['Authorization'] == ['Bearer jdoe']
        assert details.headers['Accept'] == ['application/json', 'text/plain']
        assert details.headers['X-Static'] == ['1'], "Resource headers are kept"

    def test_mapping_not_found(self):
        with self.assertRaises(ObserveError) as ctx:
            request_details(get_resource(), 'DELETE')
        assert ctx.exception.kind == ErrorKind.MAPPING_NOT_FOUND
        assert ctx.exception.method == 'DELETE'

    def test_undefined_variable(self):
        resource = get_resource(mappings=[
            Mapping('PUT', BASE_URL, body='{{ payload.body.missing.field }}'),
        ])
        with self.assertRaises(ObserveError) as ctx:
            desired_state(resource)
        assert ctx.exception.kind == ErrorKind.TEMPLATE_ERROR

    def test_template_syntax_error(self):
        resource = get_resource(mappings=[Mapping('GET', '{{ payload.baseUrl ')])
        with self.assertRaises(ObserveError) as ctx:
            request_details(resource, 'GET')
        assert ctx.exception.kind == ErrorKind.TEMPLATE_ERROR

    def test_invalid_url(self):
        resource = get_resource(mappings=[Mapping('GET', '{{ name }}')])
        with self.assertRaises(ObserveError) as ctx:
            request_details(resource, 'GET')
        assert ctx.exception.kind == ErrorKind.INVALID_REQUEST_DETAILS
        assert ctx.exception.value == 'user'

    def test_is_request_valid(self):
        assert is_request_valid(RequestDetails(url='http://localhost:8080/x'))
        assert not is_request_valid(RequestDetails(url=''))
        assert not is_request_valid(RequestDetails(url='/relative'))
        assert not is_request_valid(RequestDetails(url='ftp://host/file'))

    def test_plain_response_body_in_context(self):
        resource = get_resource(
            mappings=[Mapping('GET', '{{ payload.baseUrl }}/{{ response.body }}')],
            response_body='abc')
        assert request_details(resource, 'GET').url == f"{BASE_URL}/abc"

    def test_structured_body_keeps_native_types(self):
        resource = get_resource(
            mappings=[Mapping('PUT', BASE_URL, body={
                'age': '{{ payload.body.age }}',
                'admin': '{{ payload.body.admin }}',
                'label': 'age {{ payload.body.age }}',
                'tags': ['{{ payload.body.tags }}'],
                'fixed': 'plain',
            })],
            payload_body={'age': 30, 'admin': True, 'tags': None})
        assert json.loads(desired_state(resource)) == {
            'age': 30,
            'admin': True,
            'label': 'age 30',
            'tags': [None],
            'fixed': 'plain',
        }, "Single-expression leaves keep their type, mixed text stays a string"

    def test_string_body_stays_text(self):
        resource = get_resource(
            mappings=[Mapping('PUT', BASE_URL, body='{{ payload.body.age }}')],
            payload_body={'age': 30})
        assert desired_state(resource) == '30'

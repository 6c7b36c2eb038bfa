import unittest

from .....plugins.module_utils.resource import HttpDetails, RequestDetails, RequestResource


class ResourceTester(unittest.TestCase):

    def test_default_headers_not_shared(self):
        details = HttpDetails()
        with self.assertRaises(TypeError):
            details.headers['X-Test'] = ['1']
        assert dict(HttpDetails().headers) == {}
        assert dict(RequestDetails().headers) == {}

    def test_to_dict(self):
        details = HttpDetails(200, 'ok', {'Accept': ('a', 'b')})
        assert details.to_dict() == {
            'status_code': 200,
            'body': 'ok',
            'headers': {'Accept': ['a', 'b']},
        }

    def test_from_args(self):
        resource = RequestResource.from_args({
            'name': 'user',
            'mappings': [{'method': 'get', 'url': 'https://api.example.com'}],
            'headers': {'Accept': 'application/json'},
            'status': {
                'method': 'post',
                'response': {'status_code': 201, 'body': '{"id": 1}'},
            },
        })
        assert resource.mappings[0].method == 'GET'
        assert resource.headers == {'Accept': ['application/json']}
        assert resource.status.method == 'POST'
        assert resource.status.response.status_code == 201
        assert resource.payload.base_url == ''

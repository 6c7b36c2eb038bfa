import unittest

from .....plugins.module_utils.httpstatus import is_error, is_not_found, is_success


class HttpStatusTester(unittest.TestCase):

    def test_is_success(self):
        assert is_success(200)
        assert is_success(204)
        assert is_success(299)
        assert not is_success(199)
        assert not is_success(301)
        assert not is_success(0), "No response is not a success"

    def test_is_error(self):
        assert is_error(400)
        assert is_error(404)
        assert is_error(503)
        assert not is_error(200)
        assert not is_error(302)
        assert not is_error(600)

    def test_is_not_found(self):
        assert is_not_found(404)
        assert not is_not_found(410)

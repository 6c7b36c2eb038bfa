import unittest

from .....plugins.filter.httpstate import FilterModule
from ansible.errors import AnsibleFilterError


class FilterTester(unittest.TestCase):

    def setUp(self):
        self.filters = FilterModule().filters()

    def test_json_contains(self):
        json_contains = self.filters['json_contains']
        assert json_contains({'a': 1, 'b': 2}, {'a': 1})
        assert json_contains('{"a": 1, "b": 2}', '{"a": 1}')
        assert not json_contains({'a': 1}, '{"a": 2}')

    def test_json_contains_invalid(self):
        with self.assertRaises(AnsibleFilterError):
            self.filters['json_contains']('not json', {'a': 1})

    def test_compare_types(self):
        assert 'gitlab-file' in self.filters['compare_types']()
        assert 'harbor-robot' in self.filters['compare_types']()

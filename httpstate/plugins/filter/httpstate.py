from ..module_utils.compare import registered_compare_types
from ..module_utils.jsonutil import contains, is_json_string, json_string_to_map
from ansible.errors import AnsibleFilterError


class FilterModule(object):

    def jsonContains(self, container, containee):
        """
        Whether every key/value of containee is present, and equal, in
        container. Either side may be a JSON object string.
        Examples:

        - name: Check that the remote object carries the desired fields.
          assert:
            that: response.json | declarative.httpstate.json_contains({'name': 'r1'})
        """
        return contains(self._toMap(container), self._toMap(containee))

    def compareTypes(self, _=None):
        """
        The compare types known to the comparator.
        Examples:

        - debug:
            msg: "{{ None | declarative.httpstate.compare_types }}"
        """
        return registered_compare_types()

    def _toMap(self, value):
        if isinstance(value, str):
            if not is_json_string(value):
                raise AnsibleFilterError(f"not a JSON object string: {value}")
            return json_string_to_map(value)
        return value

    def filters(self):
        return {
            'json_contains': self.jsonContains,
            'compare_types': self.compareTypes,
        }

import json

from .errors import invalid_field_type, not_valid_json
from typing import Any, Dict, Iterable, List, Union

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JSONMap = Dict[str, JSONValue]


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _loads(s: str):
    try:
        return json.loads(s, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        return None


def is_json_string(s: str) -> bool:
    """Whether s holds a JSON object.

    Other JSON documents (strings, numbers, arrays) are treated as plain text
    by the comparator, so they are not considered JSON here.
    """
    return isinstance(_loads(s), dict)


def json_string_to_map(s: str, subject: str = 'value') -> JSONMap:
    res = _loads(s)
    if not isinstance(res, dict):
        raise not_valid_json(subject, s)
    return res


def _scalar_equal(a: JSONValue, b: JSONValue) -> bool:
    # bool is a subclass of int, but true and 1 are different JSON values.
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    return type(a) is type(b) and a == b


def contains(container: JSONValue, containee: JSONValue) -> bool:
    """Recursive subset containment.

    Every key of a containee object must be present in the container object
    with a contained value. Arrays must have the same length and contain each
    other element-wise. Scalars must be equal.
    """
    if isinstance(containee, dict):
        if not isinstance(container, dict):
            return False
        for key, value in containee.items():
            if key not in container:
                return False
            if not contains(container[key], value):
                return False
        return True

    if isinstance(containee, list):
        if not isinstance(container, list) or len(container) != len(containee):
            return False
        return all(contains(c, d) for c, d in zip(container, containee))

    return _scalar_equal(container, containee)


def without_keys(mapping: JSONMap, keys: Iterable[str]) -> JSONMap:
    keys = set(keys)
    return {k: v for k, v in mapping.items() if k not in keys}


def get_string_field(mapping: JSONMap, field: str, subject: str) -> str:
    value = mapping.get(field)
    if not isinstance(value, str):
        raise invalid_field_type(subject, field, 'str', value)
    return value

import hashlib

from .display import Display
from .errors import not_valid_json
from .httpstatus import is_success
from .jsonutil import (
    JSONMap,
    contains,
    get_string_field,
    is_json_string,
    json_string_to_map,
    without_keys,
)
from .resource import HttpDetails, ObserveResult
from enum import Enum
from typing import Dict, Iterable, List, Optional

RESPONSE_BODY = 'response body'
DESIRED_BODY = 'PUT mapping result'

display = Display()


class CompareType(str, Enum):
    DEFAULT = ''
    GITLAB_FILE = 'gitlab-file'
    HARBOR_ROBOT = 'harbor-robot'


class CompareStrategy:
    """Decides whether a JSON response matches the desired JSON state.

    Implementations must not perform I/O nor mutate their inputs.
    """

    def compare(self, response: JSONMap, desired: JSONMap, status_code: int) -> bool:
        raise NotImplementedError


class FilteredContainsStrategy(CompareStrategy):
    """Drops ignored keys from both sides, then checks that the desired state
    is contained in the response."""

    def __init__(self, response_ignore: Iterable[str] = (),
                 desired_ignore: Iterable[str] = ()) -> None:
        self.response_ignore = tuple(response_ignore)
        self.desired_ignore = tuple(desired_ignore)

    def compare(self, response: JSONMap, desired: JSONMap, status_code: int) -> bool:
        response = without_keys(response, self.response_ignore)
        desired = without_keys(desired, self.desired_ignore)
        return contains(response, desired) and is_success(status_code)


class ContentHashStrategy(CompareStrategy):
    """For remotes that only echo back a digest of the content they store."""

    def __init__(self, content_field: str = 'content',
                 digest_field: str = 'content_sha256') -> None:
        self.content_field = content_field
        self.digest_field = digest_field

    def compare(self, response: JSONMap, desired: JSONMap, status_code: int) -> bool:
        content = get_string_field(desired, self.content_field, DESIRED_BODY)
        digest = get_string_field(response, self.digest_field, RESPONSE_BODY)
        return (hashlib.sha256(content.encode('utf-8')).hexdigest() == digest
                and is_success(status_code))


_strategies: Dict[str, CompareStrategy] = {
    CompareType.DEFAULT.value: FilteredContainsStrategy(),
    CompareType.GITLAB_FILE.value: ContentHashStrategy(),
    CompareType.HARBOR_ROBOT.value: FilteredContainsStrategy(
        response_ignore=['update_time'],
        desired_ignore=['update_time', 'secret']),
}


def register_compare_type(name: str, strategy: CompareStrategy) -> None:
    if not name:
        raise ValueError("the default compare type cannot be replaced")
    if not isinstance(strategy, CompareStrategy):
        raise TypeError(f"expected a CompareStrategy, got {type(strategy).__name__}")
    _strategies[name] = strategy


def get_strategy(name: Optional[str]) -> CompareStrategy:
    """Unknown compare types use the default strategy."""
    strategy = _strategies.get(name or '')
    if strategy is None:
        display.vvv(f"Unknown compare type '{name}', using default")
        return _strategies[CompareType.DEFAULT.value]
    return strategy


def registered_compare_types() -> List[str]:
    return sorted(_strategies.keys())


def compare_response_and_desired_state(details: HttpDetails,
                                       response_error: Optional[Exception],
                                       desired_state: str,
                                       compare_type: str = '') -> ObserveResult:
    response_is_json = is_json_string(details.body)
    desired_is_json = is_json_string(desired_state)

    if response_is_json and desired_is_json:
        response_map = json_string_to_map(details.body, RESPONSE_BODY)
        desired_map = json_string_to_map(desired_state, DESIRED_BODY)
        strategy = get_strategy(compare_type)
        display.vvv(f"Comparing JSON states with '{compare_type}' "
                    f"compare type ({type(strategy).__name__})")
        synced = strategy.compare(response_map, desired_map, details.status_code)
        return ObserveResult(synced, details, response_error)

    if desired_is_json:
        raise not_valid_json(RESPONSE_BODY, details.body)

    if response_is_json:
        raise not_valid_json(DESIRED_BODY, desired_state)

    display.vvv("Comparing plain text states")
    synced = desired_state in details.body and is_success(details.status_code)
    return ObserveResult(synced, details, response_error)

from ansible.errors import AnsibleError
from enum import Enum


class ErrorKind(Enum):
    OBJECT_NOT_FOUND = "object_not_found"
    MAPPING_NOT_FOUND = "mapping_not_found"
    NOT_VALID_JSON = "not_valid_json"
    INVALID_FIELD_TYPE = "invalid_field_type"
    INVALID_REQUEST_DETAILS = "invalid_request_details"
    TEMPLATE_ERROR = "template_error"


class ObserveError(AnsibleError):
    """
    Raised when the sync state of a resource cannot be determined.

    Attributes:
        kind -- the ErrorKind, for callers to branch on
        subject -- what the error is about, e.g, 'response body'
        value -- the offending value, if any
        method -- the HTTP method involved, if any
        field -- the JSON field involved, if any
    """

    def __init__(self, kind: ErrorKind, message: str, subject: str = None,
                 value=None, method: str = None, field: str = None):
        self.kind = kind
        self.subject = subject
        self.value = value
        self.method = method
        self.field = field
        super().__init__(message)


def object_not_found() -> ObserveError:
    return ObserveError(ErrorKind.OBJECT_NOT_FOUND, "object wasn't found")


def mapping_not_found(method: str) -> ObserveError:
    return ObserveError(
        ErrorKind.MAPPING_NOT_FOUND,
        f"{method} mapping doesn't exist in request, skipping operation",
        method=method)


def not_valid_json(subject: str, value: str) -> ObserveError:
    return ObserveError(
        ErrorKind.NOT_VALID_JSON,
        f"{subject} is not a valid JSON string: {value}",
        subject=subject, value=value)


def invalid_field_type(subject: str, field: str, expected: str, value) -> ObserveError:
    return ObserveError(
        ErrorKind.INVALID_FIELD_TYPE,
        f"invalid field type for '{field}' in {subject}: expected {expected}, got {type(value).__name__}",
        subject=subject, value=value, field=field)

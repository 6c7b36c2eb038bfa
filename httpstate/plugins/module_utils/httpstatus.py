GET = 'GET'
POST = 'POST'
PUT = 'PUT'
PATCH = 'PATCH'
DELETE = 'DELETE'

NOT_FOUND = 404


def is_success(code: int) -> bool:
    return 200 <= code < 300


def is_error(code: int) -> bool:
    return 400 <= code < 600


def is_not_found(code: int) -> bool:
    return code == NOT_FOUND

from types import MappingProxyType
from typing import Any, Dict, List, NamedTuple, Optional

NO_HEADERS = MappingProxyType({})


class HttpDetails(NamedTuple):
    status_code: int = 0
    body: str = ''
    headers: Dict[str, List[str]] = NO_HEADERS

    def to_dict(self) -> dict:
        return dict(
            status_code=self.status_code,
            body=self.body,
            headers={k: list(v) for k, v in self.headers.items()},
        )


class RequestDetails(NamedTuple):
    url: str = ''
    body: str = ''
    headers: Dict[str, List[str]] = NO_HEADERS


class ObserveResult(NamedTuple):
    synced: bool = False
    details: Optional[HttpDetails] = None
    response_error: Optional[Exception] = None

    @classmethod
    def failed(cls) -> 'ObserveResult':
        return cls(synced=False)


def normalise_headers(headers: Optional[dict]) -> Dict[str, List[str]]:
    """Header values may be given as a single string or a list of strings."""
    res = {}
    for name, value in (headers or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            res[name] = [f"{v}" for v in value]
        else:
            res[name] = [f"{value}"]
    return res


class Mapping:

    # The HTTP method this mapping renders a request for, e.g, PUT.
    method: str

    # Template(s) for the request body. Either a string, or a structure whose
    # string leaves are templates.
    body: Any

    # Template for the request URL.
    url: str

    # Header templates, keyed by header name.
    headers: Dict[str, Any]

    # Selects the comparison strategy for the resource, see compare.py.
    compare_type: str

    def __init__(self, method: str, url: str = '', body: Any = None,
                 headers: dict = None, compare_type: str = '') -> None:
        self.method = method.upper()
        self.url = url or ''
        self.body = body
        self.headers = headers or {}
        self.compare_type = compare_type or ''

    @classmethod
    def from_dict(cls, data: dict) -> 'Mapping':
        return cls(
            data['method'],
            data.get('url'),
            data.get('body'),
            data.get('headers'),
            data.get('compare_type'),
        )


class Payload:

    def __init__(self, base_url: str = '', body: Any = None) -> None:
        self.base_url = base_url or ''
        self.body = body


class ResourceStatus:
    """The last response recorded for a resource and the method that
    produced it."""

    def __init__(self, response: HttpDetails = None, method: str = '') -> None:
        self.response = response if response is not None else HttpDetails()
        self.method = (method or '').upper()


class RequestResource:

    def __init__(self, name: str, mappings: List[Mapping],
                 payload: Payload = None, headers: dict = None,
                 insecure_skip_tls_verify: bool = False,
                 status: ResourceStatus = None) -> None:
        self.name = name
        self.mappings = mappings
        self.payload = payload if payload is not None else Payload()
        self.headers = normalise_headers(headers)
        self.insecure_skip_tls_verify = insecure_skip_tls_verify
        self.status = status if status is not None else ResourceStatus()

    @classmethod
    def from_args(cls, args: dict) -> 'RequestResource':
        """Builds a resource from validated task arguments."""
        payload = args.get('payload') or {}
        status = args.get('status') or {}
        response = status.get('response') or {}

        return cls(
            name=args.get('name') or '',
            mappings=[Mapping.from_dict(m) for m in args.get('mappings') or []],
            payload=Payload(payload.get('base_url'), payload.get('body')),
            headers=args.get('headers'),
            insecure_skip_tls_verify=bool(args.get('insecure_skip_tls_verify')),
            status=ResourceStatus(
                HttpDetails(
                    int(response.get('status_code') or 0),
                    response.get('body') or '',
                    normalise_headers(response.get('headers')),
                ),
                status.get('method'),
            ),
        )

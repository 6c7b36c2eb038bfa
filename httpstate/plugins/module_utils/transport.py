from .display import Display
from .resource import HttpDetails
from ansible.module_utils.common.text.converters import to_bytes, to_native, to_text
from ansible.module_utils.urls import ConnectionError, SSLValidationError, open_url
from typing import Dict, List, Optional, Tuple
from urllib.error import HTTPError, URLError


def _read_body(response) -> str:
    if response is None:
        return ''
    return to_text(response.read(), errors='surrogate_or_strict')


def _response_headers(response) -> Dict[str, List[str]]:
    res = {}
    info = getattr(response, 'headers', None)
    if info is None:
        return res
    for name, value in info.items():
        res.setdefault(name, []).append(value)
    return res


class HttpClient(Display):

    def __init__(self, timeout: float = 30, default_headers: dict = None) -> None:
        super().__init__()
        if default_headers is not None and not isinstance(default_headers, dict):
            raise ValueError("Expecting client headers to be dictionary.")

        self.timeout = timeout
        self.default_headers = default_headers or {}

    def send_request(self, method: str, url: str, body: str = '',
                     headers: Dict[str, List[str]] = None,
                     insecure_skip_tls_verify: bool = False) -> Tuple[HttpDetails, Optional[Exception]]:
        """Sends a request and returns its details along with any error.

        Error statuses are not raised: the status and body of the error
        response are returned with the HTTPError.
        """
        req_headers = dict(self.default_headers)
        for name, values in (headers or {}).items():
            req_headers[name] = ', '.join(values)

        self.vvv(f"HTTP {method} {url}")
        self.vvvv(f"HTTP request body: {body}")

        try:
            response = open_url(url, data=to_bytes(body) if body else None, method=method,
                                headers=req_headers,
                                validate_certs=not insecure_skip_tls_verify,
                                timeout=self.timeout)
        except HTTPError as e:
            details = HttpDetails(e.code, _read_body(e), _response_headers(e))
            self.vvv(f"HTTP {method} {url} returned {e.code}")
            return details, e
        except (URLError, SSLValidationError, ConnectionError) as e:
            self.vvv(f"HTTP {method} {url} failed: {to_native(e)}")
            return HttpDetails(), e

        details = HttpDetails(response.getcode(), _read_body(response),
                              _response_headers(response))
        self.vvvv(f"HTTP response: {details}")
        return details, None

import json

from .display import Display
from .errors import ErrorKind, ObserveError, mapping_not_found
from .httpstatus import PUT
from .jsonutil import is_json_string, json_string_to_map
from .resource import Mapping, RequestDetails, RequestResource
from jinja2 import StrictUndefined, TemplateError
from jinja2.nativetypes import NativeEnvironment
from jinja2.sandbox import SandboxedEnvironment
from typing import Any, Optional
from urllib.parse import urlparse

display = Display()

_env = SandboxedEnvironment(undefined=StrictUndefined, keep_trailing_newline=True)


class SandboxedNativeEnvironment(NativeEnvironment, SandboxedEnvironment):
    """Single-expression templates keep the type of their value, e.g, 30 or
    true rather than '30' or 'True'."""


_native_env = SandboxedNativeEnvironment(undefined=StrictUndefined)


def get_mapping_by_method(resource: RequestResource, method: str) -> Optional[Mapping]:
    for mapping in resource.mappings:
        if mapping.method == method.upper():
            return mapping
    return None


def template_context(resource: RequestResource) -> dict:
    response = resource.status.response
    body = response.body
    if is_json_string(body):
        body = json_string_to_map(body)

    return {
        'name': resource.name,
        'payload': {
            'baseUrl': resource.payload.base_url,
            'body': resource.payload.body,
        },
        'response': {
            'statusCode': response.status_code,
            'body': body,
            'headers': response.headers,
        },
    }


def render_template(template: str, context: dict, what: str, env=_env) -> Any:
    try:
        return env.from_string(template).render(context)
    except TemplateError as e:
        raise ObserveError(
            ErrorKind.TEMPLATE_ERROR,
            f"failed to render {what}: {e}",
            subject=what, value=template)


def render_value(value: Any, context: dict, what: str) -> Any:
    """Renders every templated string leaf of a structured value, keeping
    the native type of single-expression templates."""
    if isinstance(value, str):
        if '{{' not in value and '{%' not in value:
            return value
        return render_template(value, context, what, _native_env)
    if isinstance(value, dict):
        return {k: render_value(v, context, what) for k, v in value.items()}
    if isinstance(value, list):
        return [render_value(v, context, what) for v in value]
    return value


def render_body(body: Any, context: dict) -> str:
    if body is None:
        return ''
    if isinstance(body, str):
        return render_template(body, context, 'body')
    return json.dumps(render_value(body, context, 'body'))


def is_request_valid(details: RequestDetails) -> bool:
    if not details.url:
        return False
    parsed = urlparse(details.url)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def generate_request_details(resource: RequestResource, mapping: Mapping) -> RequestDetails:
    context = template_context(resource)

    headers = dict(resource.headers)
    for name, value in mapping.headers.items():
        values = value if isinstance(value, list) else [value]
        headers[name] = [render_template(f"{v}", context, f"header {name}") for v in values]

    details = RequestDetails(
        url=render_template(mapping.url, context, 'url').strip(),
        body=render_body(mapping.body, context),
        headers=headers,
    )
    display.vvvv(f"Rendered {mapping.method} request: {details.url}")

    if not is_request_valid(details):
        raise ObserveError(
            ErrorKind.INVALID_REQUEST_DETAILS,
            f"{mapping.method} mapping rendered an invalid URL: '{details.url}'",
            method=mapping.method, value=details.url)

    return details


def request_details(resource: RequestResource, method: str) -> RequestDetails:
    mapping = get_mapping_by_method(resource, method)
    if mapping is None:
        raise mapping_not_found(method.upper())
    return generate_request_details(resource, mapping)


def desired_state(resource: RequestResource) -> str:
    """The body an update request would send."""
    return request_details(resource, PUT).body

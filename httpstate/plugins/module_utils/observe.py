from .compare import compare_response_and_desired_state
from .display import Display
from .errors import object_not_found
from .httpstatus import GET, POST, is_error, is_not_found
from .requestgen import desired_state, request_details
from .resource import ObserveResult, RequestResource
from .transport import HttpClient


def is_object_valid_for_observation(resource: RequestResource) -> bool:
    """A resource can be observed once it has a recorded response body, unless
    that response comes from a failed creation."""
    status = resource.status
    return (status.response.body != '' and
            not (status.method == POST and is_error(status.response.status_code)))


def resolve_compare_type(resource: RequestResource) -> str:
    """The first non-empty compare type among the mappings wins."""
    for mapping in resource.mappings:
        if mapping.compare_type:
            return mapping.compare_type
    return ''


class RequestObserver(Display):
    """Determines whether the remote state of a resource matches the state its
    PUT mapping describes."""

    def __init__(self, client: HttpClient) -> None:
        super().__init__()
        self.client = client

    def is_up_to_date(self, resource: RequestResource) -> ObserveResult:
        """
        Fetches the current state of the resource and compares it with the
        desired one.

        Raises an ObserveError when the sync state cannot be determined. A
        transport error is not raised, but returned in the result's
        response_error.
        """
        if not is_object_valid_for_observation(resource):
            self.vvv(f"{resource.name}: no valid previous response recorded, skipping observation")
            raise object_not_found()

        details = request_details(resource, GET)
        response, response_error = self.client.send_request(
            GET, details.url, details.body, details.headers,
            resource.insecure_skip_tls_verify)
        if is_not_found(response.status_code):
            self.vvv(f"{resource.name}: GET {details.url} reported the object as not found")
            raise object_not_found()

        desired = desired_state(resource)
        compare_type = resolve_compare_type(resource)
        self.vvv(f"{resource.name}: using compare type '{compare_type}'")

        result = compare_response_and_desired_state(
            response, response_error, desired, compare_type)
        self.vv(f"{resource.name}: synced: {result.synced}")
        return result

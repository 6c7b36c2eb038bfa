from . import HttpStateActionBase
from ..module_utils.argspec import observe_argument_spec
from ..module_utils.display import Display
from ..module_utils.errors import ErrorKind, ObserveError
from ..module_utils.observe import RequestObserver
from ..module_utils.resource import ObserveResult, RequestResource
from ..module_utils.transport import HttpClient
from ansible.module_utils.common.text.converters import to_native


display = Display(prefix='request_observe')


def observe_request(client: HttpClient, args: dict) -> dict:
    """Observes a resource and returns the task result fields.

    A resource that cannot be found is reported as unsynced rather than
    failing the task, so that playbooks can go on to create it.
    """
    resource = RequestResource.from_args(args)
    result = dict(changed=False, found=True)

    try:
        observed = RequestObserver(client).is_up_to_date(resource)
    except ObserveError as e:
        if e.kind != ErrorKind.OBJECT_NOT_FOUND:
            raise
        display.v(f"{resource.name}: {e.message}")
        result['found'] = False
        observed = ObserveResult.failed()

    result['synced'] = observed.synced
    result['details'] = observed.details.to_dict() if observed.details is not None else None
    result['response_error'] = (to_native(observed.response_error)
                                if observed.response_error is not None else None)
    return result


class ActionModule(HttpStateActionBase):

    def run(self, tmp=None, task_vars=None):
        if task_vars is None:
            task_vars = dict()

        result = super(ActionModule, self).run(tmp, task_vars)
        del tmp  # tmp no longer has any effect

        _, args = self.validate_argument_spec(observe_argument_spec())
        self._display.vvv(f"Validated args: {args}")

        self.createClient(task_vars)

        try:
            result.update(observe_request(self.client, args))
        except ObserveError as e:
            result['failed'] = True
            result['msg'] = e.message
            result['error_kind'] = e.kind.value

        return result

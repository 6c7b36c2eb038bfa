from . import HttpStateActionBase
from ..module_utils.argspec import compare_argument_spec
from ..module_utils.compare import compare_response_and_desired_state
from ..module_utils.errors import ObserveError
from ..module_utils.resource import HttpDetails, normalise_headers


def compare_state(args: dict) -> dict:
    response = args['response']
    details = HttpDetails(
        int(response.get('status_code') or 0),
        response.get('body') or '',
        normalise_headers(response.get('headers')),
    )
    observed = compare_response_and_desired_state(
        details, None, args['desired'], args.get('compare_type') or '')
    return dict(changed=False, synced=observed.synced)


class ActionModule(HttpStateActionBase):

    def run(self, tmp=None, task_vars=None):
        if task_vars is None:
            task_vars = dict()

        result = super(ActionModule, self).run(tmp, task_vars)
        del tmp  # tmp no longer has any effect

        _, args = self.validate_argument_spec(compare_argument_spec())

        try:
            result.update(compare_state(args))
        except ObserveError as e:
            result['failed'] = True
            result['msg'] = e.message
            result['error_kind'] = e.kind.value

        return result

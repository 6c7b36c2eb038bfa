from ..module_utils.transport import HttpClient
from ansible.errors import AnsibleError
from ansible.plugins.action import ActionBase


class HttpStateActionBase(ActionBase):

  TRANSFERS_FILES = False

  def run(self, tmp=None, task_vars=None):
    if task_vars is None:
      task_vars = dict()

    result = super(HttpStateActionBase, self).run(tmp, task_vars)
    del tmp

    self._display.v("Task args: %s" % self._task.args)
    return result

  def createClient(self, task_vars):
    timeout = task_vars.get('httpstate_timeout', 30)
    try:
      timeout = float(self._templar.template(timeout))
    except (TypeError, ValueError):
      raise AnsibleError(f"httpstate_timeout must be a number, got '{timeout}'")

    headers = self._templar.template(task_vars.get('httpstate_headers', {}))
    if not isinstance(headers, dict):
      raise AnsibleError("httpstate_headers must be a dictionary")

    self.client = HttpClient(timeout, headers)

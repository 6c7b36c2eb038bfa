from ansible.utils.display import Display as OrigDisplay


class Display:
    """Verbosity-aware output, optionally prefixed with the resource name."""

    def __init__(self, prefix: str = None) -> None:
        self.display = OrigDisplay()
        self.prefix = prefix

    def _msg(self, msg) -> str:
        if self.prefix:
            return f"[{self.prefix}] {msg}"
        return f"{msg}"

    def info(self, msg, color=None, stderr=False, screen_only=False,
             log_only=False, newline=True):
        self.display.display(self._msg(msg), color, stderr,
                             screen_only, log_only, newline)

    def warning(self, msg):
        self.display.warning(self._msg(msg))

    def v(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=0)

    def vv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=1)

    def vvv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=2)

    def vvvv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=3)

    def vvvvv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=4)

    def vvvvvv(self, msg, host=None):
        return self.verbose(msg, host=host, caplevel=5)

    def debug(self, msg, host=None):
        self.display.debug(self._msg(msg), host)

    def verbose(self, msg, host=None, caplevel=2):
        self.display.verbose(self._msg(msg), host, caplevel)

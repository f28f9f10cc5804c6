"""The ways a topljavac run can go wrong.

Every one of them ends the same way: a single line on stderr and exit code 0.
"""


class TopljavacError(Exception):
    """Base class; str(e) is the text printed after the 'E: ' marker."""


class MalformedArgFileError(TopljavacError):
    pass


class StagingError(TopljavacError):
    pass


class ConfigurationError(TopljavacError):
    pass


class FailedCommandError(TopljavacError):
    """A stage exited with a nonzero code."""

    def __init__(self, returncode, command):
        super(FailedCommandError, self).__init__('command returned nonzero error code')
        self.returncode = returncode
        self.command = list(command)

    def report(self):
        return f'failed (errorcode {self.returncode}) to run: {" ".join(self.command)}'

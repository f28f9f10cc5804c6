"""
Module support for the topljavac-sanity-checker tool.

The topljavac-sanity-checker tool examines the users
environment to see if it makes sense from the
topljavac point of view. Useful first step in trying to
debug a failure, since topljavac itself always exits 0.
"""

import os
import subprocess as sp
import errno

from .version import topljavac_version, topljavac_date
from .logconfig import loggingConfiguration
from .config import toolPathEnv, javacNameEnv, toplcNameEnv

explain_TOOL_PATH = f"""

Both javac and toplc should either be in your PATH, or else located
where the environment variable {toolPathEnv} indicates.

"""

explain_JAVAC_NAME = f"""

If your java compiler is not called javac, but something else, then
you will need to set the environment variable {javacNameEnv} to the
appropriate string.

"""

explain_TOPLC_NAME = f"""

If your TOPL instrumentor is not called toplc, but something else, then
you will need to set the environment variable {toplcNameEnv} to the
appropriate string.

"""

class Checker:
    def __init__(self):
        path = os.getenv(toolPathEnv)

        if path and path[-1] != os.path.sep:
            path = path + os.path.sep

        self.path = path if path else ''

    def check(self):
        """Performs the environmental sanity check.

        Performs the following checks in order:
        0. Prints out the logging configuartion
        1. Checks that the tool path, if set, exists.
        2. Checks that javac and toplc exist.
        """

        self.checkSelf()

        self.checkLogging()

        if not self.checkToolPath():
            return 1

        return 0 if self.checkTools() else 1

    def checkSelf(self):
        print(f'topljavac version: {topljavac_version}')
        print(f'topljavac released: {topljavac_date}\n')


    def checkLogging(self):
        (destination, level) = loggingConfiguration()
        print(f'Logging output to {destination if destination else "standard error"}.')
        if not level:
            print('Logging level not set, defaulting to WARNING.')
        else:
            print(f'Logging level set to {level}.')


    def checkToolPath(self):
        if self.path and not os.path.isdir(self.path):
            print(f'The tool path {self.path} does not exist or is not a directory.')
            print(explain_TOOL_PATH)
            return False
        return True


    def checkTools(self):
        """Tests that javac and toplc actually exist."""
        javac = f'{self.path}{os.getenv(javacNameEnv) or "javac"}'
        toplc = f'{self.path}{os.getenv(toplcNameEnv) or "toplc"}'

        (javacOk, javacVersion) = self.checkExecutable(javac, '-version')
        # toplc has no version switch that we know of; -h is enough to see it run
        (toplcOk, _) = self.checkExecutable(toplc, '-h')

        if not javacOk:
            print(f'The java compiler {javac} was not found or not executable.\n{javacVersion}\n')
            print(explain_JAVAC_NAME)
        else:
            print(f'The java compiler {javac} is:\n\n\t{extractLine(javacVersion, 0)}\n')

        if not toplcOk:
            print(f'The instrumentor {toplc} was not found or not executable.\n')
            print(explain_TOPLC_NAME)
        else:
            print(f'The instrumentor {toplc} was found.\n')

        if not javacOk or not toplcOk:
            print(explain_TOOL_PATH)

        return javacOk and toplcOk


    def checkExecutable(self, exe, version_switch='-version'):
        """Checks that an executable exists, and is executable."""
        cmd = [exe, version_switch]
        try:
            tool = sp.Popen(cmd, stdout=sp.PIPE, stderr=sp.PIPE)
            output = tool.communicate()
            toolOutput = f'{output[0].decode()}{output[1].decode()}'
        except OSError as e:
            if e.errno == errno.EPERM or e.errno == errno.EACCES:
                return (False, f'{exe} not executable')
            if e.errno == errno.ENOENT:
                return (False, f'{exe} not found')
            return (False, f'{exe} not sure why, errno is {e.errno}')
        else:
            return (True, toolOutput)


def extractLine(version, n):
    if not version:
        return version
    lines = version.strip().split('\n')
    line = lines[n] if n < len(lines) else lines[-1]
    return line.strip() if line else line

"""Where the two external tools live.

Nothing here is required: with no environment set the tools are
plain 'javac' and 'toplc' found on the PATH.
"""
import os

from .errors import ConfigurationError
from .logconfig import logConfig

_logger = logConfig(__name__)

# Environmental variable for a directory holding both javac and toplc
toolPathEnv = 'TOPLJAVAC_TOOL_PATH'

javacNameEnv = 'TOPLJAVAC_JAVAC_NAME'
toplcNameEnv = 'TOPLJAVAC_TOPLC_NAME'

class ToolConfig(object):
    def __init__(self, prefixPath=None, javacName=None, toplcName=None):
        self.javacName = javacName or 'javac'
        self.toplcName = toplcName or 'toplc'

        # Used as prefix path for both tools
        if prefixPath:
            self.prefixPath = prefixPath
            # Ensure prefixPath has trailing slash
            if self.prefixPath[-1] != os.path.sep:
                self.prefixPath = self.prefixPath + os.path.sep
            if not os.path.exists(self.prefixPath):
                errorMsg = f'Path to tools "{self.prefixPath}" does not exist'
                _logger.debug(errorMsg)
                raise ConfigurationError(errorMsg)
        else:
            self.prefixPath = ''

    def getCompiler(self):
        return [f'{self.prefixPath}{self.javacName}']

    def getInstrumentor(self):
        return [f'{self.prefixPath}{self.toplcName}']


def getToolConfig():
    pathPrefix = os.getenv(toolPathEnv) # Optional
    javacName = os.getenv(javacNameEnv)
    toplcName = os.getenv(toplcNameEnv)

    if pathPrefix:
        _logger.debug('topljavac tool path prefix "%s"', pathPrefix)

    return ToolConfig(pathPrefix, javacName, toplcName)

import collections
import logging
import os
import tempfile

# Internal logger
_logger = logging.getLogger(__name__)

ClassifiedArgs = collections.namedtuple('ClassifiedArgs', ['plainArgs', 'monitorSources', 'propertySpecs', 'outputDir'])

monitorSourceSuffix = '.java.topl'
propertySpecSuffix = '.topl'

# This class splits a javac argument list into the part javac should
# see and the part meant for toplc.  It works in two sweeps.
#
# The first sweep looks only at suffixes.  Suffixes are tried in
# order and the first match wins, so '.java.topl' has to come before
# '.topl'.  Anything unmatched is kept for the second sweep.
#
# The second sweep handles flags.  Each flag has an arity, and that
# many tokens are removed from the stream and handed to its callback
# along with the flag.  Unrecognized tokens are plain javac arguments.
class ArgumentListFilter(object):
    def __init__(self, inputList, exactMatches={}, suffixMatches=()):
        defaultArgExactMatches = {
            '-d' : (1, ArgumentListFilter.outputDirCallback),
        }

        defaultArgSuffixes = [
            (monitorSourceSuffix, ArgumentListFilter.monitorSourceCallback),
            (propertySpecSuffix, ArgumentListFilter.propertySpecCallback),
        ]

        self.inputList = inputList
        self.plainArgs = []
        self.monitorSources = []
        self.propertySpecs = []
        self.outputDir = None

        argExactMatches = dict(defaultArgExactMatches)
        argExactMatches.update(exactMatches)
        argSuffixes = list(suffixMatches) + defaultArgSuffixes

        # sweep one: suffixes
        intermediate = []
        for currentItem in inputList:
            for suffix, handler in argSuffixes:
                if currentItem.endswith(suffix):
                    handler(self, currentItem)
                    break
            else:
                intermediate.append(currentItem)

        # sweep two: flags
        self._inputArgs = collections.deque(intermediate)
        while self._inputArgs:
            currentItem = self._inputArgs.popleft()
            _logger.debug('Trying to match item %s', currentItem)
            if currentItem in argExactMatches:
                (arity, handler) = argExactMatches[currentItem]
                flagArgs = self._shiftArgs(arity)
                if flagArgs is None:
                    _logger.debug('Dropping "%s": expected %d argument(s)', currentItem, arity)
                    continue
                handler(self, currentItem, *flagArgs)
            else:
                self.plainArgs.append(currentItem)

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(self.dump())

    def _shiftArgs(self, nargs):
        if len(self._inputArgs) < nargs:
            self._inputArgs.clear()
            return None
        ret = []
        while nargs > 0:
            a = self._inputArgs.popleft()
            ret.append(a)
            nargs = nargs - 1
        return ret

    def monitorSourceCallback(self, srcFile):
        _logger.debug('monitorSourceCallback: %s', srcFile)
        self.monitorSources.append(srcFile[:-len(propertySpecSuffix)])

    def propertySpecCallback(self, specFile):
        _logger.debug('propertySpecCallback: %s', specFile)
        self.propertySpecs.append(specFile)

    def outputDirCallback(self, flag, dirname):
        _logger.debug('outputDirCallback: %s %s', flag, dirname)
        self.outputDir = dirname

    def getClassifiedArgs(self):
        return ClassifiedArgs(list(self.plainArgs), list(self.monitorSources), list(self.propertySpecs), self.outputDir)

    # our partitioning of the args, for the debug log
    def dump(self):
        return (f'plainArgs: {self.plainArgs}\nmonitorSources: {self.monitorSources}\n'
                f'propertySpecs: {self.propertySpecs}\noutputDir: {self.outputDir}')


def classifyArguments(args):
    return ArgumentListFilter(args).getClassifiedArgs()


def resolveOutputDirectory(outputDir):
    """Returns a directory javac can write into.

    A declared directory is created along with any missing parents;
    without one we make a fresh temporary directory.
    """
    if outputDir is None:
        outputDir = tempfile.mkdtemp(prefix='topljavac-out')
        _logger.debug('No -d given, using %s', outputDir)
    else:
        os.makedirs(outputDir, exist_ok=True)
    return outputDir

"""The javac then toplc pipeline.

Each stage takes a StagingState and returns a new one; nothing is
mutated in place, so each transition can be driven on its own.

  classifyArgs       Init               -> ArgsClassified
  runCompiler        ArgsClassified     -> CompilerRan
  stageOutput        CompilerRan        -> Staged
  runInstrumentor    Staged             -> InstrumentorRan
  replayDiagnostics  InstrumentorRan    -> DiagnosticsFlushed
  cleanUp            DiagnosticsFlushed -> Done

Any stage may raise; that is the Failed state, reported by the caller.
"""
import collections
import os
import shutil
import tempfile

from .argfile import expandArgFiles
from .arglistfilter import classifyArguments, resolveOutputDirectory
from .config import getToolConfig
from .diagnostics import flushDiagnostics, javacErrorsFileName
from .errors import FailedCommandError, StagingError
from .logconfig import logConfig
from .popenwrapper import runStage, FileSink, INHERIT, MERGE

# Internal logger
_logger = logConfig(__name__)

class Phase:
    INIT = 'Init'
    ARGS_CLASSIFIED = 'ArgsClassified'
    COMPILER_RAN = 'CompilerRan'
    STAGED = 'Staged'
    INSTRUMENTOR_RAN = 'InstrumentorRan'
    DIAGNOSTICS_FLUSHED = 'DiagnosticsFlushed'
    DONE = 'Done'


StagingState = collections.namedtuple('StagingState', [
    'phase',
    'tools',
    'rawArgs',
    'args',
    'compilerOutputDir',
    'instrumentorInputDir',
    'compilerErrFile',
    'lastResult',
])

def initialState(argv, tools=None):
    if tools is None:
        tools = getToolConfig()
    return StagingState(Phase.INIT, tools, list(argv), None, None, None, None, None)


def _expect(state, phase):
    if state.phase != phase:
        raise ValueError(f'Stage expects phase {phase}, state is in {state.phase}')


def classifyArgs(state):
    _expect(state, Phase.INIT)
    args = classifyArguments(expandArgFiles(state.rawArgs))
    _logger.debug('classified: %s', args)
    outDir = resolveOutputDirectory(args.outputDir)

    (fd, errFile) = tempfile.mkstemp(prefix='topljavac', suffix='stderr')
    os.close(fd)
    # placeholder; removed again just before the move in stageOutput()
    inDir = tempfile.mkdtemp(prefix='topljavac-in')

    return state._replace(phase=Phase.ARGS_CLASSIFIED,
                          args=args,
                          compilerOutputDir=outDir,
                          instrumentorInputDir=inDir,
                          compilerErrFile=errFile)


def runCompiler(state):
    _expect(state, Phase.ARGS_CLASSIFIED)
    cmd = state.tools.getCompiler()
    cmd.extend(state.args.plainArgs)
    cmd.extend(['-d', state.compilerOutputDir])
    # Both streams into one file; anything else risks a child blocked on a full pipe.
    result = runStage(cmd, stdout=FileSink(state.compilerErrFile), stderr=MERGE)
    if result.exitCode != 0:
        raise FailedCommandError(result.exitCode, result.command)
    print(f'TOPL: javac finished successfully. Output in {state.compilerOutputDir}', flush=True)
    return state._replace(phase=Phase.COMPILER_RAN, lastResult=result)


def stageOutput(state):
    _expect(state, Phase.COMPILER_RAN)
    inDir = state.instrumentorInputDir
    outDir = state.compilerOutputDir
    try:
        os.rmdir(inDir)
        shutil.move(outDir, inDir)
    except OSError as e:
        raise StagingError(f'could not move {outDir} to {inDir}: {e}')
    _logger.debug('staged %s as %s', outDir, inDir)
    return state._replace(phase=Phase.STAGED)


def runInstrumentor(state):
    _expect(state, Phase.STAGED)
    cmd = state.tools.getInstrumentor()
    for src in state.args.monitorSources:
        cmd.extend(['-e', src])
    cmd.extend(['-s', '-i', state.instrumentorInputDir, '-o', state.compilerOutputDir])
    cmd.extend(state.args.propertySpecs)
    # toplc talks straight to our user
    result = runStage(cmd, stdout=INHERIT, stderr=INHERIT)
    if result.exitCode != 0:
        raise FailedCommandError(result.exitCode, result.command)
    print('TOPL: toplc finished successfully.', flush=True)
    return state._replace(phase=Phase.INSTRUMENTOR_RAN, lastResult=result)


def replayDiagnostics(state, stream=None):
    _expect(state, Phase.INSTRUMENTOR_RAN)
    flushDiagnostics([javacErrorsFileName, state.compilerErrFile], stream)
    return state._replace(phase=Phase.DIAGNOSTICS_FLUSHED)


def cleanUp(state):
    """Removes our scratch files; the output directory is the caller's."""
    _expect(state, Phase.DIAGNOSTICS_FLUSHED)
    try:
        os.remove(state.compilerErrFile)
    except OSError as e:
        _logger.info('Could not remove %s: %s', state.compilerErrFile, e)
    shutil.rmtree(state.instrumentorInputDir, ignore_errors=True)
    return state._replace(phase=Phase.DONE)


stages = [classifyArgs, runCompiler, stageOutput, runInstrumentor, replayDiagnostics, cleanUp]

def runPipeline(argv, tools=None):
    state = initialState(argv, tools)
    for s in stages:
        state = s(state)
        _logger.info('topljavac reached %s', state.phase)
    return state

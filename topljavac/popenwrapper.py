import collections
import os
import subprocess
import pprint
import logging

# This module provides a wrapper for subprocess.Popen that can be used
# for debugging, and runStage, the only way the pipeline launches a tool.
#
# Each of a stage's two output streams gets a policy. No policy is ever
# a pipe: a child writing to two pipes nobody reads blocks forever once
# either buffer fills. Either the streams share one sink (MERGE, or the
# same FileSink twice) or the operating system forwards them (INHERIT).

# Internal logger
_logger = logging.getLogger(__name__)

DISCARD = 'discard'
INHERIT = 'inherit'
# stderr only: go wherever stdout goes
MERGE = 'merge'

FileSink = collections.namedtuple('FileSink', ['path'])

SubprocessResult = collections.namedtuple('SubprocessResult', ['exitCode', 'capturedDiagnosticsPath', 'command'])

def Popen(*pargs, **kwargs):
    _logger.debug("topljavac Executing:\n" + pprint.pformat(pargs[0]) + "\nin: " +  os.getcwd())
    try:
        return subprocess.Popen(*pargs, **kwargs)
    except OSError:
        _logger.debug("topljavac Failed to execute: %s", pprint.pformat(pargs[0]))
        raise


def _checkPolicy(policy, stream):
    if policy in (DISCARD, INHERIT) or isinstance(policy, FileSink):
        return
    if policy == MERGE and stream == 'stderr':
        return
    raise ValueError(f'Invalid {stream} policy: {policy!r}')


def runStage(cmd, stdout=INHERIT, stderr=INHERIT):
    """Runs cmd to completion and returns a SubprocessResult.

    The exit code is reported, never judged; deciding whether a nonzero
    code is fatal is up to the caller.
    """
    _checkPolicy(stdout, 'stdout')
    _checkPolicy(stderr, 'stderr')

    # same file twice is the same sink
    if isinstance(stdout, FileSink) and stderr == stdout:
        stderr = MERGE

    opened = []
    try:
        outArg = _resolve(stdout, opened)
        if stderr == MERGE:
            errArg = subprocess.STDOUT
        else:
            errArg = _resolve(stderr, opened)
        proc = Popen(cmd, stdout=outArg, stderr=errArg)
        rc = proc.wait()
    finally:
        for f in opened:
            f.close()

    captured = None
    if isinstance(stdout, FileSink):
        captured = stdout.path
    elif isinstance(stderr, FileSink):
        captured = stderr.path

    _logger.debug('runStage rc = %d', rc)
    return SubprocessResult(rc, captured, list(cmd))


def _resolve(policy, opened):
    if policy == INHERIT:
        return None
    if policy == DISCARD:
        return subprocess.DEVNULL
    f = open(policy.path, 'wb')
    opened.append(f)
    return f

#!/usr/bin/env python
"""This is a wrapper around the real javac.

It first invokes javac to compile the classes,
saving everything javac says.  Then it moves the
classes aside and invokes toplc to instrument them
back into the original output directory, using the
.topl property files found on the command line.
Finally it replays javac's diagnostics on stderr.

Files ending in .java.topl are wrappers that set up
the monitor and call the real main; they are
stripped of .topl and handed to toplc with -e, since
they can only be compiled once the monitor exists.

The exit code is always 0.  If we return an error
code the caller (Infer) falls back to plain javac
and nobody notices that instrumentation failed.
Failures are reported on stderr, on a line starting
with 'E: ' or 'failed (errorcode'.
"""

import sys

from .errors import TopljavacError, FailedCommandError
from .logconfig import logConfig, informUser
from .pipeline import runPipeline

_logger = logConfig(__name__)

def bail(message):
    informUser(f'E: {message}\n')


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    _logger.info('Entering topljavac [%s]', ' '.join(argv))
    try:
        runPipeline(argv)
    except FailedCommandError as e:
        informUser(f'{e.report()}\n')
    except TopljavacError as e:
        bail(str(e))
    except Exception as e:
        _logger.debug('topljavac: exception case', exc_info=True)
        bail(f'Exception ({e}).')
    return 0


if __name__ == '__main__':
    sys.exit(main())

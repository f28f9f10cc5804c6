"""Replays the diagnostics of both stages on our own stderr.

toplc writes whatever compiler-stage diagnostics it wants surfaced to
javacErrorsFileName in the directory it was run from.  This is a
contract with toplc, not something we can discover.
"""
import logging
import sys

# Internal logger
_logger = logging.getLogger(__name__)

javacErrorsFileName = 'javac.err.topl'

def flushDiagnostics(sources, stream=None):
    """Copies each line of each file in sources to stream, in order.

    stream is a binary stream, sys.stderr.buffer by default; lines are
    copied byte for byte and a missing final newline is supplied.
    An unreadable source raises OSError.
    """
    if stream is None:
        # whatever was already written as text goes first
        sys.stderr.flush()
        stream = sys.stderr.buffer
    for source in sources:
        _logger.debug('flushing diagnostics from %s', source)
        with open(source, 'rb') as f:
            for line in f:
                if not line.endswith(b'\n'):
                    line = line + b'\n'
                stream.write(line)
    stream.flush()

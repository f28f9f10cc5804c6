"""Expansion of javac style @argfiles.

There are no proper docs for the format; this handles what Infer
produces: one argument per line, optionally wrapped in a single pair
of quotes.
"""
import logging

from .errors import MalformedArgFileError

# Internal logger
_logger = logging.getLogger(__name__)

_quotes = ('\'', '"')

def expandArgFiles(args):
    """Returns args with every @file replaced by the lines of file.

    Only one level: a line starting with '@' is kept as is.
    """
    expanded = []
    for a in args:
        if a.startswith('@'):
            expanded.extend(readArgFile(a[1:]))
        else:
            expanded.append(a)
    return expanded


def readArgFile(fileName):
    # universal newlines leave only '\n'; other control characters stay in the token
    with open(fileName) as f:
        content = f.read()
    lines = []
    if content:
        if content.endswith('\n'):
            content = content[:-1]
        lines = content.split('\n')
    _logger.debug('argfile %s holds %d lines', fileName, len(lines))
    args = []
    for line in lines:
        if not line:
            raise MalformedArgFileError('empty line in argfile')
        args.append(unquote(line))
    return args


def unquote(line):
    if len(line) >= 2 and line[0] in _quotes and line[-1] == line[0]:
        return line[1:-1]
    return line

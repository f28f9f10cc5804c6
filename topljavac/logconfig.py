"""
  Logging for topljavac.

  Configured once, on the root logger, from two environment variables;
  the per-module loggers inherit it.  Log output is for whoever debugs
  topljavac.  The single line a caller scans stderr for goes through
  informUser, never through logging.
"""
import logging
import os
import sys

levelEnv = 'TOPLJAVAC_OUTPUT_LEVEL'

destinationEnv = 'TOPLJAVAC_OUTPUT_FILE'

_levels = {
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
}

_plainFormat = '%(levelname)s:%(message)s'
_debugFormat = '%(levelname)s::%(module)s.%(funcName)s() at %(filename)s:%(lineno)d ::%(message)s'


def requestedLevel():
    """The level named in the environment, or None if unset or unknown."""
    name = os.getenv(levelEnv)
    if not name:
        return None
    return _levels.get(name.upper())


def logConfig(name):
    destination = os.getenv(destinationEnv)
    if destination:
        logging.basicConfig(filename=destination, level=logging.WARNING, format=_plainFormat)
    else:
        logging.basicConfig(level=logging.WARNING, format=_plainFormat)

    logger = logging.getLogger(name)

    level = requestedLevel()
    if level is not None:
        logger.setLevel(level)
    elif os.getenv(levelEnv):
        # reported and ignored; exiting nonzero would make the caller fall back to javac
        logging.error('"%s" is not a valid value for %s. Valid values are %s',
                      os.getenv(levelEnv), levelEnv, sorted(_levels))

    if logger.getEffectiveLevel() == logging.DEBUG:
        formatter = logging.Formatter(_debugFormat)
        for h in logging.getLogger().handlers:
            h.setFormatter(formatter)

    return logger


def loggingConfiguration():
    return (os.getenv(destinationEnv), os.getenv(levelEnv))


def informUser(msg):
    sys.stderr.write(msg)

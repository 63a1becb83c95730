"""
Logging utility for webmercator_dist

Log records go to stderr; stdout carries only the scan report.
"""

__all__ = ['LOGGER', 'warn_once']

import logging
import sys

LOGGER = logging.getLogger('webmercator_dist')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler(sys.stderr)
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    """
    Logs a warning the first time it is seen in this process.

    A scan over several increments (or repeated CLI invocations within one
    interpreter) reports each condition, such as reaching the pole, only once.
    """
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)

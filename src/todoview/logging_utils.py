"""Logging setup for todoview."""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEBUG_VERBOSITY = 2


def setup_logging(verbosity: int) -> None:
    """Send debug logs to stderr at the highest verbosity; stay silent otherwise."""
    if verbosity >= DEBUG_VERBOSITY:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)

"""Logging setup for the sampler CLI.

Diagnostics always go to STDERR (or a given stream) so that STDOUT carries
nothing but sample bytes when the sampler is used inside a pipe. The default
level is WARNING: a filter stays silent unless something is wrong.
"""
import logging
import sys
from typing import Optional, TextIO

from stream_sampler.errors import InvalidArgument

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
DEFAULT_LEVEL = "WARNING"


def resolve_level(debug: bool = False, level: str = DEFAULT_LEVEL) -> int:
    """Numeric level for the CLI flags; --debug wins over --log-level."""
    if debug:
        return logging.DEBUG
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise InvalidArgument(f"unknown log level {level!r}")
    return value


def configure_logging(debug: bool = False, level: str = DEFAULT_LEVEL, stream: Optional[TextIO] = None) -> int:
    """
    Install one handler on the root logger (unless one exists) and set its level.
    Returns the numeric level applied.
    """
    lvl = resolve_level(debug=debug, level=level)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(lvl)
    return lvl

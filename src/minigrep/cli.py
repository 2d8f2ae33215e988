"""
Command line entry point for minigrep.

Usage:
  minigrep <query> <filename>                      # Case-sensitive search
  CASE_INSENSITIVE=1 minigrep <query> <filename>   # Ignore letter case
  MINIGREP_LOG_LEVEL=DEBUG minigrep <query> <file> # Log to stderr

This is the only place that prints diagnostics and picks the exit code.
"""

import os
import sys
import logging
from typing import List, Mapping, Optional

from .config import ConfigurationError, resolve_config
from .tools import SearchError, run


LOG_LEVEL_ENV = 'MINIGREP_LOG_LEVEL'


def configure_logging(environ: Mapping[str, str]) -> None:
    """Send log records to stderr at the level named in MINIGREP_LOG_LEVEL."""
    level_name = environ.get(LOG_LEVEL_ENV, 'WARNING').upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run minigrep.

    Args:
        argv: Argument list, program name first. Defaults to sys.argv.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        0 on success (including no matches), 1 on any error
    """
    if argv is None:
        argv = sys.argv
    if environ is None:
        environ = os.environ

    configure_logging(environ)

    try:
        config = resolve_config(argv, environ)
    except ConfigurationError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        run(config)
    except SearchError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


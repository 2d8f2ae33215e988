"""
Configuration management package for minigrep.

This package turns process arguments and the environment into a validated
SearchConfig.
"""

from .parser import (
    ConfigParser,
    ConfigurationError,
    MissingQueryError,
    MissingFilenameError,
    CASE_INSENSITIVE_ENV,
    resolve_config
)

__all__ = [
    'ConfigParser',
    'ConfigurationError',
    'MissingQueryError',
    'MissingFilenameError',
    'CASE_INSENSITIVE_ENV',
    'resolve_config'
]

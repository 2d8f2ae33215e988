"""
Argument and environment resolver for minigrep.

This module turns an ordered sequence of argument strings and an environment
mapping into a validated SearchConfig. It reads the environment exactly once
per call and never touches the filesystem, so it can be driven from tests with
plain lists and dictionaries.
"""

import os
import sys
import logging
from typing import Iterable, Mapping, Optional

from .. import MinigrepError
from ..models.config import SearchConfig


logger = logging.getLogger(__name__)

CASE_INSENSITIVE_ENV = 'CASE_INSENSITIVE'


class ConfigurationError(MinigrepError):
    """Raised when the command line cannot be turned into a configuration."""
    pass


class MissingQueryError(ConfigurationError):
    """Raised when no query string follows the program name."""

    def __init__(self, message: str = "Didn't get a query string"):
        super().__init__(message)


class MissingFilenameError(ConfigurationError):
    """Raised when no file name follows the query."""

    def __init__(self, message: str = "Didn't get a file name"):
        super().__init__(message)


class ConfigParser:
    """
    Resolver for command line arguments and environment flags.

    The first argument is the program name and is discarded. The next two are
    the query and the file name, in that order. Anything after them is ignored.
    Case sensitivity is switched off when CASE_INSENSITIVE is present in the
    environment, whatever its value.
    """

    def __init__(self, env_var: str = CASE_INSENSITIVE_ENV):
        """
        Initialize the resolver.

        Args:
            env_var: Name of the variable whose presence disables case sensitivity
        """
        self.env_var = env_var
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def resolve(self, args: Iterable[str], env: Optional[Mapping[str, str]] = None) -> SearchConfig:
        """
        Build a SearchConfig from arguments and environment.

        Args:
            args: Ordered argument strings, program name first
            env: Environment mapping. Defaults to os.environ.

        Returns:
            Validated, frozen SearchConfig

        Raises:
            MissingQueryError: If there is no query argument
            MissingFilenameError: If there is no file name argument
        """
        arguments = iter(args)
        next(arguments, None)

        query = next(arguments, None)
        if not query:
            raise MissingQueryError()

        source_path = next(arguments, None)
        if not source_path:
            raise MissingFilenameError()

        if env is None:
            env = os.environ
        case_sensitive = self.env_var not in env

        config = SearchConfig(
            query=query,
            source_path=source_path,
            case_sensitive=case_sensitive
        )
        self.logger.debug(f"Resolved configuration: {config}")
        return config


def resolve_config(args: Optional[Iterable[str]] = None,
                   env: Optional[Mapping[str, str]] = None) -> SearchConfig:
    """
    Convenience function to resolve a configuration.

    Args:
        args: Ordered argument strings. Defaults to sys.argv.
        env: Environment mapping. Defaults to os.environ.

    Returns:
        Validated SearchConfig

    Raises:
        ConfigurationError: If required arguments are missing
    """
    if args is None:
        args = sys.argv
    parser = ConfigParser()
    return parser.resolve(args, env)

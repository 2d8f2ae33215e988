"""
minigrep - Core Package

A minimal command-line utility that prints every line of a file
containing a query string, optionally ignoring letter case.
"""

__version__ = "0.1.0"
__author__ = "minigrep Team"


class MinigrepError(Exception):
    """Base class for every error minigrep reports to the user."""
    pass

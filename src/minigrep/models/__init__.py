"""
Data models for minigrep.

This module contains the configuration structure that drives a search run.
"""

from .config import SearchConfig

__all__ = ['SearchConfig']

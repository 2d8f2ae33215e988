"""
Line search runner for minigrep.

This module loads a file fully into memory, splits it into lines and keeps the
lines that contain the query. Two scanners are provided: an exact one and one
that lowercases both sides before comparing. The runner picks one based on the
configuration and writes matches to standard output in file order.
"""

import sys
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Union

from .. import MinigrepError
from ..models.config import SearchConfig


logger = logging.getLogger(__name__)


class SearchError(MinigrepError):
    """Raised when the source file cannot be loaded."""
    pass


class SourceNotFoundError(SearchError):
    """Raised when the source file does not exist or cannot be opened."""
    pass


class InvalidEncodingError(SearchError):
    """Raised when the source file is not valid UTF-8 text."""
    pass


def read_contents(path: Union[str, Path]) -> str:
    """
    Read a whole file as UTF-8 text.

    Line terminators are left untouched so that iter_lines can split them
    the same way on every platform.

    Args:
        path: File to read

    Returns:
        File contents

    Raises:
        SourceNotFoundError: If the file cannot be opened or read
        InvalidEncodingError: If the bytes are not valid UTF-8
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InvalidEncodingError("stream did not contain valid UTF-8") from e
    except OSError as e:
        reason = e.strerror or str(e)
        raise SourceNotFoundError(f"{reason}: '{path}'") from e


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yield the lines of contents without their terminators.

    Lines end at '\\n' or '\\r\\n'. A '\\r' that is not followed by '\\n' is
    part of the line. A terminator at the very end does not produce an
    extra empty line.
    """
    if not contents:
        return

    lines = contents.split('\n')
    last = lines.pop()

    for line in lines:
        if line.endswith('\r'):
            line = line[:-1]
        yield line

    if last:
        yield last


def _scan_lines(query: str, lines: Iterable[str], ignore_case: bool) -> List[str]:
    if ignore_case:
        query = query.lower()
        return [line for line in lines if query in line.lower()]
    return [line for line in lines if query in line]


def search(query: str, contents: str) -> List[str]:
    """Return the lines of contents that contain query, in order."""
    return _scan_lines(query, iter_lines(contents), ignore_case=False)


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Return the lines of contents that contain query, ignoring letter case.

    Only str.lower() is applied, so accents and width variants still have
    to match exactly. Returned lines keep their original text.
    """
    return _scan_lines(query, iter_lines(contents), ignore_case=True)


class LineSearcher:
    """
    Runs one search described by a SearchConfig.

    Loads the source file, dispatches to the exact or the case-insensitive
    scanner and writes every match followed by a newline.
    """

    def __init__(self, config: SearchConfig):
        """
        Initialize the searcher.

        Args:
            config: Validated search configuration
        """
        self.config = config
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._stats = {
            'lines_scanned': 0,
            'lines_matched': 0
        }

    def _count_lines(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            self._stats['lines_scanned'] += 1
            yield line

    def search_contents(self, contents: str) -> List[str]:
        """
        Scan already loaded contents with the configured scanner.

        Args:
            contents: Text to scan

        Returns:
            Matching lines in original order
        """
        lines = self._count_lines(iter_lines(contents))
        matches = _scan_lines(
            self.config.query,
            lines,
            ignore_case=not self.config.case_sensitive
        )
        self._stats['lines_matched'] += len(matches)
        return matches

    def find_matches(self) -> List[str]:
        """
        Load the source file and return its matching lines.

        Raises:
            SearchError: If the file cannot be read as text
        """
        source = self.config.get_source_path()
        self.logger.debug(f"Reading {source}")
        contents = read_contents(source)
        matches = self.search_contents(contents)
        self.logger.info(
            f"Matched {len(matches)} of {self._stats['lines_scanned']} lines in {source}"
        )
        return matches

    def run(self, stream: Optional[TextIO] = None) -> None:
        """
        Write every matching line to stream.

        Nothing is written if the file cannot be loaded.

        Args:
            stream: Output stream. Defaults to sys.stdout.
        """
        matches = self.find_matches()
        if stream is None:
            stream = sys.stdout
        for line in matches:
            print(line, file=stream)

    def get_stats(self) -> Dict[str, int]:
        """Get scan statistics."""
        return self._stats.copy()


def run(config: SearchConfig, stream: Optional[TextIO] = None) -> None:
    """
    Convenience function to run a search and print the matches.

    Args:
        config: Validated search configuration
        stream: Output stream. Defaults to sys.stdout.

    Raises:
        SearchError: If the source file cannot be read as text
    """
    LineSearcher(config).run(stream)

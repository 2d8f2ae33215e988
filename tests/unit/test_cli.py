"""
Unit tests for the command line entry point.

Covers exit codes, diagnostics on stderr and output on stdout for the
success and failure paths.
"""

import logging
from pathlib import Path
from unittest.mock import patch
import pytest

from minigrep.cli import main, configure_logging


POEM = "I'm nobody! Who are you?\nAre you nobody, too?\nHow public, like a frog\n"


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding='utf-8')
    return path


class TestMain:
    """Test cases for main()."""

    def test_success(self, poem_file, capsys):
        """Test a successful search prints matches and returns 0."""
        exit_code = main(["minigrep", "nobody", str(poem_file)], {})

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == "I'm nobody! Who are you?\nAre you nobody, too?\n"
        assert captured.err == ""

    def test_case_insensitive_env(self, poem_file, capsys):
        """Test that CASE_INSENSITIVE switches the scanner."""
        exit_code = main(["minigrep", "NOBODY", str(poem_file)], {'CASE_INSENSITIVE': '1'})

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == "I'm nobody! Who are you?\nAre you nobody, too?\n"

    def test_case_sensitive_without_env(self, poem_file, capsys):
        """Test that an upper case query finds nothing by default."""
        exit_code = main(["minigrep", "NOBODY", str(poem_file)], {})

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == ""

    def test_zero_matches_is_success(self, poem_file, capsys):
        """Test that no matches still exits with 0."""
        exit_code = main(["minigrep", "ductivity", str(poem_file)], {})

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == ""
        assert captured.err == ""

    def test_missing_query(self, capsys):
        """Test that a bare program name reports a missing query."""
        with patch('minigrep.cli.run') as mock_run:
            exit_code = main(["minigrep"], {})

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert captured.err == "Problem parsing arguments: Didn't get a query string\n"
        mock_run.assert_not_called()

    def test_missing_file_name(self, capsys):
        """Test that a query alone reports a missing file name."""
        with patch('minigrep.cli.run') as mock_run:
            exit_code = main(["minigrep", "nobody"], {})

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.err == "Problem parsing arguments: Didn't get a file name\n"
        mock_run.assert_not_called()

    def test_file_not_found(self, tmp_path, capsys):
        """Test that a missing file reports an application error."""
        missing = tmp_path / "file_not_found.txt"
        exit_code = main(["minigrep", "nobody", str(missing)], {})

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert captured.err.startswith("Application error: No such file or directory")
        assert "file_not_found.txt" in captured.err

    def test_whitespace_file_name(self, tmp_path, capsys, monkeypatch):
        """Test that a blank file name is looked up and reported as missing."""
        monkeypatch.chdir(tmp_path)
        exit_code = main(["minigrep", "nobody", "   "], {})

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert captured.err == "Application error: No such file or directory: '   '\n"

    def test_invalid_encoding(self, tmp_path, capsys):
        """Test that an undecodable file reports an application error."""
        invalid = tmp_path / "invalid.txt"
        invalid.write_bytes(b"nobody\n\xff\xfe\n")

        exit_code = main(["minigrep", "nobody", str(invalid)], {})

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert captured.err == "Application error: stream did not contain valid UTF-8\n"

    def test_defaults_to_sys_argv(self, poem_file, capsys):
        """Test that sys.argv and os.environ are used when nothing is passed."""
        with patch('sys.argv', ["minigrep", "frog", str(poem_file)]), \
                patch.dict('os.environ', {}, clear=True):
            exit_code = main()

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == "How public, like a frog\n"


class TestConfigureLogging:
    """Test cases for logging setup."""

    def test_level_from_env(self):
        """Test that the named level is passed to basicConfig."""
        with patch('logging.basicConfig') as mock_config:
            configure_logging({'MINIGREP_LOG_LEVEL': 'debug'})

        assert mock_config.call_args.kwargs['level'] == logging.DEBUG

    def test_default_level(self):
        """Test that WARNING is used when the variable is absent."""
        with patch('logging.basicConfig') as mock_config:
            configure_logging({})

        assert mock_config.call_args.kwargs['level'] == logging.WARNING

    def test_unknown_level_falls_back(self):
        """Test that an unknown level name falls back to WARNING."""
        with patch('logging.basicConfig') as mock_config:
            configure_logging({'MINIGREP_LOG_LEVEL': 'chatty'})

        assert mock_config.call_args.kwargs['level'] == logging.WARNING

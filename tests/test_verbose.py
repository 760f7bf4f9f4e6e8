"""Tests for verbose logging."""

from pathlib import Path
import tempfile
import logging

from testy.verbose import setup_logger


def test_verbose_logger_creates_debug_log():
    """Logger should create the debug file when one is given."""
    with tempfile.TemporaryDirectory() as tmpdir:
        debug_file = Path(tmpdir) / "logs" / "debug.log"
        logger = setup_logger(debug_file=debug_file, verbose=False)

        assert not logger.disabled
        assert logger.level == logging.DEBUG
        assert debug_file.exists()


def test_verbose_logger_writes_to_file():
    """Logger should write messages to debug file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        debug_file = Path(tmpdir) / "debug.log"
        logger = setup_logger(debug_file=debug_file, verbose=False)

        logger.debug("test message")

        content = debug_file.read_text()
        assert "test message" in content
        assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler():
    """Logger should have stderr handler when verbose=True."""
    with tempfile.TemporaryDirectory() as tmpdir:
        debug_file = Path(tmpdir) / "debug.log"
        logger = setup_logger(debug_file=debug_file, verbose=True)

        assert len(logger.handlers) == 2
        handler_types = [type(h).__name__ for h in logger.handlers]
        assert "StreamHandler" in handler_types
        assert "FileHandler" in handler_types


def test_no_debug_file_and_not_verbose_has_no_handlers():
    logger = setup_logger(debug_file=None, verbose=False)
    assert logger.handlers == []
    assert logger.name == "testy"


def test_setup_twice_replaces_handlers(tmp_path):
    setup_logger(tmp_path / "a.log", verbose=True, logger_name="testy.replace")
    logger = setup_logger(tmp_path / "b.log", verbose=False, logger_name="testy.replace")
    assert len(logger.handlers) == 1
    logger.debug("only b")
    assert "only b" in (tmp_path / "b.log").read_text()
    assert "only b" not in (tmp_path / "a.log").read_text()

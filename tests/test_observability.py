"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from gotth.core.observability.logging_config import ClickHandler, _parse_level, setup_logging


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("INFO") == logging.INFO

    def test_fallback(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("nonsense") == logging.WARNING


class TestSetupLogging:
    def test_console_level(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "gotth.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.getLogger("gotth.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text()
        for h in list(root.handlers):
            h.close()
        root.handlers.clear()

    def test_console_goes_to_stderr(self, capsys):
        setup_logging(level="WARNING")
        assert isinstance(logging.getLogger().handlers[0], ClickHandler)
        logging.getLogger("gotth.test").warning("watcher did not stop")
        logging.getLogger("gotth.test").info("hidden")
        captured = capsys.readouterr()
        assert "watcher did not stop" in captured.err
        assert "hidden" not in captured.err
        assert captured.out == ""

    def test_verbose_names_the_module(self, capsys):
        setup_logging(level="INFO")
        logging.getLogger("gotth.core.services.clean").info("Removed 2 path(s)")
        assert "[gotth.core.services.clean] Removed 2 path(s)" in capsys.readouterr().err

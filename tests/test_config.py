"""Tests for configuration and logging setup."""

import json
import logging

from rich.logging import RichHandler

from revolver.config import DEFAULT_ERROR_PROMPT, DEFAULT_PROMPT, Config
from revolver.log import configure_logging


class TestConfig:
    """Test Config load/save."""

    def test_defaults(self):
        config = Config()
        assert config.prompt == DEFAULT_PROMPT
        assert config.error_prompt == DEFAULT_ERROR_PROMPT
        assert config.log_level == "WARNING"
        assert config.suggest is True

    def test_missing_file(self, tmp_path):
        """A missing file gives defaults."""
        assert Config.load(tmp_path / "nope.json") == Config()

    def test_save_load_roundtrip(self, tmp_path):
        path = tmp_path / "sub" / "config.json"
        Config(prompt="> ", suggest=False).save(path)

        loaded = Config.load(path)
        assert loaded.prompt == "> "
        assert loaded.suggest is False
        assert loaded.error_prompt == DEFAULT_ERROR_PROMPT

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}))

        loaded = Config.load(path)
        assert loaded.log_level == "DEBUG"
        assert loaded.prompt == DEFAULT_PROMPT

    def test_corrupt_file(self, tmp_path):
        """Unreadable JSON falls back to defaults."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert Config.load(path) == Config()

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert Config.load(path) == Config()

    def test_undecodable_file(self, tmp_path):
        """Bytes that are not UTF-8 fall back to defaults."""
        path = tmp_path / "config.json"
        path.write_bytes(b"\xff\xfe{\x80")
        assert Config.load(path) == Config()

    def test_non_ascii_prompt(self, tmp_path):
        path = tmp_path / "config.json"
        Config(prompt="\u00bb ").save(path)
        assert Config.load(path).prompt == "\u00bb "


class TestConfigureLogging:
    """Test configure_logging."""

    def test_installs_single_rich_handler(self):
        logger = logging.getLogger("revolver")
        try:
            configure_logging("debug")
            configure_logging(logging.INFO)

            rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
            assert len(rich_handlers) == 1
            assert logger.level == logging.INFO
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, RichHandler):
                    logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_unknown_level_name(self):
        logger = logging.getLogger("revolver")
        try:
            configure_logging("chatty")
            assert logger.level == logging.WARNING
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, RichHandler):
                    logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

from sitemap_scout.logger import LOGGER_NAME, init_logging, logger


def test_logger_is_project_logger():
    assert logger.name == LOGGER_NAME
    assert logger.propagate is False


def test_init_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "scout.log"
    lg = init_logging(level="DEBUG", log_file=log_file)
    try:
        lg.debug("Found sitemap %s", "https://x.com/sitemap.xml")
        for handler in lg.handlers:
            handler.flush()
        assert lg.level == logging.DEBUG
        assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
        assert "Found sitemap https://x.com/sitemap.xml" in log_file.read_text(encoding="utf-8")
    finally:
        init_logging()


def test_init_logging_replaces_handlers():
    init_logging(level="INFO")
    lg = init_logging(level="WARNING")
    try:
        assert len(lg.handlers) == 1
        assert lg.level == logging.WARNING
    finally:
        init_logging()

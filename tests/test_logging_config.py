"""Logging setup — handler construction."""

from logging import StreamHandler
from logging.handlers import RotatingFileHandler

from social_media_api.app.core.logging_config import LOG_FILE_BACKUPS, _build_handlers


def test_console_only_without_logfile():
    handlers = _build_handlers(None)

    assert len(handlers) == 1
    assert isinstance(handlers[0], StreamHandler)


def test_logfile_adds_rotating_handler(tmp_path):
    handlers = _build_handlers(str(tmp_path / "api.log"))
    try:
        rotating = handlers[-1]
        assert isinstance(rotating, RotatingFileHandler)
        assert rotating.backupCount == LOG_FILE_BACKUPS
        assert rotating.baseFilename == str((tmp_path / "api.log").resolve())
    finally:
        for handler in handlers:
            handler.close()

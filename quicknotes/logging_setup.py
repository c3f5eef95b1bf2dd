from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from quicknotes.settings import APP_NAME, LOG_DIR, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 5

# QtMsgType value -> logging level; QtWarningMsg (1) falls through to WARNING
_QT_LEVELS = {
    0: logging.DEBUG,
    2: logging.ERROR,
    3: logging.CRITICAL,
    4: logging.INFO,
}


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).setdefault("session", SESSION_ID)
        return msg, kwargs


def _configure(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(EnsureSessionFilter())
    return handler


def _file_handler() -> logging.Handler | None:
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            LOG_PATH, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError:
        return None


def setup_logging() -> logging.Logger:
    """
    Configure the ``quicknotes`` logger once: INFO to stdout, DEBUG to a
    rotating file under the user's home. Without a writable log directory
    only the console handler is installed.
    """
    logger = logging.getLogger(APP_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(_configure(logging.StreamHandler(sys.stdout or sys.stderr), logging.INFO))

    fh = _file_handler()
    if fh is None:
        logger.warning("File logging disabled, cannot write %s", LOG_PATH)
        return logger

    logger.addHandler(_configure(fh, logging.DEBUG))
    logger.info("Logging initialized. log_file=%s", LOG_PATH)
    return logger


log = SessionAdapter(setup_logging(), {})


def _qt_message_handler(mode, context, message):
    parts = [getattr(context, name, None) for name in ("file", "line", "function")]
    where = "{}:{} {}".format(*parts) if any(parts) else "unknown"
    try:
        level = _QT_LEVELS.get(int(getattr(mode, "value", mode)), logging.WARNING)
    except (TypeError, ValueError):
        level = logging.WARNING
    log.log(level, "Qt: %s | where=%s", message, where)


def install_global_exception_hooks() -> None:
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    try:
        from PySide6.QtCore import qInstallMessageHandler

        qInstallMessageHandler(_qt_message_handler)
        log.info("Qt message handler installed")
    except Exception:
        log.exception("Failed to install Qt message handler")

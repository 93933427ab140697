"""
Logging setup for the installer.

Every record goes to installer.log as ``[<ISO-8601>] [LEVEL] message`` and to
the console as the bare message (errors on stderr, everything else on
stdout).  The log file is truncated once, when setup_logging() runs.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

LOGGER_NAME = "hytale_installer"

_LEVEL_NAMES = {"WARNING": "WARN", "CRITICAL": "ERROR"}


class InstallerLogFormatter(logging.Formatter):
    """``[2026-01-01T12:00:00.000Z] [INFO] message``"""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        level = _LEVEL_NAMES.get(record.levelname, record.levelname)
        line = f"[{self.formatTime(record)}] [{level}] {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class _BelowError(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def setup_logging(log_file: Optional[str], level: int = logging.INFO) -> logging.Logger:
    """
    (Re)configure the installer logger.

    Existing handlers are closed and replaced, so calling this twice does not
    duplicate output.  If *log_file* cannot be opened the failure is reported
    on stderr and logging continues on the console only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = False

    console_fmt = logging.Formatter("%(message)s")

    out = logging.StreamHandler(sys.stdout)
    out.setFormatter(console_fmt)
    out.addFilter(_BelowError())
    logger.addHandler(out)

    err = logging.StreamHandler(sys.stderr)
    err.setFormatter(console_fmt)
    err.setLevel(logging.ERROR)
    logger.addHandler(err)

    if log_file:
        try:
            # mode "w" resets the log for this run
            fh = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        except OSError as exc:
            sys.stderr.write(f"Failed to reset log file {log_file}: {exc}\n")
        else:
            fh.setFormatter(InstallerLogFormatter())
            logger.addHandler(fh)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger below the installer logger (``__name__`` of a module works)."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)

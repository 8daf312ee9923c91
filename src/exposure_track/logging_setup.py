# src/exposure_track/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "exposure_track"

# Loggers that emit DEBUG on every timer start/stop and every document write.
# They stay in the log file; the console shows them only from INFO up.
CHATTY_LOGGERS = (
    "exposure_track.session",
    "exposure_track.tasks.task_persistence",
)

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _under(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


class _ConsoleFilter(logging.Filter):
    """App records pass (chatty ones from INFO); anything else only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not _under(record.name, APP_LOGGER):
            return record.levelno >= logging.WARNING
        if any(_under(record.name, p) for p in CHATTY_LOGGERS):
            return record.levelno >= logging.INFO
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/exposure",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Replace root handlers with a filtered stderr handler and a full
    exposure.log file handler. Returns the log file path.
    """
    log_file = Path(log_dir) / "exposure.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file

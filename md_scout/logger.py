# === FILE: md_scout/logger.py ===
"""Logging setup shared by every MdScout module.

All loggers hang under the ``MdScout`` root, so one call to
:func:`configure` (or :func:`init_logging` from the CLI) retunes the
scanner, the HEAD checks and the report writers at once. Records go to
stderr; stdout stays free for annotated HTML and JSON.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "MdScout"
_LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _build_handlers(log_file: str | Path | None, fmt: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=_LOG_FILE_MAX_BYTES,
                backupCount=_LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set level and handlers of the ``MdScout`` logger.

    Parameters
    ----------
    level
        Level name or number, e.g. ``"DEBUG"``.
    log_file
        Also write to this file, rotated at 5 MiB with three backups.
    log_format
        :class:`logging.Formatter` format string for every handler.
    replace_handlers
        Close and drop the current handlers first. With ``False`` the new
        handlers are added next to the old ones.
    """
    root = logging.getLogger(_LOGGER_NAME)
    root.setLevel(level)

    if replace_handlers:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(log_file, log_format):
        root.addHandler(handler)

    # keep MdScout records out of the host application's root logger
    root.propagate = False
    return root


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Start from a clean handler set; what the CLI group calls on every run."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


def get_logger(name: str | None = None) -> logging.Logger:
    """``get_logger("scan")`` -> ``MdScout.scan``; no name gives the package logger."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger"]

"""Logger bootstrap for the unit value host."""
from __future__ import annotations

import logging
import os
import tempfile
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from unit_value.version import is_dev_build

LOG_LEVEL_ENV_VAR = "UNIT_VALUE_LOG_LEVEL"
LOG_FILE_NAME = "unit_value.log"
LOG_DIR_NAME = "UnitValue"
LOGGER_NAME = "UnitValue"
DEFAULT_MAX_BYTES = 512 * 1024


def resolve_logs_dir(root_path: Path, *, log_dir_name: str = LOG_DIR_NAME) -> Path:
    """Return (and create) the logs directory under ``root_path``."""

    log_dir = Path(root_path) / "logs" / log_dir_name
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def build_rotating_file_handler(
    log_dir: Path,
    file_name: str,
    *,
    retention: int,
    max_bytes: int,
    formatter: Optional[logging.Formatter] = None,
) -> RotatingFileHandler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / file_name,
        maxBytes=max_bytes,
        backupCount=max(0, retention - 1),
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(hint: Optional[str] = None) -> int:
    """Resolve the level from an explicit hint, then the environment; dev builds force DEBUG."""

    for candidate in (hint, os.getenv(LOG_LEVEL_ENV_VAR)):
        if not candidate:
            continue
        token = str(candidate).strip()
        if token.isdigit():
            level = int(token)
        else:
            level = getattr(logging, token.upper(), None)
        if isinstance(level, int):
            return logging.DEBUG if is_dev_build() else level
    return logging.DEBUG if is_dev_build() else logging.INFO


def _formatter() -> logging.Formatter:
    formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d UTC - %(levelname)s - %(name)s - %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )
    formatter.converter = time.gmtime
    return formatter


def ensure_logger(
    root_path: Path,
    *,
    level_hint: Optional[str] = None,
    retention: int = 5,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> Optional[logging.Logger]:
    """Attach a rotating file handler to the ``UnitValue`` logger tree.

    Safe to call repeatedly. Falls back to the temp directory when ``root_path``
    is not writable and returns None if no handler can be created.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, "_unit_value_configured", False):
        return logger
    formatter = _formatter()
    handler: Optional[RotatingFileHandler] = None
    for base in (Path(root_path), Path(tempfile.gettempdir())):
        try:
            handler = build_rotating_file_handler(
                resolve_logs_dir(base),
                LOG_FILE_NAME,
                retention=retention,
                max_bytes=max_bytes,
                formatter=formatter,
            )
            break
        except OSError:
            continue
    if handler is None:
        return None
    logger.setLevel(resolve_log_level(level_hint))
    logger.propagate = False
    logger.handlers.clear()
    logger.addHandler(handler)
    logger._unit_value_configured = True  # type: ignore[attr-defined]
    logger.debug(
        "Logger initialised: path=%s level=%s retention=%d max_bytes=%d",
        handler.baseFilename,
        logging.getLevelName(logger.level),
        retention,
        max_bytes,
    )
    return logger


def reset_logger() -> None:
    """Drop handlers installed by ensure_logger (test hook)."""

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger._unit_value_configured = False  # type: ignore[attr-defined]

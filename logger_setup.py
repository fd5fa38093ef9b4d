"""Central logging configuration for the face detection app."""

from __future__ import annotations

import logging
from typing import Any, Optional

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _level_from_value(value: Any, fallback: int = logging.INFO) -> int:
    if value is None:
        return fallback
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        level = logging.getLevelName(value.upper())
        if isinstance(level, int):
            return level
    return fallback


def _set_logger_level(target_logger: logging.Logger, level: int) -> None:
    target_logger.setLevel(level)
    for handler in target_logger.handlers:
        handler.setLevel(level)


def setup_logging(level: Any = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        formatter = logging.Formatter(_FORMAT)

        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        root_logger.addHandler(ch)

        if log_file:
            try:
                fh = logging.FileHandler(log_file)
            except OSError:
                fh = logging.NullHandler()
            fh.setFormatter(formatter)
            root_logger.addHandler(fh)

    _set_logger_level(root_logger, _level_from_value(level))
    return root_logger


def configure_logging(level: Any) -> None:
    _set_logger_level(logging.getLogger(), _level_from_value(level))


logger = setup_logging()

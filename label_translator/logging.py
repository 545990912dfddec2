"""
Logging for the ``label_translator`` package logger.

The package only emits records; it attaches a ``NullHandler`` so nothing is
printed unless the host application configures logging. ``configure_logging``
is the opt-in used by :meth:`Translator.from_environment` to honour the
``LABEL_TRANSLATOR_LOG_LEVEL`` and ``LABEL_TRANSLATOR_LOG_DIR`` settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from . import config

LOGGER_NAME = "label_translator"
LOG_FILE_NAME = "label_translator.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_file_handler: Optional[logging.FileHandler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def _drop_file_handler() -> None:
    global _file_handler
    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def configure_logging(
    level: Union[int, str, None] = None,
    log_dir: Union[str, Path, None] = None,
) -> logging.Logger:
    """
    Set the package log level and route records to ``label_translator.log``.

    ``level`` and ``log_dir`` default to ``config.LOG_LEVEL`` and
    ``config.LOG_DIR``; an empty ``log_dir`` detaches the file handler.
    Repeated calls replace the file handler rather than adding another one.
    """
    global _file_handler
    logger.setLevel(_resolve_level(config.LOG_LEVEL if level is None else level))

    directory = config.LOG_DIR if log_dir is None else log_dir
    if not directory:
        _drop_file_handler()
        return logger

    log_path = Path(directory).expanduser() / LOG_FILE_NAME
    if _file_handler is not None and _file_handler.baseFilename == os.path.abspath(log_path):
        return logger

    _drop_file_handler()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _file_handler = logging.FileHandler(log_path, encoding="utf-8")
    _file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_file_handler)
    return logger

"""
Central logging for Number Sorter.

Usage:
    from numbersorter.log import logger

    logger.info("Generated 40 numbers", component="GEN")
    logger.warning("Bad value", component="CFG", details="grid_rows=0")

Console output goes to stdout; file output is optional.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    DEBUG   = logging.DEBUG
    INFO    = logging.INFO
    WARNING = logging.WARNING
    ERROR   = logging.ERROR


class NumberSorterLogger:
    """Thin wrapper over a ``logging.Logger`` that adds component tags."""

    def __init__(self, name: str = "numbersorter"):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S"
        ))
        self._logger.addHandler(self._console_handler)

        self._file_handler: Optional[logging.FileHandler] = None

    @property
    def raw(self) -> logging.Logger:
        return self._logger

    @property
    def level(self) -> int:
        return self._console_handler.level

    @property
    def log_file(self) -> Optional[str]:
        return self._file_handler.baseFilename if self._file_handler else None

    def set_level(self, level: LogLevel):
        self._console_handler.setLevel(level)

    def enable_file_logging(self, filepath: str):
        self.disable_file_logging()
        self._file_handler = logging.FileHandler(filepath)
        self._file_handler.setLevel(logging.DEBUG)
        self._file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s"
        ))
        self._logger.addHandler(self._file_handler)

    def disable_file_logging(self):
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def _format_message(self, msg: str, component: Optional[str] = None,
                        details: Optional[str] = None) -> str:
        parts = []
        if component:
            parts.append(f"[{component}]")
        parts.append(msg)
        if details:
            parts.append(f"- {details}")
        return " ".join(parts)

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.debug(self._format_message(msg, component, details))

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        self._logger.info(self._format_message(msg, component, details))

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        self._logger.warning(self._format_message(msg, component, details))

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.error(self._format_message(msg, component, details))


logger = NumberSorterLogger()


def configure_logging(cfg: dict):
    """Apply the ``log_level`` and ``log_file`` settings to the app logger."""
    logger.set_level(LogLevel[cfg.get("log_level", "INFO")])
    if cfg.get("log_file"):
        logger.enable_file_logging(cfg["log_file"])
    else:
        logger.disable_file_logging()

# Bridge from the stdlib logging module.

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Optional

from .default import std
from .logger import Logger
from .severity import from_logging_level


class CloudHandler(logging.Handler):
    """Writes stdlib log records as Cloud Logging entries.

    A mapping attached as ``extra={"json_fields": {...}}`` becomes the
    structured payload of the entry.
    """

    def __init__(self, logger: Optional[Logger] = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.logger = logger if logger is not None else std

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            severity = from_logging_level(record.levelno)
            fields = getattr(record, "json_fields", None)
            if isinstance(fields, Mapping):
                self.logger.emit(severity, message, dict(fields))
            else:
                self.logger.emit(severity, message)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def setup_logging(level: int = logging.INFO, logger: Optional[Logger] = None) -> CloudHandler:
    handler = CloudHandler(logger)
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    return handler

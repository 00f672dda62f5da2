# Cloud Logging severities. Values are spaced by 100 so levels can be inserted.

from __future__ import annotations
from enum import IntEnum
from typing import Any

from .errors import UnknownSeverityError


class Severity(IntEnum):
    DEFAULT = 0
    DEBUG = 100
    INFO = 200
    NOTICE = 300
    WARNING = 400
    ERROR = 500
    CRITICAL = 600
    ALERT = 700
    EMERGENCY = 800

    @property
    def label(self) -> str:
        """Name written to the ``severity`` field; empty for DEFAULT."""
        return "" if self is Severity.DEFAULT else self.name

    @property
    def is_error(self) -> bool:
        return self >= Severity.ERROR

    def __str__(self) -> str:
        return self.label


def is_error(value: Any) -> bool:
    """True if entries at ``value`` belong on the error stream."""
    return int(value) >= Severity.ERROR


def severity_name(value: Any, strict: bool = False) -> str:
    try:
        return Severity(value).label
    except ValueError:
        if strict:
            raise UnknownSeverityError(value) from None
        return ""


def describe(value: Any) -> str:
    try:
        sev = Severity(value)
    except ValueError:
        return f"!SEVERITY({value})"
    return sev.name


def from_logging_level(levelno: int) -> Severity:
    """Map a stdlib ``logging`` level number onto a severity."""
    if levelno <= 0:
        return Severity.DEFAULT
    if levelno < 20:
        return Severity.DEBUG
    if levelno == 20:
        return Severity.INFO
    if levelno < 30:
        return Severity.NOTICE
    if levelno < 40:
        return Severity.WARNING
    if levelno < 50:
        return Severity.ERROR
    if levelno < 60:
        return Severity.CRITICAL
    if levelno < 70:
        return Severity.ALERT
    return Severity.EMERGENCY

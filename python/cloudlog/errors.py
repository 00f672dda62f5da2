# Exceptions raised by cloudlog. Logging calls never raise except where noted.

from __future__ import annotations
from typing import Any


class CloudLogError(Exception):
    """Base class for cloudlog errors."""


class PayloadError(CloudLogError, TypeError):
    """A structured payload could not be serialized as JSON."""


class UnknownSeverityError(CloudLogError, ValueError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"unknown severity value: {value!r}")
        self.value = value


class PanicError(CloudLogError):
    """Raised by the panic* family after the entry has been written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

# Logger handle: trace context, stream routing and the per-severity call surface.

from __future__ import annotations
import io
import sys
import threading
from typing import IO, Any, Optional

from .config import Config, get_config
from .errors import PanicError, PayloadError
from .formatter import (
    format_entry, format_fallback_entry, marshal_payload, splice_payload, sprint, sprintf, sprintln,
)
from .severity import Severity, is_error
from .trace import extract_span_id, extract_trace, header_value, span_trace

_UNSET = object()

D, DBG, INF, NTC, WRN, ERR, CRT, ALR, EMG = (
    Severity.DEFAULT, Severity.DEBUG, Severity.INFO, Severity.NOTICE, Severity.WARNING,
    Severity.ERROR, Severity.CRITICAL, Severity.ALERT, Severity.EMERGENCY,
)


class Logger:
    """Writes one JSON line per call.

    Entries below ERROR go to the normal stream, ERROR and above to the error
    stream. Without overrides these are ``sys.stdout``/``sys.stderr`` as they
    are at write time. Writes through one instance are serialized by a lock;
    separate instances share nothing.
    """

    def __init__(self, trace: str = "", span_id: str = "",
                 out: Optional[IO[Any]] = None, err: Optional[IO[Any]] = None) -> None:
        self._trace = trace
        self._span_id = span_id if trace else ""
        self._out = out
        self._err = err if err is not None else out
        self._lock = threading.Lock()

    @classmethod
    def for_header(cls, header: Optional[str], config: Optional[Config] = None) -> "Logger":
        project_id = (config or get_config()).project_id
        trace = extract_trace(header, project_id)
        return cls(trace=trace, span_id=extract_span_id(header) if trace else "")

    @classmethod
    def for_request(cls, request: Any, config: Optional[Config] = None) -> "Logger":
        return cls.for_header(header_value(request), config)

    @classmethod
    def for_span(cls, span: Any = None, config: Optional[Config] = None) -> "Logger":
        trace, span_id = span_trace((config or get_config()).project_id, span)
        return cls(trace=trace, span_id=span_id)

    @property
    def trace(self) -> str:
        """Trace fragment as a JSON string literal, ``""`` if none."""
        return self._trace

    @property
    def span_id(self) -> str:
        return self._span_id

    def stream(self, severity: Any) -> Optional[IO[Any]]:
        if is_error(severity):
            return self._err if self._err is not None else sys.stderr
        return self._out if self._out is not None else sys.stdout

    def emit(self, severity: Any, message: str, payload: Any = _UNSET) -> None:
        # Payload code may log through this same instance; run it before locking.
        body, line = None, None
        if payload is not _UNSET:
            try:
                body = marshal_payload(payload)
            except PayloadError:
                line = format_fallback_entry(severity, message)
        with self._lock:
            if body is not None:
                line = splice_payload(severity, message, body, self._trace, self._span_id)
            elif line is None:
                line = format_entry(severity, message, self._trace, self._span_id)
            self._write(self.stream(severity), line + "\n")

    @staticmethod
    def _write(stream: Optional[IO[Any]], data: str) -> None:
        if stream is None:
            return
        try:
            if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
                stream.write(data.encode("utf-8"))
            else:
                stream.write(data)
            flush = getattr(stream, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError):
            # a broken sink must not take the application down
            pass

    def flush(self) -> None:
        for stream in {id(s): s for s in (self.stream(D), self.stream(ERR))}.values():
            if stream is None:
                continue
            try:
                stream.flush()
            except (AttributeError, OSError, ValueError):
                pass

    def _fatal(self, message: str, payload: Any = _UNSET) -> None:
        self.emit(CRT, message, payload)
        sys.exit(1)

    def _panic(self, message: str, payload: Any = _UNSET) -> None:
        self.emit(CRT, message, payload)
        raise PanicError(message)

    # no assigned severity
    def log(self, *args: Any) -> None: self.emit(D, sprint(*args))
    def logln(self, *args: Any) -> None: self.emit(D, sprintln(*args))
    def logf(self, fmt: str, *args: Any) -> None: self.emit(D, sprintf(fmt, *args))
    def logj(self, msg: str, payload: Any) -> None: self.emit(D, msg, payload)

    # debug or trace information
    def debug(self, *args: Any) -> None: self.emit(DBG, sprint(*args))
    def debugln(self, *args: Any) -> None: self.emit(DBG, sprintln(*args))
    def debugf(self, fmt: str, *args: Any) -> None: self.emit(DBG, sprintf(fmt, *args))
    def debugj(self, msg: str, payload: Any) -> None: self.emit(DBG, msg, payload)

    # routine information, such as ongoing status or performance
    def info(self, *args: Any) -> None: self.emit(INF, sprint(*args))
    def infoln(self, *args: Any) -> None: self.emit(INF, sprintln(*args))
    def infof(self, fmt: str, *args: Any) -> None: self.emit(INF, sprintf(fmt, *args))
    def infoj(self, msg: str, payload: Any) -> None: self.emit(INF, msg, payload)

    # normal but significant events: start up, shut down, configuration
    def notice(self, *args: Any) -> None: self.emit(NTC, sprint(*args))
    def noticeln(self, *args: Any) -> None: self.emit(NTC, sprintln(*args))
    def noticef(self, fmt: str, *args: Any) -> None: self.emit(NTC, sprintf(fmt, *args))
    def noticej(self, msg: str, payload: Any) -> None: self.emit(NTC, msg, payload)

    # events that might cause problems
    def warning(self, *args: Any) -> None: self.emit(WRN, sprint(*args))
    def warningln(self, *args: Any) -> None: self.emit(WRN, sprintln(*args))
    def warningf(self, fmt: str, *args: Any) -> None: self.emit(WRN, sprintf(fmt, *args))
    def warningj(self, msg: str, payload: Any) -> None: self.emit(WRN, msg, payload)

    # events likely to cause problems
    def error(self, *args: Any) -> None: self.emit(ERR, sprint(*args))
    def errorln(self, *args: Any) -> None: self.emit(ERR, sprintln(*args))
    def errorf(self, fmt: str, *args: Any) -> None: self.emit(ERR, sprintf(fmt, *args))
    def errorj(self, msg: str, payload: Any) -> None: self.emit(ERR, msg, payload)

    # more severe problems or outages
    def critical(self, *args: Any) -> None: self.emit(CRT, sprint(*args))
    def criticalln(self, *args: Any) -> None: self.emit(CRT, sprintln(*args))
    def criticalf(self, fmt: str, *args: Any) -> None: self.emit(CRT, sprintf(fmt, *args))
    def criticalj(self, msg: str, payload: Any) -> None: self.emit(CRT, msg, payload)

    # a person must take an action immediately
    def alert(self, *args: Any) -> None: self.emit(ALR, sprint(*args))
    def alertln(self, *args: Any) -> None: self.emit(ALR, sprintln(*args))
    def alertf(self, fmt: str, *args: Any) -> None: self.emit(ALR, sprintf(fmt, *args))
    def alertj(self, msg: str, payload: Any) -> None: self.emit(ALR, msg, payload)

    # one or more systems are unusable
    def emergency(self, *args: Any) -> None: self.emit(EMG, sprint(*args))
    def emergencyln(self, *args: Any) -> None: self.emit(EMG, sprintln(*args))
    def emergencyf(self, fmt: str, *args: Any) -> None: self.emit(EMG, sprintf(fmt, *args))
    def emergencyj(self, msg: str, payload: Any) -> None: self.emit(EMG, msg, payload)

    # CRITICAL, then sys.exit(1)
    def fatal(self, *args: Any) -> None: self._fatal(sprint(*args))
    def fatalln(self, *args: Any) -> None: self._fatal(sprintln(*args))
    def fatalf(self, fmt: str, *args: Any) -> None: self._fatal(sprintf(fmt, *args))
    def fatalj(self, msg: str, payload: Any) -> None: self._fatal(msg, payload)

    # CRITICAL, then raise PanicError(message)
    def panic(self, *args: Any) -> None: self._panic(sprint(*args))
    def panicln(self, *args: Any) -> None: self._panic(sprintln(*args))
    def panicf(self, fmt: str, *args: Any) -> None: self._panic(sprintf(fmt, *args))
    def panicj(self, msg: str, payload: Any) -> None: self._panic(msg, payload)


def new(out: Optional[IO[Any]] = None, prefix: str = "", flag: int = 0) -> Logger:
    """Logger writing every entry to ``out``; ``prefix`` and ``flag`` are ignored."""
    return Logger(out=out, err=out)

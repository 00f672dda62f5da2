__all__ = [
    "init", "shutdown", "get_logger", "for_request", "for_span", "new",
    "Config", "Logger", "Severity", "CloudHandler", "setup_logging", "TraceMiddleware",
    "CloudLogError", "PanicError", "UnknownSeverityError", "emit",
    "log", "logln", "logf", "logj",
    "debug", "debugln", "debugf", "debugj",
    "info", "infoln", "infof", "infoj",
    "notice", "noticeln", "noticef", "noticej",
    "warning", "warningln", "warningf", "warningj",
    "error", "errorln", "errorf", "errorj",
    "critical", "criticalln", "criticalf", "criticalj",
    "alert", "alertln", "alertf", "alertj",
    "emergency", "emergencyln", "emergencyf", "emergencyj",
    "fatal", "fatalln", "fatalf", "fatalj",
    "panic", "panicln", "panicf", "panicj",
]
__version__ = "0.1.0"

from .config import Config
from .errors import CloudLogError, PanicError, UnknownSeverityError
from .severity import Severity
from .logger import Logger, new
from .default import (
    emit,
    log, logln, logf, logj,
    debug, debugln, debugf, debugj,
    info, infoln, infof, infoj,
    notice, noticeln, noticef, noticej,
    warning, warningln, warningf, warningj,
    error, errorln, errorf, errorj,
    critical, criticalln, criticalf, criticalj,
    alert, alertln, alertf, alertj,
    emergency, emergencyln, emergencyf, emergencyj,
    fatal, fatalln, fatalf, fatalj,
    panic, panicln, panicf, panicj,
)
from .bootstrap import init, shutdown, get_logger, for_request, for_span
from .handler import CloudHandler, setup_logging
from .middleware import TraceMiddleware

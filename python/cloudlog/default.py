# Module-level functions against the process-wide default logger.

from __future__ import annotations
from typing import Any

from .logger import _UNSET, Logger

# Lives for the whole process; never replaced.
std = Logger()


def emit(severity: Any, message: str, payload: Any = _UNSET) -> None:
    std.emit(severity, message, payload)


def log(*args: Any) -> None: std.log(*args)
def logln(*args: Any) -> None: std.logln(*args)
def logf(fmt: str, *args: Any) -> None: std.logf(fmt, *args)
def logj(msg: str, payload: Any) -> None: std.logj(msg, payload)

def debug(*args: Any) -> None: std.debug(*args)
def debugln(*args: Any) -> None: std.debugln(*args)
def debugf(fmt: str, *args: Any) -> None: std.debugf(fmt, *args)
def debugj(msg: str, payload: Any) -> None: std.debugj(msg, payload)

def info(*args: Any) -> None: std.info(*args)
def infoln(*args: Any) -> None: std.infoln(*args)
def infof(fmt: str, *args: Any) -> None: std.infof(fmt, *args)
def infoj(msg: str, payload: Any) -> None: std.infoj(msg, payload)

def notice(*args: Any) -> None: std.notice(*args)
def noticeln(*args: Any) -> None: std.noticeln(*args)
def noticef(fmt: str, *args: Any) -> None: std.noticef(fmt, *args)
def noticej(msg: str, payload: Any) -> None: std.noticej(msg, payload)

def warning(*args: Any) -> None: std.warning(*args)
def warningln(*args: Any) -> None: std.warningln(*args)
def warningf(fmt: str, *args: Any) -> None: std.warningf(fmt, *args)
def warningj(msg: str, payload: Any) -> None: std.warningj(msg, payload)

def error(*args: Any) -> None: std.error(*args)
def errorln(*args: Any) -> None: std.errorln(*args)
def errorf(fmt: str, *args: Any) -> None: std.errorf(fmt, *args)
def errorj(msg: str, payload: Any) -> None: std.errorj(msg, payload)

def critical(*args: Any) -> None: std.critical(*args)
def criticalln(*args: Any) -> None: std.criticalln(*args)
def criticalf(fmt: str, *args: Any) -> None: std.criticalf(fmt, *args)
def criticalj(msg: str, payload: Any) -> None: std.criticalj(msg, payload)

def alert(*args: Any) -> None: std.alert(*args)
def alertln(*args: Any) -> None: std.alertln(*args)
def alertf(fmt: str, *args: Any) -> None: std.alertf(fmt, *args)
def alertj(msg: str, payload: Any) -> None: std.alertj(msg, payload)

def emergency(*args: Any) -> None: std.emergency(*args)
def emergencyln(*args: Any) -> None: std.emergencyln(*args)
def emergencyf(fmt: str, *args: Any) -> None: std.emergencyf(fmt, *args)
def emergencyj(msg: str, payload: Any) -> None: std.emergencyj(msg, payload)

def fatal(*args: Any) -> None: std.fatal(*args)
def fatalln(*args: Any) -> None: std.fatalln(*args)
def fatalf(fmt: str, *args: Any) -> None: std.fatalf(fmt, *args)
def fatalj(msg: str, payload: Any) -> None: std.fatalj(msg, payload)

def panic(*args: Any) -> None: std.panic(*args)
def panicln(*args: Any) -> None: std.panicln(*args)
def panicf(fmt: str, *args: Any) -> None: std.panicf(fmt, *args)
def panicj(msg: str, payload: Any) -> None: std.panicj(msg, payload)

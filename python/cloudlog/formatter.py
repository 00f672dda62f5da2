# JSON entry formatting.
#
# Structured payloads are serialized once and the reserved fields are spliced
# in after the opening brace, so the payload is never decoded again and keeps
# its own key order.

from __future__ import annotations
import dataclasses
import json
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, List

from .errors import PayloadError
from .severity import severity_name

MESSAGE_KEY = "message"
SEVERITY_KEY = "severity"
TRACE_KEY = "logging.googleapis.com/trace"
SPAN_ID_KEY = "logging.googleapis.com/spanId"
LIB_MSG_KEY = "logLibMsg"
MARSHAL_FAILED = "cannot marshal the argument as jsonPayload"

_decoder = json.JSONDecoder()


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    dump = getattr(obj, "model_dump", None)
    if callable(dump):
        return dump(mode="json")
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def marshal_payload(payload: Any) -> str:
    """Serialize ``payload`` to JSON text.

    Objects may provide ``__json__()`` returning their own JSON (str or UTF-8
    bytes); the text must hold exactly one JSON value. TypeError and ValueError
    become PayloadError; anything else raised while serializing propagates to
    the caller.
    """
    hook = getattr(payload, "__json__", None)
    try:
        if callable(hook):
            raw = hook()
            if isinstance(raw, (bytes, bytearray)):
                raw = bytes(raw).decode("utf-8")
            if not isinstance(raw, str):
                raise TypeError(f"__json__ returned {type(raw).__name__}, not str")
            raw = raw.strip()
            _, end = _decoder.raw_decode(raw)
            if end != len(raw):
                raise ValueError(f"__json__ returned extra data at offset {end}")
            return raw
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=_default)
    except (TypeError, ValueError) as exc:
        raise PayloadError(str(exc)) from exc


def reserved_fields(severity: Any, message: str, trace: str = "", span_id: str = "") -> List[str]:
    # trace is already a JSON string literal
    fields = []
    if message:
        fields.append(f'"{MESSAGE_KEY}":' + _dumps(message))
    name = severity_name(severity)
    if name:
        fields.append(f'"{SEVERITY_KEY}":' + _dumps(name))
    if trace:
        fields.append(f'"{TRACE_KEY}":' + trace)
        if span_id:
            fields.append(f'"{SPAN_ID_KEY}":' + _dumps(span_id))
    return fields


def format_entry(severity: Any, message: str, trace: str = "", span_id: str = "") -> str:
    return "{" + ",".join(reserved_fields(severity, message, trace, span_id)) + "}"


def format_fallback_entry(severity: Any, message: str) -> str:
    fields = reserved_fields(severity, message)
    fields.append(f'"{LIB_MSG_KEY}":' + _dumps(MARSHAL_FAILED))
    return "{" + ",".join(fields) + "}"


def format_payload_entry(severity: Any, message: str, payload: Any, trace: str = "", span_id: str = "") -> str:
    try:
        body = marshal_payload(payload)
    except PayloadError:
        return format_fallback_entry(severity, message)
    return splice_payload(severity, message, body, trace, span_id)


def splice_payload(severity: Any, message: str, body: str, trace: str = "", span_id: str = "") -> str:
    """Merge reserved fields into JSON text already produced by marshal_payload."""
    fields = reserved_fields(severity, message, trace, span_id)
    if body.startswith("{"):
        rest = body[1:]
        if not fields:
            return "{" + rest.lstrip()
        sep = "" if rest.lstrip().startswith("}") else ","
        return "{" + ",".join(fields) + sep + rest
    fields.append('"value":' + body)
    return "{" + ",".join(fields) + "}"


def sprint(*args: Any) -> str:
    """Concatenate args, with a space between two adjacent non-strings."""
    parts = []
    for i, arg in enumerate(args):
        if i and not isinstance(arg, str) and not isinstance(args[i - 1], str):
            parts.append(" ")
        parts.append(str(arg))
    return "".join(parts)


def sprintln(*args: Any) -> str:
    return " ".join(str(arg) for arg in args) + "\n"


def sprintf(fmt: str, *args: Any) -> str:
    """Apply ``fmt % args``.

    As with stdlib ``logging``, a call without args returns ``fmt`` untouched,
    so ``sprintf("100%%")`` keeps both percent signs.
    """
    if not args:
        return fmt
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        extra = ", ".join(repr(a) for a in (args.values() if isinstance(args, Mapping) else args))
        return f"{fmt} %!(BADFORMAT {extra})"

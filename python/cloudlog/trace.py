# Trace correlation for Cloud Logging entries.
#
# Everything here is best effort: a header or span that cannot be used yields
# an empty result and the entry is written without a trace.

from __future__ import annotations
import json
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from opentelemetry import trace as otel_trace

TRACE_HEADER = "X-Cloud-Trace-Context"
MAX_TRACE_ID_LENGTH = 128

_TRACE_ID_CHARS = frozenset("0123456789abcdefABCDEFxX")
_MAX_SPAN_ID = (1 << 64) - 1


def _fragment(project_id: str, trace_id: str) -> str:
    return json.dumps(f"projects/{project_id}/traces/{trace_id}", ensure_ascii=False)


def extract_trace(header: Optional[str], project_id: str) -> str:
    """Turn an ``X-Cloud-Trace-Context`` value into a quoted JSON string.

    The header looks like ``TRACE_ID/SPAN_ID;o=FLAG``. Returns ``""`` when
    tracing is disabled (no project), the header is malformed, the request
    opted out with ``o=0`` or the trace id is all zeros.
    """
    if not project_id or not header:
        return ""
    i = header.find("/")
    if i < 0:
        return ""
    candidate, rest = header[:i], header[i + 1:]
    if ";o=0" in rest:
        return ""
    if not candidate or len(candidate) > MAX_TRACE_ID_LENGTH:
        return ""
    if not _TRACE_ID_CHARS.issuperset(candidate):
        return ""
    if candidate.strip("0") == "":
        return ""
    return _fragment(project_id, candidate)


def extract_span_id(header: Optional[str]) -> str:
    """Decimal span id from the header as 16 lowercase hex digits, or ``""``."""
    if not header:
        return ""
    i = header.find("/")
    if i < 0:
        return ""
    span = header[i + 1:].split(";", 1)[0]
    if not span.isdigit() or not span.isascii():
        return ""
    n = int(span)
    if n == 0 or n > _MAX_SPAN_ID:
        return ""
    return f"{n:016x}"


def header_value(request: Any, name: str = TRACE_HEADER) -> str:
    """Read one header from a request object, header mapping or WSGI environ."""
    if request is None:
        return ""
    headers = getattr(request, "headers", request)
    value = headers.get(name) if hasattr(headers, "get") else None
    if value is None and isinstance(headers, Mapping):
        wanted = name.lower()
        environ_key = "HTTP_" + name.upper().replace("-", "_")
        for key, candidate in headers.items():
            if isinstance(key, bytes):
                key = key.decode("latin-1")
            if not isinstance(key, str):
                continue
            if key.lower() == wanted or key == environ_key:
                value = candidate
                break
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    return value if isinstance(value, str) else ""


def span_trace(project_id: str, span: Optional[otel_trace.Span] = None) -> Tuple[str, str]:
    """Trace fragment and span id for an OpenTelemetry span (current span by default)."""
    if not project_id:
        return "", ""
    if span is None:
        span = otel_trace.get_current_span()
    ctx = span.get_span_context()
    if not ctx.is_valid or not ctx.trace_flags.sampled:
        return "", ""
    return (
        _fragment(project_id, otel_trace.format_trace_id(ctx.trace_id)),
        otel_trace.format_span_id(ctx.span_id),
    )

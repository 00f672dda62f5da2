import logging

from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

import cloudlog

def main():
    cloudlog.init(project_id="my-project")
    cloudlog.setup_logging(logging.DEBUG)

    ctx = SpanContext(trace_id=0x4BF92F3577B34DA6A3CE929D0E0E4736, span_id=0x00F067AA0BA902B7,
                      is_remote=True, trace_flags=TraceFlags(TraceFlags.SAMPLED))
    with trace.use_span(NonRecordingSpan(ctx), end_on_exit=False):
        log = cloudlog.for_span()
        log.info("correlated with the active span")
        print("trace:", log.trace, "span:", log.span_id)

    logging.getLogger(__name__).warning("via stdlib logging", extra={"json_fields": {"retry": 3}})
    cloudlog.shutdown()

if __name__ == "__main__":
    main()

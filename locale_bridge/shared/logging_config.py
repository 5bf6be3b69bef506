# locale_bridge/shared/logging_config.py
import sys
import logging
from typing import Optional

import structlog
from opentelemetry import trace
from locale_bridge.shared.config import LogFormat, Settings, settings as default_settings

def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    Lets a host pipeline correlate locale-resolution logs with its own traces.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict

def build_processors(log_format: LogFormat) -> list:
    """
    Returns the structlog processor chain for the given output format.
    """
    processors = [
        structlog.contextvars.merge_contextvars, # Merge context from thread local
        add_open_telemetry_spans,                # Inject Trace IDs
        structlog.processors.add_log_level,      # Add "level": "info"
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == LogFormat.JSON:
        # Production: Machine-readable JSON
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Human-readable colored console output
        processors.append(structlog.dev.ConsoleRenderer())
    return processors

def configure_logging(config: Optional[Settings] = None):
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).
    Every event carries the service name and environment; DEBUG forces
    debug-level output regardless of LOG_LEVEL.

    The library never calls this itself; host applications call it once at
    startup.
    """
    config = config or default_settings
    level = logging.getLevelName(config.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if config.DEBUG:
        level = logging.DEBUG

    # merge_contextvars copies these onto every event.
    structlog.contextvars.bind_contextvars(service=config.APP_NAME, env=config.APP_ENV.value)

    structlog.configure(
        processors=build_processors(config.LOG_FORMAT),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library logging from host code shares the same stream and level.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

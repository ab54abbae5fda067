# quote_scribe\shared\logging_config.py
import sys
import logging
import structlog
from opentelemetry import trace
from quote_scribe.shared.config import settings

# Marks the root handler installed here, so a second configure replaces it
_HANDLER_NAME = "quote_scribe"

def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
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

def add_service_context(_, __, event_dict):
    """
    Stamps every entry with the service name, environment and storage backend.
    Values already bound by the caller win.
    """
    event_dict.setdefault("service", settings.OTEL_SERVICE_NAME)
    event_dict.setdefault("app_env", settings.APP_ENV.value)
    event_dict.setdefault("storage_backend", settings.STORAGE_BACKEND.value)
    return event_dict

def shared_processors():
    """Processors applied both to structlog events and to plain stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_service_context,
        add_open_telemetry_spans,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

def build_renderer():
    if settings.LOG_FORMAT == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()

def configure_logging():
    """
    Configures structlog on top of the standard logging library.

    structlog events and records from uvicorn, httpx and FastAPI all end up
    in one stdout handler and share the same processor chain, so both come
    out as JSON (LOG_FORMAT=json) or as colored console lines.
    """
    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + shared_processors()
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            build_renderer(),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())

    # uvicorn's own handlers would print a second, unstructured copy
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    return handler

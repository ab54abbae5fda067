# quote_scribe/shared/telemetry.py
from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from quote_scribe import __version__
from quote_scribe.shared.config import settings, AppEnv

logger = structlog.get_logger()

# Health checks are not traced
EXCLUDED_URLS = "health/live,health/ready"

_tracer_provider: Optional[TracerProvider] = None

def build_resource() -> Resource:
    return Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.version": __version__,
        "deployment.environment": settings.APP_ENV.value,
        "app.storage_backend": settings.STORAGE_BACKEND.value,
    })

def console_export_enabled() -> bool:
    """Spans are echoed to stdout only while developing with DEBUG on."""
    return settings.APP_ENV == AppEnv.DEVELOPMENT and settings.DEBUG

def setup_telemetry() -> bool:
    """
    Installs the global tracer provider once per process.

    Spans go to the OTLP collector when OTEL_EXPORTER_OTLP_ENDPOINT is set,
    and to the console in development with DEBUG on. With neither, tracing
    stays a no-op and False is returned.
    """
    global _tracer_provider
    if _tracer_provider is not None:
        return True

    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
    console = console_export_enabled()
    if not endpoint and not console:
        logger.info("telemetry_disabled", reason="no exporter configured")
        return False

    provider = TracerProvider(resource=build_resource())
    if endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint.rstrip('/')}/v1/traces"))
        )
    if console:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer_provider = provider
    logger.info(
        "telemetry_enabled",
        service=settings.OTEL_SERVICE_NAME,
        otlp_endpoint=endpoint,
        console=console,
    )
    return True

def flush_telemetry() -> None:
    """Pushes buffered spans out; called when the app shuts down."""
    if _tracer_provider is not None:
        _tracer_provider.force_flush()

def instrument_fastapi(app) -> bool:
    """
    Traces incoming HTTP requests, apart from the health checks.
    Does nothing while tracing is disabled.
    """
    if _tracer_provider is None:
        return False
    FastAPIInstrumentor.instrument_app(
        app,
        tracer_provider=_tracer_provider,
        excluded_urls=EXCLUDED_URLS,
    )
    return True

def get_tracer(name: str):
    """
    Tracer for manual spans, versioned with the package.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("use_case.save_quote"):
            ...
    """
    return trace.get_tracer(name, __version__)

"""OpenTelemetry setup for the constants service.

Spans cover incoming HTTP requests (health probes excluded), jobs-table
queries through SQLAlchemy, and the cache's own fetch/refresh spans
(see app.shared.telemetry.tracing). Exporters: console, otlp, or none.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

# Probes are polled frequently and carry no useful trace data.
EXCLUDED_URLS = "/api/health"


def build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Return the span exporter for exporter_type, or None for "none".

    "otlp" without an endpoint, or an unknown type, falls back to console.
    """
    kind = exporter_type.strip().lower()
    if kind == "none":
        return None
    if kind == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning("TELEMETRY_OTLP_ENDPOINT not set; exporting spans to console")
    elif kind != "console":
        logger.warning("Unknown telemetry exporter %r; exporting spans to console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider lifecycle plus FastAPI/SQLAlchemy instrumentation.

    Built once in the lifespan when TELEMETRY_ENABLED is true.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @property
    def active(self) -> bool:
        return self.enabled and self.tracer_provider is not None

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and register it globally.

        Sampling follows the parent span when there is one, otherwise
        sample_rate (0.0-1.0). Returns None when disabled or on failure;
        telemetry never prevents the service from starting.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        try:
            provider = TracerProvider(
                resource=resource,
                sampler=ParentBased(TraceIdRatioBased(sample_rate)),
            )
            exporter = build_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s version=%s exporter=%s sample_rate=%s",
            self.service_name,
            self.service_version,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace every request except health probes."""
        if not self.active:
            return
        try:
            FastAPIInstrumentor.instrument_app(
                app, tracer_provider=self.tracer_provider, excluded_urls=EXCLUDED_URLS
            )
        except Exception as e:
            logger.exception("Failed to instrument FastAPI: %s", e)
            return
        logger.info("FastAPI instrumentation enabled")

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        """Trace jobs-table queries issued through the async engine."""
        if not self.active:
            return
        try:
            SQLAlchemyInstrumentor().instrument(
                engine=engine.sync_engine, tracer_provider=self.tracer_provider
            )
        except Exception as e:
            logger.exception("Failed to instrument SQLAlchemy: %s", e)
            return
        logger.info("SQLAlchemy instrumentation enabled")

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)
        self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the process telemetry instance (set at startup), if any."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set the process telemetry instance; None clears it on shutdown."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry

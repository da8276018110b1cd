"""
product_api.observability.tracing

OpenTelemetry tracer provider setup for the remote collector.

Responsibilities:
- Describe this service with a `Resource` (name, version, environment).
- Pick a span exporter from settings: none, console, or OTLP/gRPC.
"""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.sdk.resources import (
    DEPLOYMENT_ENVIRONMENT,
    SERVICE_NAME,
    SERVICE_VERSION,
    Resource,
)
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)

from product_api import __version__
from product_api.observability.logging import get_logger
from product_api.settings import Settings

log = get_logger(__name__)


def create_tracer_provider(settings: Settings) -> TracerProvider:
    resource = Resource(
        attributes={
            SERVICE_NAME: settings.service_name,
            SERVICE_VERSION: __version__,
            DEPLOYMENT_ENVIRONMENT: settings.env,
        }
    )
    provider = TracerProvider(resource=resource)

    if settings.telemetry_exporter == "console":
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    elif settings.telemetry_exporter == "otlp":
        # Imported lazily: the gRPC exporter pulls in grpcio.
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        # Batching keeps export off the request path; an unreachable collector drops spans.
        exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    log.info("tracing_configured", exporter=settings.telemetry_exporter)
    return provider


def get_tracer(provider: TracerProvider) -> trace.Tracer:
    return provider.get_tracer("product_api", __version__)


# --- Module Notes -----------------------------------------------------------
# The provider is not installed globally; the app factory owns it and shuts it down,
# which keeps tests free to build their own provider with an in-memory exporter.

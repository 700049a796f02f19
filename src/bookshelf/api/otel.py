"""
OpenTelemetry instrumentation setup for the Bookshelf API.

Pipeline stages always emit spans through the OpenTelemetry API; they are
no-ops until a tracer provider is installed here. When BOOKSHELF_OTEL_ENABLED
is set, spans are exported over OTLP and FastAPI requests are traced.
"""

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)


def setup_opentelemetry(app: FastAPI) -> bool:
    """
    Configure OpenTelemetry instrumentation for the FastAPI application.

    Returns:
        True if tracing was enabled
    """
    if not settings.otel_enabled:
        logger.debug("OpenTelemetry instrumentation disabled")
        return False

    try:
        resource = Resource.create({SERVICE_NAME: settings.otel_service_name})
        tracer_provider = TracerProvider(resource=resource)

        otlp_exporter = OTLPSpanExporter(endpoint=settings.otel_endpoint, insecure=True)
        tracer_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
        trace.set_tracer_provider(tracer_provider)

        FastAPIInstrumentor.instrument_app(app, tracer_provider=tracer_provider)

        logger.info(
            "OpenTelemetry configured for OTLP",
            endpoint=settings.otel_endpoint,
            service_name=settings.otel_service_name,
        )
        return True
    except Exception as e:
        logger.error("Failed to initialize OpenTelemetry", error=str(e))
        return False

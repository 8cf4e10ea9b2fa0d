"""Logging and OpenTelemetry initialization helpers."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from backend.core.config import Settings, settings

logger = logging.getLogger(__name__)
_TRACING_INITIALIZED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: Settings = settings) -> None:
    """Configure root logging once from LOG_LEVEL."""

    logging.basicConfig(level=config.LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger().setLevel(config.LOG_LEVEL)


def setup_tracing(app: Optional[FastAPI] = None, config: Settings = settings) -> None:
    """Configure OpenTelemetry tracers and instrument FastAPI if enabled."""

    global _TRACING_INITIALIZED
    if not config.ENABLE_TRACING:
        return

    if not _TRACING_INITIALIZED:
        resource = Resource.create(
            {
                "service.name": config.API_TITLE.lower().replace(" ", "-"),
                "service.version": config.API_VERSION,
                "environment": config.ENVIRONMENT,
            }
        )

        provider = TracerProvider(resource=resource)
        if config.OTEL_EXPORTER_OTLP_ENDPOINT:
            headers = _parse_headers(config.OTEL_EXPORTER_OTLP_HEADERS)
            exporter = OTLPSpanExporter(endpoint=str(config.OTEL_EXPORTER_OTLP_ENDPOINT), headers=headers or None)
            provider.add_span_processor(BatchSpanProcessor(exporter))
        else:
            logger.warning("Tracing enabled without OTEL_EXPORTER_OTLP_ENDPOINT; spans will not be exported.")
        trace.set_tracer_provider(provider)

        _TRACING_INITIALIZED = True
        logger.info("OpenTelemetry tracing initialized")

    if app is not None:
        FastAPIInstrumentor.instrument_app(app)


def _parse_headers(raw_headers: Optional[str]) -> Dict[str, str]:
    if not raw_headers:
        return {}
    pairs = {}
    for item in raw_headers.split(","):
        if "=" not in item:
            continue
        key, value = item.split("=", 1)
        pairs[key.strip()] = value.strip()
    return pairs


__all__ = ["configure_logging", "setup_tracing"]

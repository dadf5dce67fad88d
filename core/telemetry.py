"""Optional Langfuse tracing through OpenTelemetry."""

import base64
import json
import logging
import os
from typing import Any, Dict

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

logger = logging.getLogger(__name__)


class TelemetryManager:
    """Telemetry manager for Langfuse integration."""

    def __init__(
        self,
        enabled: bool = False,
        public_key: str = "",
        secret_key: str = "",
        host: str = "",
        tag: str = "docs-helper-mcp",
    ) -> None:
        self.enabled = enabled
        self.tag = tag
        self._public_key = public_key
        self._secret_key = secret_key
        self._host = host
        if self.enabled:
            self._setup()

    def _setup(self) -> None:
        langfuse_auth = base64.b64encode(
            f"{self._public_key}:{self._secret_key}".encode()
        ).decode()

        os.environ["OTEL_EXPORTER_OTLP_HEADERS"] = f"Authorization=Basic {langfuse_auth}"
        os.environ["OTEL_EXPORTER_OTLP_ENDPOINT"] = f"{self._host}/api/public/otel"

        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(OTLPSpanExporter()))
        trace.set_tracer_provider(provider)

    def get_tracer(self, name: str) -> trace.Tracer:
        """Get tracer instance."""
        if self.enabled:
            return trace.get_tracer(name)
        # Local provider without processors, spans go nowhere
        return trace.get_tracer(name, tracer_provider=TracerProvider())

    def set_span_attributes(
        self,
        span: trace.Span,
        input_data: Dict[str, Any],
        output_data: Dict[str, Any],
        session_id: str,
    ) -> None:
        """Attach common Langfuse attributes to a span."""
        if not self.enabled:
            return
        try:
            span.set_attribute("langfuse.session.id", session_id)
            span.set_attribute("langfuse.tags", [self.tag])
            span.set_attribute("input", json.dumps(input_data))
            span.set_attribute("output", json.dumps(output_data))
        except Exception as exc:
            logger.error(f"Error setting span attributes: {exc}")

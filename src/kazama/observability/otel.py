from __future__ import annotations

import json
import os
from typing import Optional, Sequence

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import ReadableSpan, TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    SpanExporter,
    SpanExportResult,
)

from kazama.config import settings

try:
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
except ImportError:
    OTLPSpanExporter = None  # type: ignore


class JsonlFileSpanExporter(SpanExporter):
    """One JSON object per span per line, so request timings can be grepped."""

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        with open(self.path, "a", encoding="utf-8") as f:
            for sp in spans:
                ctx = sp.get_span_context()
                rec = {
                    "name": sp.name,
                    "trace_id": f"{ctx.trace_id:032x}",
                    "span_id": f"{ctx.span_id:016x}",
                    "parent_span_id": f"{sp.parent.span_id:016x}" if sp.parent else None,
                    "start_time_ns": sp.start_time,
                    "end_time_ns": sp.end_time,
                    "status": str(sp.status.status_code),
                    "attributes": dict(sp.attributes) if sp.attributes else {},
                }
                f.write(json.dumps(rec, ensure_ascii=False) + "\n")
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        return


def setup_otel(service_name: str = "kazama", trace_file: Optional[str] = None) -> TracerProvider:
    """Install a tracer provider: JSONL file always, OTLP when an endpoint is configured."""
    resource = Resource.create({
        "service.name": service_name,
        "deployment.environment": settings.APP_ENV,
    })

    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    provider.add_span_processor(
        BatchSpanProcessor(JsonlFileSpanExporter(trace_file or settings.TRACE_FILE))
    )

    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if endpoint and OTLPSpanExporter:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint))
        )
    return provider

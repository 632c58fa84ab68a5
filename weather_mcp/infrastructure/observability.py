"""
Observability configuration for the weather MCP server.

Provides OpenTelemetry-based tracing for MCP tool and prompt invocations:
- Custom span creation around each handler
- Workflow-step span events with duration and outcome

Only the OpenTelemetry API is required. Without an SDK tracer provider
(e.g. when not run under `opentelemetry-instrument`) spans are no-ops.

Environment Variables:
    AGENT_OBSERVABILITY_ENABLED: Enable span creation (default: false)
    OTEL_SERVICE_NAME: Service name used for the tracer (default: weather-mcp)

Usage:
    Run with automatic instrumentation:
        opentelemetry-instrument weather-mcp-server
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Optional

from loguru import logger
from opentelemetry import trace
from opentelemetry.trace import SpanKind, Status, StatusCode


class ObservabilityManager:
    """Manages OpenTelemetry spans for the MCP server."""

    def __init__(
        self,
        service_name: str = "weather-mcp",
        enabled: bool = False,
    ) -> None:
        self.service_name = service_name
        self.enabled = enabled
        self._tracer = None

        if self.enabled:
            self._tracer = trace.get_tracer(
                instrumenting_module_name=service_name,
                tracer_provider=trace.get_tracer_provider(),
            )
            logger.info(f"Observability initialized for service: {service_name}")
        else:
            logger.debug("Observability disabled")

    # ------------------------------------------------------------------
    # Span creation
    # ------------------------------------------------------------------

    @contextmanager
    def create_span(
        self,
        name: str,
        kind: Optional[SpanKind] = None,
        attributes: Optional[dict] = None,
    ):
        """
        Create a custom span for detailed tracing.

        Args:
            name: Span name (e.g. "mcp.tool.get_weather").
            kind: SpanKind (defaults to INTERNAL).
            attributes: Custom attributes to attach.
        """
        if not self.enabled or self._tracer is None:
            yield None
            return

        with self._tracer.start_as_current_span(
            name=name,
            kind=kind or SpanKind.INTERNAL,
            attributes=attributes or {},
        ) as span:
            try:
                yield span
            except Exception as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
                raise

    def set_lookup_attributes(
        self,
        tool: str,
        city: str,
        units: str,
        outcome: str | None = None,
    ) -> None:
        """Tag the current span with the weather lookup it is serving."""
        if not self.enabled:
            return

        current_span = trace.get_current_span()
        if not current_span.is_recording():
            return

        current_span.set_attribute("weather.tool", tool)
        current_span.set_attribute("weather.city", city)
        current_span.set_attribute("weather.units", units)
        if outcome is not None:
            current_span.set_attribute("weather.outcome", outcome)

    def add_span_event(
        self,
        name: str,
        attributes: Optional[dict] = None,
    ) -> None:
        """Add an event to the current span."""
        if not self.enabled:
            return

        current_span = trace.get_current_span()
        if current_span.is_recording():
            current_span.add_event(name, attributes=attributes or {})

    def record_workflow_step(
        self,
        step_name: str,
        step_type: str,
        duration_ms: Optional[float] = None,
        success: bool = True,
        metadata: Optional[dict] = None,
    ) -> None:
        """Record a workflow step as a span event with standard attributes."""
        attributes: dict = {
            "workflow.step.name": step_name,
            "workflow.step.type": step_type,
            "workflow.step.success": success,
        }

        if duration_ms is not None:
            attributes["workflow.step.duration_ms"] = duration_ms

        if metadata:
            for key, value in metadata.items():
                attributes[f"workflow.step.{key}"] = str(value)

        self.add_span_event(f"workflow.{step_name}", attributes)


# ------------------------------------------------------------------
# Singleton
# ------------------------------------------------------------------

_observability_manager: ObservabilityManager | None = None


def get_observability_manager() -> ObservabilityManager:
    """Return the process-wide ObservabilityManager (disabled until initialized)."""
    global _observability_manager

    if _observability_manager is None:
        _observability_manager = ObservabilityManager(enabled=False)

    return _observability_manager


def initialize_observability(
    service_name: str = "weather-mcp",
    enabled: bool = False,
) -> ObservabilityManager:
    """Initialize the global observability manager at startup."""
    global _observability_manager

    _observability_manager = ObservabilityManager(
        service_name=service_name,
        enabled=enabled,
    )

    return _observability_manager

"""
Trace decorator for MCP tool and prompt handlers.

Provides a @traced decorator that wraps any async MCP handler with an
OpenTelemetry span. Automatically captures:
- Span name (e.g. "mcp.tool.get_weather", "mcp.prompt.weather_summary")
- Handler type (tool / prompt)
- Function arguments as span attributes
- Duration and success/failure status

Usage:
    @mcp.tool(...)
    @traced(span_name="mcp.tool.get_weather", handler_type="tool")
    async def get_weather(city: str, ...) -> str:
        ...
"""

from __future__ import annotations

import functools
import inspect
import time
from typing import Any, Callable

from loguru import logger

from weather_mcp.infrastructure.observability import get_observability_manager


def traced(
    span_name: str,
    handler_type: str = "tool",
) -> Callable:
    """
    Decorator that wraps an async MCP handler with an OpenTelemetry span.

    Args:
        span_name: The span name (e.g. "mcp.tool.get_forecast").
        handler_type: Either "tool" or "prompt".
    """

    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            observability = get_observability_manager()

            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            span_attributes: dict[str, Any] = {
                "mcp.handler.type": handler_type,
                "mcp.handler.name": func.__name__,
            }
            for param_name, param_value in bound.arguments.items():
                attr_key = f"mcp.{handler_type}.param.{param_name}"
                span_attributes[attr_key] = str(param_value)

            start_time = time.monotonic()

            with observability.create_span(
                name=span_name,
                attributes=span_attributes,
            ):
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    duration_ms = (time.monotonic() - start_time) * 1000
                    observability.record_workflow_step(
                        step_name=func.__name__,
                        step_type=handler_type,
                        duration_ms=round(duration_ms, 2),
                        success=False,
                        metadata={"error": str(e)},
                    )
                    logger.warning(
                        f"[trace] {span_name} failed after {duration_ms:.1f}ms: {e}"
                    )
                    raise

                duration_ms = (time.monotonic() - start_time) * 1000
                observability.record_workflow_step(
                    step_name=func.__name__,
                    step_type=handler_type,
                    duration_ms=round(duration_ms, 2),
                    success=True,
                )
                logger.debug(f"[trace] {span_name} completed in {duration_ms:.1f}ms")
                return result

        return wrapper

    return decorator

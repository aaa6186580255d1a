"""OpenTelemetry tracing helpers for toolmodel.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
package can call ``get_tracer()`` without caring whether the SDK is
installed.  When the SDK is *not* configured the API returns no-op
implementations.

Usage::

    from toolmodel.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("toolmodel.schema.validate") as span:
        span.set_attribute(ATTR_SCHEMA_DIALECT, "2020-12")

To activate real tracing, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install toolmodel[otel]``).
"""

from __future__ import annotations

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used throughout toolmodel instrumentation
# ---------------------------------------------------------------------------

ATTR_SCHEMA_DIALECT = "toolmodel.schema.dialect"
ATTR_VALIDATION_OUTCOME = "toolmodel.validation.outcome"
ATTR_VALIDATION_ERROR = "toolmodel.validation.error"
ATTR_TOOL_ID = "toolmodel.tool.id"
ATTR_TOOL_DIRECTION = "toolmodel.tool.direction"

_INSTRUMENTATION_NAME = "toolmodel"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "toolmodel",
    export_to_console: bool = True,
) -> None:
    """Configure OpenTelemetry tracing (requires ``toolmodel[otel]``).

    Parameters
    ----------
    service_name:
        The ``service.name`` resource attribute.
    export_to_console:
        If ``True``, export spans as JSON to stdout.

    Raises
    ------
    ImportError
        If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install toolmodel[otel]"
        )
        raise ImportError(msg) from exc

    resource = Resource.create({"service.name": service_name})  # pyright: ignore[reportUnknownVariableType,reportUnknownMemberType]
    provider = TracerProvider(resource=resource)  # pyright: ignore[reportUnknownVariableType]

    if export_to_console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))  # pyright: ignore[reportUnknownMemberType]

    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]

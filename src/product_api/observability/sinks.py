"""
product_api.observability.sinks

Destinations for lifecycle telemetry.

Responsibilities:
- `LogSink`: local/console stream (structlog JSON on stdout).
- `TelemetryCollector`: remote trace + exception records (OpenTelemetry spans).
- Translate each adapter's own failures into `TelemetryError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from product_api.errors import TelemetryError

if TYPE_CHECKING:
    from product_api.observability.telemetry import TelemetryEvent


class LogSink(Protocol):
    def write(self, event: TelemetryEvent) -> None: ...


class TelemetryCollector(Protocol):
    def record_trace(self, message: str, severity: int, properties: Mapping[str, str]) -> None: ...

    def record_exception(self, error: BaseException, properties: Mapping[str, str]) -> None: ...


class LocalLogSink:
    """Writes one structured log line per event at the phase's severity."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._log = logger or structlog.get_logger("product_api.telemetry")

    def write(self, event: TelemetryEvent) -> None:
        fields: dict[str, object] = {"phase": event.phase.value, "process_name": event.process_name}
        if event.context is not None:
            fields["context"] = event.context
        if event.error is not None:
            fields["error"] = {
                "type": event.error.type,
                "message": event.error.message,
                "file_name": event.error.file_name,
                "line_number": event.error.line_number,
            }
        if event.exception is not None:
            fields["exc_info"] = event.exception
        try:
            self._log.log(event.severity, event.message, **fields)
        except Exception as e:
            raise TelemetryError("local log sink failed") from e


class OpenTelemetryCollector:
    """
    Remote collector backed by an OpenTelemetry tracer.
    Each record is its own short span, parented to whatever span is current.
    """

    def __init__(self, tracer: trace.Tracer, *, application_name: str = "ProductApi") -> None:
        self._tracer = tracer
        self._trace_span = f"{application_name}.trace"
        self._exception_span = f"{application_name}.exception"

    def record_trace(self, message: str, severity: int, properties: Mapping[str, str]) -> None:
        attributes = {
            "log.message": message,
            "log.severity": logging.getLevelName(severity),
            **properties,
        }
        try:
            with self._tracer.start_as_current_span(self._trace_span, attributes=attributes):
                pass
        except Exception as e:
            raise TelemetryError("trace record failed") from e

    def record_exception(self, error: BaseException, properties: Mapping[str, str]) -> None:
        try:
            with self._tracer.start_as_current_span(
                self._exception_span,
                attributes=dict(properties),
                record_exception=False,
                set_status_on_exception=False,
            ) as span:
                span.record_exception(error)
                span.set_status(Status(StatusCode.ERROR, str(error)))
        except Exception as e:
            raise TelemetryError("exception record failed") from e


class NullCollector:
    """Remote telemetry disabled."""

    def record_trace(self, message: str, severity: int, properties: Mapping[str, str]) -> None:
        return None

    def record_exception(self, error: BaseException, properties: Mapping[str, str]) -> None:
        return None


# --- Module Notes -----------------------------------------------------------
# Swapping the remote backend means writing another `TelemetryCollector`; the
# helper in `observability.telemetry` does not change.

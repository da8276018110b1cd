"""
product_api.observability.telemetry

Lifecycle telemetry for service operations.

Responsibilities:
- Define the `Phase` of an operation (Start/Warning/Success/Exception) separately
  from the human-readable message template used for each phase.
- Build a structured `TelemetryEvent` (message, severity, serialized context,
  captured error details).
- Emit each event once to the local log sink and once to the remote collector,
  plus a separate exception record on the remote side when an error is attached.
- Never let a sink failure escape into the calling operation.

Per operation the expected sequence is:

    START -> WARNING* -> (SUCCESS | EXCEPTION)
"""

from __future__ import annotations

import enum
import logging
import traceback
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import TypeAdapter

from product_api.observability.sinks import LogSink, TelemetryCollector

_fallback = logging.getLogger("product_api.telemetry.fallback")

_CONTEXT_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


class Phase(enum.StrEnum):
    start = "START"
    warning = "WARNING"
    success = "SUCCESS"
    exception = "EXCEPTION"

    @property
    def severity(self) -> int:
        return _PHASE_SEVERITY[self]


_PHASE_SEVERITY: dict[Phase, int] = {
    Phase.start: logging.INFO,
    Phase.warning: logging.WARNING,
    Phase.success: logging.INFO,
    Phase.exception: logging.ERROR,
}

# Wording only; dispatch always goes through `Phase`.
PHASE_TEMPLATES: dict[Phase, str] = {
    Phase.start: "{application} Start Process: {process_name}",
    Phase.warning: "{application} Warning Process: {process_name}",
    Phase.success: "{application} Success Process: {process_name}",
    Phase.exception: "{application} Exception Process: {process_name}",
}


def process_name(operation: str, **identifiers: Any) -> str:
    """
    Conventional process label: "<operation> with <key>: <value>, ...".
    """

    if not identifiers:
        return operation
    keyed = ", ".join(f"{key}: {value}" for key, value in identifiers.items())
    return f"{operation} with {keyed}"


@dataclass(frozen=True, slots=True)
class ErrorDetails:
    type: str
    message: str
    # Origin = innermost traceback frame, i.e. where the exception was raised.
    file_name: str | None = None
    line_number: int | None = None

    @classmethod
    def from_exception(cls, error: BaseException) -> ErrorDetails:
        frames = traceback.extract_tb(error.__traceback__) if error.__traceback__ else []
        origin = frames[-1] if frames else None
        return cls(
            type=type(error).__name__,
            message=str(error),
            file_name=origin.filename if origin else None,
            line_number=origin.lineno if origin else None,
        )


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
    process_name: str
    phase: Phase
    message: str
    context: str | None = None
    error: ErrorDetails | None = None
    exception: BaseException | None = field(default=None, repr=False, compare=False)

    @property
    def severity(self) -> int:
        return self.phase.severity

    def properties(self) -> dict[str, str]:
        # Kept out of the message so the template stays stable for aggregation/search.
        props: dict[str, str] = {"Phase": self.phase.value, "ProcessName": self.process_name}
        if self.context is not None:
            props["Context"] = self.context
        if self.error is not None:
            props["ExceptionType"] = self.error.type
            props["ExceptionMessage"] = self.error.message
            if self.error.file_name is not None:
                props["FileName"] = self.error.file_name
            if self.error.line_number is not None:
                props["LineNumber"] = str(self.error.line_number)
        return props


def serialize_context(context: Any) -> str | None:
    if context is None:
        return None
    try:
        return _CONTEXT_ADAPTER.dump_json(context).decode()
    except Exception:
        # Unserializable payloads fall back to repr; reporting must not raise.
        return repr(context)


class TelemetryHelper:
    """
    Single reporting primitive shared by the controller and service layers.

    `local` and `remote` are optional; a disabled sink is simply None.
    `min_level` is a stdlib logging level applied to both sinks.
    """

    def __init__(
        self,
        *,
        local: LogSink | None,
        remote: TelemetryCollector | None,
        application_name: str = "ProductApi",
        min_level: int = logging.INFO,
    ) -> None:
        self._local = local
        self._remote = remote
        self._application_name = application_name
        self._min_level = min_level

    def build_event(
        self,
        process_name: str,
        phase: Phase,
        context: Any = None,
        error: BaseException | None = None,
    ) -> TelemetryEvent:
        message = PHASE_TEMPLATES[phase].format(
            application=self._application_name, process_name=process_name
        )
        return TelemetryEvent(
            process_name=process_name,
            phase=phase,
            message=message,
            context=serialize_context(context),
            error=ErrorDetails.from_exception(error) if error is not None else None,
            exception=error,
        )

    def log_process(
        self,
        process_name: str,
        phase: Phase,
        context: Any = None,
        error: BaseException | None = None,
    ) -> None:
        if phase.severity < self._min_level:
            return
        try:
            event = self.build_event(process_name, phase, context, error)
        except Exception as e:
            _fallback.warning("telemetry event could not be built: %r", e)
            return

        if self._local is not None:
            self._guard("local", self._local.write, event)

        if self._remote is not None:
            props = {**_request_properties(), **event.properties()}
            self._guard(
                "remote.trace", self._remote.record_trace, event.message, event.severity, props
            )
            if error is not None:
                # Separate record so exception search and trace search stay independent.
                self._guard("remote.exception", self._remote.record_exception, error, props)

    def _guard(self, sink: str, emit: Callable[..., None], *args: Any) -> None:
        try:
            emit(*args)
        except Exception as e:
            # A sink outage degrades observability, never the calling operation.
            _fallback.warning("telemetry sink %s failed: %r", sink, e)


def _request_properties() -> dict[str, str]:
    # Request-scoped fields bound by `RequestContextMiddleware`.
    return {key: str(value) for key, value in structlog.contextvars.get_contextvars().items()}


# --- Module Notes -----------------------------------------------------------
# Nothing here decides HTTP behavior; callers pick the phase and this module only
# formats and ships the record.

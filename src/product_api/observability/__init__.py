"""
product_api.observability

Observability package.

Responsibilities:
- Structured logging configuration and request context propagation.
- Lifecycle telemetry (Start/Warning/Success/Exception) fanned out to a local log
  sink and a remote OpenTelemetry collector.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Business code only talks to `telemetry.TelemetryHelper`; sinks and exporters are
# wired in the app factory.

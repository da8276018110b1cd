"""
tests.conftest

Shared fixtures: recording sinks, a telemetry helper wired to them, and an
OpenTelemetry provider that exports into memory.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import pytest
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from product_api.observability.telemetry import TelemetryHelper
from product_api.settings import Settings
from tests.fakes import RecordingCollector, RecordingLogSink


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", telemetry_exporter="none")


@pytest.fixture
def log_sink() -> RecordingLogSink:
    return RecordingLogSink()


@pytest.fixture
def collector() -> RecordingCollector:
    return RecordingCollector()


@pytest.fixture
def telemetry(log_sink: RecordingLogSink, collector: RecordingCollector) -> TelemetryHelper:
    return TelemetryHelper(local=log_sink, remote=collector)


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@asynccontextmanager
async def api_client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

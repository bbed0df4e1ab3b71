"""
Shared fixtures for telemetry tests
"""
import pytest
from unittest.mock import patch

from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from gitlens_telemetry.config import TelemetryContext
from gitlens_telemetry.utils.diag import disable_verbose_diagnostics


@pytest.fixture
def context():
    """Telemetry context describing a test host"""
    return TelemetryContext(
        env="test",
        extension_id="eamodio.gitlens",
        extension_version="15.0.0",
        machine_id="machine-123",
        session_id="session-456",
        language="en",
        platform="linux",
        vscode_edition="Visual Studio Code",
        vscode_host="desktop",
        vscode_version="1.90.0",
    )


@pytest.fixture
def memory_exporter():
    """In-memory exporter standing in for the OTLP network exporter"""
    exporter = InMemorySpanExporter()
    with patch("gitlens_telemetry.telemetry.provider.create_otlp_exporter", return_value=exporter) as factory:
        exporter.factory = factory
        yield exporter


@pytest.fixture(autouse=True)
def reset_diagnostics():
    """Undo verbose SDK logging enabled by debug providers"""
    yield
    disable_verbose_diagnostics()

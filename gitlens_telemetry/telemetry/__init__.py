"""
OpenTelemetry Integration Module

Provides the telemetry provider used by the extension:
- interface: TelemetryProvider contract
- provider: OpenTelemetry implementation (resource, processors, exporters)
- exporters: OTLP/HTTP exporter and export failure reporting
- resource: Resource attributes describing the host
"""

from .interface import AttributeValue, Attributes, TelemetryProvider
from .provider import OpenTelemetryProvider
from .exporters import ReportingSpanExporter, create_otlp_exporter
from .resource import build_resource, resource_attributes

__all__ = [
    "AttributeValue",
    "Attributes",
    "TelemetryProvider",
    "OpenTelemetryProvider",
    "ReportingSpanExporter",
    "create_otlp_exporter",
    "build_resource",
    "resource_attributes",
]

"""
GitLens telemetry

Records extension events as OpenTelemetry spans and ships them to the
GitKraken collector over OTLP/HTTP.
"""

from .config import ProxyAgentOptions, TelemetryConfig, TelemetryContext
from .telemetry import OpenTelemetryProvider, TelemetryProvider

__version__ = "0.1.0"

__all__ = [
    "ProxyAgentOptions",
    "TelemetryConfig",
    "TelemetryContext",
    "OpenTelemetryProvider",
    "TelemetryProvider",
]

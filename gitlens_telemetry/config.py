"""
Configuration settings for GitLens telemetry
"""
import os
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field


SERVICE_NAME = "gitlens"

PRODUCTION_ENDPOINT = "https://otel.gitkraken.com:4318/v1/traces"
DEBUG_ENDPOINT = "https://otel-dev.gitkraken.com:4318/v1/traces"


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid integer for {name}: {value!r}")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class TelemetryContext:
    """Description of the host environment the extension runs in"""
    env: str
    extension_id: str
    extension_version: str
    machine_id: str
    session_id: str
    language: str
    platform: str
    vscode_edition: str
    vscode_host: str
    vscode_version: str


@dataclass
class ProxyAgentOptions:
    """Proxy settings forwarded to the OTLP/HTTP transport"""
    proxy_url: str
    no_proxy: Optional[str] = None
    verify: Union[bool, str] = True  # False disables TLS verification, a str is a CA bundle path
    cert: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class TelemetryConfig:
    """Tuning for the span pipeline"""
    # BatchSpanProcessor settings
    max_queue_size: int = 2048
    schedule_delay_millis: int = 5000
    max_export_batch_size: int = 512
    export_timeout_millis: int = 30000

    # OTLP exporter request timeout in seconds
    exporter_timeout_seconds: int = 10

    # Upper bound on the flush performed by dispose()
    flush_timeout_millis: int = 30000

    # Also install the provider as the process-wide OpenTelemetry provider
    set_global_provider: bool = False

    def __post_init__(self):
        if self.max_export_batch_size > self.max_queue_size:
            raise ValueError(
                f"max_export_batch_size ({self.max_export_batch_size}) must be less than "
                f"or equal to max_queue_size ({self.max_queue_size})"
            )
        for name in ("max_queue_size", "schedule_delay_millis", "max_export_batch_size",
                     "export_timeout_millis", "exporter_timeout_seconds", "flush_timeout_millis"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @classmethod
    def from_env(cls) -> "TelemetryConfig":
        """Create config from environment variables"""
        return cls(
            max_queue_size=_env_int("GITLENS_TELEMETRY_MAX_QUEUE_SIZE", 2048),
            schedule_delay_millis=_env_int("GITLENS_TELEMETRY_SCHEDULE_DELAY_MILLIS", 5000),
            max_export_batch_size=_env_int("GITLENS_TELEMETRY_MAX_EXPORT_BATCH_SIZE", 512),
            export_timeout_millis=_env_int("GITLENS_TELEMETRY_EXPORT_TIMEOUT_MILLIS", 30000),
            exporter_timeout_seconds=_env_int("GITLENS_TELEMETRY_EXPORTER_TIMEOUT", 10),
            flush_timeout_millis=_env_int("GITLENS_TELEMETRY_FLUSH_TIMEOUT_MILLIS", 30000),
            set_global_provider=_env_bool("GITLENS_TELEMETRY_SET_GLOBAL", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "max_queue_size": self.max_queue_size,
            "schedule_delay_millis": self.schedule_delay_millis,
            "max_export_batch_size": self.max_export_batch_size,
            "export_timeout_millis": self.export_timeout_millis,
            "exporter_timeout_seconds": self.exporter_timeout_seconds,
            "flush_timeout_millis": self.flush_timeout_millis,
            "set_global_provider": self.set_global_provider,
        }


def get_endpoint(debugging: bool) -> str:
    """Return the collector endpoint for the given mode"""
    return DEBUG_ENDPOINT if debugging else PRODUCTION_ENDPOINT

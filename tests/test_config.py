"""
Tests for telemetry configuration
"""
import os
import pytest
from unittest.mock import patch

from gitlens_telemetry.config import (
    DEBUG_ENDPOINT,
    PRODUCTION_ENDPOINT,
    ProxyAgentOptions,
    TelemetryConfig,
    TelemetryContext,
    get_endpoint,
)


class TestEndpoints:
    """Test collector endpoint selection"""

    def test_production_endpoint(self):
        assert get_endpoint(False) == "https://otel.gitkraken.com:4318/v1/traces"
        assert get_endpoint(False) == PRODUCTION_ENDPOINT

    def test_debug_endpoint(self):
        assert get_endpoint(True) == "https://otel-dev.gitkraken.com:4318/v1/traces"
        assert get_endpoint(True) == DEBUG_ENDPOINT


class TestTelemetryConfig:
    """Test pipeline configuration"""

    def test_default_values(self):
        """Test default config values"""
        config = TelemetryConfig()
        assert config.max_queue_size == 2048
        assert config.schedule_delay_millis == 5000
        assert config.max_export_batch_size == 512
        assert config.export_timeout_millis == 30000
        assert config.exporter_timeout_seconds == 10
        assert config.flush_timeout_millis == 30000
        assert config.set_global_provider is False

    def test_config_from_env(self):
        """Test config creation from environment"""
        with patch.dict(os.environ, {
            "GITLENS_TELEMETRY_MAX_QUEUE_SIZE": "100",
            "GITLENS_TELEMETRY_SCHEDULE_DELAY_MILLIS": "250",
            "GITLENS_TELEMETRY_MAX_EXPORT_BATCH_SIZE": "50",
            "GITLENS_TELEMETRY_SET_GLOBAL": "true",
        }):
            config = TelemetryConfig.from_env()
            assert config.max_queue_size == 100
            assert config.schedule_delay_millis == 250
            assert config.max_export_batch_size == 50
            assert config.export_timeout_millis == 30000
            assert config.set_global_provider is True

    def test_config_from_empty_env(self):
        """Test defaults are used when no variables are set"""
        with patch.dict(os.environ, clear=True):
            assert TelemetryConfig.from_env() == TelemetryConfig()

    def test_invalid_env_integer(self):
        """Test error on a non-numeric environment value"""
        with patch.dict(os.environ, {"GITLENS_TELEMETRY_MAX_QUEUE_SIZE": "lots"}):
            with pytest.raises(ValueError, match="Invalid integer"):
                TelemetryConfig.from_env()

    def test_batch_larger_than_queue(self):
        """Test error when the export batch cannot fit in the queue"""
        with pytest.raises(ValueError, match="max_export_batch_size"):
            TelemetryConfig(max_queue_size=10, max_export_batch_size=20)

    def test_non_positive_value(self):
        """Test error on a zero timeout"""
        with pytest.raises(ValueError, match="flush_timeout_millis must be positive"):
            TelemetryConfig(flush_timeout_millis=0)

    def test_config_to_dict(self):
        """Test config serialization to dictionary"""
        config_dict = TelemetryConfig(schedule_delay_millis=1000).to_dict()
        assert config_dict["schedule_delay_millis"] == 1000
        assert config_dict["max_queue_size"] == 2048
        assert "set_global_provider" in config_dict
        assert "flush_timeout_millis" in config_dict


class TestModels:
    """Test context and proxy records"""

    def test_context_is_immutable(self, context):
        with pytest.raises(AttributeError):
            context.env = "production"  # type: ignore

    def test_proxy_defaults(self):
        agent = ProxyAgentOptions(proxy_url="http://proxy:3128")
        assert agent.verify is True
        assert agent.no_proxy is None
        assert agent.cert is None
        assert agent.headers == {}

    def test_context_equality(self, context):
        assert context == TelemetryContext(**context.__dict__)

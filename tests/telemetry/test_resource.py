"""
Tests for resource attributes
"""
from gitlens_telemetry.telemetry.resource import build_resource, resource_attributes


def test_resource_attributes_mapping(context):
    """Test every context field maps to its resource key"""
    attributes = resource_attributes(context)
    assert attributes == {
        "service.name": "gitlens",
        "service.version": "15.0.0",
        "deployment.environment": "test",
        "device.id": "machine-123",
        "os.type": "linux",
        "extension.id": "eamodio.gitlens",
        "session.id": "session-456",
        "language": "en",
        "vscode.edition": "Visual Studio Code",
        "vscode.version": "1.90.0",
        "vscode.host": "desktop",
    }


def test_build_resource_keeps_sdk_defaults(context):
    """Test the resource adds SDK identification and keeps the fixed service name"""
    resource = build_resource(context)
    assert resource.attributes["service.name"] == "gitlens"
    assert resource.attributes["telemetry.sdk.language"] == "python"
    assert resource.attributes["vscode.host"] == "desktop"


def test_standard_keys_from_current_semconv():
    """Test resource keys come from the attribute modules, not the deprecated ResourceAttributes class"""
    import gitlens_telemetry.telemetry.resource as resource

    assert not hasattr(resource, "ResourceAttributes")
    assert resource.SERVICE_NAME_KEY == "service.name"
    assert resource.SERVICE_VERSION == "service.version"
    assert resource.DEVICE_ID == "device.id"
    assert resource.OS_TYPE == "os.type"
    assert resource.DEPLOYMENT_ENVIRONMENT == "deployment.environment"

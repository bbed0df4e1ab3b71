"""
Resource descriptor for the extension process
"""

from typing import Dict

from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv._incubating.attributes.device_attributes import DEVICE_ID
from opentelemetry.semconv._incubating.attributes.os_attributes import OS_TYPE
from opentelemetry.semconv.attributes.service_attributes import SERVICE_NAME as SERVICE_NAME_KEY
from opentelemetry.semconv.attributes.service_attributes import SERVICE_VERSION

from gitlens_telemetry.config import SERVICE_NAME, TelemetryContext

# Collector receives the pre-1.27 key; newer semconv names it deployment.environment.name
DEPLOYMENT_ENVIRONMENT = "deployment.environment"


def resource_attributes(context: TelemetryContext) -> Dict[str, str]:
    """Map a TelemetryContext to resource attribute keys

    Args:
        context: Host environment description

    Returns:
        Dict[str, str]: Resource attributes
    """
    return {
        SERVICE_NAME_KEY: SERVICE_NAME,
        SERVICE_VERSION: context.extension_version,
        DEPLOYMENT_ENVIRONMENT: context.env,
        DEVICE_ID: context.machine_id,
        OS_TYPE: context.platform,
        "extension.id": context.extension_id,
        "session.id": context.session_id,
        "language": context.language,
        "vscode.edition": context.vscode_edition,
        "vscode.version": context.vscode_version,
        "vscode.host": context.vscode_host,
    }


def build_resource(context: TelemetryContext) -> Resource:
    """Create the Resource, merged over the SDK's default attributes"""
    return Resource.create(resource_attributes(context))

"""
Telemetry provider example

Records a few events in debug mode: each span is printed to the console and
sent synchronously to the dev collector.
"""

import logging
import time

from gitlens_telemetry import OpenTelemetryProvider, TelemetryContext

logging.basicConfig(level=logging.INFO)


def main():
    context = TelemetryContext(
        env="dev",
        extension_id="eamodio.gitlens",
        extension_version="15.0.0",
        machine_id="example-machine",
        session_id="example-session",
        language="en",
        platform="linux",
        vscode_edition="Visual Studio Code",
        vscode_host="desktop",
        vscode_version="1.90.0",
    )

    provider = OpenTelemetryProvider(
        context,
        debugging=True,
        on_export_error=lambda spans, result: print(f"Failed to export {len(spans)} span(s)"),
    )
    try:
        provider.set_global_attributes({"account.plan": "free"})
        provider.send_event("activate", {"activation.mode": "startup"})

        span = provider.start_event("graph/load")
        time.sleep(0.1)
        span.set_attribute("graph.rows", 250)
        span.end()

        with provider.event("command/executed", {"command": "gitlens.showGraph"}):
            time.sleep(0.05)
    finally:
        provider.dispose()


if __name__ == "__main__":
    main()

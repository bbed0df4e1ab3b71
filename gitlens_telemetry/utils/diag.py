"""
Console diagnostics for the OpenTelemetry SDK.

The SDK reports its internal problems (dropped spans, export retries, invalid
attributes) through the ``opentelemetry`` logger hierarchy.
"""
import logging
import sys

logger = logging.getLogger(__name__)

OTEL_LOGGER_NAME = "opentelemetry"
_HANDLER_NAME = "gitlens-telemetry-diag"


def enable_verbose_diagnostics(stream=None) -> logging.Handler:
    """Route SDK diagnostics at DEBUG level to the console

    Repeated calls reuse the handler installed by the first call.

    Args:
        stream: Output stream, defaults to stderr

    Returns:
        logging.Handler: The installed console handler
    """
    otel_logger = logging.getLogger(OTEL_LOGGER_NAME)
    otel_logger.setLevel(logging.DEBUG)

    for handler in otel_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    otel_logger.addHandler(handler)

    logger.debug("Verbose OpenTelemetry diagnostics enabled")
    return handler


def disable_verbose_diagnostics() -> None:
    """Remove the console handler and restore the default level"""
    otel_logger = logging.getLogger(OTEL_LOGGER_NAME)
    for handler in list(otel_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            otel_logger.removeHandler(handler)
    otel_logger.setLevel(logging.NOTSET)

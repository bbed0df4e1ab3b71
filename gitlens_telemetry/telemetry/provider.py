"""
OpenTelemetry-backed telemetry provider

Wires a TracerProvider for the extension: resource attributes describing the
host, a console pipeline in debug mode and one OTLP/HTTP pipeline to the
GitKraken collector. Each provider owns its pipeline; callers that need the
SDK provider receive it through ``tracer_provider``.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Dict, Generator, IO, Optional

from opentelemetry import trace
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)
from opentelemetry.trace import Span, Status, StatusCode

from gitlens_telemetry.config import ProxyAgentOptions, TelemetryConfig, TelemetryContext, get_endpoint
from gitlens_telemetry.telemetry.exporters import ExportErrorCallback, ReportingSpanExporter, create_otlp_exporter
from gitlens_telemetry.telemetry.interface import AttributeValue, Attributes, TelemetryProvider, merge_attributes
from gitlens_telemetry.telemetry.resource import build_resource
from gitlens_telemetry.utils.diag import enable_verbose_diagnostics
from gitlens_telemetry.utils.timeutils import TimeInput, now_ns, to_time_ns

logger = logging.getLogger(__name__)


class OpenTelemetryProvider(TelemetryProvider):
    """Telemetry provider that records events as OpenTelemetry spans"""

    def __init__(self,
                 context: TelemetryContext,
                 agent: Optional[ProxyAgentOptions] = None,
                 debugging: bool = False,
                 config: Optional[TelemetryConfig] = None,
                 on_export_error: Optional[ExportErrorCallback] = None,
                 console_out: Optional[IO] = None):
        """Configure the tracing pipeline

        Args:
            context: Host environment description
            agent: Optional proxy options for the collector connection
            debugging: Print spans to the console and export synchronously to the dev collector
            config: Pipeline tuning, defaults to TelemetryConfig()
            on_export_error: Called with the spans of every batch that failed to export
            console_out: Stream for the debug console exporter, defaults to stdout
        """
        self._config = config or TelemetryConfig()
        self._debugging = bool(debugging)
        self._global_attributes: Dict[str, AttributeValue] = {}
        self._disposed = False

        provider = TracerProvider(resource=build_resource(context))

        if self._debugging:
            enable_verbose_diagnostics()
            provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=console_out or sys.stdout)))

        endpoint = get_endpoint(self._debugging)
        exporter = ReportingSpanExporter(
            create_otlp_exporter(endpoint, agent=agent, timeout=self._config.exporter_timeout_seconds),
            on_error=on_export_error,
        )
        provider.add_span_processor(self._create_processor(exporter))

        if self._config.set_global_provider:
            trace.set_tracer_provider(provider)

        self._provider = provider
        self._tracer = provider.get_tracer(context.extension_id)

        logger.info(
            f"Telemetry configured, extension: {context.extension_id}, endpoint: {endpoint}, "
            f"debugging: {self._debugging}"
        )

    def _create_processor(self, exporter: ReportingSpanExporter) -> SpanProcessor:
        if self._debugging:
            return SimpleSpanProcessor(exporter)
        return BatchSpanProcessor(
            exporter,
            max_queue_size=self._config.max_queue_size,
            schedule_delay_millis=self._config.schedule_delay_millis,
            max_export_batch_size=self._config.max_export_batch_size,
            export_timeout_millis=self._config.export_timeout_millis,
        )

    @property
    def tracer_provider(self) -> TracerProvider:
        return self._provider

    @property
    def debugging(self) -> bool:
        return self._debugging

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def global_attributes(self) -> Dict[str, AttributeValue]:
        return dict(self._global_attributes)

    def send_event(self,
                   name: str,
                   data: Optional[Attributes] = None,
                   start_time: Optional[TimeInput] = None,
                   end_time: Optional[TimeInput] = None) -> None:
        if self._disposed:
            logger.debug(f"Telemetry disposed, dropping event {name}")
            return

        span = self._start_span(name, data, start_time)
        span.end(end_time=to_time_ns(end_time))

    def start_event(self,
                    name: str,
                    data: Optional[Attributes] = None,
                    start_time: Optional[TimeInput] = None) -> Span:
        if self._disposed:
            logger.debug(f"Telemetry disposed, returning non-recording span for {name}")
            return trace.INVALID_SPAN

        return self._start_span(name, data, start_time)

    @contextmanager
    def event(self, name: str, data: Optional[Attributes] = None) -> Generator[Span, None, None]:
        """Context-manager helper that ends the event span on exit

        An exception raised inside the block is recorded on the span and re-raised.
        """
        span = self.start_event(name, data)
        try:
            yield span
        except Exception as e:
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            raise
        finally:
            span.end()

    def _start_span(self, name: str, data: Optional[Attributes], start_time: Optional[TimeInput]) -> Span:
        start = to_time_ns(start_time)
        return self._tracer.start_span(
            name,
            attributes=merge_attributes(self._global_attributes, data),
            start_time=start if start is not None else now_ns(),
        )

    def set_global_attributes(self, attributes: Attributes) -> None:
        self._global_attributes = dict(attributes)

    def flush(self, timeout_millis: Optional[int] = None) -> bool:
        """Export every finished span still held by the processors

        Args:
            timeout_millis: Upper bound, defaults to the configured flush timeout

        Returns:
            bool: True if all processors flushed in time
        """
        if self._disposed:
            return True
        if timeout_millis is None:
            timeout_millis = self._config.flush_timeout_millis
        flushed = self._provider.force_flush(timeout_millis)
        if not flushed:
            logger.warning(f"Telemetry flush did not complete within {timeout_millis}ms")
        return flushed

    def dispose(self) -> None:
        """Flush pending spans and shut the pipeline down

        A provider installed with ``set_global_provider`` stays the
        process-wide provider: the OpenTelemetry API cannot unregister it.
        Spans started through ``trace.get_tracer`` afterwards are dropped by
        the shut-down processors, which log SDK warnings.
        """
        if self._disposed:
            return
        self.flush()
        self._disposed = True
        self._provider.shutdown()
        if self._config.set_global_provider:
            logger.warning("Telemetry disposed while registered as the global tracer provider; "
                           "global spans will be dropped")
        else:
            logger.info("Telemetry disposed")

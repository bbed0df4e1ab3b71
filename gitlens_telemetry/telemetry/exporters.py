"""
Span exporters

Builds the OTLP/HTTP exporter that ships spans to the GitKraken collector and
a wrapper that reports batches the pipeline fails to deliver.
"""

import logging
from typing import Callable, Optional, Sequence

import requests
from requests.utils import should_bypass_proxies
from opentelemetry.exporter.otlp.proto.http import Compression
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from gitlens_telemetry.config import ProxyAgentOptions

logger = logging.getLogger(__name__)

ExportErrorCallback = Callable[[Sequence[ReadableSpan], SpanExportResult], None]


class ProxySession(requests.Session):
    """Session whose proxy and TLS settings override per-request values

    The OTLP exporter passes ``verify`` on every post, and requests lets both
    request-level values and ``*_PROXY`` environment variables win over the
    session's own settings.
    """

    def merge_environment_settings(self, url, proxies, stream, verify, cert):
        return super().merge_environment_settings(
            url,
            {**(proxies or {}), **self.proxies},
            stream,
            self.verify,
            self.cert if self.cert is not None else cert,
        )


def proxy_bypassed(agent: ProxyAgentOptions, endpoint: str) -> bool:
    """Check whether the endpoint matches the agent's no_proxy list"""
    if not agent.no_proxy:
        return False
    return should_bypass_proxies(endpoint, no_proxy=agent.no_proxy)


def create_proxy_session(agent: ProxyAgentOptions, endpoint: str) -> requests.Session:
    """Build an HTTP session that routes exports through a proxy

    TLS settings and headers apply even when ``no_proxy`` lets the endpoint
    bypass the proxy.

    Args:
        agent: Proxy options
        endpoint: Collector URL the session will post to

    Returns:
        requests.Session: Session for the OTLP exporter
    """
    session = ProxySession()
    if proxy_bypassed(agent, endpoint):
        logger.info(f"Endpoint {endpoint} matches no_proxy, connecting directly")
        # also filters proxies picked up from the environment
        session.proxies["no_proxy"] = agent.no_proxy
    else:
        session.proxies.update({"http": agent.proxy_url, "https": agent.proxy_url})
    session.verify = agent.verify
    if agent.cert:
        session.cert = agent.cert
    if agent.headers:
        session.headers.update(agent.headers)
    return session


def create_otlp_exporter(endpoint: str,
                         agent: Optional[ProxyAgentOptions] = None,
                         timeout: Optional[int] = None) -> OTLPSpanExporter:
    """Create a gzip-compressed OTLP/HTTP span exporter

    Args:
        endpoint: Full traces URL of the collector
        agent: Optional proxy options
        timeout: Request timeout in seconds

    Returns:
        OTLPSpanExporter: Configured exporter
    """
    session = create_proxy_session(agent, endpoint) if agent is not None else None
    exporter = OTLPSpanExporter(
        endpoint=endpoint,
        compression=Compression.Gzip,
        timeout=timeout,
        session=session,
    )
    logger.info(f"OTLP span exporter configured, endpoint: {endpoint}, proxy: {agent.proxy_url if agent else None}")
    return exporter


class ReportingSpanExporter(SpanExporter):
    """Delegating exporter that logs and reports failed exports

    The wrapped exporter still owns retries; this class only observes the
    final result of each batch.
    """

    def __init__(self, delegate: SpanExporter, on_error: Optional[ExportErrorCallback] = None):
        self._delegate = delegate
        self._on_error = on_error

    @property
    def delegate(self) -> SpanExporter:
        return self._delegate

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        try:
            result = self._delegate.export(spans)
        except Exception:
            logger.exception(f"Span exporter raised while exporting {len(spans)} span(s)")
            result = SpanExportResult.FAILURE

        if result is SpanExportResult.FAILURE:
            logger.warning(f"Dropped {len(spans)} span(s) after failed export")
            self._report(spans, result)
        return result

    def _report(self, spans: Sequence[ReadableSpan], result: SpanExportResult) -> None:
        if self._on_error is None:
            return
        try:
            self._on_error(spans, result)
        except Exception:
            # runs on the batch worker thread
            logger.exception("Export error callback failed")

    def shutdown(self) -> None:
        self._delegate.shutdown()

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return self._delegate.force_flush(timeout_millis)

"""Prometheus metrics for upstream data-source calls."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest


class MetricsCollector:
    """Collects and exposes Prometheus metrics for upstream fetches."""

    def __init__(self, *, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self.upstream_latency_seconds = Histogram(
            "eodproxy_upstream_latency_seconds",
            "Latency distribution for upstream data-source calls.",
            ("source", "operation"),
            buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, float("inf")),
            registry=self.registry,
        )
        self.upstream_requests_total = Counter(
            "eodproxy_upstream_requests_total",
            "Total count of upstream data-source calls.",
            ("source", "operation"),
            registry=self.registry,
        )
        self.upstream_failures_total = Counter(
            "eodproxy_upstream_failures_total",
            "Total count of failed upstream data-source calls.",
            ("source", "operation"),
            registry=self.registry,
        )

    def observe_fetch(
        self, source: str, operation: str, latency_seconds: float, *, success: bool = True
    ) -> None:
        """Record one completed upstream call."""

        self.upstream_latency_seconds.labels(source=source, operation=operation).observe(latency_seconds)
        self.upstream_requests_total.labels(source=source, operation=operation).inc()
        if not success:
            self.upstream_failures_total.labels(source=source, operation=operation).inc()

    def render(self) -> bytes:
        """Render metrics in Prometheus exposition format."""

        return generate_latest(self.registry)


_DEFAULT_COLLECTOR: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Return the process-wide metrics collector."""

    global _DEFAULT_COLLECTOR
    if _DEFAULT_COLLECTOR is None:
        _DEFAULT_COLLECTOR = MetricsCollector()
    return _DEFAULT_COLLECTOR


def configure_metrics_collector(collector: MetricsCollector | None) -> None:
    """Override the process-wide collector (``None`` resets to lazy default)."""

    global _DEFAULT_COLLECTOR
    _DEFAULT_COLLECTOR = collector


__all__ = ["MetricsCollector", "configure_metrics_collector", "get_metrics_collector"]

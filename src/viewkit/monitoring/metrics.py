"""
Metrics Collection
Prometheus metrics for render pipeline performance tracking
"""

from prometheus_client import Counter, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the renderer.
    """

    def __init__(self) -> None:
        # Render metrics
        self.renders_total = Counter(
            "viewkit_renders_total",
            "Total number of render calls",
            ["kind", "status"],
        )
        self.render_duration = Histogram(
            "viewkit_render_duration_seconds",
            "Render duration in seconds",
            ["kind"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )

        # Template cache metrics
        self.cache_hits = Counter(
            "viewkit_template_cache_hits_total",
            "Total number of compiled template cache hits",
        )
        self.cache_misses = Counter(
            "viewkit_template_cache_misses_total",
            "Total number of compiled template cache misses",
        )
        self.compilations = Counter(
            "viewkit_template_compilations_total",
            "Total number of template compilations",
        )

        # Error metrics
        self.errors_total = Counter(
            "viewkit_errors_total",
            "Total number of render errors",
            ["error_type", "stage"],
        )

    def record_render(self, kind: str, status: str, duration: float) -> None:
        """Record a finished render call."""
        self.renders_total.labels(kind=kind, status=status).inc()
        self.render_duration.labels(kind=kind).observe(duration)

    def record_cache_hit(self) -> None:
        self.cache_hits.inc()

    def record_cache_miss(self) -> None:
        self.cache_misses.inc()

    def record_compilation(self) -> None:
        self.compilations.inc()

    def record_error(self, error_type: str, stage: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, stage=stage).inc()

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()

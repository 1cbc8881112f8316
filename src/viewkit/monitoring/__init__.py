"""
Performance Monitoring
Prometheus-based metrics collection for the render pipeline
"""

from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
]

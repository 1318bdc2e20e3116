"""Monitoring infrastructure: Prometheus counters for the signature flow."""

from src.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    SignatureMetrics,
    generate_metrics,
    get_signature_metrics,
    reset_signature_metrics,
)

__all__: list[str] = [
    "METRICS_CONTENT_TYPE",
    "SignatureMetrics",
    "generate_metrics",
    "get_signature_metrics",
    "reset_signature_metrics",
]

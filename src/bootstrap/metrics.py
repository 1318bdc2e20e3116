"""Bootstrap wiring for signature flow metrics."""

from __future__ import annotations

from src.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    SignatureMetrics,
    generate_metrics,
    get_signature_metrics as get_infra_signature_metrics,
    reset_signature_metrics,
)

_signature_metrics: SignatureMetrics | None = None


def get_signature_metrics() -> SignatureMetrics:
    """Get the signature metrics collector."""
    global _signature_metrics
    if _signature_metrics is None:
        _signature_metrics = get_infra_signature_metrics()
    return _signature_metrics


def set_signature_metrics(metrics: SignatureMetrics) -> None:
    """Set a custom collector (testing/override)."""
    global _signature_metrics
    _signature_metrics = metrics


def render_metrics() -> tuple[bytes, str]:
    """Render the exposition payload and its content type."""
    return generate_metrics(get_signature_metrics()), METRICS_CONTENT_TYPE


def reset_metrics() -> None:
    """Reset metrics singletons (testing cleanup)."""
    global _signature_metrics
    _signature_metrics = None
    reset_signature_metrics()

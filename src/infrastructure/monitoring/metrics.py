"""Prometheus metrics for the signature flow.

Operational counters only, labelled by outcome. Nothing identifying a
petition, signer or caller is ever used as a label value.

Metrics:
- signatures_submitted_total{outcome}: accepted, duplicate, not_found, invalid, error
- signature_confirmations_total{outcome}: confirmed, already_confirmed,
  not_found, invalid_token, error
- confirmation_emails_total{outcome}: sent, failed
- signer_list_requests_total{outcome}: served, unauthorized, error
"""

import os
import threading

from prometheus_client import (
    CollectorRegistry,
    Counter,
    generate_latest,
)

# Content type for Prometheus metrics endpoint
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

_collector_lock = threading.Lock()


class SignatureMetrics:
    """Collects signature flow counters.

    Attributes:
        signatures_submitted_total: Submissions by outcome.
        signature_confirmations_total: Confirmation attempts by outcome.
        confirmation_emails_total: Email hand-offs by outcome.
        signer_list_requests_total: Signer list requests by outcome.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize the collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")
        self._service_name = os.environ.get("SERVICE_NAME", "petition-signatures")

        labelnames = ["service", "environment", "outcome"]

        self.signatures_submitted_total = Counter(
            name="signatures_submitted_total",
            documentation="Signature submissions by outcome",
            labelnames=labelnames,
            registry=self._registry,
        )
        self.signature_confirmations_total = Counter(
            name="signature_confirmations_total",
            documentation="Signature confirmation attempts by outcome",
            labelnames=labelnames,
            registry=self._registry,
        )
        self.confirmation_emails_total = Counter(
            name="confirmation_emails_total",
            documentation="Confirmation email hand-offs by outcome",
            labelnames=labelnames,
            registry=self._registry,
        )
        self.signer_list_requests_total = Counter(
            name="signer_list_requests_total",
            documentation="Signer list requests by outcome",
            labelnames=labelnames,
            registry=self._registry,
        )

    def _inc(self, counter: Counter, outcome: str) -> None:
        counter.labels(
            service=self._service_name,
            environment=self._environment,
            outcome=outcome,
        ).inc()

    def record_submission(self, outcome: str) -> None:
        self._inc(self.signatures_submitted_total, outcome)

    def record_confirmation(self, outcome: str) -> None:
        self._inc(self.signature_confirmations_total, outcome)

    def record_email(self, sent: bool) -> None:
        self._inc(self.confirmation_emails_total, "sent" if sent else "failed")

    def record_signer_list(self, outcome: str) -> None:
        self._inc(self.signer_list_requests_total, outcome)

    def get_sample(self, name: str, outcome: str) -> float:
        """Read one counter value (mainly for tests).

        Args:
            name: Metric name without the ``_total`` suffix.
            outcome: Outcome label value.

        Returns:
            The current value, or 0.0 if never incremented.
        """
        value = self._registry.get_sample_value(
            f"{name}_total",
            {
                "service": self._service_name,
                "environment": self._environment,
                "outcome": outcome,
            },
        )
        return value or 0.0

    def get_registry(self) -> CollectorRegistry:
        """Get the collector registry."""
        return self._registry


_signature_metrics: SignatureMetrics | None = None


def get_signature_metrics() -> SignatureMetrics:
    """Get the singleton SignatureMetrics instance (thread-safe)."""
    global _signature_metrics
    if _signature_metrics is None:
        with _collector_lock:
            if _signature_metrics is None:
                _signature_metrics = SignatureMetrics()
    return _signature_metrics


def generate_metrics(metrics: SignatureMetrics | None = None) -> bytes:
    """Generate Prometheus metrics in exposition format.

    Args:
        metrics: Collector to render; the singleton when omitted.
    """
    collector = metrics or get_signature_metrics()
    return generate_latest(collector.get_registry())


def reset_signature_metrics() -> None:
    """Reset the singleton collector (for testing only)."""
    global _signature_metrics
    with _collector_lock:
        _signature_metrics = None

"""Unit tests for signature flow metrics.

Each test uses its own CollectorRegistry so counters never leak between
tests or into the process-wide singleton.
"""

import pytest
from prometheus_client import CollectorRegistry

from src.infrastructure.monitoring.metrics import (
    SignatureMetrics,
    generate_metrics,
    get_signature_metrics,
    reset_signature_metrics,
)


@pytest.fixture
def metrics() -> SignatureMetrics:
    return SignatureMetrics(registry=CollectorRegistry())


class TestSignatureMetrics:
    def test_counters_start_at_zero(self, metrics: SignatureMetrics) -> None:
        assert metrics.get_sample("signatures_submitted", "accepted") == 0.0

    def test_record_submission(self, metrics: SignatureMetrics) -> None:
        metrics.record_submission("accepted")
        metrics.record_submission("accepted")
        metrics.record_submission("duplicate")

        assert metrics.get_sample("signatures_submitted", "accepted") == 2.0
        assert metrics.get_sample("signatures_submitted", "duplicate") == 1.0

    def test_record_confirmation(self, metrics: SignatureMetrics) -> None:
        metrics.record_confirmation("already_confirmed")

        assert metrics.get_sample("signature_confirmations", "already_confirmed") == 1.0

    @pytest.mark.parametrize(("sent", "outcome"), [(True, "sent"), (False, "failed")])
    def test_record_email(self, metrics: SignatureMetrics, sent, outcome) -> None:
        metrics.record_email(sent)

        assert metrics.get_sample("confirmation_emails", outcome) == 1.0

    def test_record_signer_list(self, metrics: SignatureMetrics) -> None:
        metrics.record_signer_list("unauthorized")

        assert metrics.get_sample("signer_list_requests", "unauthorized") == 1.0

    def test_exposition_format(self, metrics: SignatureMetrics) -> None:
        metrics.record_submission("accepted")

        output = generate_metrics(metrics).decode()

        assert "# TYPE signatures_submitted_total counter" in output
        assert 'outcome="accepted"' in output
        assert 'service="petition-signatures"' in output

    def test_environment_label_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        metrics = SignatureMetrics(registry=CollectorRegistry())

        metrics.record_submission("accepted")

        assert 'environment="staging"' in generate_metrics(metrics).decode()


class TestSingleton:
    def test_singleton_and_reset(self) -> None:
        reset_signature_metrics()
        first = get_signature_metrics()

        assert get_signature_metrics() is first

        reset_signature_metrics()
        assert get_signature_metrics() is not first
        reset_signature_metrics()

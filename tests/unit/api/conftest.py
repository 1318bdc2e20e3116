"""API test fixtures.

Wires the bootstrap singletons to in-memory stubs and a frozen clock, and
builds the full application so middleware and error handlers run.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from src.api.main import create_app
from src.bootstrap.metrics import reset_metrics, set_signature_metrics
from src.bootstrap.signatures import (
    reset_signature_dependencies,
    set_credential_verifier,
    set_email_dispatcher,
    set_repositories,
    set_signature_config,
    set_time_authority,
)
from src.config.signature_config import TEST_SIGNATURE_CONFIG, SignatureConfig
from src.infrastructure.monitoring.metrics import SignatureMetrics


@pytest.fixture
def api_config() -> SignatureConfig:
    return TEST_SIGNATURE_CONFIG


@pytest.fixture
def signature_metrics() -> SignatureMetrics:
    return SignatureMetrics(registry=CollectorRegistry())


@pytest.fixture
def app(
    api_config,
    signature_metrics,
    fake_time_authority,
    petition_repo,
    signature_repo,
    email_dispatcher,
    credential_verifier,
) -> FastAPI:
    set_signature_config(api_config)
    set_time_authority(fake_time_authority)
    set_repositories(petition_repo, signature_repo)
    set_email_dispatcher(email_dispatcher)
    set_credential_verifier(credential_verifier)
    set_signature_metrics(signature_metrics)

    yield create_app()

    reset_signature_dependencies()
    reset_metrics()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)

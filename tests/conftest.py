"""Shared test fixtures for anf-sample tests."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def _clear_subscription_env(monkeypatch):
    """Never pick up the developer's AZURE_SUBSCRIPTION_ID."""
    monkeypatch.delenv("AZURE_SUBSCRIPTION_ID", raising=False)


@pytest.fixture(autouse=True)
def _mock_credential():
    """Prevent real Azure credential construction in every test."""
    mock_token = MagicMock()
    mock_token.token = "fake-token"
    with patch("anf_sample.iam._credential.DefaultAzureCredential") as factory:
        factory.return_value.get_token.return_value = mock_token
        yield factory


@pytest.fixture(autouse=True)
def _no_az_cli():
    """Fail loudly if a test reaches the real Azure CLI."""
    with patch(
        "anf_sample.iam._subscription.subprocess.run",
        side_effect=AssertionError("az CLI must be stubbed"),
    ) as run:
        yield run


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() so caplog keeps seeing package records."""
    yield
    app_logger = logging.getLogger("anf_sample")
    app_logger.handlers = []
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True

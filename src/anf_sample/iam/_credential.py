"""Credential construction for ARM API calls."""

from __future__ import annotations

import logging
from collections.abc import Callable

from azure.core.credentials import TokenCredential
from azure.identity import DefaultAzureCredential

from anf_sample.errors import CredentialError
from anf_sample.iam._subscription import get_subscription_id

logger = logging.getLogger(__name__)


def get_authorizer(
    credential_factory: Callable[[], TokenCredential] | None = None,
    subscription_resolver: Callable[[], str] | None = None,
) -> tuple[TokenCredential, str]:
    """Return a token credential and the subscription ID to use with it.

    The credential is a *DefaultAzureCredential* unless *credential_factory*
    is given.  When it cannot be built the subscription is not resolved and
    :class:`CredentialError` is raised; resolution failures propagate as
    :class:`~anf_sample.errors.SubscriptionResolutionError`.
    """
    factory = credential_factory or DefaultAzureCredential
    resolve = subscription_resolver or get_subscription_id

    try:
        credential = factory()
    except Exception as exc:
        logger.error("Failed to create Azure credential: %s", exc)
        raise CredentialError(str(exc)) from exc

    subscription_id = resolve()
    return credential, subscription_id

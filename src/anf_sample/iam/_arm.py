"""ARM lookups used to verify a credential and subscription pair."""

from __future__ import annotations

import logging

import requests
from azure.core.credentials import TokenCredential

from anf_sample.config import settings

logger = logging.getLogger(__name__)

AZURE_API_VERSION = "2022-12-01"


def _get_headers(credential: TokenCredential, endpoint: str) -> dict[str, str]:
    """Return authorization headers for *endpoint*."""
    token = credential.get_token(f"{endpoint}/.default")
    return {
        "Authorization": f"Bearer {token.token}",
        "Content-Type": "application/json",
    }


def get_subscription_details(
    credential: TokenCredential,
    subscription_id: str,
    *,
    endpoint: str | None = None,
    timeout: int = 30,
) -> dict[str, str | None]:
    """Return ``{"id", "name", "state", "tenantId"}`` for *subscription_id*.

    *endpoint* is the resource manager URL, e.g. the
    ``resourceManagerEndpointUrl`` of a :class:`~anf_sample.models.BasicInfo`;
    it defaults to ``settings.resource_manager_endpoint``.
    """
    base = (endpoint or settings.resource_manager_endpoint).rstrip("/")
    headers = _get_headers(credential, base)
    url = f"{base}/subscriptions/{subscription_id}?api-version={AZURE_API_VERSION}"
    logger.debug("GET %s", url)
    resp = requests.get(url, headers=headers, timeout=timeout)
    resp.raise_for_status()
    data = resp.json()
    return {
        "id": data.get("subscriptionId", subscription_id),
        "name": data.get("displayName"),
        "state": data.get("state"),
        "tenantId": data.get("tenantId"),
    }

"""Tests for the ARM subscription lookup."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from anf_sample.iam import AZURE_API_VERSION, get_subscription_details


def _credential() -> MagicMock:
    token = MagicMock()
    token.token = "fake-token"
    cred = MagicMock()
    cred.get_token.return_value = token
    return cred


def _response(payload: dict) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


class TestGetSubscriptionDetails:
    def test_returns_subscription_fields(self) -> None:
        cred = _credential()
        payload = {
            "subscriptionId": "sub-1",
            "displayName": "Dev",
            "state": "Enabled",
            "tenantId": "tid-1",
        }
        with patch("anf_sample.iam.requests.get", return_value=_response(payload)) as get:
            details = get_subscription_details(cred, "sub-1")

        assert details == {"id": "sub-1", "name": "Dev", "state": "Enabled", "tenantId": "tid-1"}
        cred.get_token.assert_called_once_with("https://management.azure.com/.default")
        url = get.call_args.args[0]
        assert url == (
            f"https://management.azure.com/subscriptions/sub-1?api-version={AZURE_API_VERSION}"
        )
        assert get.call_args.kwargs["headers"]["Authorization"] == "Bearer fake-token"
        assert get.call_args.kwargs["timeout"] == 30

    def test_endpoint_from_basic_info_with_trailing_slash(self) -> None:
        cred = _credential()
        with patch("anf_sample.iam.requests.get", return_value=_response({})) as get:
            details = get_subscription_details(
                cred, "sub-2", endpoint="https://management.usgovcloudapi.net/"
            )

        cred.get_token.assert_called_once_with("https://management.usgovcloudapi.net/.default")
        assert get.call_args.args[0].startswith(
            "https://management.usgovcloudapi.net/subscriptions/sub-2?"
        )
        assert details == {"id": "sub-2", "name": None, "state": None, "tenantId": None}

    def test_http_error_propagates(self) -> None:
        resp = _response({})
        resp.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")
        with patch("anf_sample.iam.requests.get", return_value=resp):
            with pytest.raises(requests.HTTPError, match="403"):
                get_subscription_details(_credential(), "sub-3")

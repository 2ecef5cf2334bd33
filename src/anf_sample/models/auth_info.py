"""Pydantic models for the Azure authentication files.

``AuthInfo`` mirrors the file written by
``az ad sp create-for-rbac --sdk-auth``; ``BasicInfo`` is the reduced shape
used when only the subscription, tenant and endpoints are needed.  Field
names are the JSON keys of those files.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

_MASK = "***"


class _AuthFileModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    def present_fields(self) -> set[str]:
        """Return the keys that were present in the decoded document."""
        return set(self.model_fields_set)


class AuthInfo(_AuthFileModel):
    clientId: str | None = None
    clientSecret: str | None = None
    subscriptionId: str | None = None
    tenantId: str | None = None
    activeDirectoryEndpointUrl: str | None = None
    resourceManagerEndpointUrl: str | None = None
    activeDirectoryGraphResourceId: str | None = None
    sqlManagementEndpointUrl: str | None = None
    galleryEndpointUrl: str | None = None
    managementEndpointUrl: str | None = None

    def masked(self) -> dict[str, Any]:
        """Return the fields as a dict with the client secret hidden."""
        data = self.model_dump()
        if data["clientSecret"] is not None:
            data["clientSecret"] = _MASK
        return data


class BasicInfo(_AuthFileModel):
    subscriptionId: str | None = None
    tenantId: str | None = None
    resourceManagerEndpointUrl: str | None = None
    managementEndpointUrl: str | None = None

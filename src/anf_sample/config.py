"""Sample settings loaded from environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

AZURE_MGMT_URL = "https://management.azure.com"


class SampleSettings(BaseSettings):
    """Configuration for the subscription lookup and ARM calls.

    Values are read from environment variables (case-insensitive) and
    optionally from a ``.env`` file in the working directory.
    """

    az_cli_path: str = Field(default="az", validation_alias="ANF_SAMPLE_AZ_CLI_PATH")
    subscription_lookup_timeout: float | None = Field(
        default=30.0, validation_alias="ANF_SAMPLE_SUBSCRIPTION_LOOKUP_TIMEOUT"
    )
    resource_manager_endpoint: str = Field(
        default=AZURE_MGMT_URL, validation_alias="ANF_SAMPLE_RESOURCE_MANAGER_ENDPOINT"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("subscription_lookup_timeout")
    @classmethod
    def _zero_disables_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            return None
        return value

    @field_validator("resource_manager_endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


settings = SampleSettings()

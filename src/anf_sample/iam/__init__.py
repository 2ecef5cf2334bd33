"""Identity helpers: credentials, subscription resolution and auth files.

This package re-exports all public names so callers can use
``from anf_sample.iam import X``.
"""

import requests as requests  # noqa: F401  # re-export for mock patching

# -- Auth files ---------------------------------------------------------------
from anf_sample.iam._auth_file import read_auth_info, read_basic_info  # noqa: F401

# -- Subscription resolution --------------------------------------------------
from anf_sample.iam._subscription import (  # noqa: F401
    SUBSCRIPTION_ENV_VAR,
    get_subscription_id,
    subscription_id_from_az_cli,
    subscription_id_from_env,
)

# -- Credentials --------------------------------------------------------------
from anf_sample.iam._credential import get_authorizer  # noqa: F401

# -- ARM ----------------------------------------------------------------------
from anf_sample.iam._arm import AZURE_API_VERSION, get_subscription_details  # noqa: F401

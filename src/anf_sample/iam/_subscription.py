"""Subscription ID resolution.

The subscription is taken from ``AZURE_SUBSCRIPTION_ID`` when set, otherwise
from the account the Azure CLI is currently logged in with.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Callable, Mapping, Sequence

from anf_sample.config import settings
from anf_sample.errors import (
    SubscriptionCommandError,
    SubscriptionEnvError,
    SubscriptionLookupError,
    SubscriptionResolutionError,
)

logger = logging.getLogger(__name__)

SUBSCRIPTION_ENV_VAR = "AZURE_SUBSCRIPTION_ID"

SubscriptionSource = Callable[[], str]
CommandRunner = Callable[[list[str], float | None], str]


def subscription_id_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Return the subscription ID from ``AZURE_SUBSCRIPTION_ID``."""
    env = os.environ if environ is None else environ
    subscription_id = env.get(SUBSCRIPTION_ENV_VAR, "").strip()
    if not subscription_id:
        raise SubscriptionEnvError(f"{SUBSCRIPTION_ENV_VAR} environment variable is not set")
    return subscription_id


def _run_command(cmd: list[str], timeout: float | None) -> str:
    """Run *cmd* and return its standard output."""
    result = subprocess.run(  # noqa: S603
        cmd,
        capture_output=True,
        text=True,
        timeout=timeout,
        check=True,
    )
    return result.stdout


def subscription_id_from_az_cli(
    runner: CommandRunner | None = None,
    *,
    az_path: str | None = None,
    timeout: float | None = None,
) -> str:
    """Return the ID of the Azure CLI's active account.

    Runs ``az account show --query id -o tsv``.  *timeout* defaults to
    ``settings.subscription_lookup_timeout``; zero or less disables it.
    """
    run = runner or _run_command
    cmd = [az_path or settings.az_cli_path, "account", "show", "--query", "id", "-o", "tsv"]
    if timeout is None:
        timeout = settings.subscription_lookup_timeout
    elif timeout <= 0:
        timeout = None

    try:
        output = run(cmd, timeout)
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or "").strip()
        detail = f": {stderr}" if stderr else ""
        raise SubscriptionCommandError(
            f"az account show exited with status {exc.returncode}{detail}"
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise SubscriptionCommandError(
            f"az account show timed out after {exc.timeout} seconds"
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SubscriptionCommandError(f"error running az account show: {exc}") from exc

    subscription_id = output.strip()
    if not subscription_id:
        raise SubscriptionCommandError("az account show returned no subscription id")
    return subscription_id


def get_subscription_id(sources: Sequence[SubscriptionSource] | None = None) -> str:
    """Return the first subscription ID produced by *sources*.

    *sources* default to the environment variable followed by the Azure CLI.
    Sources after the first successful one are not called.  When all of them
    fail a :class:`SubscriptionResolutionError` carrying every failure is
    raised.
    """
    if sources is None:
        sources = (subscription_id_from_env, subscription_id_from_az_cli)

    errors: list[SubscriptionLookupError] = []
    for source in sources:
        try:
            subscription_id = source()
        except SubscriptionLookupError as exc:
            logger.debug("Subscription source %s failed: %s", _source_name(source), exc)
            errors.append(exc)
            continue
        logger.info("Using subscription %s from %s", subscription_id, _source_name(source))
        return subscription_id

    raise SubscriptionResolutionError(errors)


def _source_name(source: SubscriptionSource) -> str:
    return getattr(source, "__name__", repr(source))

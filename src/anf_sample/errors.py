"""Exceptions raised by the sample helpers."""

from __future__ import annotations

from collections.abc import Sequence


class SampleError(Exception):
    """Base class for every error raised by ``anf_sample``."""


class AuthFileReadError(SampleError):
    """An authentication file could not be read from disk."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class AuthFileDecodeError(SampleError):
    """An authentication file was read but is not a valid JSON document."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class SubscriptionLookupError(SampleError):
    """A single subscription ID source did not yield a value."""


class SubscriptionEnvError(SubscriptionLookupError):
    pass


class SubscriptionCommandError(SubscriptionLookupError):
    pass


class SubscriptionResolutionError(SampleError):
    """Every subscription ID source failed.

    The message joins the individual failure messages with ``"; "`` in the
    order the sources were tried; the exceptions are kept on ``errors``.
    """

    def __init__(self, errors: Sequence[Exception]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))


class CredentialError(SampleError):
    """The default Azure credential could not be constructed."""


__all__ = [
    "SampleError",
    "AuthFileReadError",
    "AuthFileDecodeError",
    "SubscriptionLookupError",
    "SubscriptionEnvError",
    "SubscriptionCommandError",
    "SubscriptionResolutionError",
    "CredentialError",
]

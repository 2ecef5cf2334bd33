"""Readers for the JSON authentication files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from anf_sample.errors import AuthFileDecodeError, AuthFileReadError
from anf_sample.models import AuthInfo, BasicInfo

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", AuthInfo, BasicInfo)


def _read_model(path: str | os.PathLike[str], model: type[_ModelT]) -> _ModelT:
    try:
        # utf-8-sig: the Azure CLI on Windows writes a BOM.
        text = Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise AuthFileDecodeError(str(path), f"failed to decode {path}: {exc}") from exc
    except OSError as exc:
        logger.error("failed to read file: %s", exc)
        raise AuthFileReadError(str(path), f"failed to read file: {exc}") from exc

    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        raise AuthFileDecodeError(
            str(path), f"failed to decode {path} as {model.__name__}: {exc}"
        ) from exc


def read_auth_info(path: str | os.PathLike[str]) -> AuthInfo:
    """Read and decode an ``--sdk-auth`` style file into :class:`AuthInfo`.

    Raises :class:`AuthFileReadError` when the file cannot be read and
    :class:`AuthFileDecodeError` when its content is not a valid document.
    """
    return _read_model(path, AuthInfo)


def read_basic_info(path: str | os.PathLike[str]) -> BasicInfo:
    """Read and decode a file into :class:`BasicInfo`.

    Same error contract as :func:`read_auth_info`.
    """
    return _read_model(path, BasicInfo)

"""Pure helpers for sequence search and storage-size conversion.

Azure NetApp Files sizes capacity pools and volumes in tebibytes while the
management API exchanges byte counts, so the sample converts between the two.
"""

from __future__ import annotations

from collections.abc import Sequence

TIB_IN_BYTES = 1024**4

_UINT32_LIMIT = 2**32


def contains(sequence: Sequence[str], value: str) -> bool:
    """Return *True* if *value* is an element of *sequence*."""
    return find_in_sequence(sequence, value)[1]


def find_in_sequence(sequence: Sequence[str], value: str) -> tuple[int, bool]:
    """Return ``(index, True)`` for the first match of *value*, else ``(-1, False)``."""
    for index, item in enumerate(sequence):
        if item == value:
            return index, True
    return -1, False


def bytes_to_tebibytes(size: int) -> int:
    """Convert a byte count to whole tebibytes, truncating any remainder."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return size // TIB_IN_BYTES


def tebibytes_to_bytes(size: int) -> int:
    """Convert a tebibyte count to bytes.

    *size* must fit an unsigned 32-bit integer; the result may need up to
    72 bits.
    """
    if not 0 <= size < _UINT32_LIMIT:
        raise ValueError(f"size must be within [0, 2**32), got {size}")
    return size * TIB_IN_BYTES

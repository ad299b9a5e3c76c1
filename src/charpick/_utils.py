"""Internal shared utilities for charpick."""

from __future__ import annotations

#: Codec used when every candidate is rejected.  Decoded with
#: ``errors="replace"`` so it cannot fail.
FALLBACK_ENCODING: str = "utf-8"

#: Highest naturalness score; reaching it stops candidate evaluation.
PERFECT_SCORE: int = 100


def _validate_max_length(max_length: int) -> None:
    """Raise ValueError if *max_length* is not a non-negative integer."""
    if (
        isinstance(max_length, bool)
        or not isinstance(max_length, int)
        or max_length < 0
    ):
        msg = "max_length must be a non-negative integer"
        raise ValueError(msg)


def _validate_address(address: int) -> None:
    """Raise ValueError if *address* is not a non-negative integer."""
    if isinstance(address, bool) or not isinstance(address, int) or address < 0:
        msg = "address must be a non-negative integer"
        raise ValueError(msg)


def fallback_decode(data: bytes) -> str:
    """Decode *data* with the fallback codec, substituting malformed bytes."""
    return data.decode(FALLBACK_ENCODING, errors="replace")

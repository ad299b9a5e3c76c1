"""Reading zero-terminated strings out of raw memory."""

from __future__ import annotations

import ctypes
from collections.abc import Sequence

from charpick._utils import _validate_address, _validate_max_length
from charpick.pipeline.terminator import terminator_bound
from charpick.registry import EncodingCandidate


def read_memory(address: int, max_length: int) -> bytes:
    """Copy *max_length* bytes starting at *address*.

    The caller guarantees that the whole range is readable.  A null address
    or a zero length yields ``b""``.

    :raises ValueError: If *address* or *max_length* is not a non-negative
        integer.
    """
    _validate_address(address)
    _validate_max_length(max_length)
    if address == 0 or max_length == 0:
        return b""
    return ctypes.string_at(address, max_length)


def bound_to_terminator(
    data: bytes, candidates: Sequence[EncodingCandidate]
) -> bytes:
    """Cut *data* at the widest terminator any of *candidates* would honour.

    A zero byte inside a UTF-16 code unit ends the string for a single-byte
    candidate but not for a UTF-16 one, so the bound is the largest
    per-candidate terminator offset.
    """
    return data[: terminator_bound(data, candidates)]

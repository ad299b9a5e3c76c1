"""Stage 1a: Embedded terminator truncation.

Strings copied out of foreign memory are usually zero-terminated, and the
terminator is one code unit wide: a zero byte for single-byte and
variable-width encodings, a zero 16-bit unit for UTF-16, a zero 32-bit unit
for UTF-32.  Each candidate is truncated at the terminator for its own
width so a wide candidate is never cut in the middle of a code unit.
"""

from __future__ import annotations

from collections.abc import Iterable

from charpick.pipeline.bom import strip_bom
from charpick.registry import EncodingCandidate


def find_terminator(data: bytes, width: int) -> int | None:
    """Return the byte offset of the first aligned zero code unit, or None.

    :param data: The raw byte data to search.
    :param width: Code-unit width in bytes (1, 2 or 4).
    """
    if width <= 1:
        index = data.find(b"\x00")
        return index if index >= 0 else None

    zero = bytes(width)
    index = data.find(zero)
    while index >= 0:
        if index % width == 0:
            return index
        # Resume at the next aligned position.
        index = data.find(zero, index + width - index % width)
    return None


def truncate_at_terminator(data: bytes, width: int) -> bytes:
    """Return *data* up to (excluding) its first zero code unit of *width*."""
    index = find_terminator(data, width)
    return data if index is None else data[:index]


def preprocess(data: bytes, candidate: EncodingCandidate) -> bytes:
    """Return the slice of *data* that *candidate* should decode.

    Truncates at the candidate's terminator first, then strips its BOM from
    the truncated slice.
    """
    truncated = truncate_at_terminator(data, candidate.width.terminator_width)
    return strip_bom(truncated, candidate)


def terminator_bound(data: bytes, candidates: Iterable[EncodingCandidate]) -> int:
    """Return the largest terminator offset over *candidates*.

    Used to bound raw memory before selection: no candidate loses bytes it
    would have decoded.  Returns ``len(data)`` if any candidate finds no
    terminator or there are no candidates.
    """
    bound = 0
    seen = False
    for candidate in candidates:
        seen = True
        index = find_terminator(data, candidate.width.terminator_width)
        if index is None:
            return len(data)
        bound = max(bound, index)
    return bound if seen else len(data)

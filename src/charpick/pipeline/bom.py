"""Stage 1b: BOM (Byte Order Mark) removal."""

from __future__ import annotations

from charpick.registry import EncodingCandidate


def strip_bom(data: bytes, candidate: EncodingCandidate) -> bytes:
    """Remove *candidate*'s preamble from the start of *data* if present."""
    preamble = candidate.preamble
    if preamble and data.startswith(preamble):
        return data[len(preamble) :]
    return data

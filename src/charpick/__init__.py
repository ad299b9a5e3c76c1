"""Pick the most natural decoding of a byte string with unknown encoding."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from charpick._utils import FALLBACK_ENCODING, fallback_decode
from charpick.codepages import register_codepages
from charpick.enums import CodeUnit
from charpick.memory import bound_to_terminator, read_memory
from charpick.pipeline import DecodeResult
from charpick.pipeline.orchestrator import run_pipeline, score_candidates
from charpick.registry import (
    EncodingCandidate,
    default_candidates,
    get_candidate,
    resolve_candidates,
)

__version__ = "1.0.0"
__all__ = [
    "CodeUnit",
    "DecodeResult",
    "EncodingCandidate",
    "decode_all",
    "decode_auto",
    "decode_auto_at",
    "default_candidates",
    "get_candidate",
    "register_codepages",
]

logger = logging.getLogger(__name__)


def _resolve(
    candidates: Iterable[EncodingCandidate | str | int] | None,
) -> tuple[EncodingCandidate, ...]:
    if candidates is None:
        return default_candidates()
    if isinstance(candidates, (EncodingCandidate, str, int)):
        candidates = (candidates,)
    return resolve_candidates(candidates)


def _decode(data: bytes, candidates: tuple[EncodingCandidate, ...]) -> str:
    if not data:
        return ""
    best = run_pipeline(data, candidates)
    if best is not None:
        return best.text
    logger.debug("no candidate survived; falling back to %s", FALLBACK_ENCODING)
    return fallback_decode(data)


def decode_auto(
    byte_str: bytes | bytearray | memoryview,
    candidates: Iterable[EncodingCandidate | str | int] | None = None,
) -> str:
    """Decode *byte_str* with whichever candidate gives the most natural text.

    Each candidate sees the buffer truncated at its own zero terminator and
    without its BOM.  Decodes that fail or contain garbled characters are
    discarded; the survivor with the highest readable-character ratio wins,
    earlier candidates winning ties.  If nothing survives, the whole buffer
    is decoded as UTF-8 with replacement characters.

    :param byte_str: The bytes to decode.
    :param candidates: Encodings to try, in priority order: candidates,
        codec names or Windows code page numbers.  Defaults to UTF-16LE,
        UTF-8 and the host's legacy code page.
    :returns: The decoded text.  Empty input gives ``""``.
    """
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    if not data:
        return ""
    return _decode(data, _resolve(candidates))


def decode_auto_at(
    address: int,
    max_length: int,
    candidates: Iterable[EncodingCandidate | str | int] | None = None,
) -> str:
    """Decode a zero-terminated string of unknown encoding in raw memory.

    Reads at most *max_length* bytes from *address*, bounds them at the
    terminator appropriate to the candidates, then proceeds as
    :func:`decode_auto`.

    :param address: Start address, e.g. from :func:`ctypes.addressof`.
    :param max_length: Number of bytes the caller guarantees are readable.
    :param candidates: As for :func:`decode_auto`.
    :raises ValueError: If *address* or *max_length* is not a non-negative
        integer.
    """
    data = read_memory(address, max_length)
    resolved = _resolve(candidates)
    return _decode(bound_to_terminator(data, resolved), resolved)


def decode_all(
    byte_str: bytes | bytearray | memoryview,
    candidates: Iterable[EncodingCandidate | str | int] | None = None,
) -> list[dict[str, str | int]]:
    """Return every candidate decode of *byte_str* that is not garbled.

    Results are dicts with ``"encoding"``, ``"text"`` and ``"score"`` keys,
    best first; the first entry is what :func:`decode_auto` returns.  When
    nothing survives, a single fallback entry with score 0 is returned so
    the caller always receives a result for non-empty input.
    """
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    if not data:
        return []
    results = score_candidates(data, _resolve(candidates))
    if not results:
        results = [
            DecodeResult(
                encoding=FALLBACK_ENCODING, text=fallback_decode(data), score=0
            )
        ]
    return [r.to_dict() for r in results]

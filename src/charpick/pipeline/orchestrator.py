"""Pipeline orchestrator: runs candidates through the decoding stages."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from charpick._utils import PERFECT_SCORE
from charpick.enums import CodeUnit
from charpick.pipeline import DecodeResult
from charpick.pipeline.ascii import ascii_prefix
from charpick.pipeline.garble import is_definitely_garbled
from charpick.pipeline.naturalness import score_text
from charpick.pipeline.terminator import preprocess
from charpick.pipeline.validity import try_decode
from charpick.registry import EncodingCandidate

logger = logging.getLogger(__name__)

_WIDE_UNITS = frozenset({CodeUnit.WORD, CodeUnit.DWORD})


def _detect_ascii(
    data: bytes, candidates: Sequence[EncodingCandidate]
) -> DecodeResult | None:
    """Return the winning result if *data* is printable ASCII text.

    The first single-byte or variable-width candidate that decodes the
    ASCII prefix unchanged wins, whatever its score.  Wide candidates would
    otherwise read pairs of ASCII letters as CJK ideographs, which score as
    letters too.
    """
    text = ascii_prefix(data)
    if text is None:
        return None
    for candidate in candidates:
        if candidate.width in _WIDE_UNITS:
            continue
        if try_decode(preprocess(data, candidate), candidate) == text:
            logger.debug("%s: printable ASCII", candidate.name)
            return DecodeResult(
                encoding=candidate.name, text=text, score=score_text(text)
            )
    return None


def evaluate_candidate(
    data: bytes, candidate: EncodingCandidate
) -> DecodeResult | None:
    """Preprocess, decode, filter and score *data* for one candidate.

    :returns: The scored result, or ``None`` if the decode failed or the
        text is garbled.
    """
    text = try_decode(preprocess(data, candidate), candidate)
    if text is None:
        return None
    if is_definitely_garbled(text):
        logger.debug("%s: rejected as garbled", candidate.name)
        return None
    score = score_text(text)
    logger.debug("%s: score %d", candidate.name, score)
    return DecodeResult(encoding=candidate.name, text=text, score=score)


def run_pipeline(
    data: bytes, candidates: Sequence[EncodingCandidate]
) -> DecodeResult | None:
    """Return the most natural decode of *data* over *candidates*.

    Candidates are tried in order.  Only a strictly higher score replaces
    the current best, so earlier candidates win ties, and a perfect score
    ends the search.

    :param data: The raw byte data to decode.
    :param candidates: Encodings to try, in priority order.
    :returns: The best :class:`DecodeResult`, or ``None`` if *data* is empty
        or every candidate was rejected.
    """
    if not data:
        return None

    ascii_result = _detect_ascii(data, candidates)
    if ascii_result is not None:
        return ascii_result

    best: DecodeResult | None = None
    for candidate in candidates:
        result = evaluate_candidate(data, candidate)
        if result is None:
            continue
        if best is None or result.score > best.score:
            best = result
            if best.score == PERFECT_SCORE:
                break
    return best


def score_candidates(
    data: bytes, candidates: Sequence[EncodingCandidate]
) -> list[DecodeResult]:
    """Return every surviving decode of *data*, best first.

    Unlike :func:`run_pipeline` this never stops early.  Results are sorted
    by descending score with candidate order breaking ties, except that an
    ASCII winner always comes first, so the first entry is what
    :func:`run_pipeline` returns.
    """
    if not data:
        return []

    results = []
    for candidate in candidates:
        result = evaluate_candidate(data, candidate)
        if result is not None:
            results.append(result)
    results.sort(key=lambda r: -r.score)

    ascii_result = _detect_ascii(data, candidates)
    if ascii_result is not None:
        results = [ascii_result] + [
            r for r in results if r.encoding != ascii_result.encoding
        ]
    return results

"""Stage 4: Naturalness scoring.

Scores text that survived the garble filter by the share of characters that
look like ordinary language: letters, digits, whitespace and punctuation.
Symbols, format characters and C1 controls lower the score.
"""

from __future__ import annotations

import unicodedata

from charpick._utils import PERFECT_SCORE


def _is_readable(ch: str) -> bool:
    """Return True if *ch* is a letter, digit, whitespace or punctuation."""
    if ch.isspace():
        return True
    cat = unicodedata.category(ch)
    if cat[0] in ("L", "P") or cat == "Nd":
        return True
    # A valid surrogate pair is one legitimately encoded character; in a str
    # it is either a Cs pair or a single supplementary-plane code point.
    return cat == "Cs" or ord(ch) > 0xFFFF


def score_text(text: str) -> int:
    """Return a naturalness score for decoded text. 0 = noise, 100 = clean.

    The score is the percentage of readable characters, rounded down.
    Empty text scores 0.
    """
    if not text:
        return 0
    readable = sum(1 for ch in text if _is_readable(ch))
    return readable * PERFECT_SCORE // len(text)

"""Stage 3: Garbled text rejection.

A conservative filter: any one of the characters below is strong structural
evidence that the bytes were decoded with the wrong encoding, so the
candidate is dropped outright instead of being scored.
"""

from __future__ import annotations

_REPLACEMENT_CHAR = 0xFFFD
_DEL = 0x7F
_PRIVATE_USE_FIRST = 0xE000
_PRIVATE_USE_LAST = 0xF8FF
_NONCHAR_BLOCK_FIRST = 0xFDD0
_NONCHAR_BLOCK_LAST = 0xFDEF
_HIGH_SURROGATE_FIRST = 0xD800
_HIGH_SURROGATE_LAST = 0xDBFF
_LOW_SURROGATE_FIRST = 0xDC00
_LOW_SURROGATE_LAST = 0xDFFF


def _is_high_surrogate(code: int) -> bool:
    return _HIGH_SURROGATE_FIRST <= code <= _HIGH_SURROGATE_LAST


def _is_low_surrogate(code: int) -> bool:
    return _LOW_SURROGATE_FIRST <= code <= _LOW_SURROGATE_LAST


def _is_garbled_char(code: int) -> bool:
    if code <= 0x1F or code == _DEL or code == _REPLACEMENT_CHAR:
        return True
    if _PRIVATE_USE_FIRST <= code <= _PRIVATE_USE_LAST:
        return True
    if _NONCHAR_BLOCK_FIRST <= code <= _NONCHAR_BLOCK_LAST:
        return True
    # U+FFFE/U+FFFF and their counterparts at the end of every plane
    return (code & 0xFFFE) == 0xFFFE


def is_definitely_garbled(text: str) -> bool:
    """Return True if *text* contains a character no correct decode produces.

    Checks for:
    1. The replacement character U+FFFD
    2. C0 controls (U+0000-U+001F) and DEL
    3. Private Use Area code points (U+E000-U+F8FF)
    4. Noncharacters (U+FDD0-U+FDEF, U+nFFFE, U+nFFFF)
    5. Surrogates that are not a high surrogate immediately followed by a
       low surrogate
    """
    i = 0
    length = len(text)
    while i < length:
        code = ord(text[i])
        if _is_high_surrogate(code):
            if i + 1 >= length or not _is_low_surrogate(ord(text[i + 1])):
                return True
            i += 2
            continue
        if _is_low_surrogate(code) or _is_garbled_char(code):
            return True
        i += 1
    return False

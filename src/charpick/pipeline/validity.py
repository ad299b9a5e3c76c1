"""Stage 2: Per-candidate decoding."""

from __future__ import annotations

import logging

from charpick.registry import EncodingCandidate

logger = logging.getLogger(__name__)


def try_decode(data: bytes, candidate: EncodingCandidate) -> str | None:
    """Decode *data* with *candidate*, returning None if it is not valid.

    Malformed or truncated sequences, and codecs that are not text
    encodings, are reported as a failed decode rather than raised.

    :param data: The preprocessed byte data.
    :param candidate: The encoding to decode with.
    :returns: The decoded text, or ``None``.
    """
    try:
        return data.decode(candidate.python_codec, errors=candidate.errors)
    except (UnicodeError, LookupError) as e:
        logger.debug("%s: decode failed: %s", candidate.name, e)
        return None

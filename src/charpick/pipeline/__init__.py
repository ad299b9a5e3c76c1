"""Decoding pipeline stages and shared types."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class DecodeResult:
    """A candidate decode that survived the garble filter.

    Frozen dataclass holding the candidate name, the decoded text and its
    naturalness score (0-100).
    """

    encoding: str
    text: str
    score: int

    def to_dict(self) -> dict[str, str | int]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'``, ``'text'``, and ``'score'`` keys.
        """
        return {
            "encoding": self.encoding,
            "text": self.text,
            "score": self.score,
        }

"""Enumerations for charpick."""

import enum


class CodeUnit(enum.IntEnum):
    """Code-unit width class of an encoding.

    The value is the width in bytes; ``VARIABLE`` covers multi-byte codecs
    such as UTF-8 or Shift_JIS whose characters span a varying number of
    bytes.
    """

    VARIABLE = 0
    BYTE = 1
    WORD = 2
    DWORD = 4

    @property
    def terminator_width(self) -> int:
        """Number of zero bytes that make up an embedded terminator."""
        return self.value or 1

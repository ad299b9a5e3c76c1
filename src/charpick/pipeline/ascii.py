"""Stage 0: Pure ASCII detection."""

from __future__ import annotations

# Printable ASCII (0x20-0x7E).  Tab, newline and CR are excluded because the
# garble filter rejects every C0 control.
_PRINTABLE_ASCII: bytes = bytes(range(0x20, 0x7F))

# One printable byte followed by a zero byte is what UTF-16/UTF-32 encoded
# ASCII looks like, so at least two bytes are needed before the terminator.
_MIN_ASCII_LENGTH = 2


def ascii_prefix(data: bytes) -> str | None:
    """Return the printable ASCII text before the first zero byte, if any.

    :param data: The raw byte data to examine.
    :returns: The ASCII text, or ``None`` if the bytes before the first zero
        byte are too short or contain anything but printable ASCII.
    """
    end = data.find(b"\x00")
    prefix = data if end < 0 else data[:end]
    if len(prefix) < _MIN_ASCII_LENGTH:
        return None
    if prefix.translate(None, _PRINTABLE_ASCII):
        return None  # Non-printable bytes remain
    return prefix.decode("ascii")

from __future__ import annotations

from charpick.pipeline.ascii import ascii_prefix


def test_pure_ascii():
    assert ascii_prefix(b"Hello, world! 123") == "Hello, world! 123"


def test_ascii_before_terminator():
    assert ascii_prefix(b"Hello\x00\xff\xfe") == "Hello"


def test_control_characters_not_ascii_text():
    assert ascii_prefix(b"Hello\n\tworld\r\n") is None
    assert ascii_prefix(b"ab\x7f") is None


def test_high_byte_not_ascii():
    assert ascii_prefix(b"Hello \x80 world") is None


def test_utf8_multibyte_not_ascii():
    assert ascii_prefix("Héllo".encode()) is None


def test_utf16_encoded_ascii_is_not_ascii_text():
    assert ascii_prefix("Hello".encode("utf-16-le")) is None
    assert ascii_prefix("Hello".encode("utf-32-le")) is None


def test_single_character():
    assert ascii_prefix(b"A") is None


def test_empty_input():
    assert ascii_prefix(b"") is None
    assert ascii_prefix(b"\x00abc") is None

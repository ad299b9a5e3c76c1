# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

from charpick.registry import (
    EncodingCandidate,
    build_default_candidates,
    get_candidate,
)

#: Sample string with ASCII, katakana and a prolonged sound mark.
JAPANESE_TEXT = "HID キーボード デバイス"


@pytest.fixture
def japanese_text() -> str:
    return JAPANESE_TEXT


@pytest.fixture
def japanese_host_candidates() -> tuple[EncodingCandidate, ...]:
    """Default candidate order on a host whose ANSI code page is 932."""
    return build_default_candidates(legacy=932)


@pytest.fixture
def utf16le() -> EncodingCandidate:
    return get_candidate("utf-16-le")


@pytest.fixture
def utf8() -> EncodingCandidate:
    return get_candidate("utf-8")


@pytest.fixture
def utf32le() -> EncodingCandidate:
    return get_candidate("utf-32-le")

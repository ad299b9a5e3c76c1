# tests/test_api.py
from __future__ import annotations

import pytest

import charpick
from charpick import decode_all, decode_auto
from charpick.pipeline.naturalness import score_text
from charpick.registry import EncodingCandidate, get_candidate


def test_empty_input():
    assert decode_auto(b"") == ""
    assert decode_auto(bytearray()) == ""
    assert decode_auto(b"", ["utf-8"]) == ""


def test_accepts_bytearray_and_memoryview():
    assert decode_auto(bytearray(b"Hello")) == "Hello"
    assert decode_auto(memoryview(b"Hello")) == "Hello"


@pytest.mark.parametrize("text", ["test", "HI", "Hello, world!", "A", "a b c d"])
@pytest.mark.parametrize(
    "candidates",
    [
        None,
        ["utf-16-le", "utf-32-le", "utf-8"],
        ["utf-16-be", "utf-8", "cp932"],
        ["utf-8"],
    ],
)
def test_ascii_utf8_round_trips(text: str, candidates: list[str] | None):
    assert decode_auto(text.encode("utf-8"), candidates) == text


def test_bom_never_in_output():
    data = b"\xff\xfe" + "Hello".encode("utf-16-le")
    assert decode_auto(data) == "Hello"


def test_utf8_bom_stripped_by_utf8_sig_candidate():
    data = b"\xef\xbb\xbf" + "Grüße".encode()
    assert decode_auto(data, ["utf-8-sig", "utf-8"]) == "Grüße"


def test_plain_utf8_keeps_bom_character():
    # utf-8 is the BOM-less variant; U+FEFF is decoded but not readable
    data = b"\xef\xbb\xbf" + b"Hello"
    assert decode_auto(data, ["utf-8"]) == "\ufeffHello"


def test_utf16_not_misread_as_utf8_when_utf8_fails():
    # C6 30 is not valid UTF-8
    data = "テスト".encode("utf-16-le")
    assert decode_auto(data, ["utf-8", "utf-16-le"]) == "テスト"


def test_utf16_not_misread_as_garbled_utf8():
    # 01 01 03 01 05 01 is valid UTF-8, but made of C0 controls
    data = "āăą".encode("utf-16-le")
    assert decode_auto(data, ["utf-8", "utf-16-le"]) == "āăą"


def test_total_fallback_on_decode_failure():
    assert decode_auto(b"\xff\xfe\xfd", ["utf-8"]) == "\ufffd\ufffd\ufffd"


def test_total_fallback_on_garbled_text():
    data = b"ab\x01cd"
    assert decode_auto(data, ["cp1252", "utf-16-le"]) == "ab\x01cd"


def test_fallback_decodes_whole_buffer():
    # utf-8 rejects the first byte; the fallback ignores the terminator
    data = b"\xffab\x00cd"
    assert decode_auto(data, ["utf-8"]) == "\ufffdab\x00cd"


def test_noise_never_raises():
    result = decode_auto(bytes(range(1, 256)))
    assert isinstance(result, str)
    assert result


def test_no_resolvable_candidates_falls_back():
    assert decode_auto("Grüße".encode(), ["no-such-encoding"]) == "Grüße"


def test_unknown_candidates_are_skipped(japanese_text: str):
    data = japanese_text.encode("shift_jis")
    assert decode_auto(data, ["no-such-encoding", "cp932"]) == japanese_text


def test_codepage_numbers_as_candidates(japanese_text: str):
    data = japanese_text.encode("shift_jis")
    assert decode_auto(data, [1200, 65001, 932]) == japanese_text


def test_single_candidate_not_in_list(japanese_text: str):
    data = japanese_text.encode("shift_jis")
    assert decode_auto(data, "cp932") == japanese_text
    assert decode_auto(data, get_candidate("shift_jis")) == japanese_text


def test_codec_raising_unicode_error_does_not_escape():
    assert decode_auto(b"\xffab", ["undefined", "utf-8"]) == "\ufffdab"
    assert decode_auto(b"xn--zzzzzz-", ["idna", "utf-8"]) == "xn--zzzzzz-"


# ---------------------------------------------------------------------------
# End-to-end
# ---------------------------------------------------------------------------


def test_utf8_without_bom(japanese_text: str):
    assert decode_auto(japanese_text.encode("utf-8")) == japanese_text


def test_utf16_le(japanese_text: str):
    assert decode_auto(japanese_text.encode("utf-16-le")) == japanese_text


def test_legacy_code_page(
    japanese_text: str, japanese_host_candidates: tuple[EncodingCandidate, ...]
):
    data = japanese_text.encode("shift_jis")
    assert decode_auto(data, japanese_host_candidates) == japanese_text


def test_legacy_code_page_by_name(japanese_text: str):
    data = japanese_text.encode("shift_jis")
    assert decode_auto(data, ["utf-16-le", "utf-8", "shift_jis"]) == japanese_text


# ---------------------------------------------------------------------------
# decode_all
# ---------------------------------------------------------------------------


def test_decode_all_returns_dicts(japanese_text: str):
    data = japanese_text.encode("utf-16-le")
    results = decode_all(data, ["utf-16-le", "utf-16-be"])
    assert isinstance(results, list)
    for r in results:
        assert set(r) == {"encoding", "text", "score"}
    assert results[0] == {
        "encoding": "utf-16-le",
        "text": japanese_text,
        "score": 100,
    }


def test_decode_all_sorted_by_score():
    results = decode_all(b"ab\xa4", ["cp1252", "cp866"])
    scores = [r["score"] for r in results]
    assert scores == sorted(scores, reverse=True)


def test_decode_all_scores_are_readable_ratios(japanese_text: str):
    for data in (b"a+b=$", b"test", japanese_text.encode("utf-8"), b"ab\xa4"):
        for r in decode_all(data, ["utf-16-le", "utf-8", "cp1252", "cp866"]):
            assert r["score"] == score_text(r["text"])


def test_decode_all_first_matches_decode_auto(japanese_text: str):
    for data in (
        japanese_text.encode("utf-8"),
        japanese_text.encode("utf-16-le"),
        b"test",
    ):
        assert decode_all(data)[0]["text"] == decode_auto(data)


def test_decode_all_fallback_entry():
    results = decode_all(b"\xff\xfe\xfd", ["utf-8"])
    assert results == [{"encoding": "utf-8", "text": "\ufffd\ufffd\ufffd", "score": 0}]


def test_decode_all_empty():
    assert decode_all(b"") == []


def test_version_exists():
    assert hasattr(charpick, "__version__")
    assert isinstance(charpick.__version__, str)

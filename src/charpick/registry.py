"""Encoding candidates and the default candidate set."""

from __future__ import annotations

import codecs
import dataclasses
import logging
import threading
from collections.abc import Iterable

from charpick.codepages import codec_for_codepage, host_codepage, register_codepages
from charpick.enums import CodeUnit

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingCandidate:
    """One encoding to try when guessing how a buffer was encoded."""

    name: str
    python_codec: str
    width: CodeUnit
    preamble: bytes = b""
    errors: str = "strict"
    codepage: int | None = None


# Keyed by canonical codec name with underscores replaced by hyphens.
_WIDE_CODECS: dict[str, CodeUnit] = {
    "utf-16": CodeUnit.WORD,
    "utf-16-le": CodeUnit.WORD,
    "utf-16-be": CodeUnit.WORD,
    "utf-32": CodeUnit.DWORD,
    "utf-32-le": CodeUnit.DWORD,
    "utf-32-be": CodeUnit.DWORD,
}

_VARIABLE_CODECS: frozenset[str] = frozenset(
    {
        "big5",
        "big5hkscs",
        "cp932",
        "cp949",
        "cp950",
        "euc-jis-2004",
        "euc-jisx0213",
        "euc-jp",
        "euc-kr",
        "gb18030",
        "gb2312",
        "gbk",
        "hz",
        "johab",
        "shift-jis",
        "shift-jis-2004",
        "shift-jisx0213",
        "utf-7",
        "utf-8",
        "utf-8-sig",
    }
)

# The unmarked utf-16/utf-32 codecs consume their own BOM, and plain utf-8
# is the BOM-less variant.
_PREAMBLES: dict[str, bytes] = {
    "utf-8-sig": codecs.BOM_UTF8,
    "utf-16-le": codecs.BOM_UTF16_LE,
    "utf-16-be": codecs.BOM_UTF16_BE,
    "utf-32-le": codecs.BOM_UTF32_LE,
    "utf-32-be": codecs.BOM_UTF32_BE,
}


def _codec_key(python_codec: str) -> str:
    return python_codec.lower().replace("_", "-")


def _width_for(key: str) -> CodeUnit:
    if key in _WIDE_CODECS:
        return _WIDE_CODECS[key]
    if key in _VARIABLE_CODECS or key.startswith("iso2022-"):
        return CodeUnit.VARIABLE
    return CodeUnit.BYTE


def make_candidate(
    codec: str, name: str | None = None, codepage: int | None = None
) -> EncodingCandidate:
    """Build a candidate for any codec Python can look up.

    Width, preamble and error handler are derived from the canonical codec
    name.  UTF-16 and UTF-32 decode with ``surrogatepass`` so that isolated
    surrogates reach the garble filter instead of aborting the decode.

    :raises LookupError: If *codec* is unknown.
    """
    python_codec = codecs.lookup(codec).name
    key = _codec_key(python_codec)
    width = _width_for(key)
    wide = width in (CodeUnit.WORD, CodeUnit.DWORD)
    return EncodingCandidate(
        name=name or python_codec,
        python_codec=python_codec,
        width=width,
        preamble=_PREAMBLES.get(key, b""),
        errors="surrogatepass" if wide else "strict",
        codepage=codepage,
    )


REGISTRY: tuple[EncodingCandidate, ...] = (
    make_candidate("utf-8", codepage=65001),
    make_candidate("utf-8-sig", name="utf-8-sig"),
    make_candidate("utf-16-le", codepage=1200),
    make_candidate("utf-16-be", codepage=1201),
    make_candidate("utf-32-le", codepage=12000),
    make_candidate("utf-32-be", codepage=12001),
    make_candidate("ascii", codepage=20127),
    make_candidate("cp932", codepage=932),
    make_candidate("shift_jis", codepage=None),
    make_candidate("euc_jp", name="euc-jp", codepage=51932),
    make_candidate("gbk", codepage=936),
    make_candidate("gb18030", codepage=54936),
    make_candidate("cp950", codepage=950),
    make_candidate("cp949", codepage=949),
    make_candidate("euc_kr", name="euc-kr", codepage=51949),
    make_candidate("cp874", name="windows-874", codepage=874),
    make_candidate("cp1250", name="windows-1250", codepage=1250),
    make_candidate("cp1251", name="windows-1251", codepage=1251),
    make_candidate("cp1252", name="windows-1252", codepage=1252),
    make_candidate("cp1253", name="windows-1253", codepage=1253),
    make_candidate("cp1254", name="windows-1254", codepage=1254),
    make_candidate("cp1255", name="windows-1255", codepage=1255),
    make_candidate("cp1256", name="windows-1256", codepage=1256),
    make_candidate("cp1257", name="windows-1257", codepage=1257),
    make_candidate("cp1258", name="windows-1258", codepage=1258),
    make_candidate("cp437", codepage=437),
    make_candidate("cp866", codepage=866),
    make_candidate("koi8_r", name="koi8-r", codepage=20866),
    make_candidate("latin_1", name="iso-8859-1", codepage=28591),
)

_BY_NAME: dict[str, EncodingCandidate] = {c.name: c for c in REGISTRY}
_BY_CODEC: dict[str, EncodingCandidate] = {c.python_codec: c for c in REGISTRY}
_BY_CODEPAGE: dict[int, EncodingCandidate] = {
    c.codepage: c for c in REGISTRY if c.codepage is not None
}

_default_candidates: tuple[EncodingCandidate, ...] | None = None
_DEFAULT_LOCK = threading.Lock()


def get_candidate(spec: EncodingCandidate | str | int) -> EncodingCandidate:
    """Return the candidate described by *spec*.

    :param spec: A candidate (returned as is), a codec name such as
        ``"shift_jis"`` or ``"cp1200"``, or a Windows code page number.
    :raises LookupError: If no codec matches *spec*.
    :raises TypeError: If *spec* is of an unsupported type.
    """
    if isinstance(spec, EncodingCandidate):
        return spec
    if isinstance(spec, int) and not isinstance(spec, bool):
        known = _BY_CODEPAGE.get(spec)
        if known is not None:
            return known
        return make_candidate(codec_for_codepage(spec), codepage=spec)
    if isinstance(spec, str):
        known = _BY_NAME.get(spec.lower())
        if known is not None:
            return known
        register_codepages()
        candidate = make_candidate(spec)
        return _BY_CODEC.get(candidate.python_codec, candidate)
    msg = (
        "expected an EncodingCandidate, codec name or code page, "
        f"got {type(spec).__name__}"
    )
    raise TypeError(msg)


def resolve_candidates(
    specs: Iterable[EncodingCandidate | str | int],
) -> tuple[EncodingCandidate, ...]:
    """Resolve *specs* in order, skipping any that name an unknown codec."""
    resolved = []
    for spec in specs:
        try:
            resolved.append(get_candidate(spec))
        except LookupError:
            logger.warning("skipping unknown encoding candidate %r", spec)
    return tuple(resolved)


def build_default_candidates(
    legacy: EncodingCandidate | str | int | None = None,
) -> tuple[EncodingCandidate, ...]:
    """Build the default candidate order: UTF-16LE, UTF-8 (no BOM), legacy.

    :param legacy: The legacy code page to try last.  Defaults to the host's
        ANSI code page (see :func:`charpick.codepages.host_codepage`).
    """
    if legacy is None:
        legacy = host_codepage()
    candidates = [get_candidate("utf-16-le"), get_candidate("utf-8")]
    try:
        candidates.append(get_candidate(legacy))
    except LookupError:
        logger.warning("legacy code page %r is not available", legacy)
    return tuple(candidates)


def default_candidates() -> tuple[EncodingCandidate, ...]:
    """Return the process-wide default candidates, building them on first use."""
    global _default_candidates  # noqa: PLW0603
    if _default_candidates is not None:
        return _default_candidates
    with _DEFAULT_LOCK:
        if _default_candidates is None:
            _default_candidates = build_default_candidates()
            logger.debug(
                "default candidates: %s",
                ", ".join(c.name for c in _default_candidates),
            )
        return _default_candidates

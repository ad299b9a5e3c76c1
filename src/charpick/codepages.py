"""Windows code page identifiers and the host's legacy code page.

Python ships codecs for most Windows code pages under their ``cpNNN`` names,
but a handful of identifiers (the UTF-16/UTF-32 pages, the ISO-8859 and EUC
pages) are only known under other names.  :func:`register_codepages` installs
a :mod:`codecs` search function for those so every candidate can be named by
its code page number.
"""

from __future__ import annotations

import codecs
import locale
import logging
import sys
import threading

logger = logging.getLogger(__name__)

# Code page numbers Python has no ``cpNNN`` codec for, mapped to the codec
# that implements them.
_EXTRA_CODEPAGES: dict[int, str] = {
    1200: "utf-16-le",
    1201: "utf-16-be",
    1361: "johab",
    10000: "mac-roman",
    10006: "mac-greek",
    10007: "mac-cyrillic",
    10029: "mac-latin2",
    10079: "mac-iceland",
    10081: "mac-turkish",
    12000: "utf-32-le",
    12001: "utf-32-be",
    20127: "ascii",
    20866: "koi8-r",
    21866: "koi8-u",
    28591: "iso8859-1",
    28592: "iso8859-2",
    28593: "iso8859-3",
    28594: "iso8859-4",
    28595: "iso8859-5",
    28596: "iso8859-6",
    28597: "iso8859-7",
    28598: "iso8859-8",
    28599: "iso8859-9",
    28603: "iso8859-13",
    28605: "iso8859-15",
    50220: "iso2022-jp",
    50225: "iso2022-kr",
    51932: "euc-jp",
    51949: "euc-kr",
    52936: "hz",
    54936: "gb18030",
    65000: "utf-7",
    65001: "utf-8",
}

#: Code pages that are Unicode transformation formats rather than legacy pages.
UNICODE_CODEPAGES: frozenset[int] = frozenset(
    {1200, 1201, 12000, 12001, 65000, 65001}
)

# ANSI code page Windows assigns to each language.  Languages not listed use
# 1252, as does the invariant (C/POSIX) locale.
_LANGUAGE_CODEPAGES: dict[str, int] = {
    "ja": 932,
    "ko": 949,
    "th": 874,
    "vi": 1258,
    # Cyrillic
    "be": 1251,
    "bg": 1251,
    "kk": 1251,
    "ky": 1251,
    "mk": 1251,
    "mn": 1251,
    "ru": 1251,
    "sr": 1251,
    "tt": 1251,
    "uk": 1251,
    # Central European
    "bs": 1250,
    "cs": 1250,
    "hr": 1250,
    "hu": 1250,
    "pl": 1250,
    "ro": 1250,
    "sk": 1250,
    "sl": 1250,
    "sq": 1250,
    "el": 1253,
    "az": 1254,
    "tr": 1254,
    "uz": 1254,
    "he": 1255,
    "ar": 1256,
    "fa": 1256,
    "ur": 1256,
    # Baltic
    "et": 1257,
    "lt": 1257,
    "lv": 1257,
}

_CHINESE_TRADITIONAL_REGIONS: frozenset[str] = frozenset({"TW", "HK", "MO"})

_DEFAULT_ANSI_CODEPAGE = 1252

_IS_WINDOWS = sys.platform == "win32"

_registered = False
_REGISTER_LOCK = threading.Lock()


def _parse_codepage_name(name: str) -> int | None:
    """Return the number in ``cpNNN`` / ``windows_NNN`` names, else None."""
    for prefix in ("cp", "windows_", "windows"):
        if name.startswith(prefix):
            digits = name[len(prefix) :]
            if digits.isdigit():
                return int(digits)
    return None


def _search_codepage(name: str) -> codecs.CodecInfo | None:
    """Codec search function resolving code page identifiers."""
    normalized = name.lower().replace("-", "_").replace(" ", "_")
    number = _parse_codepage_name(normalized)
    if number is None:
        return None
    target = _EXTRA_CODEPAGES.get(number)
    if target is None:
        if normalized.startswith("cp"):
            # Native cpNNN names never reach this function.
            return None
        target = f"cp{number}"
    try:
        return codecs.lookup(target)
    except LookupError:
        return None


def register_codepages() -> None:
    """Make every supported Windows code page resolvable by ``cpNNN`` name.

    Safe to call any number of times and from any thread; the search
    function is installed exactly once.
    """
    global _registered  # noqa: PLW0603
    if _registered:
        return
    with _REGISTER_LOCK:
        if _registered:
            return
        codecs.register(_search_codepage)
        _registered = True
        logger.debug(
            "registered %d extra code page identifiers", len(_EXTRA_CODEPAGES)
        )


def codec_for_codepage(codepage: int) -> str:
    """Return the canonical Python codec name for a Windows code page number.

    :param codepage: Windows code page identifier, e.g. ``932``.
    :returns: The codec name, e.g. ``"cp932"``.
    :raises LookupError: If no codec implements *codepage*.
    """
    register_codepages()
    return codecs.lookup(f"cp{codepage}").name


def codepage_for_locale(locale_name: str | None) -> int:
    """Return the ANSI code page Windows uses for *locale_name*.

    Accepts POSIX (``ja_JP.UTF-8``) and BCP 47 (``zh-TW``) spellings.
    """
    if not locale_name:
        return _DEFAULT_ANSI_CODEPAGE
    base = locale_name.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    language, _, region = base.partition("_")
    language = language.lower()
    if language in ("c", "posix"):
        return _DEFAULT_ANSI_CODEPAGE
    if language == "zh":
        return 950 if region.upper() in _CHINESE_TRADITIONAL_REGIONS else 936
    return _LANGUAGE_CODEPAGES.get(language, _DEFAULT_ANSI_CODEPAGE)


def host_codepage() -> int:
    """Return the host environment's legacy (ANSI) code page number.

    On Windows this is the active code page reported by the locale module,
    unless the process runs in UTF-8 mode.  Elsewhere it is derived from the
    language of the ``LC_CTYPE`` locale.
    """
    if _IS_WINDOWS:
        active = _parse_codepage_name(locale.getpreferredencoding(False).lower())
        if active is not None and active not in UNICODE_CODEPAGES:
            return active
    try:
        locale_name = locale.getlocale(locale.LC_CTYPE)[0]
    except ValueError:
        locale_name = None
    return codepage_for_locale(locale_name)

"""Registry of supported encodings.

``REGISTRY`` is ordered: an entry's position is its tie-break rank when two
candidates score exactly the same confidence.  The order is

1. byte-order-mark encodings (UTF-32 before UTF-16 since their BOMs overlap),
2. escape-sequence encodings,
3. ASCII, then UTF-8,
4. CJK multi-byte encodings, each subset before its superset,
5. single-byte code pages, ISO/TIS subsets before their Windows supersets.
"""

from __future__ import annotations

import codecs
import dataclasses
import threading

from charsight.enums import EncodingEra, ModelKind

#: Single-byte model that yields a baseline confidence on empty input.
FALLBACK_ENCODING = "windows-1252"

_WESTERN = ("en", "fr", "de", "es", "it", "pt", "nl")
_CENTRAL = ("pl", "cs", "hu")
_CYRILLIC = ("ru", "uk", "bg")


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingInfo:
    """Static description of one candidate encoding and how to score it."""

    name: str
    python_codec: str
    era: EncodingEra
    kind: ModelKind
    languages: tuple[str, ...] = ()
    bom: bytes = b""
    grammar: str = ""

    @property
    def is_multibyte(self) -> bool:
        return self.kind is ModelKind.MULTI_BYTE

    @property
    def is_fallback(self) -> bool:
        return self.name == FALLBACK_ENCODING


def _single(
    name: str, codec: str, era: EncodingEra, languages: tuple[str, ...]
) -> EncodingInfo:
    return EncodingInfo(name, codec, era, ModelKind.SINGLE_BYTE, languages)


def _cjk(
    name: str, codec: str, era: EncodingEra, language: str, grammar: str
) -> EncodingInfo:
    return EncodingInfo(
        name, codec, era, ModelKind.MULTI_BYTE, (language,), grammar=grammar
    )


_MODERN = EncodingEra.MODERN_WEB
_ISO = EncodingEra.LEGACY_ISO
_MAC = EncodingEra.LEGACY_MAC
_DOS = EncodingEra.DOS

REGISTRY: tuple[EncodingInfo, ...] = (
    # Byte-order marks
    EncodingInfo(
        "utf-32-be", "utf-32-be", _MODERN, ModelKind.WIDE, bom=b"\x00\x00\xfe\xff"
    ),
    EncodingInfo(
        "utf-32-le", "utf-32-le", _MODERN, ModelKind.WIDE, bom=b"\xff\xfe\x00\x00"
    ),
    EncodingInfo("utf-8-sig", "utf-8-sig", _MODERN, ModelKind.BOM, bom=b"\xef\xbb\xbf"),
    EncodingInfo("utf-16-be", "utf-16-be", _MODERN, ModelKind.WIDE, bom=b"\xfe\xff"),
    EncodingInfo("utf-16-le", "utf-16-le", _MODERN, ModelKind.WIDE, bom=b"\xff\xfe"),
    # Escape sequences
    EncodingInfo("iso-2022-jp", "iso2022_jp", _MODERN, ModelKind.ESCAPE, ("ja",)),
    EncodingInfo("iso-2022-kr", "iso2022_kr", _MODERN, ModelKind.ESCAPE, ("ko",)),
    EncodingInfo("hz-gb-2312", "hz", _MODERN, ModelKind.ESCAPE, ("zh",)),
    # Unicode and ASCII
    EncodingInfo("ascii", "ascii", _MODERN, ModelKind.ASCII),
    EncodingInfo("utf-8", "utf-8", _MODERN, ModelKind.UTF8),
    # CJK multi-byte
    _cjk("shift_jis", "shift_jis", _MODERN, "ja", "shift_jis"),
    _cjk("cp932", "cp932", _ISO, "ja", "shift_jis"),
    _cjk("euc-jp", "euc_jp", _MODERN, "ja", "euc_jp"),
    _cjk("gb2312", "gb2312", _ISO, "zh", "gb18030"),
    _cjk("gb18030", "gb18030", _MODERN, "zh", "gb18030"),
    _cjk("big5", "big5", _MODERN, "zh", "big5"),
    _cjk("euc-kr", "euc_kr", _MODERN, "ko", "euc_kr"),
    _cjk("cp949", "cp949", _MODERN, "ko", "uhc"),
    _cjk("johab", "johab", _ISO, "ko", "johab"),
    # Western European
    _single("iso-8859-1", "iso-8859-1", _ISO, _WESTERN),
    _single("iso-8859-15", "iso-8859-15", _ISO, _WESTERN),
    _single("windows-1252", "cp1252", _MODERN, _WESTERN),
    _single("mac-roman", "mac_roman", _MAC, _WESTERN),
    _single("cp437", "cp437", _DOS, ("en", "fr", "de", "es")),
    _single("cp850", "cp850", _DOS, _WESTERN),
    # Central European
    _single("iso-8859-2", "iso-8859-2", _ISO, _CENTRAL),
    _single("windows-1250", "cp1250", _MODERN, _CENTRAL),
    _single("cp852", "cp852", _DOS, _CENTRAL),
    # Cyrillic
    _single("iso-8859-5", "iso-8859-5", _ISO, _CYRILLIC),
    _single("windows-1251", "cp1251", _MODERN, _CYRILLIC),
    _single("koi8-r", "koi8_r", _MODERN, ("ru",)),
    _single("koi8-u", "koi8_u", _MODERN, ("uk",)),
    _single("cp866", "cp866", _DOS, ("ru", "bg")),
    _single("mac-cyrillic", "mac_cyrillic", _MAC, _CYRILLIC),
    # Greek
    _single("iso-8859-7", "iso-8859-7", _ISO, ("el",)),
    _single("windows-1253", "cp1253", _MODERN, ("el",)),
    # Turkish
    _single("iso-8859-9", "iso-8859-9", _ISO, ("tr",)),
    _single("windows-1254", "cp1254", _MODERN, ("tr",)),
    # Hebrew
    _single("iso-8859-8", "iso-8859-8", _ISO, ("he",)),
    _single("windows-1255", "cp1255", _MODERN, ("he",)),
    # Arabic
    _single("iso-8859-6", "iso-8859-6", _ISO, ("ar",)),
    _single("windows-1256", "cp1256", _MODERN, ("ar",)),
    # Thai
    _single("tis-620", "tis_620", _MODERN, ("th",)),
    _single("iso-8859-11", "iso-8859-11", _ISO, ("th",)),
    _single("cp874", "cp874", _MODERN, ("th",)),
)

_BY_NAME: dict[str, EncodingInfo] = {e.name: e for e in REGISTRY}
_RANK: dict[str, int] = {e.name: i for i, e in enumerate(REGISTRY)}

_CANDIDATES_CACHE: dict[int, tuple[EncodingInfo, ...]] = {}
_CANDIDATES_LOCK = threading.Lock()


def lookup(name: str) -> EncodingInfo | None:
    """Return the registry entry for *name*, or ``None``."""
    return _BY_NAME.get(name)


def tie_break_rank(name: str) -> int:
    """Position of *name* in the tie-break order (unknown names sort last)."""
    return _RANK.get(name, len(REGISTRY))


def get_candidates(encoding_era: EncodingEra) -> tuple[EncodingInfo, ...]:
    """Return registry entries belonging to *encoding_era*.

    The fallback model is always included so that every era can produce a
    result for empty input.  Results are cached per era value.
    """
    key = int(encoding_era)
    cached = _CANDIDATES_CACHE.get(key)
    if cached is not None:
        return cached
    with _CANDIDATES_LOCK:
        if not _CANDIDATES_CACHE:
            validate_registry()
        candidates = tuple(
            e for e in REGISTRY if (e.era & encoding_era) or e.is_fallback
        )
        _CANDIDATES_CACHE[key] = candidates
        return candidates


def validate_registry(entries: tuple[EncodingInfo, ...] = REGISTRY) -> None:
    """Check every entry against the codec, grammar and language tables.

    :raises ModelTableError: For the first misconfigured entry.
    """
    from charsight.models import LANGUAGES, ModelTableError, frequent_characters
    from charsight.pipeline.structural import GRAMMARS

    for enc in entries:
        try:
            codecs.lookup(enc.python_codec)
        except LookupError as e:
            msg = f"registry entry {enc.name!r} names unknown codec {enc.python_codec!r}"
            raise ModelTableError(msg) from e
        for lang in enc.languages:
            if lang not in LANGUAGES:
                msg = f"registry entry {enc.name!r} names unknown language {lang!r}"
                raise ModelTableError(msg)
        if enc.kind is ModelKind.MULTI_BYTE:
            if enc.grammar not in GRAMMARS:
                msg = f"multi-byte registry entry {enc.name!r} has no grammar"
                raise ModelTableError(msg)
            if len(enc.languages) != 1:
                msg = f"multi-byte registry entry {enc.name!r} needs one language"
                raise ModelTableError(msg)
            frequent_characters(enc.languages[0])

"""Per-encoding probability models.

Each :class:`~charsight.enums.ModelKind` has exactly one scoring function
taking ``(EncodingInfo, ByteStatistics)`` and returning a confidence in
``[0, 1]``.  Models never see the raw bytes: everything they need has already
been summarized by :func:`~charsight.pipeline.statistics.collect_statistics`.
"""

from __future__ import annotations

import dataclasses
import threading
import unicodedata
from collections.abc import Callable

from charsight.enums import ModelKind
from charsight.models import letter_fit
from charsight.pipeline import (
    BOM_CONFIDENCE,
    MAX_HEURISTIC_CONFIDENCE,
    PATTERN_CONFIDENCE,
)
from charsight.pipeline.statistics import UTF8_KEY, ByteStatistics
from charsight.registry import EncodingInfo

#: Confidence the fallback single-byte model reports for empty input.
FALLBACK_BASELINE: float = 0.10

# Minimum bytes needed for reliable NUL-pattern detection
_MIN_BYTES_UTF32 = 16  # 4 full code units
_MIN_BYTES_UTF16 = 10  # 5 full code units

# Minimum fraction of null bytes in the expected position for UTF-16.
# Real UTF-16 text always has >=15% (even for CJK-heavy content).
_UTF16_MIN_NULL_FRACTION = 0.10

# Multi-byte gating thresholds
_MIN_NON_ASCII = 2
_MIN_BYTE_COVERAGE = 0.35
_MIN_LEAD_DIVERSITY = 4
_LEAD_DIVERSITY_MIN_NON_ASCII = 16

# Share of decoded characters found in the frequent-character table for
# typical running text.  Ratios at or above it earn full distribution credit.
_TYPICAL_FREQUENT_RATIO = 0.40
_DISTRIBUTION_BASE = 0.20

# Legacy interpretations of data that is clean, non-trivial UTF-8 are scaled
# by this factor.
_CLEAN_UTF8_PENALTY = 0.5

# Single-byte: 10% control bytes drives the printable factor to zero.
_CONTROL_PENALTY = 10.0
_TEXT_C0: frozenset[int] = frozenset({0x09, 0x0A, 0x0B, 0x0C, 0x0D})

_ASCII_TEXT_BYTES: frozenset[int] = frozenset({0x09, 0x0A, 0x0D, *range(0x20, 0x7F)})


@dataclasses.dataclass(frozen=True, slots=True)
class CodePage:
    """Decoded view of a single-byte code page.

    :param letters: byte -> lowercased letter, for bytes that decode to one.
    :param undefined: Bytes the code page leaves unassigned.
    :param controls: Bytes that decode to control characters other than
        whitespace.
    """

    letters: dict[int, str]
    undefined: frozenset[int]
    controls: frozenset[int]


_CODE_PAGES: dict[str, CodePage] = {}
_CODE_PAGES_LOCK = threading.Lock()


def _build_code_page(codec: str) -> CodePage:
    letters: dict[int, str] = {}
    undefined: set[int] = set()
    controls: set[int] = set()
    for b in range(256):
        try:
            ch = bytes([b]).decode(codec)
        except UnicodeDecodeError:
            undefined.add(b)
            continue
        if ch.isalpha():
            letters[b] = ch.lower()
        elif unicodedata.category(ch) == "Cc" and b not in _TEXT_C0:
            controls.add(b)
    return CodePage(letters, frozenset(undefined), frozenset(controls))


def get_code_page(codec: str) -> CodePage:
    """Return the cached :class:`CodePage` for *codec*, building it once."""
    page = _CODE_PAGES.get(codec)
    if page is not None:
        return page
    with _CODE_PAGES_LOCK:
        page = _CODE_PAGES.get(codec)
        if page is None:
            page = _build_code_page(codec)
            _CODE_PAGES[codec] = page
        return page


def _utf32_pattern(stats: ByteStatistics) -> str | None:
    """Return ``"utf-32-be"``/``"utf-32-le"`` if the NUL layout fits, else None.

    For valid Unicode the high byte of every 4-byte unit is NUL, and for BMP
    text (the vast majority) the next byte is mostly NUL too.
    """
    length = stats.length
    if length < _MIN_BYTES_UTF32 or length % 4 != 0:
        return None
    units = length // 4
    z0, z1, z2, z3 = stats.zero_positions
    if z0 == units and z1 / units > 0.5:
        return "utf-32-be"
    if z3 == units and z2 / units > 0.5:
        return "utf-32-le"
    return None


def _is_clean_utf8(stats: ByteStatistics) -> bool:
    counts = stats.sequence_counts(UTF8_KEY)
    return counts.valid > 0 and counts.invalid == 0


# ---------------------------------------------------------------------------
# Scorers
# ---------------------------------------------------------------------------


def score_bom(info: EncodingInfo, stats: ByteStatistics) -> float:
    """1.0 iff the winning BOM belongs to *info*."""
    return BOM_CONFIDENCE if stats.bom == info.name else 0.0


def score_wide(info: EncodingInfo, stats: ByteStatistics) -> float:
    """UTF-16/32: BOM match, else NUL-byte position pattern."""
    if stats.bom is not None:
        return BOM_CONFIDENCE if stats.bom == info.name else 0.0

    if info.name not in stats.wide_text:
        return 0.0
    utf32 = _utf32_pattern(stats)
    if info.name.startswith("utf-32"):
        return PATTERN_CONFIDENCE if utf32 == info.name else 0.0
    # UTF-32 text also shows NULs on both sides of each 16-bit unit
    if utf32 is not None:
        return 0.0

    length = stats.length
    if length < _MIN_BYTES_UTF16 or length % 2 != 0:
        return 0.0
    z0, z1, z2, z3 = stats.zero_positions
    units = length // 2
    even = (z0 + z2) / units
    odd = (z1 + z3) / units
    own, other = (even, odd) if info.name == "utf-16-be" else (odd, even)
    if own >= _UTF16_MIN_NULL_FRACTION and other <= own / 2:
        return PATTERN_CONFIDENCE
    return 0.0


def score_escape(info: EncodingInfo, stats: ByteStatistics) -> float:
    """Escape-sequence encodings are certain once their markers appear."""
    if info.name in stats.escapes and stats.non_ascii == 0:
        return MAX_HEURISTIC_CONFIDENCE
    return 0.0


def score_ascii(info: EncodingInfo, stats: ByteStatistics) -> float:
    """Pure printable ASCII plus TAB, LF and CR."""
    if stats.is_empty:
        return 0.0
    hist = stats.histogram
    for b in range(256):
        if hist[b] and b not in _ASCII_TEXT_BYTES:
            return 0.0
    return MAX_HEURISTIC_CONFIDENCE


def score_utf8(info: EncodingInfo, stats: ByteStatistics) -> float:
    """UTF-8: confidence rises with the share of multi-byte sequences."""
    counts = stats.sequence_counts(UTF8_KEY)
    if counts.valid == 0:
        return 0.0
    if counts.invalid:
        return counts.valid_ratio * 0.5
    # Confidence scales with the proportion of multi-byte bytes in the data.
    # Even a small amount of valid multi-byte UTF-8 is strong evidence.
    mb_ratio = counts.multibyte_bytes / stats.length
    return min(MAX_HEURISTIC_CONFIDENCE, 0.80 + 0.19 * min(mb_ratio * 6, 1.0))


def score_multi_byte(info: EncodingInfo, stats: ByteStatistics) -> float:
    """CJK multi-byte: structural validity times character distribution.

    Gates (any failure scores 0):

    - at least two non-ASCII bytes,
    - at least 35% of non-ASCII bytes inside valid characters,
    - at least four distinct lead bytes once there are 16 or more
      non-ASCII bytes.
    """
    non_ascii = stats.non_ascii
    if non_ascii < _MIN_NON_ASCII:
        return 0.0
    counts = stats.sequence_counts(info.name)
    if counts.valid == 0:
        return 0.0
    coverage = counts.multibyte_bytes / non_ascii
    if coverage < _MIN_BYTE_COVERAGE:
        return 0.0
    if (
        non_ascii >= _LEAD_DIVERSITY_MIN_NON_ASCII
        and counts.lead_diversity < _MIN_LEAD_DIVERSITY
    ):
        return 0.0

    distribution = min(1.0, counts.frequent / counts.valid / _TYPICAL_FREQUENT_RATIO)
    score = (
        counts.valid_ratio
        * min(1.0, coverage)
        * (_DISTRIBUTION_BASE + (1.0 - _DISTRIBUTION_BASE) * distribution)
    )
    if _is_clean_utf8(stats):
        score *= _CLEAN_UTF8_PENALTY
    return min(MAX_HEURISTIC_CONFIDENCE, score)


def score_single_byte(info: EncodingInfo, stats: ByteStatistics) -> float:
    """Single-byte code page: definedness, control bytes and letter fit."""
    if stats.is_empty:
        return FALLBACK_BASELINE if info.is_fallback else 0.0

    page = get_code_page(info.python_codec)
    hist = stats.histogram
    if any(hist[b] for b in page.undefined):
        return 0.0

    bad = sum(hist[b] for b in page.controls)
    printable = max(0.0, 1.0 - _CONTROL_PENALTY * bad / stats.length)
    if printable == 0.0:
        return 0.0

    letters: dict[str, int] = {}
    high_letters = 0
    for b, ch in page.letters.items():
        n = hist[b]
        if n:
            letters[ch] = letters.get(ch, 0) + n
            if b >= 0x80:
                high_letters += n
    non_ascii = stats.non_ascii
    high_letter_ratio = high_letters / non_ascii if non_ascii else 0.0

    fit = letter_fit(letters, info.languages)
    score = (
        MAX_HEURISTIC_CONFIDENCE
        * printable
        * (0.2 + 0.8 * fit)
        * (0.5 + 0.5 * high_letter_ratio)
    )
    if _is_clean_utf8(stats):
        score *= _CLEAN_UTF8_PENALTY
    return score


# ---------------------------------------------------------------------------
# Dispatch table: model kind -> scorer
# ---------------------------------------------------------------------------

_SCORERS: dict[ModelKind, Callable[[EncodingInfo, ByteStatistics], float]] = {
    ModelKind.BOM: score_bom,
    ModelKind.WIDE: score_wide,
    ModelKind.ESCAPE: score_escape,
    ModelKind.ASCII: score_ascii,
    ModelKind.UTF8: score_utf8,
    ModelKind.MULTI_BYTE: score_multi_byte,
    ModelKind.SINGLE_BYTE: score_single_byte,
}

_missing = set(ModelKind) - set(_SCORERS)
if _missing:
    msg = f"no scorer registered for model kinds: {sorted(k.value for k in _missing)}"
    raise RuntimeError(msg)


def score_encoding(info: EncodingInfo, stats: ByteStatistics) -> float:
    """Score *stats* under the model for *info*.

    :returns: A confidence in ``[0, 1]``.
    """
    return _SCORERS[info.kind](info, stats)

"""Multi-byte structural analysis.

Each grammar walks the data once and reports the spans of well-formed
multi-byte sequences together with the number of lead bytes that failed to
start one.  :func:`analyze_sequences` then decodes each span with the real
codec, so a sequence that is structurally plausible but unassigned in the
code table counts as invalid.  This is what separates a subset (GB2312,
EUC-KR, Shift_JIS) from its superset when the data uses superset-only
characters.

Trailing sequences cut short by the end of the data are neither valid nor
invalid: sampling with ``max_bytes`` routinely splits a character.
"""

from __future__ import annotations

import codecs
import dataclasses
from collections.abc import Callable

# A grammar returns (spans, invalid) where spans are (start, length) pairs.
_Walk = tuple[list[tuple[int, int]], int]

# Byte table for fast non-ASCII counting (C-speed via bytes.translate).
_HIGH_BYTES: bytes = bytes(range(0x80, 0x100))


@dataclasses.dataclass(frozen=True, slots=True)
class SequenceCounts:
    """Per-scheme multi-byte evidence gathered from one input.

    :param valid: Well-formed multi-byte characters the codec accepts.
    :param invalid: Lead bytes (or codec rejections) that did not form one.
    :param multibyte_bytes: Non-ASCII bytes covered by valid characters.
    :param lead_diversity: Distinct lead byte values among valid characters.
    :param frequent: Valid characters found in the language's
        frequent-character table.
    """

    valid: int = 0
    invalid: int = 0
    multibyte_bytes: int = 0
    lead_diversity: int = 0
    frequent: int = 0

    @property
    def valid_ratio(self) -> float:
        total = self.valid + self.invalid
        return self.valid / total if total else 0.0


EMPTY_COUNTS = SequenceCounts()


def _walk_utf8(data: bytes) -> _Walk:
    """UTF-8 grammar: no overlongs, no surrogates, nothing above U+10FFFF."""
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        byte = data[i]
        if byte < 0x80:
            i += 1
            continue

        # 0xC0-0xC1 are overlong 2-byte encodings of ASCII, so we start at 0xC2.
        if 0xC2 <= byte <= 0xDF:
            seq_len = 2
        elif 0xE0 <= byte <= 0xEF:
            seq_len = 3
        elif 0xF0 <= byte <= 0xF4:
            seq_len = 4
        else:
            invalid += 1
            i += 1
            continue

        if i + seq_len > length:
            break

        ok = all(0x80 <= data[i + j] <= 0xBF for j in range(1, seq_len))
        if ok and seq_len == 3:
            # E0 must not be overlong; ED must not encode a UTF-16 surrogate
            if (byte == 0xE0 and data[i + 1] < 0xA0) or (
                byte == 0xED and data[i + 1] > 0x9F
            ):
                ok = False
        elif ok and seq_len == 4:
            if (byte == 0xF0 and data[i + 1] < 0x90) or (
                byte == 0xF4 and data[i + 1] > 0x8F
            ):
                ok = False

        if ok:
            spans.append((i, seq_len))
            i += seq_len
        else:
            invalid += 1
            i += 1
    return spans, invalid


def _walk_shift_jis(data: bytes) -> _Walk:
    """Shift_JIS / CP932.

    Lead bytes: 0x81-0x9F, 0xE0-0xFC
    Trail bytes: 0x40-0x7E, 0x80-0xFC
    Half-width katakana 0xA1-0xDF stand alone.
    """
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if (0x81 <= b <= 0x9F) or (0xE0 <= b <= 0xFC):
            if i + 1 >= length:
                break
            trail = data[i + 1]
            if (0x40 <= trail <= 0x7E) or (0x80 <= trail <= 0xFC):
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif 0xA1 <= b <= 0xDF:
            spans.append((i, 1))
        elif b > 0x7F:
            invalid += 1
        i += 1
    return spans, invalid


def _walk_euc_jp(data: bytes) -> _Walk:
    """EUC-JP.

    Two-byte: Lead 0xA1-0xFE, Trail 0xA1-0xFE
    SS2 (half-width katakana): 0x8E + 0xA1-0xDF
    SS3 (JIS X 0212): 0x8F + 0xA1-0xFE + 0xA1-0xFE
    """
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if b == 0x8E:
            if i + 1 >= length:
                break
            if 0xA1 <= data[i + 1] <= 0xDF:
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif b == 0x8F:
            if i + 2 >= length:
                break
            if 0xA1 <= data[i + 1] <= 0xFE and 0xA1 <= data[i + 2] <= 0xFE:
                spans.append((i, 3))
                i += 3
                continue
            invalid += 1
        elif 0xA1 <= b <= 0xFE:
            if i + 1 >= length:
                break
            if 0xA1 <= data[i + 1] <= 0xFE:
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif b > 0x7F:
            invalid += 1
        i += 1
    return spans, invalid


def _walk_euc_kr(data: bytes) -> _Walk:
    """EUC-KR: Lead 0xA1-0xFE; Trail 0xA1-0xFE."""
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if 0xA1 <= b <= 0xFE:
            if i + 1 >= length:
                break
            if 0xA1 <= data[i + 1] <= 0xFE:
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif b > 0x7F:
            invalid += 1
        i += 1
    return spans, invalid


def _walk_uhc(data: bytes) -> _Walk:
    """CP949 (Unified Hangul Code), a superset of EUC-KR.

    Lead 0x81-0xFE; Trail 0x41-0x5A, 0x61-0x7A, 0x81-0xFE
    """
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if 0x81 <= b <= 0xFE:
            if i + 1 >= length:
                break
            trail = data[i + 1]
            if (0x41 <= trail <= 0x5A) or (0x61 <= trail <= 0x7A) or trail >= 0x81:
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif b > 0x7F:
            invalid += 1
        i += 1
    return spans, invalid


def _walk_gb18030(data: bytes) -> _Walk:
    """GB18030 / GBK / GB2312.

    2-byte: Lead 0x81-0xFE; Trail 0x40-0x7E, 0x80-0xFE
    4-byte: 0x81-0xFE, 0x30-0x39, 0x81-0xFE, 0x30-0x39

    The GBK trail range overlaps ASCII letters, so accented Latin text often
    walks as valid pairs.  Those pairs decode to rare ideographs and are
    discounted by the frequent-character table, not by the grammar.
    """
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if 0x81 <= b <= 0xFE:
            if i + 1 >= length:
                break
            trail = data[i + 1]
            # byte 2 in 0x30-0x39 distinguishes a 4-byte sequence
            if 0x30 <= trail <= 0x39:
                if i + 3 >= length:
                    break
                if 0x81 <= data[i + 2] <= 0xFE and 0x30 <= data[i + 3] <= 0x39:
                    spans.append((i, 4))
                    i += 4
                    continue
            elif (0x40 <= trail <= 0x7E) or (0x80 <= trail <= 0xFE):
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif b > 0x7F:
            invalid += 1
        i += 1
    return spans, invalid


def _walk_big5(data: bytes) -> _Walk:
    """Big5: Lead 0xA1-0xF9; Trail 0x40-0x7E, 0xA1-0xFE."""
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if 0xA1 <= b <= 0xF9:
            if i + 1 >= length:
                break
            trail = data[i + 1]
            if (0x40 <= trail <= 0x7E) or (0xA1 <= trail <= 0xFE):
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif b > 0x7F:
            invalid += 1
        i += 1
    return spans, invalid


def _walk_johab(data: bytes) -> _Walk:
    """Johab.

    Lead: 0x84-0xD3, 0xD8-0xDE, 0xE0-0xF9
    Trail: 0x31-0x7E, 0x81-0xFE
    """
    spans: list[tuple[int, int]] = []
    invalid = 0
    i = 0
    length = len(data)
    while i < length:
        b = data[i]
        if (0x84 <= b <= 0xD3) or (0xD8 <= b <= 0xDE) or (0xE0 <= b <= 0xF9):
            if i + 1 >= length:
                break
            trail = data[i + 1]
            if (0x31 <= trail <= 0x7E) or (0x81 <= trail <= 0xFE):
                spans.append((i, 2))
                i += 2
                continue
            invalid += 1
        elif b > 0x7F:
            invalid += 1
        i += 1
    return spans, invalid


# ---------------------------------------------------------------------------
# Dispatch table: grammar name -> walker
# ---------------------------------------------------------------------------

GRAMMARS: dict[str, Callable[[bytes], _Walk]] = {
    "utf-8": _walk_utf8,
    "shift_jis": _walk_shift_jis,
    "euc_jp": _walk_euc_jp,
    "euc_kr": _walk_euc_kr,
    "uhc": _walk_uhc,
    "gb18030": _walk_gb18030,
    "big5": _walk_big5,
    "johab": _walk_johab,
}


def analyze_sequences(
    data: bytes,
    grammar: str,
    codec: str,
    frequent: frozenset[str] = frozenset(),
) -> SequenceCounts:
    """Walk *data* with *grammar* and confirm each sequence with *codec*.

    :param data: The raw byte data to examine.
    :param grammar: A key of :data:`GRAMMARS`.
    :param codec: The Python codec that must accept each sequence.
    :param frequent: Characters that count towards ``frequent``.
    :returns: The aggregated :class:`SequenceCounts`.
    :raises KeyError: If *grammar* is unknown.
    """
    walker = GRAMMARS[grammar]
    spans, invalid = walker(data)
    if not spans:
        return SequenceCounts(invalid=invalid)

    decode = codecs.getdecoder(codec)
    decoded: dict[bytes, str | None] = {}
    valid = 0
    mb = 0
    hits = 0
    leads: set[int] = set()
    for start, n in spans:
        chunk = data[start : start + n]
        if chunk in decoded:
            char = decoded[chunk]
        else:
            try:
                char = decode(chunk)[0]
            except UnicodeDecodeError:
                char = None
            decoded[chunk] = char
        if char is None:
            invalid += 1
            continue
        valid += 1
        leads.add(chunk[0])
        mb += n - len(chunk.translate(None, _HIGH_BYTES))
        if char in frequent:
            hits += 1
    return SequenceCounts(valid, invalid, mb, len(leads), hits)


# ---------------------------------------------------------------------------
# Helpers exposed through the public API
# ---------------------------------------------------------------------------


def is_utf8(data: bytes) -> bool:
    """Return True if *data* decodes as UTF-8 without error.

    Pure ASCII (and empty input) is valid UTF-8.
    """
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


#: Share of aligned byte pairs that must look like GB double-byte characters.
_GBK_PAIR_THRESHOLD = 0.30


def is_likely_gbk(data: bytes) -> bool:
    """Cheap GBK test: share of aligned byte pairs with both bytes in 0xA1-0xFE.

    Pairs are taken at even offsets; a trailing odd byte is ignored.  Returns
    True when more than 30% of pairs qualify.
    """
    pairs = len(data) // 2
    if pairs == 0:
        return False
    hits = 0
    for i in range(0, pairs * 2, 2):
        if 0xA1 <= data[i] <= 0xFE and 0xA1 <= data[i + 1] <= 0xFE:
            hits += 1
    return hits / pairs > _GBK_PAIR_THRESHOLD

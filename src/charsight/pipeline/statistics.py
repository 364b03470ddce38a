"""Byte statistics collected once per detection call.

Every encoding model scores the same :class:`ByteStatistics` record, so all
per-byte work happens here and the models themselves only do arithmetic on
summaries.
"""

from __future__ import annotations

import collections
import dataclasses
import logging
from collections.abc import Iterable

from charsight.enums import ModelKind
from charsight.models import frequent_characters
from charsight.pipeline.bom import detect_bom, present_boms
from charsight.pipeline.escape import find_escape_encodings
from charsight.pipeline.structural import (
    EMPTY_COUNTS,
    SequenceCounts,
    analyze_sequences,
)
from charsight.registry import EncodingInfo

logger = logging.getLogger(__name__)

#: Key under which UTF-8 sequence counts are stored.
UTF8_KEY = "utf-8"

# Bytes that never appear in text: C0 controls other than TAB, LF, VT, FF,
# CR and ESC, plus DEL.
_BINARY_CONTROLS: frozenset[int] = frozenset(
    set(range(0x00, 0x09)) | set(range(0x0E, 0x1B)) | set(range(0x1C, 0x20)) | {0x7F}
)

# How many bytes to decode when checking UTF-16/32 plausibility
_WIDE_SAMPLE_SIZE = 4096
_WIDE_UNITS: tuple[tuple[str, int], ...] = (
    ("utf-32-be", 4),
    ("utf-32-le", 4),
    ("utf-16-be", 2),
    ("utf-16-le", 2),
)


@dataclasses.dataclass(frozen=True, slots=True)
class ByteStatistics:
    """Fixed-shape summary of one input sample.

    :param length: Number of bytes examined.
    :param histogram: 256 byte counts.
    :param boms: Every encoding whose BOM prefixes the data.
    :param bom: The encoding of the winning BOM, or ``None``.
    :param escapes: Escape-sequence encodings whose shift markers occur.
    :param zero_positions: NUL byte counts by offset modulo 4.
    :param wide_text: UTF-16/32 variants under which the leading sample
        decodes to mostly printable text (only checked when NULs occur).
    :param sequences: ``(name, counts)`` pairs of multi-byte evidence, one
        per multi-byte candidate plus ``"utf-8"``.
    """

    length: int
    histogram: tuple[int, ...]
    boms: frozenset[str] = frozenset()
    bom: str | None = None
    escapes: frozenset[str] = frozenset()
    zero_positions: tuple[int, int, int, int] = (0, 0, 0, 0)
    wide_text: frozenset[str] = frozenset()
    sequences: tuple[tuple[str, SequenceCounts], ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    @property
    def non_ascii(self) -> int:
        """Count of bytes >= 0x80."""
        return sum(self.histogram[0x80:])

    @property
    def binary_controls(self) -> int:
        """Count of control bytes that do not occur in text."""
        return sum(self.histogram[b] for b in _BINARY_CONTROLS)

    def sequence_counts(self, key: str) -> SequenceCounts:
        """Return counts for *key*, or all-zero counts when not collected."""
        for name, counts in self.sequences:
            if name == key:
                return counts
        return EMPTY_COUNTS


EMPTY_STATISTICS = ByteStatistics(length=0, histogram=(0,) * 256)


def _histogram(data: bytes) -> tuple[int, ...]:
    counts = collections.Counter(data)
    return tuple(counts.get(b, 0) for b in range(256))


def _looks_like_text(text: str) -> bool:
    """Quick check: is decoded text mostly printable characters?"""
    if not text:
        return False
    sample = text[:500]
    printable = sum(1 for c in sample if c.isprintable() or c in "\n\r\t")
    return printable / len(sample) > 0.7


def _wide_text(data: bytes) -> frozenset[str]:
    found: set[str] = set()
    for encoding, unit in _WIDE_UNITS:
        n = min(len(data), _WIDE_SAMPLE_SIZE)
        n -= n % unit
        if n == 0:
            continue
        try:
            text = data[:n].decode(encoding)
        except UnicodeDecodeError:
            continue
        if _looks_like_text(text):
            found.add(encoding)
    return frozenset(found)


def collect_statistics(
    data: bytes, encodings: Iterable[EncodingInfo] = ()
) -> ByteStatistics:
    """Summarize *data* for the given candidate encodings.

    Multi-byte sequence walks run only for the multi-byte candidates in
    *encodings*, and only when the data has bytes >= 0x80.

    :param data: The raw byte sample.
    :param encodings: Candidate registry entries.
    :returns: A :class:`ByteStatistics`; :data:`EMPTY_STATISTICS` for empty
        input.
    """
    if not data:
        return EMPTY_STATISTICS

    histogram = _histogram(data)
    zero_positions = (
        data[0::4].count(0),
        data[1::4].count(0),
        data[2::4].count(0),
        data[3::4].count(0),
    )

    sequences: list[tuple[str, SequenceCounts]] = []
    if sum(histogram[0x80:]):
        sequences.append((UTF8_KEY, analyze_sequences(data, "utf-8", "utf-8")))
        for info in encodings:
            if info.kind is not ModelKind.MULTI_BYTE:
                continue
            frequent = frequent_characters(info.languages[0])
            counts = analyze_sequences(data, info.grammar, info.python_codec, frequent)
            sequences.append((info.name, counts))

    stats = ByteStatistics(
        length=len(data),
        histogram=histogram,
        boms=present_boms(data),
        bom=detect_bom(data),
        escapes=find_escape_encodings(data),
        zero_positions=zero_positions,
        wide_text=_wide_text(data) if histogram[0] else frozenset(),
        sequences=tuple(sequences),
    )
    logger.debug(
        "collected statistics: %d bytes, %d non-ASCII, bom=%s, escapes=%s",
        stats.length,
        sum(histogram[0x80:]),
        stats.bom,
        sorted(stats.escapes),
    )
    return stats

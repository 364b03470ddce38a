"""Character encoding and language detection from raw bytes."""

from __future__ import annotations

from charsight._utils import (
    DEFAULT_MAX_BYTES,
    MINIMUM_THRESHOLD,
    _as_bytes,
    _validate_max_bytes,
)
from charsight.detector import UniversalDetector
from charsight.enums import EncodingEra, NoDetectionReason
from charsight.equivalences import apply_legacy_rename
from charsight.models import ModelTableError
from charsight.pipeline import Candidate, EncodingReport, NoDetection
from charsight.pipeline.orchestrator import run_pipeline
from charsight.pipeline.structural import is_likely_gbk as _is_likely_gbk
from charsight.pipeline.structural import is_utf8 as _is_utf8

__version__ = "1.0.0"
__all__ = [
    "Candidate",
    "EncodingEra",
    "EncodingReport",
    "ModelTableError",
    "NoDetection",
    "NoDetectionReason",
    "UniversalDetector",
    "detect",
    "detect_all",
    "detect_best",
    "detect_charset",
    "detect_encoding_detailed",
    "is_likely_gbk",
    "is_utf8",
]


def detect_best(
    byte_str: bytes | bytearray,
    encoding_era: EncodingEra = EncodingEra.MODERN_WEB,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> Candidate | NoDetection:
    """Return the single most likely encoding of *byte_str*.

    :param byte_str: The bytes to examine.
    :param encoding_era: Restrict candidate encodings to the given era.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: The top :class:`Candidate`, or a falsy :class:`NoDetection`
        when the input is empty or no model recognised it.
    :raises TypeError: If *byte_str* is not bytes-like.
    :raises ValueError: If *max_bytes* is not a positive integer.
    """
    _validate_max_bytes(max_bytes)
    data = _as_bytes(byte_str)
    if not data:
        return NoDetection(NoDetectionReason.EMPTY_INPUT)
    results = run_pipeline(data, encoding_era, max_bytes=max_bytes)
    if not results:
        return NoDetection(NoDetectionReason.NO_MATCH)
    return results[0]


def detect_all(
    byte_str: bytes | bytearray,
    ignore_threshold: bool = False,
    encoding_era: EncodingEra = EncodingEra.MODERN_WEB,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> list[Candidate]:
    """Return every plausible encoding of *byte_str*, most likely first.

    When *ignore_threshold* is False (the default), results with confidence
    <= MINIMUM_THRESHOLD (0.20) are filtered out.  If all results are below
    the threshold, the full unfiltered list is returned instead.  The list is
    empty only when every model scored zero.
    """
    _validate_max_bytes(max_bytes)
    data = _as_bytes(byte_str)
    results = run_pipeline(data, encoding_era, max_bytes=max_bytes)
    if not ignore_threshold:
        filtered = [r for r in results if r.confidence > MINIMUM_THRESHOLD]
        if filtered:
            results = filtered
    return results


def detect(
    byte_str: bytes | bytearray,
    should_rename_legacy: bool = False,
    encoding_era: EncodingEra = EncodingEra.MODERN_WEB,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> dict[str, str | float | None]:
    """Detect the encoding of *byte_str* and return a chardet-style dict.

    The dict has ``"encoding"``, ``"confidence"`` and ``"language"`` keys;
    ``"encoding"`` is ``None`` when nothing was detected.  With
    *should_rename_legacy*, ISO/subset names are replaced by their
    Windows/CP supersets.
    """
    result = detect_best(byte_str, encoding_era=encoding_era, max_bytes=max_bytes)
    d = result.to_dict()
    if should_rename_legacy:
        apply_legacy_rename(d)
    return d


def detect_charset(
    byte_str: bytes | bytearray,
    encoding_era: EncodingEra = EncodingEra.MODERN_WEB,
) -> str | None:
    """Return just the name of the most likely encoding, or ``None``."""
    result = detect_best(byte_str, encoding_era=encoding_era)
    return result.charset if result else None


def detect_encoding_detailed(
    byte_str: bytes | bytearray,
    encoding_era: EncodingEra = EncodingEra.MODERN_WEB,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> EncodingReport:
    """Detect *byte_str* and report its UTF-8 and GBK byte checks alongside.

    Detection looks at the first *max_bytes* only; the UTF-8 and GBK checks
    cover the whole input.

    :param byte_str: The bytes to examine.
    :param encoding_era: Restrict candidate encodings to the given era.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: An :class:`EncodingReport`; its ``charset`` is ``None`` when
        :func:`detect_best` would return a :class:`NoDetection`.
    """
    data = _as_bytes(byte_str)
    result = detect_best(data, encoding_era=encoding_era, max_bytes=max_bytes)
    valid_utf8 = _is_utf8(data)
    likely_gbk = _is_likely_gbk(data)
    if not result:
        return EncodingReport(None, 0.0, "", valid_utf8, likely_gbk)
    return EncodingReport(
        charset=result.charset,
        confidence=result.confidence,
        language=result.language,
        is_valid_utf8=valid_utf8,
        is_likely_gbk=likely_gbk,
    )


def is_utf8(byte_str: bytes | bytearray) -> bool:
    """Return True if *byte_str* is valid UTF-8 (pure ASCII included)."""
    return _is_utf8(_as_bytes(byte_str))


def is_likely_gbk(byte_str: bytes | bytearray) -> bool:
    """Return True if more than 30% of aligned byte pairs look like GBK."""
    return _is_likely_gbk(_as_bytes(byte_str))

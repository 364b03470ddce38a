"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from charsight.enums import NoDetectionReason

#: Confidence for a byte-order mark match.  Only BOM models may reach it.
BOM_CONFIDENCE: float = 1.0

#: Ceiling for every heuristic model, keeping BOM matches strictly first.
MAX_HEURISTIC_CONFIDENCE: float = 0.99

#: Confidence for NUL-pattern UTF-16/32 detection without a BOM.
PATTERN_CONFIDENCE: float = 0.95


@dataclasses.dataclass(frozen=True, slots=True)
class Candidate:
    """A single scored guess for one encoding.

    Frozen dataclass holding the charset name, a confidence in ``[0, 1]``
    and an ISO 639-1 language code (``""`` when the language is unknown).
    """

    charset: str
    confidence: float
    language: str = ""

    def to_dict(self) -> dict[str, str | float | None]:
        """Convert this candidate to a chardet-style dict.

        :returns: A dict with ``'encoding'``, ``'confidence'``, and ``'language'`` keys.
        """
        return {
            "encoding": self.charset,
            "confidence": self.confidence,
            "language": self.language,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class NoDetection:
    """Signal returned when no charset can be named.

    ``reason`` distinguishes an empty input from bytes that no model could
    classify.  Instances are falsy so ``if result:`` reads naturally.
    """

    reason: NoDetectionReason

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> dict[str, str | float | None]:
        """Convert to the chardet-style dict used for a failed detection."""
        return {"encoding": None, "confidence": 0.0, "language": ""}


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingReport:
    """Detailed detection result for one input.

    :param charset: The most likely encoding, or ``None`` when nothing was
        detected.
    :param confidence: Confidence of *charset*; ``0.0`` without one.
    :param language: ISO 639-1 code, or ``""`` when unknown.
    :param is_valid_utf8: Whether the whole input decodes as UTF-8.
    :param is_likely_gbk: Whether the input passes the GBK byte-pair check.
    """

    charset: str | None
    confidence: float
    language: str
    is_valid_utf8: bool
    is_likely_gbk: bool

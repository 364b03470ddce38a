"""Language guessing for a detected encoding."""

from __future__ import annotations

import logging

from charsight.models import NgramProfile, score_best_language
from charsight.registry import lookup

logger = logging.getLogger(__name__)

#: Bytes decoded and profiled per encoding, spread over the whole input.
LANGUAGE_SAMPLE_BYTES = 4096

# Longer inputs are profiled as evenly spaced chunks from head to tail.
_SAMPLE_CHUNKS = 8
# Chunk offsets stay aligned to UTF-32 (and so UTF-16) code units.
_CHUNK_ALIGN = 4

# Confidence reported for encodings that only ever carry one language.
_SINGLE_LANGUAGE_CONFIDENCE = 1.0


def infer_language(encoding: str) -> str | None:
    """Return the language for a single-language encoding, or None.

    :param encoding: The canonical encoding name.
    :returns: An ISO 639-1 language code, or ``None`` if the encoding is
        multi-language or unknown.
    """
    info = lookup(encoding)
    if info is None or len(info.languages) != 1:
        return None
    return info.languages[0]


def sample_chunks(data: bytes) -> list[bytes]:
    """Cut *data* into the chunks profiled for language.

    Inputs up to :data:`LANGUAGE_SAMPLE_BYTES` are returned whole.  Longer
    ones give evenly spaced chunks from the head, the middle and the tail,
    so the language filling most of the input decides the guess.
    """
    length = len(data)
    if length <= LANGUAGE_SAMPLE_BYTES:
        return [data]
    size = LANGUAGE_SAMPLE_BYTES // _SAMPLE_CHUNKS
    span = length - size
    chunks = []
    for i in range(_SAMPLE_CHUNKS):
        start = i * span // (_SAMPLE_CHUNKS - 1)
        start -= start % _CHUNK_ALIGN
        chunks.append(data[start : start + size])
    return chunks


def _decoded_spans(data: bytes, codec: str) -> str:
    """Decode *data* and keep only the spans that decoded cleanly."""
    text = data.decode(codec, errors="replace")
    return " ".join(span for span in text.split("\ufffd") if span)


def guess_language(data: bytes, encoding: str) -> tuple[str, float]:
    """Guess the natural language of *data* read as *encoding*.

    :param data: The raw byte data.
    :param encoding: A registry encoding name.
    :returns: ``(language, confidence)``; ``("", 0.0)`` when nothing decodes
        to letters or the encoding is unknown.
    """
    info = lookup(encoding)
    if info is None or not data:
        return "", 0.0

    text = " ".join(
        _decoded_spans(chunk, info.python_codec) for chunk in sample_chunks(data)
    )

    profile = NgramProfile(text)
    if profile.is_empty:
        return "", 0.0

    single = infer_language(encoding)
    if single is not None:
        return single, _SINGLE_LANGUAGE_CONFIDENCE

    score, lang = score_best_language(profile, info.languages or None)
    if lang is None:
        return "", 0.0
    logger.debug("language for %s: %s (%.3f)", encoding, lang, score)
    return lang, score

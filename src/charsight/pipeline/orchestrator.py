"""Pipeline orchestrator: statistics, scoring, ranking, language."""

from __future__ import annotations

import logging

from charsight._utils import DEFAULT_MAX_BYTES
from charsight.enums import EncodingEra
from charsight.pipeline import Candidate
from charsight.pipeline.encoding_models import FALLBACK_BASELINE, score_encoding
from charsight.pipeline.language import guess_language
from charsight.pipeline.statistics import collect_statistics
from charsight.registry import FALLBACK_ENCODING, get_candidates, tie_break_rank

logger = logging.getLogger(__name__)

_EMPTY_RESULT = Candidate(FALLBACK_ENCODING, FALLBACK_BASELINE, "")


def _fill_language(data: bytes, results: list[Candidate]) -> list[Candidate]:
    """Attach a language guess to each candidate."""
    filled: list[Candidate] = []
    for result in results:
        lang, _ = guess_language(data, result.charset)
        filled.append(Candidate(result.charset, result.confidence, lang))
    return filled


def rank(candidates: list[Candidate]) -> list[Candidate]:
    """Sort by descending confidence, breaking exact ties by registry order."""
    return sorted(candidates, key=lambda c: (-c.confidence, tie_break_rank(c.charset)))


def score_all(
    data: bytes, encoding_era: EncodingEra = EncodingEra.MODERN_WEB
) -> list[Candidate]:
    """Score every candidate for *encoding_era*, including zero scores.

    :returns: Unranked candidates in registry order, without languages.
    """
    encodings = get_candidates(encoding_era)
    stats = collect_statistics(data, encodings)
    return [Candidate(info.name, score_encoding(info, stats)) for info in encodings]


def run_pipeline(
    data: bytes,
    encoding_era: EncodingEra = EncodingEra.MODERN_WEB,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> list[Candidate]:
    """Run the full detection pipeline.

    :param data: The raw byte data to analyze.
    :param encoding_era: Filter candidates to a specific era of encodings.
    :param max_bytes: Maximum number of bytes to process.
    :returns: Candidates with non-zero confidence, ranked.  Empty when every
        model scored zero; the fallback baseline alone for empty input.
    """
    data = data[:max_bytes]
    if not data:
        return [_EMPTY_RESULT]

    scored = [c for c in score_all(data, encoding_era) if c.confidence > 0.0]
    results = rank(scored)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "ranked %d candidates: %s",
            len(results),
            ", ".join(f"{c.charset}={c.confidence:.3f}" for c in results[:5]),
        )
    return _fill_language(data, results)

"""Language tables and n-gram scoring utilities.

All tables are derived from the seed text in :mod:`charsight.models.corpus`
on first use and cached for the life of the process.  Building is guarded by
a lock so concurrent first calls observe a single, fully built table set.
"""

from __future__ import annotations

import logging
import math
import threading
import unicodedata

from charsight.models.corpus import FREQUENT_CHARACTERS, SEED_TEXT

logger = logging.getLogger(__name__)


class ModelTableError(ValueError):
    """Raised when the built-in tables are malformed.

    This is a programming or packaging error, never a property of the input
    being detected.
    """


#: Languages that have a profile, in a stable order.
LANGUAGES: tuple[str, ...] = tuple(SEED_TEXT)

# Unigrams, bigrams and trigrams are weighted so that longer n-grams, which
# carry more language signal, dominate the cosine.
_NGRAM_WEIGHTS: dict[int, int] = {1: 1, 2: 2, 3: 3}

_TABLES: _LanguageTables | None = None
_TABLES_LOCK = threading.Lock()


def is_word_char(ch: str) -> bool:
    """Return True for letters and combining marks."""
    if ch.isalpha():
        return True
    return unicodedata.category(ch).startswith("M")


def _words(text: str) -> list[str]:
    """Split *text* into lowercased runs of letters and combining marks."""
    words: list[str] = []
    current: list[str] = []
    for ch in text.lower():
        if is_word_char(ch):
            current.append(ch)
        elif current:
            words.append("".join(current))
            current = []
    if current:
        words.append("".join(current))
    return words


class NgramProfile:
    """Weighted character n-gram frequencies for a piece of text.

    Each word is padded with a space on both sides so that word-initial and
    word-final n-grams are distinguishable from word-internal ones.
    """

    __slots__ = ("freq", "letter_count", "norm")

    def __init__(self, text: str) -> None:
        freq: dict[str, int] = {}
        letters = 0
        _get = freq.get
        for word in _words(text):
            letters += len(word)
            padded = f" {word} "
            for n, weight in _NGRAM_WEIGHTS.items():
                if n == 1:
                    for ch in word:
                        freq[ch] = _get(ch, 0) + weight
                    continue
                for i in range(len(padded) - n + 1):
                    gram = padded[i : i + n]
                    freq[gram] = _get(gram, 0) + weight
        self.freq = freq
        self.letter_count = letters
        self.norm = math.sqrt(sum(v * v for v in freq.values()))

    @property
    def is_empty(self) -> bool:
        return self.letter_count == 0


def cosine(
    a: dict[str, int], a_norm: float, b: dict[str, int], b_norm: float
) -> float:
    """Cosine similarity between two sparse frequency vectors."""
    if a_norm == 0.0 or b_norm == 0.0:
        return 0.0
    if len(a) > len(b):
        a, b = b, a
    dot = 0
    _get = b.get
    for key, value in a.items():
        other = _get(key)
        if other:
            dot += value * other
    return dot / (a_norm * b_norm)


class _LanguageTables:
    __slots__ = ("frequent", "letter_norms", "letters", "profiles")

    def __init__(self) -> None:
        self.profiles: dict[str, NgramProfile] = {}
        self.letters: dict[str, dict[str, int]] = {}
        self.letter_norms: dict[str, float] = {}
        self.frequent: dict[str, frozenset[str]] = {}


def _build_tables() -> _LanguageTables:
    tables = _LanguageTables()
    for lang, seed in SEED_TEXT.items():
        text = seed + " " + FREQUENT_CHARACTERS.get(lang, "")
        profile = NgramProfile(text)
        if profile.is_empty:
            msg = f"seed text for language {lang!r} contains no letters"
            raise ModelTableError(msg)
        tables.profiles[lang] = profile

        letters: dict[str, int] = {}
        for word in _words(seed):
            for ch in word:
                letters[ch] = letters.get(ch, 0) + 1
        tables.letters[lang] = letters
        tables.letter_norms[lang] = math.sqrt(sum(v * v for v in letters.values()))

    for lang, chars in FREQUENT_CHARACTERS.items():
        if lang not in SEED_TEXT:
            msg = f"frequent-character table for unknown language {lang!r}"
            raise ModelTableError(msg)
        tables.frequent[lang] = frozenset(chars)
    logger.debug("built language tables for %d languages", len(tables.profiles))
    return tables


def load_tables() -> _LanguageTables:
    """Return the process-wide language tables, building them on first use."""
    global _TABLES  # noqa: PLW0603
    if _TABLES is not None:
        return _TABLES
    with _TABLES_LOCK:
        if _TABLES is None:
            _TABLES = _build_tables()
        return _TABLES


def frequent_characters(language: str) -> frozenset[str]:
    """Return the frequent-character set for a CJK *language*.

    :raises ModelTableError: If *language* has no such table.
    """
    try:
        return load_tables().frequent[language]
    except KeyError:
        msg = f"no frequent-character table for language {language!r}"
        raise ModelTableError(msg) from None


def letter_fit(letters: dict[str, int], languages: tuple[str, ...]) -> float:
    """Best cosine between a letter histogram and the given languages' profiles.

    :param letters: Lowercased letter -> count.
    :param languages: Candidate language codes.
    :returns: The highest cosine found, or 0.0.
    """
    if not letters or not languages:
        return 0.0
    tables = load_tables()
    norm = math.sqrt(sum(v * v for v in letters.values()))
    best = 0.0
    for lang in languages:
        profile = tables.letters.get(lang)
        if profile is None:
            continue
        s = cosine(letters, norm, profile, tables.letter_norms[lang])
        best = max(best, s)
    return best


def score_best_language(
    profile: NgramProfile, languages: tuple[str, ...] | None = None
) -> tuple[float, str | None]:
    """Score an n-gram profile against language profiles.

    :param profile: The profile of the decoded text.
    :param languages: Restrict scoring to these languages; ``None`` means all.
    :returns: A ``(score, language)`` tuple with the best cosine and its
        language code, or ``(0.0, None)`` when nothing matches.
    """
    if profile.is_empty:
        return 0.0, None
    tables = load_tables()
    best_score = 0.0
    best_lang: str | None = None
    for lang in languages if languages is not None else LANGUAGES:
        model = tables.profiles.get(lang)
        if model is None:
            continue
        s = cosine(profile.freq, profile.norm, model.freq, model.norm)
        if s > best_score:
            best_score = s
            best_lang = lang
    return best_score, best_lang

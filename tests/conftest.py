# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

ENGLISH = (
    "The quick brown fox jumps over the lazy dog. This is a short paragraph "
    "of plain English text that we use to check which language the detector "
    "reports. It has the usual words of the language, and there is nothing "
    "unusual about it at all."
)
FRENCH = (
    "Les êtres humains naissent libres et égaux en dignité et en droits. Ils "
    "sont doués de raison et de conscience et doivent agir les uns envers les "
    "autres dans un esprit de fraternité. Le cœur déçu mais l'âme plutôt "
    "naïve, il rêva de crapahuter au-delà des îles, près du château."
)
GERMAN = (
    "Die Größe des Gebäudes überraschte die Besucher. Natürlich können wir "
    "das ändern, aber wir müssen schon früh genug mit der Planung anfangen."
)
RUSSIAN = (
    "Все люди рождаются свободными и равными в своем достоинстве и правах. "
    "Они наделены разумом и совестью и должны поступать в отношении друг "
    "друга в духе братства."
)
GREEK = (
    "Όλοι οι άνθρωποι γεννιούνται ελεύθεροι και ίσοι στην αξιοπρέπεια και τα "
    "δικαιώματα. Είναι προικισμένοι με λογική και συνείδηση."
)
CHINESE = "这是中文测试文本，用于并发检测。我们的国家有很多人，他们都在学习中文。"  # noqa: RUF001
TRADITIONAL_CHINESE = "繁體中文測試，這個網頁的內容是關於學習與工作的說明。"  # noqa: RUF001
JAPANESE = "これはテストです。日本語のテキスト。今日はとても良い天気ですね。"
KOREAN = "안녕하세요. 오늘은 날씨가 정말 좋습니다. 한국어 텍스트입니다."


@pytest.fixture
def english_bytes() -> bytes:
    return ENGLISH.encode("ascii")


@pytest.fixture
def cjk_samples() -> list[tuple[bytes, frozenset[str]]]:
    """Encoded CJK text paired with the encodings that decode it correctly."""
    return [
        (CHINESE.encode("gb18030"), frozenset({"gb18030", "gb2312"})),
        (JAPANESE.encode("shift_jis"), frozenset({"shift_jis", "cp932"})),
        (JAPANESE.encode("euc_jp"), frozenset({"euc-jp"})),
        (KOREAN.encode("euc_kr"), frozenset({"euc-kr", "cp949"})),
    ]

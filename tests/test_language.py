# tests/test_language.py
from __future__ import annotations

import pytest
from conftest import ENGLISH, FRENCH, GERMAN, GREEK, JAPANESE, RUSSIAN

import charsight
from charsight.pipeline.language import (
    LANGUAGE_SAMPLE_BYTES,
    guess_language,
    infer_language,
    sample_chunks,
)


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("koi8-r", "ru"),
        ("windows-1253", "el"),
        ("euc-kr", "ko"),
        ("iso-2022-jp", "ja"),
        ("windows-1252", None),
        ("utf-8", None),
        ("not-an-encoding", None),
    ],
)
def test_infer_language(encoding, expected):
    assert infer_language(encoding) == expected


def test_single_language_encoding_is_certain():
    assert guess_language(GREEK.encode("windows-1253"), "windows-1253") == ("el", 1.0)


@pytest.mark.parametrize(
    ("text", "encoding", "expected"),
    [
        (FRENCH, "windows-1252", "fr"),
        (GERMAN, "iso-8859-1", "de"),
        (RUSSIAN, "windows-1251", "ru"),
        (ENGLISH, "ascii", "en"),
    ],
)
def test_guess_language_within_encoding(text, encoding, expected):
    lang, confidence = guess_language(text.encode(encoding), encoding)
    assert lang == expected
    assert 0.0 < confidence <= 1.0


@pytest.mark.parametrize("text", [FRENCH, RUSSIAN, GREEK, JAPANESE])
def test_guess_language_unicode(text):
    lang, _ = guess_language(text.encode("utf-8"), "utf-8")
    assert lang == {FRENCH: "fr", RUSSIAN: "ru", GREEK: "el", JAPANESE: "ja"}[text]


def test_longer_sample_wins():
    data = (FRENCH + " " + ENGLISH[:40]).encode("utf-8")
    assert guess_language(data, "utf-8")[0] == "fr"


def test_majority_language_of_long_input_wins():
    data = ((ENGLISH + " ") * 8 + (FRENCH + " ") * 40).encode("utf-8")
    assert len(data) > LANGUAGE_SAMPLE_BYTES
    assert guess_language(data, "utf-8")[0] == "fr"
    assert charsight.detect_best(data).language == "fr"


def test_sample_chunks_cover_head_and_tail():
    data = bytes(range(256)) * 64
    chunks = sample_chunks(data)
    assert sum(len(c) for c in chunks) == LANGUAGE_SAMPLE_BYTES
    assert data.startswith(chunks[0])
    assert data.endswith(chunks[-1])


def test_sample_chunks_stay_aligned():
    text = "Ünïcödé wïdé tëxt, " * 300
    data = text.encode("utf-16-le")
    assert len(data) > LANGUAGE_SAMPLE_BYTES
    decoded = "".join(c.decode("utf-16-le") for c in sample_chunks(data))
    assert set(decoded) <= set(text)


def test_short_input_is_profiled_whole():
    data = FRENCH.encode("utf-8")
    assert sample_chunks(data) == [data]


def test_undecodable_bytes_are_skipped():
    data = FRENCH.encode("utf-8") + b"\xff\xfe\xff"
    assert guess_language(data, "utf-8")[0] == "fr"


def test_no_letters():
    assert guess_language(b"1234 5678 !!", "windows-1252") == ("", 0.0)


def test_empty_and_unknown():
    assert guess_language(b"", "utf-8") == ("", 0.0)
    assert guess_language(b"hello", "not-an-encoding") == ("", 0.0)

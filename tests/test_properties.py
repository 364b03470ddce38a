# tests/test_properties.py
"""Whole-pipeline properties that hold for any input."""

from __future__ import annotations

import pytest
from conftest import (
    CHINESE,
    ENGLISH,
    FRENCH,
    GERMAN,
    GREEK,
    JAPANESE,
    KOREAN,
    RUSSIAN,
    TRADITIONAL_CHINESE,
)

import charsight
from charsight.enums import EncodingEra

_BOMS = [
    (b"\xef\xbb\xbf", "utf-8-sig"),
    (b"\xff\xfe", "utf-16-le"),
    (b"\xfe\xff", "utf-16-be"),
    (b"\xff\xfe\x00\x00", "utf-32-le"),
    (b"\x00\x00\xfe\xff", "utf-32-be"),
]

_TRAILERS = [
    b"",
    b"\x00\x00\x00\x00",
    b"\xff" * 7,
    b"\x80\x81\x82\x83",
    "plain text".encode("utf-32-le"),
]

_INPUTS = [
    b"",
    b"a",
    b"\x00",
    b"\xff",
    bytes(range(256)),
    ENGLISH.encode("ascii"),
    FRENCH.encode("utf-8"),
    FRENCH.encode("windows-1252"),
    GERMAN.encode("cp850"),
    RUSSIAN.encode("koi8_r"),
    GREEK.encode("iso-8859-7"),
    TRADITIONAL_CHINESE.encode("big5"),
    TRADITIONAL_CHINESE.encode("gbk"),
    JAPANESE.encode("shift_jis"),
    KOREAN.encode("cp949"),
]


@pytest.mark.parametrize(("bom", "expected"), _BOMS)
@pytest.mark.parametrize("trailer", _TRAILERS)
def test_bom_wins_regardless_of_payload(bom, expected, trailer):
    data = bom + trailer
    if expected.startswith("utf-32") and len(trailer) % 4:
        pytest.skip("UTF-32 BOM needs a whole number of code units")
    result = charsight.detect_best(data, encoding_era=EncodingEra.ALL)
    assert result.charset == expected
    assert result.confidence == 1.0


@pytest.mark.parametrize("data", _INPUTS)
@pytest.mark.parametrize("era", [EncodingEra.MODERN_WEB, EncodingEra.ALL])
def test_results_well_formed(data, era):
    results = charsight.detect_all(data, ignore_threshold=True, encoding_era=era)
    confidences = [r.confidence for r in results]
    assert confidences == sorted(confidences, reverse=True)
    assert all(0.0 < c <= 1.0 for c in confidences)
    assert len({r.charset for r in results}) == len(results)
    # only a byte-order mark may reach certainty
    assert all(c < 1.0 for c in confidences)


@pytest.mark.parametrize("data", _INPUTS)
def test_deterministic(data):
    assert charsight.detect_all(data, ignore_threshold=True) == charsight.detect_all(
        data, ignore_threshold=True
    )


@pytest.mark.parametrize(
    ("text", "codec"),
    [
        (FRENCH, "utf-8"),
        (RUSSIAN, "windows-1251"),
        (RUSSIAN, "koi8_r"),
        (GREEK, "windows-1253"),
        (CHINESE, "gb18030"),
        (TRADITIONAL_CHINESE, "gbk"),
        (JAPANESE, "shift_jis"),
        (JAPANESE, "euc_jp"),
        (KOREAN, "euc_kr"),
        (JAPANESE, "iso2022_jp"),
    ],
)
def test_top_charset_decodes_fixture(text, codec):
    data = text.encode(codec)
    result = charsight.detect_best(data)
    assert data.decode(result.charset) == text


def test_pure_ascii_is_ascii():
    result = charsight.detect_best(b"Just some ASCII text, 100% printable.\r\n")
    assert result.charset == "ascii"
    assert result.confidence > 0.9


def test_concatenated_samples_report_longer_language():
    data = (RUSSIAN * 3 + " " + "Привіт, як справи?").encode("utf-8")
    assert charsight.detect_best(data).language == "ru"

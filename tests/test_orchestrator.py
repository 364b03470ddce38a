# tests/test_orchestrator.py
from __future__ import annotations

import logging

import pytest
from conftest import CHINESE, FRENCH, RUSSIAN

from charsight.enums import EncodingEra
from charsight.pipeline import Candidate
from charsight.pipeline.orchestrator import rank, run_pipeline, score_all
from charsight.registry import get_candidates


def test_empty_input():
    result = run_pipeline(b"", EncodingEra.MODERN_WEB)
    assert result == [Candidate("windows-1252", 0.10, "")]


def test_empty_input_any_era():
    result = run_pipeline(b"", EncodingEra.DOS)
    assert result == [Candidate("windows-1252", 0.10, "")]


def test_bom_detected():
    data = b"\xef\xbb\xbfHello"
    result = run_pipeline(data, EncodingEra.ALL)
    assert result[0].charset == "utf-8-sig"
    assert result[0].confidence == 1.0


@pytest.mark.parametrize(
    ("bom", "codec"),
    [
        (b"\xff\xfe", "utf-16-le"),
        (b"\xfe\xff", "utf-16-be"),
        (b"\xff\xfe\x00\x00", "utf-32-le"),
        (b"\x00\x00\xfe\xff", "utf-32-be"),
    ],
)
def test_wide_bom(bom, codec):
    data = bom + "Hello world".encode(codec)
    result = run_pipeline(data, EncodingEra.ALL)
    assert result[0].charset == codec
    assert result[0].confidence == 1.0
    # Only the winning BOM reaches certainty
    assert all(c.confidence < 1.0 for c in result[1:])


def test_utf16_le_no_bom():
    """UTF-16-LE without a BOM should be detected via null-byte patterns."""
    data = "Hello world, this is a test of UTF-16 detection.".encode("utf-16-le")
    result = run_pipeline(data, EncodingEra.ALL)
    assert result[0].charset == "utf-16-le"
    assert result[0].confidence == 0.95


def test_utf16_be_no_bom():
    data = "Hello world, this is a test of UTF-16 detection.".encode("utf-16-be")
    result = run_pipeline(data, EncodingEra.ALL)
    assert result[0].charset == "utf-16-be"
    assert result[0].confidence == 0.95


def test_utf32_le_no_bom():
    data = "Hello world, this is a test.".encode("utf-32-le")
    result = run_pipeline(data, EncodingEra.ALL)
    assert result[0].charset == "utf-32-le"
    assert result[0].confidence == 0.95


def test_pure_ascii():
    result = run_pipeline(b"Hello world 123", EncodingEra.ALL)
    assert result[0].charset == "ascii"
    assert result[0].confidence == 0.99


def test_utf8_french():
    result = run_pipeline(FRENCH.encode("utf-8"), EncodingEra.MODERN_WEB)
    assert result[0].charset == "utf-8"
    assert result[0].language == "fr"
    assert result[0].confidence > 0.9


def test_windows_1251_russian():
    result = run_pipeline(RUSSIAN.encode("windows-1251"), EncodingEra.MODERN_WEB)
    assert result[0].charset == "windows-1251"
    assert result[0].language == "ru"


def test_gb18030_chinese():
    result = run_pipeline(CHINESE.encode("gb18030"), EncodingEra.MODERN_WEB)
    assert result[0].charset == "gb18030"
    assert result[0].language == "zh"


def test_escape_before_ascii_on_tie():
    data = "你好".encode("hz")
    result = run_pipeline(data, EncodingEra.ALL)
    assert [c.charset for c in result[:2]] == ["hz-gb-2312", "ascii"]
    assert result[0].confidence == result[1].confidence


def test_no_model_matches():
    assert run_pipeline(b"\x00\x00\x00\x01" * 16, EncodingEra.ALL) == []


def test_max_bytes_truncates():
    data = b"Hello" + "é".encode() * 10
    result = run_pipeline(data, EncodingEra.ALL, max_bytes=5)
    assert result[0].charset == "ascii"


def test_results_sorted_and_positive():
    result = run_pipeline(FRENCH.encode("windows-1252"), EncodingEra.ALL)
    confidences = [c.confidence for c in result]
    assert confidences == sorted(confidences, reverse=True)
    assert all(0.0 < c <= 0.99 for c in confidences)
    assert len({c.charset for c in result}) == len(result)


def test_rank_breaks_ties_by_registry_order():
    ranked = rank(
        [
            Candidate("windows-1252", 0.5),
            Candidate("iso-8859-1", 0.5),
            Candidate("utf-8", 0.9),
        ]
    )
    assert [c.charset for c in ranked] == ["utf-8", "iso-8859-1", "windows-1252"]


def test_score_all_keeps_zero_scores():
    scored = score_all(b"Hello", EncodingEra.MODERN_WEB)
    assert [c.charset for c in scored] == [
        e.name for e in get_candidates(EncodingEra.MODERN_WEB)
    ]
    assert any(c.confidence == 0.0 for c in scored)
    assert all(c.language == "" for c in scored)


def test_era_filters_candidates():
    result = run_pipeline(FRENCH.encode("windows-1252"), EncodingEra.MODERN_WEB)
    modern = {e.name for e in get_candidates(EncodingEra.MODERN_WEB)}
    assert {c.charset for c in result} <= modern


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="charsight"):
        run_pipeline(b"Hello world", EncodingEra.MODERN_WEB)
    assert any("ranked" in r.getMessage() for r in caplog.records)

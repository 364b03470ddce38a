# tests/test_detector.py
from __future__ import annotations

import pytest

import charsight
from charsight.detector import UniversalDetector
from charsight.enums import EncodingEra, NoDetectionReason
from charsight.pipeline import Candidate, NoDetection


def test_basic_lifecycle():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    result = detector.close()
    assert result.charset == "ascii"
    assert detector.result is result


def test_result_before_close():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    assert detector.result == NoDetection(NoDetectionReason.NO_MATCH)


def test_result_before_any_feed():
    detector = UniversalDetector()
    assert detector.result == NoDetection(NoDetectionReason.EMPTY_INPUT)


def test_close_without_data():
    detector = UniversalDetector()
    result = detector.close()
    assert not result
    assert result.reason is NoDetectionReason.EMPTY_INPUT


def test_close_no_match():
    detector = UniversalDetector(encoding_era=EncodingEra.ALL)
    detector.feed(b"\x00\x00\x00\x01" * 16)
    assert detector.close() == NoDetection(NoDetectionReason.NO_MATCH)


def test_reset():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    detector.close()
    detector.reset()
    assert detector.result.to_dict() == {
        "encoding": None,
        "confidence": 0.0,
        "language": "",
    }
    assert detector.done is False


def test_done_property():
    detector = UniversalDetector()
    assert detector.done is False


def test_feed_after_close_raises():
    detector = UniversalDetector()
    detector.feed(b"Hello")
    detector.close()
    with pytest.raises(ValueError, match="after close"):
        detector.feed(b"more data")


def test_feed_rejects_text():
    detector = UniversalDetector()
    with pytest.raises(TypeError):
        detector.feed("Hello")  # type: ignore[arg-type]


def test_feed_after_done_is_ignored():
    detector = UniversalDetector(max_bytes=10)
    detector.feed(b"x" * 20)
    assert detector.done is True
    detector.feed(b"\xff" * 20)  # Should not raise
    assert detector.close().charset == "ascii"


def test_multiple_feeds():
    detector = UniversalDetector()
    for chunk in (b"Hello ", "wörld ".encode(), b"again"):
        detector.feed(chunk)
    assert detector.close().charset == "utf-8"


def test_bom_finishes_early():
    detector = UniversalDetector()
    detector.feed(b"\xef\xbb\xbfHello")
    assert detector.done is True
    assert detector.result == Candidate("utf-8-sig", 1.0)
    result = detector.close()
    assert result.charset == "utf-8-sig"
    assert result.confidence == 1.0


def test_bom_split_across_feeds():
    detector = UniversalDetector()
    detector.feed(b"\xff")
    assert detector.done is False
    detector.feed(b"\xfeH\x00i\x00")
    assert detector.done is True
    assert detector.close().charset == "utf-16-le"


def test_utf32_le_bom_waits_for_payload():
    # FF FE 00 00 then 22 bytes of UTF-16-LE: a NUL character, not a UTF-32 BOM
    data = b"\xff\xfe\x00\x00" + "héllo wörld".encode("utf-16-le")
    detector = UniversalDetector()
    detector.feed(data[:4])
    assert detector.done is False
    assert isinstance(detector.result, NoDetection)
    detector.feed(data[4:])
    result = detector.close()
    assert result.charset == "utf-16-le"
    assert result == charsight.detect_best(data)


def test_utf32_bom_with_whole_code_units():
    data = b"\x00\x00\xfe\xff" + "wide".encode("utf-32-be")
    detector = UniversalDetector()
    detector.feed(data)
    assert detector.done is False
    result = detector.close()
    assert result.charset == "utf-32-be"
    assert result.confidence == 1.0
    assert result == charsight.detect_best(data)


def test_done_when_max_bytes_reached():
    detector = UniversalDetector(max_bytes=100)
    detector.feed(b"a" * 60)
    assert detector.done is False
    detector.feed(b"a" * 60)
    assert detector.done is True


def test_encoding_era_parameter():
    data = "Größe".encode("mac-roman") * 10
    detector = UniversalDetector(encoding_era=EncodingEra.LEGACY_MAC)
    detector.feed(data)
    assert detector.close().charset == "mac-roman"


@pytest.mark.parametrize("max_bytes", [0, -1, True, 1.5])
def test_invalid_max_bytes_raises(max_bytes):
    with pytest.raises(ValueError, match="max_bytes"):
        UniversalDetector(max_bytes=max_bytes)


def test_close_idempotent():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    first = detector.close()
    assert detector.close() is first


def test_reset_allows_new_detection():
    detector = UniversalDetector()
    detector.feed(b"\xef\xbb\xbfHello")
    assert detector.close().charset == "utf-8-sig"

    detector.reset()
    detector.feed("Héllo wörld café".encode())
    assert detector.close().charset == "utf-8"


# -- Equivalence tests: UniversalDetector must match detect_best() --

_EQUIVALENCE_SAMPLES = {
    "ascii": b"Hello world, this is plain ASCII text. " * 5,
    "utf8": "Héllo wörld café résumé naïve über Ελληνικά".encode(),
    "escape_iso2022jp": b"Hello \x1b$B$3$s$K$A$O\x1b(B World",
    "windows1252": bytes(range(0x20, 0x7F)) + b"\xe9\xe8\xea\xeb\xf6\xfc\xe4" * 20,
    "cjk_shiftjis": b"\x82\xb1\x82\xf1\x82\xc9\x82\xbf\x82\xcd" * 10,
    "utf16le_no_bom": "Hello world, wide text.".encode("utf-16-le"),
    "utf16le_bom_nul_start": b"\xff\xfe\x00\x00" + "héllo wörld".encode("utf-16-le"),
}


@pytest.mark.parametrize(("label", "data"), list(_EQUIVALENCE_SAMPLES.items()))
@pytest.mark.parametrize("chunk_size", [1, 64, None])
def test_equivalence_with_detect_best(label: str, data: bytes, chunk_size: int | None):
    """UniversalDetector must produce the same result as detect_best()."""
    expected = charsight.detect_best(data)

    detector = UniversalDetector()
    if chunk_size is None:
        detector.feed(data)
    else:
        for i in range(0, len(data), chunk_size):
            detector.feed(data[i : i + chunk_size])
    result = detector.close()

    assert result == expected, f"[{label}, chunk={chunk_size}]"

"""Byte Order Mark detection."""

from __future__ import annotations

# Ordered longest-first so UTF-32 is checked before UTF-16
# (UTF-32-LE BOM starts with the same bytes as UTF-16-LE BOM)
BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\x00\x00\xfe\xff", "utf-32-be"),
    (b"\xff\xfe\x00\x00", "utf-32-le"),
    (b"\xef\xbb\xbf", "utf-8-sig"),
    (b"\xfe\xff", "utf-16-be"),
    (b"\xff\xfe", "utf-16-le"),
)

_UTF32_BOMS: frozenset[bytes] = frozenset({b"\x00\x00\xfe\xff", b"\xff\xfe\x00\x00"})


def present_boms(data: bytes) -> frozenset[str]:
    """Return every encoding whose BOM bytes prefix *data*.

    Overlapping marks are all reported: ``FF FE 00 00`` flags both
    ``utf-32-le`` and ``utf-16-le``.
    """
    return frozenset(enc for bom, enc in BOMS if data.startswith(bom))


def detect_bom(data: bytes) -> str | None:
    """Return the encoding of the winning BOM at the start of *data*, or None.

    A UTF-32 BOM only wins when the payload after it is a whole number of
    4-byte code units; otherwise the shorter UTF-16 BOM gets its chance.
    """
    for bom_bytes, encoding in BOMS:
        if data.startswith(bom_bytes):
            if bom_bytes in _UTF32_BOMS:
                payload_len = len(data) - len(bom_bytes)
                if payload_len % 4 != 0:
                    continue
            return encoding
    return None

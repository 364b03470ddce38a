"""Escape-sequence markers for ISO-2022 and HZ-GB-2312.

These encodings use ESC (0x1B) or tilde (~) sequences to switch character
sets, so they look like plain 7-bit data to every other model.
"""

from __future__ import annotations

_ISO2022_JP_MARKERS: tuple[bytes, ...] = (b"\x1b$B", b"\x1b$@", b"\x1b(J", b"\x1b(I")
_ISO2022_KR_MARKER = b"\x1b$)C"


def _has_valid_hz_regions(data: bytes) -> bool:
    """Check that at least one ~{...~} region contains valid GB2312 byte pairs.

    In HZ-GB-2312 GB mode, characters are encoded as pairs of bytes in the
    0x21-0x7E range.  We require at least one region with a non-empty, even-
    length run of such bytes.
    """
    start = 0
    while True:
        begin = data.find(b"~{", start)
        if begin == -1:
            return False
        end = data.find(b"~}", begin + 2)
        if end == -1:
            return False
        region = data[begin + 2 : end]
        if (
            len(region) >= 2
            and len(region) % 2 == 0
            and all(0x21 <= b <= 0x7E for b in region)
        ):
            return True
        start = end + 2


def find_escape_encodings(data: bytes) -> frozenset[str]:
    """Return the escape-sequence encodings whose shift markers occur in *data*.

    :param data: The raw byte data to examine.
    :returns: A subset of ``{"iso-2022-jp", "iso-2022-kr", "hz-gb-2312"}``.
    """
    if b"\x1b" not in data and b"~" not in data:
        return frozenset()

    found: set[str] = set()
    if any(marker in data for marker in _ISO2022_JP_MARKERS):
        found.add("iso-2022-jp")
    if _ISO2022_KR_MARKER in data:
        found.add("iso-2022-kr")
    if b"~{" in data and b"~}" in data and _has_valid_hz_regions(data):
        found.add("hz-gb-2312")
    return frozenset(found)

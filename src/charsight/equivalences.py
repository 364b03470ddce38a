"""Legacy encoding name remapping.

Backs the ``should_rename_legacy`` option of :func:`charsight.detect`:
detected ISO and subset encoding names are replaced with the Windows/CP
supersets that modern software actually uses.
"""

from __future__ import annotations

# Preferred superset name for each encoding, used by ``should_rename_legacy``.
# Each Windows code page fills the C1 control range (0x80-0x9F) with
# printable characters, making it a strict superset of its ISO counterpart.
PREFERRED_SUPERSET: dict[str, str] = {
    "ascii": "windows-1252",
    "euc-kr": "cp949",
    "gb2312": "gb18030",
    "shift_jis": "cp932",
    "iso-8859-1": "windows-1252",
    "iso-8859-2": "windows-1250",
    "iso-8859-5": "windows-1251",
    "iso-8859-6": "windows-1256",
    "iso-8859-7": "windows-1253",
    "iso-8859-8": "windows-1255",
    "iso-8859-9": "windows-1254",
    "iso-8859-11": "cp874",
    "tis-620": "cp874",
}


def apply_legacy_rename(
    result: dict[str, str | float | None],
) -> dict[str, str | float | None]:
    """Replace the encoding name with its preferred Windows/CP superset.

    Modifies the ``"encoding"`` value in *result* in-place and returns it.
    """
    enc = result.get("encoding")
    if isinstance(enc, str):
        result["encoding"] = PREFERRED_SUPERSET.get(enc.lower(), enc)
    return result

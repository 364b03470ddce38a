# tests/test_equivalences.py
from __future__ import annotations

import codecs

import pytest

from charsight.equivalences import PREFERRED_SUPERSET, apply_legacy_rename
from charsight.registry import lookup


@pytest.mark.parametrize(("subset", "preferred"), list(PREFERRED_SUPERSET.items()))
def test_preferred_superset_is_a_registry_entry(subset, preferred):
    assert lookup(preferred) is not None
    assert codecs.lookup(subset).name != codecs.lookup(preferred).name


def test_apply_legacy_rename():
    result = {"encoding": "iso-8859-7", "confidence": 0.9, "language": "el"}
    assert apply_legacy_rename(result) is result
    assert result == {"encoding": "windows-1253", "confidence": 0.9, "language": "el"}


def test_apply_legacy_rename_is_case_insensitive():
    assert apply_legacy_rename({"encoding": "ISO-8859-1"})["encoding"] == "windows-1252"


def test_apply_legacy_rename_leaves_others():
    assert apply_legacy_rename({"encoding": "utf-8"})["encoding"] == "utf-8"
    assert apply_legacy_rename({"encoding": None})["encoding"] is None
    assert apply_legacy_rename({"encoding": "gb18030"})["encoding"] == "gb18030"

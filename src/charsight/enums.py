"""Enumerations for charsight."""

import enum


class EncodingEra(enum.IntFlag):
    """Bit flags representing encoding eras for filtering detection candidates."""

    MODERN_WEB = 1
    LEGACY_ISO = 2
    LEGACY_MAC = 4
    LEGACY_REGIONAL = 8
    DOS = 16
    ALL = MODERN_WEB | LEGACY_ISO | LEGACY_MAC | LEGACY_REGIONAL | DOS


class ModelKind(enum.Enum):
    """The closed set of encoding model variants.

    Every registry entry names exactly one kind, and every kind has exactly
    one scoring function in :mod:`charsight.pipeline.encoding_models`.
    """

    BOM = "bom"
    WIDE = "wide"
    ESCAPE = "escape"
    ASCII = "ascii"
    UTF8 = "utf8"
    MULTI_BYTE = "multi_byte"
    SINGLE_BYTE = "single_byte"


class NoDetectionReason(enum.Enum):
    """Why :func:`charsight.detect_best` could not name a charset."""

    #: The input held no bytes at all.
    EMPTY_INPUT = "empty_input"
    #: Bytes were present but every model scored exactly zero.
    NO_MATCH = "no_match"

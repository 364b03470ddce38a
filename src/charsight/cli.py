"""Command-line interface for charsight."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import charsight
from charsight._utils import DEFAULT_MAX_BYTES
from charsight.enums import EncodingEra
from charsight.pipeline import Candidate, EncodingReport, NoDetection

_ERA_NAMES = [e.name.lower() for e in EncodingEra if e.bit_count() == 1] + ["all"]
_SAMPLE_CHARS = 50


def _format_line(name: str, result: Candidate | NoDetection) -> str:
    if not result:
        return f"{name}: No charset detected."
    line = f"{name}: {result.charset} with confidence {result.confidence:.2f}"
    if result.language:
        line += f" ({result.language})"
    return line


def _print_details(data: bytes, report: EncodingReport) -> None:
    """Print the multi-line report for one input."""
    if not data:
        print("No data provided for encoding detection.")
        return
    if report.charset is None:
        print("No charset detected.")
        return
    print(f"Detected charset: {report.charset}")
    print(f"Confidence: {report.confidence * 100:.2f}%")
    print(f"Language: {report.language}")
    print(f"Valid UTF-8: {'Yes' if report.is_valid_utf8 else 'No'}")
    if report.is_valid_utf8:
        text = data.decode("utf-8")
        if text.strip():
            print(f"Sample text: {text[:_SAMPLE_CHARS]}")
    if report.is_likely_gbk:
        print("Likely GBK encoding: Yes")


def _report(name: str, data: bytes, era: EncodingEra, args: argparse.Namespace) -> None:
    if args.all:
        candidates = charsight.detect_all(data, encoding_era=era)
        if not candidates or not data:
            print(f"{name}: No charset detected.")
            return
        print(f"{name}:")
        for c in candidates:
            lang = f" ({c.language})" if c.language else ""
            print(f"  {c.charset} with confidence {c.confidence:.2f}{lang}")
        return

    if args.details:
        if args.files:
            print(f"{name}:")
        _print_details(data, charsight.detect_encoding_detailed(data, encoding_era=era))
        return

    result = charsight.detect_best(data, encoding_era=era)
    if args.minimal:
        print(result.charset if result else None)
    else:
        print(_format_line(name, result))


def main(argv: list[str] | None = None) -> int:
    """Run the ``charsight`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    :returns: The process exit status: 1 if any file could not be read.
    """
    parser = argparse.ArgumentParser(
        description="Detect the character encoding and language of files."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "-f",
        "--file",
        dest="extra_files",
        action="append",
        default=[],
        metavar="FILE",
        help="Input file (may be repeated)",
    )
    parser.add_argument(
        "-t", "--text", default=None, help="Detect the encoding of this text"
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    output.add_argument(
        "--all", action="store_true", help="Output every plausible encoding"
    )
    output.add_argument(
        "--details", action="store_true", help="Output a detailed report"
    )
    parser.add_argument(
        "--legacy", action="store_true", help="Include legacy encodings"
    )
    parser.add_argument(
        "-e",
        "--encoding-era",
        default=None,
        choices=_ERA_NAMES,
        help="Encoding era filter",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log pipeline decisions"
    )
    parser.add_argument(
        "--version", action="version", version=f"charsight {charsight.__version__}"
    )

    args = parser.parse_args(argv)
    args.files = list(args.files) + list(args.extra_files)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    if args.encoding_era:
        era = EncodingEra[args.encoding_era.upper()]
    elif args.legacy:
        era = EncodingEra.ALL
    else:
        era = EncodingEra.MODERN_WEB

    status = 0
    if args.text is not None:
        _report("text", args.text.encode("utf-8"), era, args)
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read(DEFAULT_MAX_BYTES)
            except OSError as e:
                print(f"charsight: {filepath}: {e}", file=sys.stderr)
                status = 1
                continue
            _report(filepath, data, era, args)
    elif args.text is None:
        data = sys.stdin.buffer.read(DEFAULT_MAX_BYTES)
        _report("stdin", data, era, args)
    return status


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import notepad2rtf
from notepad2rtf.converter.data_types import (
    OUTPUT_MODE_RTF,
    OUTPUT_MODE_TEXT,
    ConversionOptions,
)
from notepad2rtf.converter.serialization import serialize_report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notepad2rtf",
        description="Convert an Amstrad Notepad word processor document to RTF (or plain text with --text).",
        epilog=f"notepad2rtf version {notepad2rtf.__version__}",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to the Notepad document.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file. Defaults to the input name with a .rtf (or .txt) extension.",
    )
    parser.add_argument(
        "-t",
        "--text",
        action="store_true",
        help="Write unformatted text instead of RTF.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostic details to stderr.",
    )
    parser.add_argument(
        "--stale-fragment",
        action="store_true",
        help="Repeat the previous formatting after an unknown format code.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON conversion report instead of the success message.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {notepad2rtf.__version__}",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="notepad2rtf: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    # basicConfig leaves an already configured root logger alone
    logging.getLogger("notepad2rtf").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0

    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"notepad2rtf: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    _configure_logging(args.verbose)

    try:
        options = ConversionOptions(
            mode=OUTPUT_MODE_TEXT if args.text else OUTPUT_MODE_RTF,
            reemit_stale_fragment=args.stale_fragment,
        )
        report = notepad2rtf.convert_file(args.path, args.output, options)
        if args.json:
            json.dump(serialize_report(report), sys.stdout)
            sys.stdout.write("\n")
        else:
            sys.stdout.write(
                f"conversion successful: {report.metadata.target.file_path}\n"
            )
        return 0
    except Exception as exc:
        print(f"notepad2rtf: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

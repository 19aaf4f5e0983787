#!/usr/bin/env python3
"""Split a Format 1 MIDI file into one single-track file per track.

Examples
--------
    python tools/split_midi.py song.mid out/
    python tools/split_midi.py            # prompts for both paths
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from midisplit.driver import PromptPathProvider, StaticPathProvider, run  # noqa: E402
from midisplit.errors import SplitError  # noqa: E402


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Split a Format 1 MIDI file into single-track Format 1 files."
    )
    parser.add_argument("input", nargs="?", help="MIDI file to split.")
    parser.add_argument(
        "output_dir",
        nargs="?",
        help="Directory for the split files (created if missing).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug output.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only warnings and errors.")
    args = parser.parse_args(argv)

    if args.input and not args.output_dir:
        parser.error("output_dir is required when input is given.")

    configure_logging(args.verbose, args.quiet)

    if args.input:
        provider = StaticPathProvider(Path(args.input), Path(args.output_dir))
    else:
        provider = PromptPathProvider()

    try:
        written = run(provider)
    except SplitError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""List the track chunks of Format 1 MIDI files without writing anything."""

from __future__ import annotations

import argparse
import glob
from pathlib import Path
import sys
from typing import Iterable, List

import mido

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from midisplit.container import MidiSummary, read_midi_file  # noqa: E402
from midisplit.errors import SplitError  # noqa: E402


MIDI_SUFFIXES = {".mid", ".midi"}


def _is_midi(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in MIDI_SUFFIXES


def collect_paths(patterns: Iterable[str]) -> List[Path]:
    """Expand globs and directories into an ordered, duplicate-free MIDI file list."""

    found: dict[Path, Path] = {}
    for pattern in patterns:
        candidates = [Path(p) for p in glob.glob(pattern, recursive=True)] or [Path(pattern)]
        for candidate in sorted(candidates):
            if candidate.is_dir():
                members = sorted(p for p in candidate.iterdir() if _is_midi(p))
            else:
                members = [candidate] if _is_midi(candidate) else []
            for path in members:
                found.setdefault(path.resolve(), path)
    return list(found.values())


def format_rows(summary: MidiSummary) -> List[str]:
    header = ["#", "Offset", "Length", "Name"]
    rows = [
        [str(t.index), f"0x{t.offset:06X}", str(t.length), t.name]
        for t in summary.tracks
    ]
    widths = [
        max(len(row[i]) for row in ([header] + rows))
        for i in range(len(header))
    ]

    def fmt_row(row: list[str]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()

    lines = [fmt_row(header), "  ".join("-" * w for w in widths)]
    lines.extend(fmt_row(row) for row in rows)
    return lines


def dump_events(path: Path) -> None:
    mid = mido.MidiFile(str(path))
    for number, track in enumerate(mid.tracks, start=1):
        print(f"  track {number}: {len(track)} events")
        for msg in track:
            print(f"    {msg}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show the track chunks (offset, length, name) of Format 1 MIDI files."
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="MIDI files, directories, or glob patterns (quote wildcards).",
    )
    parser.add_argument(
        "--events",
        action="store_true",
        help="Also decode every event with mido.",
    )
    args = parser.parse_args(argv)

    targets = collect_paths(args.paths)
    if not targets:
        parser.error("No .mid/.midi files matched the provided paths/patterns.")

    failures = 0
    for path in targets:
        try:
            summary = read_midi_file(path)
        except SplitError as exc:
            failures += 1
            print(f"ERR  {path}: {exc}")
            continue

        ticks = int.from_bytes(summary.division, "big")
        print(f"{path}: {summary.track_count} tracks, division 0x{ticks:04X}")
        for line in format_rows(summary):
            print(f"  {line}")
        if args.events:
            dump_events(path)

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Write each track of a Format 1 file to its own single-track file.

Output layout per track::

    MThd 00000006 0001 0001 <division>
    MTrk <length> <original body bytes>

Chunk bytes are copied from the source verbatim; nothing in the event
stream is decoded or re-encoded.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Callable, List, Optional

from .container import (
    SUPPORTED_FORMAT,
    MidiSummary,
    SmfHeader,
    TrackDescriptor,
    open_midi_file,
    parse_midi,
)
from .errors import (
    CopyError,
    OutputCreateError,
    OutputWriteError,
    SourceSeekError,
    SplitCancelled,
    SplitError,
)
from .naming import NamingStrategy, default_naming

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 4096

CancelCheck = Callable[[], bool]


def build_single_track_header(division: bytes) -> bytes:
    return SmfHeader(format=SUPPORTED_FORMAT, track_count=1, division=division).to_bytes()


def _check_cancel(should_cancel: Optional[CancelCheck]) -> None:
    if should_cancel is not None and should_cancel():
        raise SplitCancelled("split cancelled")


def copy_track(
    source: BinaryIO,
    sink: BinaryIO,
    track: TrackDescriptor,
    *,
    chunk_size: int = COPY_CHUNK_SIZE,
    should_cancel: Optional[CancelCheck] = None,
) -> int:
    """Copy the chunk header and body of `track` from `source` into `sink`.

    The source is always re-seeked first; earlier reads may have moved it.
    Returns the number of bytes copied.
    """

    try:
        source.seek(track.offset)
    except (OSError, ValueError) as exc:
        raise SourceSeekError(track.index, track.offset) from exc

    remaining = track.chunk_size
    copied = 0
    while remaining > 0:
        _check_cancel(should_cancel)
        try:
            block = source.read(min(remaining, chunk_size))
        except OSError as exc:
            raise CopyError(track.index, str(exc)) from exc
        if not block:
            raise CopyError(
                track.index, f"source ended after {copied} of {track.chunk_size} bytes"
            )
        try:
            sink.write(block)
        except OSError as exc:
            raise CopyError(track.index, f"error writing to output stream: {exc}") from exc
        remaining -= len(block)
        copied += len(block)
    return copied


def write_track(
    sink: BinaryIO,
    path: Path,
    header: bytes,
    source: BinaryIO,
    track: TrackDescriptor,
    *,
    chunk_size: int = COPY_CHUNK_SIZE,
    should_cancel: Optional[CancelCheck] = None,
) -> None:
    """Write `header` then the chunk bytes of `track` into an open sink."""

    try:
        sink.write(header)
    except OSError as exc:
        raise OutputWriteError(path) from exc
    copy_track(
        source,
        sink,
        track,
        chunk_size=chunk_size,
        should_cancel=should_cancel,
    )


def emit_tracks(
    source: BinaryIO,
    summary: MidiSummary,
    base_name: str,
    output_dir: Path,
    *,
    naming: NamingStrategy = default_naming,
    chunk_size: int = COPY_CHUNK_SIZE,
    should_cancel: Optional[CancelCheck] = None,
) -> List[Path]:
    """Emit one file per descriptor in `summary`, in track order.

    Completed files written before a failure are left on disk.  The file
    being written when the failure happens is removed.
    """

    output_dir = Path(output_dir)
    header = build_single_track_header(summary.division)
    written: List[Path] = []

    for track in sorted(summary.tracks, key=lambda t: t.index):
        _check_cancel(should_cancel)
        kind = "Tempo" if track.is_primary else "Track"
        logger.info("Splitting: %s %d", kind, track.index)

        path = naming(base_name, track.name, track.index, output_dir)
        try:
            sink = path.open("wb")
        except (OSError, ValueError) as exc:
            # ValueError: names with an embedded NUL byte
            raise OutputCreateError(path) from exc

        try:
            with sink:
                write_track(
                    sink,
                    path,
                    header,
                    source,
                    track,
                    chunk_size=chunk_size,
                    should_cancel=should_cancel,
                )
        except SplitError:
            path.unlink(missing_ok=True)
            raise
        except OSError as exc:
            path.unlink(missing_ok=True)
            raise OutputWriteError(path) from exc

        written.append(path)
        logger.info("  -> Created: %s", path.name)

    logger.info("Successfully split %d tracks!", len(written))
    return written


def split_midi_file(
    input_path: str | os.PathLike[str],
    output_dir: str | os.PathLike[str],
    *,
    naming: NamingStrategy = default_naming,
    chunk_size: int = COPY_CHUNK_SIZE,
    should_cancel: Optional[CancelCheck] = None,
) -> List[Path]:
    """Split a Format 1 file into single-track files under `output_dir`.

    The whole file is parsed before any output is created, so a structural
    error leaves `output_dir` untouched.
    """

    input_path = Path(input_path)
    with open_midi_file(input_path) as source:
        summary = parse_midi(source)
        return emit_tracks(
            source,
            summary,
            input_path.stem,
            Path(output_dir),
            naming=naming,
            chunk_size=chunk_size,
            should_cancel=should_cancel,
        )

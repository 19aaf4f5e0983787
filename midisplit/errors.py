"""Failure taxonomy for parsing and splitting Standard MIDI Files.

Structural problems with the input are ``ValueError`` subclasses, I/O
problems are ``OSError`` subclasses; both share ``SplitError`` so a driver
can report any of them with a single handler.
"""

from __future__ import annotations

from pathlib import Path


class SplitError(Exception):
    """Base class for every failure raised by this package."""


class MidiFormatError(SplitError, ValueError):
    pass


class MidiIOError(SplitError, OSError):
    pass


class MalformedHeader(MidiFormatError):
    def __init__(self, length: int) -> None:
        super().__init__(f"file too short for MIDI header ({length} bytes, need 14)")
        self.length = length


class NotAMidiFile(MidiFormatError):
    def __init__(self, tag: bytes) -> None:
        super().__init__(f"not a valid MIDI file (missing MThd header, got {tag!r})")
        self.tag = tag


class UnsupportedHeaderSize(MidiFormatError):
    def __init__(self, size: int) -> None:
        super().__init__(f"invalid MIDI header size {size} (expected 6)")
        self.size = size


class UnsupportedFormat(MidiFormatError):
    def __init__(self, fmt: int) -> None:
        super().__init__(f"not a Format 1 MIDI file (format {fmt})")
        self.format = fmt


class TrackError(SplitError):
    """A failure tied to one 1-based track index."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(message)
        self.index = index


class InvalidTrackHeader(TrackError, MidiFormatError):
    def __init__(self, index: int, tag: bytes) -> None:
        super().__init__(index, f"invalid track header for track {index} (got {tag!r})")
        self.tag = tag


class TruncatedTrack(TrackError, MidiFormatError):
    def __init__(self, index: int, detail: str = "") -> None:
        message = f"track {index} runs past the end of the file"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(index, message)


class SourceSeekError(TrackError, MidiIOError):
    def __init__(self, index: int, offset: int) -> None:
        super().__init__(index, f"error seeking to track {index} at offset {offset}")
        self.offset = offset


class CopyError(TrackError, MidiIOError):
    def __init__(self, index: int, detail: str) -> None:
        super().__init__(index, f"error copying track {index}: {detail}")


class PathError(SplitError):
    """A failure tied to one filesystem path."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class OutputCreateError(PathError, MidiIOError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"cannot create output file: {path}")


class OutputWriteError(PathError, MidiIOError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"error writing header to: {path}")


class InputNotFound(PathError, MidiIOError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"input file does not exist: {path}")


class OutputDirectoryError(PathError, MidiIOError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"cannot create output directory: {path}")


class SplitCancelled(SplitError):
    pass

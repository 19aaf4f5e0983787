from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List

from .codec import read_u16_be, read_u32_be, write_u16_be, write_u32_be
from .errors import (
    InvalidTrackHeader,
    MalformedHeader,
    NotAMidiFile,
    TruncatedTrack,
    UnsupportedFormat,
    UnsupportedHeaderSize,
)
from .track_names import extract_track_name, fallback_name

logger = logging.getLogger(__name__)

HEADER_TAG = b"MThd"
TRACK_TAG = b"MTrk"
HEADER_SIZE = 14  # tag + length + 6-byte body
HEADER_BODY_SIZE = 6
TRACK_HEADER_SIZE = 8
SUPPORTED_FORMAT = 1
TEMPO_TRACK_NAME = "Tempo Track"


@dataclass(frozen=True)
class SmfHeader:
    """The 14-byte ``MThd`` chunk.  `division` is carried as raw bytes."""

    format: int
    track_count: int
    division: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "SmfHeader":
        if len(data) < HEADER_SIZE:
            raise MalformedHeader(len(data))
        if data[:4] != HEADER_TAG:
            raise NotAMidiFile(data[:4])

        header_size = read_u32_be(data, 4)
        if header_size != HEADER_BODY_SIZE:
            raise UnsupportedHeaderSize(header_size)

        fmt = read_u16_be(data, 8)
        if fmt != SUPPORTED_FORMAT:
            raise UnsupportedFormat(fmt)

        return cls(
            format=fmt,
            track_count=read_u16_be(data, 10),
            division=bytes(data[12:14]),
        )

    def to_bytes(self) -> bytes:
        return b"".join(
            [
                HEADER_TAG,
                write_u32_be(HEADER_BODY_SIZE),
                write_u16_be(self.format),
                write_u16_be(self.track_count),
                self.division,
            ]
        )


@dataclass(frozen=True)
class TrackDescriptor:
    """Location of one ``MTrk`` chunk inside the source file."""

    index: int  # 1-based; track 1 is the conductor/tempo track by convention
    length: int  # declared body length, excluding the 8-byte chunk header
    offset: int  # start of the chunk header in the source file
    name: str

    @property
    def chunk_size(self) -> int:
        return TRACK_HEADER_SIZE + self.length

    @property
    def is_primary(self) -> bool:
        return self.index == 1


@dataclass(frozen=True)
class MidiSummary:
    """Parsed Format 1 file: header fields plus one descriptor per track."""

    header: SmfHeader
    tracks: List[TrackDescriptor]

    @property
    def division(self) -> bytes:
        return self.header.division

    @property
    def track_count(self) -> int:
        return self.header.track_count


def _stream_size(stream: BinaryIO) -> int:
    position = stream.tell()
    size = stream.seek(0, io.SEEK_END)
    stream.seek(position)
    return size


def _track_name(stream: BinaryIO, index: int, length: int) -> str:
    try:
        return extract_track_name(stream, index, length)
    except OSError as exc:
        logger.debug("track %d: name extraction failed: %s", index, exc)
        return TEMPO_TRACK_NAME if index == 1 else fallback_name(index)


def parse_midi(stream: BinaryIO) -> MidiSummary:
    """Validate the header and walk every declared track chunk.

    `stream` must be seekable and positioned at the start of the file.  Any
    structural problem aborts the walk; no partial summary is returned.
    """

    file_size = _stream_size(stream)
    header = SmfHeader.from_bytes(stream.read(HEADER_SIZE))
    logger.info("Found %d tracks to split", header.track_count)

    tracks: List[TrackDescriptor] = []
    for index in range(1, header.track_count + 1):
        offset = stream.tell()
        chunk_header = stream.read(TRACK_HEADER_SIZE)
        if len(chunk_header) != TRACK_HEADER_SIZE:
            raise TruncatedTrack(index, "incomplete chunk header")
        if chunk_header[:4] != TRACK_TAG:
            raise InvalidTrackHeader(index, chunk_header[:4])

        length = read_u32_be(chunk_header, 4)
        body_start = offset + TRACK_HEADER_SIZE
        if body_start + length > file_size:
            raise TruncatedTrack(
                index, f"declares {length} bytes, {file_size - body_start} available"
            )

        name = _track_name(stream, index, length)
        track = TrackDescriptor(index=index, length=length, offset=offset, name=name)
        tracks.append(track)

        if track.is_primary:
            logger.info("Primary Track: %s (%d bytes)", name, length)
        else:
            logger.info("Track %d: %s (%d bytes)", index, name, length)

        stream.seek(length, io.SEEK_CUR)

    return MidiSummary(header=header, tracks=tracks)


def open_midi_file(path: str | os.PathLike[str]) -> BinaryIO:
    path = Path(path)
    logger.info("Reading MIDI file: %s", path)
    return path.open("rb")


def read_midi_file(path: str | os.PathLike[str]) -> MidiSummary:
    with open_midi_file(path) as stream:
        return parse_midi(stream)

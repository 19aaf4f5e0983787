"""Best-effort track naming from the first bytes of an ``MTrk`` body.

The scan does not walk delta-times or running status.  It looks for the
``FF 03`` (Sequence/Track Name) meta-event prefix anywhere in a bounded
window, so a matching byte pair inside unrelated event data can produce a
false positive.  That is accepted: the name only feeds output filenames.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from .search import find_all

logger = logging.getLogger(__name__)

TRACK_NAME_MARKER = b"\xFF\x03"
MAX_NAME_SEARCH = 1024


def fallback_name(index: int) -> str:
    return f"Track {index}"


def name_from_window(window: bytes) -> str | None:
    """Return the first non-empty track name found in `window`, if any."""

    for match in find_all(window, TRACK_NAME_MARKER):
        length_pos = match + len(TRACK_NAME_MARKER)
        if length_pos + 1 >= len(window):
            continue
        length = window[length_pos]
        start = length_pos + 1
        if start + length > len(window):
            continue
        name = window[start : start + length].decode("latin-1")
        if name:
            return name
    return None


def extract_track_name(stream: BinaryIO, index: int, track_size: int) -> str:
    """Peek at the track body under the cursor and return a display name.

    `stream` must be positioned just past the 8-byte chunk header.  The read
    position is always restored before returning.
    """

    search_size = min(track_size, MAX_NAME_SEARCH)
    try:
        position = stream.tell()
    except OSError:
        logger.debug("track %d: stream position unavailable", index)
        return fallback_name(index)

    try:
        window = stream.read(search_size)
    except (OSError, MemoryError) as exc:
        logger.debug("track %d: name scan read failed: %s", index, exc)
        return fallback_name(index)
    finally:
        stream.seek(position)

    if len(window) < search_size:
        logger.debug(
            "track %d: short name scan (%d of %d bytes)", index, len(window), search_size
        )
        return fallback_name(index)

    name = name_from_window(window)
    if name is None:
        return fallback_name(index)
    return name

"""Split Format 1 Standard MIDI Files into one single-track file per track."""

from .codec import read_u16_be, read_u32_be, write_u16_be, write_u32_be  # noqa: F401
from .container import (  # noqa: F401
    HEADER_SIZE,
    HEADER_TAG,
    TRACK_HEADER_SIZE,
    TRACK_TAG,
    MidiSummary,
    SmfHeader,
    TrackDescriptor,
    open_midi_file,
    parse_midi,
    read_midi_file,
)
from .driver import PathProvider, PromptPathProvider, StaticPathProvider, run  # noqa: F401
from .errors import (  # noqa: F401
    CopyError,
    InputNotFound,
    InvalidTrackHeader,
    MalformedHeader,
    MidiFormatError,
    MidiIOError,
    NotAMidiFile,
    OutputCreateError,
    OutputDirectoryError,
    OutputWriteError,
    SourceSeekError,
    SplitCancelled,
    SplitError,
    TruncatedTrack,
    UnsupportedFormat,
    UnsupportedHeaderSize,
)
from .naming import (  # noqa: F401
    NamingStrategy,
    default_naming,
    resolve_output_path,
    sanitize_filename,
)
from .search import find_all  # noqa: F401
from .splitter import (  # noqa: F401
    build_single_track_header,
    copy_track,
    emit_tracks,
    split_midi_file,
    write_track,
)
from .track_names import MAX_NAME_SEARCH, TRACK_NAME_MARKER, extract_track_name  # noqa: F401

"""Output filenames for split tracks."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

RESERVED_CHARS = '<>:"/\\|?*'
OUTPUT_SUFFIX = ".mid"

_RESERVED_TABLE = str.maketrans({ch: "_" for ch in RESERVED_CHARS})

# (base name of input, track display name, 1-based track index, output dir) -> path
NamingStrategy = Callable[[str, str, int, Path], Path]


def sanitize_filename(name: str) -> str:
    """Replace characters reserved on common filesystems with ``_``.

    Everything else passes through, including characters a particular
    filesystem may still reject.
    """

    return name.translate(_RESERVED_TABLE)


def candidate_name(base_name: str, safe_name: str, copy: int = 0) -> str:
    if copy == 0:
        return f"{base_name} - {safe_name}{OUTPUT_SUFFIX}"
    return f"{base_name} - {safe_name} (Copy {copy}){OUTPUT_SUFFIX}"


def resolve_output_path(base_name: str, safe_name: str, directory: Path) -> Path:
    """Return the first candidate path under `directory` that does not exist."""

    directory = Path(directory)
    copy = 0
    path = directory / candidate_name(base_name, safe_name, copy)
    while path.exists():
        copy += 1
        path = directory / candidate_name(base_name, safe_name, copy)
    return path


def default_naming(base_name: str, track_name: str, index: int, directory: Path) -> Path:
    return resolve_output_path(base_name, sanitize_filename(track_name), directory)

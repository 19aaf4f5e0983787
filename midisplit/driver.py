"""Top-level split workflow behind a pluggable path provider."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Protocol

from .errors import InputNotFound, OutputDirectoryError
from .naming import NamingStrategy, default_naming
from .splitter import split_midi_file

logger = logging.getLogger(__name__)


class PathProvider(Protocol):
    def select_input_file(self) -> Optional[Path]:
        ...

    def select_output_directory(self) -> Optional[Path]:
        ...


@dataclass
class StaticPathProvider:
    """Paths known up front, e.g. from command-line arguments."""

    input_file: Optional[Path]
    output_directory: Optional[Path]

    def select_input_file(self) -> Optional[Path]:
        return self.input_file

    def select_output_directory(self) -> Optional[Path]:
        return self.output_directory


class PromptPathProvider:
    """Ask for both paths on the console.  An empty answer cancels."""

    def __init__(self, ask: Callable[[str], str] = input) -> None:
        self._ask = ask

    def _prompt(self, question: str) -> Optional[Path]:
        answer = self._ask(question).strip().strip('"')
        return Path(answer) if answer else None

    def select_input_file(self) -> Optional[Path]:
        return self._prompt("Enter MIDI file path: ")

    def select_output_directory(self) -> Optional[Path]:
        return self._prompt("Enter output directory: ")


def ensure_output_directory(path: Path) -> None:
    if path.is_dir():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(path) from exc


def run(
    provider: PathProvider,
    *,
    naming: NamingStrategy = default_naming,
) -> List[Path]:
    """Select paths, validate them, and split.

    Returns the written files, or an empty list when the user cancelled a
    selection.
    """

    input_file = provider.select_input_file()
    if input_file is None:
        logger.info("No file selected. Exiting.")
        return []

    output_dir = provider.select_output_directory()
    if output_dir is None:
        logger.info("No output folder selected. Exiting.")
        return []

    if not input_file.is_file():
        raise InputNotFound(input_file)
    ensure_output_directory(output_dir)

    return split_midi_file(input_file, output_dir, naming=naming)

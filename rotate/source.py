"""Reading compiler source files from disk."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .common import EXTRA_NULL_TERMINATORS, UINT_MAX

SOURCE_EXTENSION = ".vr"

_WHITESPACE = frozenset(b" \t\n\v\f\r")


class FileReadError(Exception):
    """Raised when a source file cannot be read or is not acceptable."""


@dataclass(frozen=True)
class SourceFile:
    """A source file read into memory in one go."""

    name: str
    contents: str

    @property
    def length(self) -> int:
        return len(self.contents)


def _is_text_byte(byte: int) -> bool:
    return byte in _WHITESPACE or 0x20 <= byte <= 0x7E


def read_source(name: str | os.PathLike[str]) -> SourceFile:
    """Read a ``.vr`` source file whole and validate it."""
    path = os.fspath(name)
    if len(path) < 3:
        raise FileReadError("File name is too short to have a valid extension")
    if not path.endswith(SOURCE_EXTENSION):
        raise FileReadError("File name must end with .vr")

    try:
        with open(path, "rb") as handle:
            try:
                size = os.fstat(handle.fileno()).st_size
            except OSError as exc:
                raise FileReadError("Failed to get file size") from exc
            if size == 0:
                raise FileReadError("File is empty")
            if size > UINT_MAX - EXTRA_NULL_TERMINATORS:
                raise FileReadError("File is too large")
            try:
                data = handle.read()
            except OSError as exc:
                raise FileReadError("Read file error") from exc
    except FileReadError:
        raise
    except OSError as exc:
        raise FileReadError("File does not exist") from exc

    if len(data) != size:
        raise FileReadError("Read file error")
    if not _is_text_byte(data[0]):
        raise FileReadError("Only ASCII text files are supported for compilation")

    return SourceFile(name=path, contents=data.decode("latin-1"))
"""Reading map files into a grid of rows."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class MapFileError(Exception):
    """Raised when a map file cannot be read or has an empty line."""


def parse_map(text: str) -> list[str]:
    """Split map text into its rows.

    Rows are separated by ``"\\n"``. One final newline is allowed. An empty
    text, or any empty line (leading, inside, or after the final row),
    makes the map invalid. Other characters, ``"\\r"`` included, stay in
    the rows.
    """
    if not text:
        raise MapFileError("map file is empty")
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    for number, row in enumerate(rows, start=1):
        if not row:
            raise MapFileError(f"empty line {number} in map")
    return rows


def read_map(path: PathLike) -> list[str]:
    """Read the map file at *path* and return its rows."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError as error:
        raise MapFileError(f"cannot read map file {os.fspath(path)!r}: {error}") from error
    return parse_map(text)
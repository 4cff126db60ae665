"""Reading the game's text resources: art, numbers and component specs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from caro.colors import Color
from caro.geometry import Point

PathLike = Union[str, Path]

_INT = re.compile(r"\s*([+-]?\d+)")


def _read(path: PathLike) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return None


def read_text_file(path: PathLike) -> list[str]:
    """Return the lines of a file without line ends; none if it is missing."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return [line.rstrip("\n") for line in handle]
    except OSError:
        return []


def read_number_file(path: PathLike) -> list[int]:
    """Return the leading whitespace-separated integers of a file."""
    text = _read(path)
    if text is None:
        return []
    numbers = []
    pos = 0
    while (match := _INT.match(text, pos)) is not None:
        numbers.append(int(match.group(1)))
        pos = match.end()
    return numbers


@dataclass
class ComponentSpec:
    """A drawable component as stored on disk: colour, anchor and text."""

    color: int = Color.DEFAULT
    anchor: Point = field(default_factory=Point)
    content: list[str] = field(default_factory=list)


def parse_component(text: str) -> ComponentSpec:
    """Parse ``color x y`` followed by the non-empty lines of the shape."""
    values = []
    pos = 0
    for name in ("colour", "anchor x", "anchor y"):
        match = _INT.match(text, pos)
        if match is None:
            raise ValueError(f"component is missing its {name}")
        values.append(int(match.group(1)))
        pos = match.end()
    content = [line for line in text[pos:].split("\n") if line]
    return ComponentSpec(values[0], Point(values[1], values[2]), content)


def read_component(path: PathLike) -> ComponentSpec:
    """Read a component file; a missing file gives an empty default component."""
    text = _read(path)
    if text is None:
        return ComponentSpec()
    return parse_component(text)
"""Small helpers for strings and shapes."""

from __future__ import annotations

from typing import Sequence

from caro.geometry import Point


def argmax(values: Sequence) -> int:
    """Return the index of the first largest value."""
    if not values:
        raise ValueError("argmax of an empty sequence")
    return max(range(len(values)), key=lambda i: (values[i], -i))


def max_length(lines: Sequence[str]) -> int:
    """Return the length of the longest line, 0 for none."""
    return max((len(line) for line in lines), default=0)


def char_string(size: int, ch: str) -> str:
    """Return ``ch`` repeated ``size`` times."""
    return ch * max(size, 0)


def rectangle_content(content: Sequence[str], offset: Point) -> list[str]:
    """Return an outline of stars framing ``content`` with ``offset`` margins."""
    width = max_length(content) + offset.x * 2
    height = len(content) + offset.y * 2
    if width <= 0 or height <= 0:
        return [""] * max(height, 0)
    edge = "*" * width
    middle = "*" + " " * (width - 2) + "*" if width >= 2 else edge
    return [edge if row in (0, height - 1) else middle for row in range(height)]
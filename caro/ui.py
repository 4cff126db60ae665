"""Drawable text components, components with a frame, and board slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from caro.colors import Color
from caro.files import read_component
from caro.geometry import Point
from caro.screen import Screen, default_screen
from caro.utility import rectangle_content

PathLike = Union[str, Path]


@dataclass(eq=False)
class UIComponent:
    """A block of text drawn in one colour with its top left at ``anchor``."""

    content: list[str] = field(default_factory=list)
    anchor: Point = field(default_factory=Point)
    color: int = Color.DEFAULT
    screen: Screen = field(default_factory=default_screen, repr=False)

    @classmethod
    def from_file(cls, path: PathLike, screen: Screen | None = None) -> UIComponent:
        """Build a component from a resource file; a missing file gives an empty one."""
        spec = read_component(path)
        return cls(
            content=list(spec.content),
            anchor=spec.anchor,
            color=spec.color,
            screen=default_screen() if screen is None else screen,
        )

    def show(self) -> None:
        """Draw the component in its own colour."""
        self.screen.draw(self.anchor, self.content, self.color)

    def hide(self, replace_color: int = Color.DEFAULT) -> None:
        """Draw over the component in ``replace_color``."""
        self.screen.draw(self.anchor, self.content, replace_color)


@dataclass(eq=False)
class UIBound(UIComponent):
    """A component that can show a star frame around itself."""

    bound: UIComponent | None = field(default=None, repr=False)

    def make_bound(self, offset: Point = Point(1, 1), color: int = Color.RED_RED) -> None:
        """Build the frame with ``offset`` margins around the current content."""
        self.bound = UIComponent(
            rectangle_content(self.content, offset),
            self.anchor - offset,
            color,
            self.screen,
        )

    def draw_bound(self) -> None:
        """Show the frame, building a default one first if there is none."""
        if self.bound is None:
            self.make_bound()
        self.bound.show()

    def clear_bound(self, replace_color: int = Color.DEFAULT) -> None:
        """Draw over the frame in ``replace_color``, if there is one."""
        if self.bound is not None:
            self.bound.hide(replace_color)


@dataclass(eq=False)
class SlotBoard(UIBound):
    """One cell of the board: a shell, a yellow frame and an X or O mark.

    Mark 0 is empty, 1 is X (drawn red) and 2 is O (drawn green).
    """

    x_shape: list[str] = field(default_factory=list)
    o_shape: list[str] = field(default_factory=list)
    mark: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.make_bound(Point(1, 1), Color.YELLOW_YELLOW)
        mark_anchor = self.anchor.moved(1, 0)
        self._x_mark = UIComponent(list(self.x_shape), mark_anchor, Color.RED_RED, self.screen)
        self._o_mark = UIComponent(list(self.o_shape), mark_anchor, Color.GREEN_GREEN, self.screen)

    def set_mark(self, mark: int) -> bool:
        """Set the mark if it is 0, 1 or 2; tell whether it was accepted."""
        if 0 <= mark <= 2:
            self.mark = mark
            return True
        return False

    def draw_mark(self) -> None:
        """Draw the X or O shape for the current mark; nothing when empty."""
        if self.mark == 1:
            self._x_mark.show()
        elif self.mark == 2:
            self._o_mark.show()
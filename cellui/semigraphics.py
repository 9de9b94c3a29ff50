"""Drawing box-drawing characters so that crossing lines join up."""

from __future__ import annotations

from typing import Optional

from .boxchars import lookup_joint
from .primitive import Screen, Style


def join_semigraphics(existing: str, ch: str) -> str:
    """Return the character that results from drawing ``ch`` over ``existing``.

    Identical characters stay as they are. Pairs with a known joint become that
    joint. Any other pair resolves to the one with the higher code point.
    """
    if ch == existing:
        return ch
    low, high = sorted((existing, ch))
    joint = lookup_joint(low, high)
    return joint if joint is not None else high


def print_joined_semigraphics(
    screen: Screen, x: int, y: int, ch: str, style: Optional[Style] = None
) -> None:
    """Print a line character at a cell, joining it with what is already there."""
    previous, _ = screen.get_content(x, y)
    screen.set_content(x, y, join_semigraphics(previous, ch), style)
"""Layout arithmetic for grids: which items apply and how space is shared."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .primitive import Primitive


@dataclass(eq=False)
class GridItem:
    """One primitive placed on a grid, with the cells it spans.

    ``x``, ``y``, ``w`` and ``h`` hold the last computed position relative to
    the grid; they are meaningful only while ``visible`` is true.
    """

    item: Optional[Primitive]
    row: int
    column: int
    row_span: int
    col_span: int
    min_grid_height: int = 0
    min_grid_width: int = 0
    focus: bool = False
    visible: bool = False
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def min_size(self) -> int:
        """The larger of the two minimum grid sizes."""
        return max(self.min_grid_width, self.min_grid_height)

    def overlaps(self, other: "GridItem") -> bool:
        return not (
            self.row >= other.row + other.row_span
            or self.row + self.row_span <= other.row
            or self.column >= other.column + other.col_span
            or self.column + self.col_span <= other.column
        )


def select_items(items: Iterable[GridItem], width: int, height: int) -> list[GridItem]:
    """Return the items that apply to a grid of the given size.

    Every item's ``visible`` flag is reset. Items without a primitive, with an
    empty span, or whose minimum grid size is not met are left out. An item is
    compared for overlap with the earliest selected item only: if they overlap,
    the one with the larger minimum size takes that place (the later one on a
    tie) and the other is dropped.
    """
    selected: list[GridItem] = []
    for item in items:
        item.visible = False
        if (
            item.item is None
            or item.col_span <= 0
            or item.row_span <= 0
            or width < item.min_grid_width
            or height < item.min_grid_height
        ):
            continue
        if selected and item.overlaps(selected[0]):
            if item.min_size >= selected[0].min_size:
                selected[0] = item
            continue
        selected.append(item)
    return selected


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def distribute(
    definitions: Sequence[int],
    count: int,
    available: int,
    minimum: int = 0,
    gap: int = 0,
    borders: bool = False,
) -> list[int]:
    """Return the sizes of ``count`` rows or columns sharing ``available`` cells.

    Positive definitions are absolute sizes; zero and negative ones are
    proportional shares (0 counts as -1). Rows or columns beyond the
    definitions are proportional with a share of 1. Gaps, or a one-cell border
    line on each side when ``borders`` is set, are taken off first. No size
    falls below ``minimum``.
    """
    if count < len(definitions):
        raise ValueError("count must cover every definition")

    sizes = [0] * count
    remaining = available
    proportional = 0
    for index, size in enumerate(definitions):
        if size > 0:
            size = max(size, minimum)
            remaining -= size
            sizes[index] = size
        else:
            proportional += -size or 1
    remaining -= (count + 1) if borders else (count - 1) * gap
    proportional += count - len(definitions)

    for index in range(count):
        size = definitions[index] if index < len(definitions) else 0
        if size > 0:
            continue
        share = -size or 1
        absolute = _trunc_div(share * remaining, proportional)
        remaining -= absolute
        proportional -= share
        sizes[index] = max(absolute, minimum)
    return sizes


def positions(sizes: Iterable[int], gap: int = 0, borders: bool = False) -> list[int]:
    """Return the start offset of each row or column of the given sizes."""
    step = 1 if borders else gap
    position = 1 if borders else 0
    result = []
    for size in sizes:
        result.append(position)
        position += size + step
    return result
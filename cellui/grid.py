"""A layout that places primitives on a grid of rows and columns."""

from __future__ import annotations

from typing import Any, Optional

from . import boxchars
from .gridlayout import GridItem, distribute, positions, select_items
from .primitive import (
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    Style,
)
from .semigraphics import print_joined_semigraphics

_MAX_OFFSET = 2**31 - 1


class Grid(Primitive):
    """Places primitives into cells of a grid whose rows and columns have
    absolute or proportional sizes.

    When the grid itself has focus, its row and column offsets can be moved
    with the arrow keys, Home/End, and the keys g, G, j, k, h and l.
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: list[GridItem] = []
        self._rows: list[int] = []
        self._columns: list[int] = []
        self.min_width = 0
        self.min_height = 0
        self.gap_rows = 0
        self.gap_columns = 0
        self.row_offset = 0
        self.column_offset = 0
        self.borders = False
        self.borders_color: Any = None
        self.transparent = True

    def set_columns(self, *args: int) -> "Grid":
        """Define column widths: positive values are absolute, zero and
        negative values are proportional shares (0 counts as -1)."""
        self._columns = list(args)
        return self

    def set_rows(self, *args: int) -> "Grid":
        """Define row heights, with the same meaning as for columns."""
        self._rows = list(args)
        return self

    def set_size(
        self, num_rows: int, num_columns: int, row_size: int, column_size: int
    ) -> "Grid":
        """Define ``num_rows`` rows and ``num_columns`` columns of equal size."""
        self._rows = [row_size] * num_rows
        self._columns = [column_size] * num_columns
        return self

    def set_min_size(self, row: int, column: int) -> "Grid":
        """Set the minimum row height and column width."""
        if row < 0 or column < 0:
            raise ValueError("Invalid minimum row/column size")
        self.min_height, self.min_width = row, column
        return self

    def set_gap(self, row: int, column: int) -> "Grid":
        """Set the gaps between neighbouring rows and columns."""
        if row < 0 or column < 0:
            raise ValueError("Invalid gap size")
        self.gap_rows, self.gap_columns = row, column
        return self

    def set_borders(self, borders: bool) -> "Grid":
        """Draw borders around items; gaps are then one cell wide."""
        self.borders = borders
        return self

    def set_borders_color(self, color: Any) -> "Grid":
        self.borders_color = color
        return self

    def add_item(
        self,
        p: Optional[Primitive],
        row: int,
        column: int,
        row_span: int,
        col_span: int,
        min_grid_height: int,
        min_grid_width: int,
        focus: bool,
    ) -> "Grid":
        """Place a primitive on the grid. The same primitive may be added
        several times; the minimum grid sizes decide which placement applies."""
        self._items.append(
            GridItem(
                item=p,
                row=row,
                column=column,
                row_span=row_span,
                col_span=col_span,
                min_grid_height=min_grid_height,
                min_grid_width=min_grid_width,
                focus=focus,
            )
        )
        return self

    def remove_item(self, p: Primitive) -> "Grid":
        """Remove every placement of the given primitive."""
        self._items = [entry for entry in self._items if entry.item is not p]
        return self

    def clear(self) -> "Grid":
        """Remove all items."""
        self._items = []
        return self

    def set_offset(self, rows: int, columns: int) -> "Grid":
        """Set how many rows and columns are skipped at the top left. The
        values may be corrected the next time the grid is drawn."""
        self.row_offset, self.column_offset = rows, columns
        return self

    def offset(self) -> tuple[int, int]:
        return self.row_offset, self.column_offset

    def focus(self, delegate: SetFocus) -> None:
        for entry in self._items:
            if entry.focus:
                delegate(entry.item)
                return
        super().focus(delegate)

    def has_focus(self) -> bool:
        if any(
            entry.visible and entry.item is not None and entry.item.has_focus()
            for entry in self._items
        ):
            return True
        return super().has_focus()

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        x, y, width, height = self.inner_rect()
        screen_width, screen_height = screen.size()

        items = select_items(self._items, width, height)

        rows = max([len(self._rows)] + [entry.row + entry.row_span for entry in items])
        columns = max(
            [len(self._columns)] + [entry.column + entry.col_span for entry in items]
        )
        if rows == 0 or columns == 0:
            return

        row_heights = distribute(
            self._rows, rows, height, self.min_height, self.gap_rows, self.borders
        )
        column_widths = distribute(
            self._columns, columns, width, self.min_width, self.gap_columns, self.borders
        )
        row_pos = positions(row_heights, self.gap_rows, self.borders)
        column_pos = positions(column_widths, self.gap_columns, self.borders)

        focused: Optional[GridItem] = None
        for entry in items:
            pw = sum(column_widths[entry.column : entry.column + entry.col_span])
            ph = sum(row_heights[entry.row : entry.row + entry.row_span])
            if self.borders:
                pw += entry.col_span - 1
                ph += entry.row_span - 1
            else:
                pw += (entry.col_span - 1) * self.gap_columns
                ph += (entry.row_span - 1) * self.gap_rows
            entry.x, entry.y = column_pos[entry.column], row_pos[entry.row]
            entry.w, entry.h = pw, ph
            entry.visible = True
            if entry.item.has_focus():
                focused = entry

        row_step = 1 if self.borders else self.gap_rows
        column_step = 1 if self.borders else self.gap_columns
        offset_y = sum(size + row_step for size in row_heights[: max(self.row_offset, 0)])
        offset_x = sum(
            size + column_step for size in column_widths[: max(self.column_offset, 0)]
        )

        border = 1 if self.borders else 0
        if row_pos[-1] + row_heights[-1] + border - offset_y < height:
            offset_y = row_pos[-1] - height + row_heights[-1] + border
        if column_pos[-1] + column_widths[-1] + border - offset_x < width:
            offset_x = column_pos[-1] - width + column_widths[-1] + border

        if focused is not None:
            if focused.y + focused.h - offset_y >= height:
                offset_y = focused.y - height + focused.h
            if focused.y - offset_y < 0:
                offset_y = focused.y
            if focused.x + focused.w - offset_x >= width:
                offset_x = focused.x - width + focused.w
            if focused.x - offset_x < 0:
                offset_x = focused.x

        self.row_offset = self._clamp_offset(self.row_offset, row_pos, offset_y, height)
        self.column_offset = self._clamp_offset(
            self.column_offset, column_pos, offset_x, width
        )

        border_style = Style(foreground=self.borders_color, background=self.background_color)
        draw_last: list[Primitive] = []
        for entry in items:
            if not entry.visible:
                continue
            entry.x -= offset_x
            entry.y -= offset_y
            if (
                entry.x >= width
                or entry.x + entry.w <= 0
                or entry.y >= height
                or entry.y + entry.h <= 0
            ):
                entry.visible = False
                continue
            entry.w = min(entry.w, width - entry.x)
            entry.h = min(entry.h, height - entry.y)
            if entry.x < 0:
                entry.w += entry.x
                entry.x = 0
            if entry.y < 0:
                entry.h += entry.y
                entry.y = 0
            if entry.w <= 0 or entry.h <= 0:
                entry.visible = False
                continue
            entry.x += x
            entry.y += y
            entry.item.set_rect(entry.x, entry.y, entry.w, entry.h)

            if entry is focused:
                draw_last.append(entry.item)
            else:
                entry.item.draw(screen)

            if self.borders:
                self._draw_border(screen, entry, border_style, screen_width, screen_height)

        for item in draw_last:
            item.draw(screen)

    @staticmethod
    def _clamp_offset(current: int, starts: list[int], offset: int, limit: int) -> int:
        first, last = 0, 0
        for index, pos in enumerate(starts):
            if pos - offset < 0:
                first = index + 1
            if pos - offset < limit:
                last = index
        return min(max(current, first), last)

    @staticmethod
    def _draw_border(
        screen: Screen,
        entry: GridItem,
        style: Style,
        screen_width: int,
        screen_height: int,
    ) -> None:
        def put(bx: int, by: int, ch: str) -> None:
            if 0 <= bx < screen_width and 0 <= by < screen_height:
                print_joined_semigraphics(screen, bx, by, ch, style)

        left, top = entry.x - 1, entry.y - 1
        right, bottom = entry.x + entry.w, entry.y + entry.h
        for bx in range(entry.x, right):
            put(bx, top, boxchars.LIGHT_HORIZONTAL)
            put(bx, bottom, boxchars.LIGHT_HORIZONTAL)
        for by in range(entry.y, bottom):
            put(left, by, boxchars.LIGHT_VERTICAL)
            put(right, by, boxchars.LIGHT_VERTICAL)
        put(left, top, boxchars.LIGHT_DOWN_AND_RIGHT)
        put(right, top, boxchars.LIGHT_DOWN_AND_LEFT)
        put(left, bottom, boxchars.LIGHT_UP_AND_RIGHT)
        put(right, bottom, boxchars.LIGHT_UP_AND_LEFT)

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None
        capture: Optional[Primitive] = None
        for entry in self._items:
            if entry.item is None:
                continue
            consumed, capture = entry.item.handle_mouse(action, event, set_focus)
            if consumed:
                return True, capture
        return False, capture

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        if not self._has_focus:
            for entry in self._items:
                if entry.item is not None and entry.item.has_focus():
                    entry.item.handle_key(event, set_focus)
                    return
            return

        key = event.key
        if key == Key.RUNE:
            rune = event.rune
            if rune == "g":
                self.row_offset, self.column_offset = 0, 0
            elif rune == "G":
                self.row_offset = _MAX_OFFSET
            elif rune == "j":
                self.row_offset += 1
            elif rune == "k":
                self.row_offset -= 1
            elif rune == "h":
                self.column_offset -= 1
            elif rune == "l":
                self.column_offset += 1
        elif key == Key.HOME:
            self.row_offset, self.column_offset = 0, 0
        elif key == Key.END:
            self.row_offset = _MAX_OFFSET
        elif key == Key.UP:
            self.row_offset -= 1
        elif key == Key.DOWN:
            self.row_offset += 1
        elif key == Key.LEFT:
            self.column_offset -= 1
        elif key == Key.RIGHT:
            self.column_offset += 1

    def handle_paste(self, text: str, set_focus: SetFocus) -> None:
        for entry in self._items:
            if entry.item is not None and entry.item.has_focus():
                entry.item.handle_paste(text, set_focus)
                return
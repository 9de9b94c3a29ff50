"""A selectable list drawn on screen, navigable by keyboard and mouse."""

from __future__ import annotations

from typing import Callable, Optional

from .listmodel import ChangedFunc, ListModel
from .primitive import (
    Align,
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    Style,
    print_text,
    text_width,
)


class ListView(ListModel, Primitive):
    """Rows of items, each shown as one line or two (main and secondary text).

    Items are selected with their shortcut key, with Enter or Space on the
    current item, or with a mouse click. Up/Down, Tab/Backtab, Home/End and
    Page Up/Down move the selection; Left/Right scroll horizontally when text
    does not fit.
    """

    def __init__(self) -> None:
        ListModel.__init__(self)
        Primitive.__init__(self)
        self._show_secondary = True
        self._wrap_around = True
        self._selected_focus_only = False
        self._highlight_full_line = False
        self._item_offset = 0
        self._horizontal_offset = 0
        self._overflowing = False
        self._selected: Optional[ChangedFunc] = None
        self._done: Optional[Callable[[], None]] = None
        self.main_text_style = Style(foreground="white")
        self.secondary_text_style = Style(foreground="green")
        self.shortcut_style = Style(foreground="yellow")
        self.selected_style = Style(foreground="black", background="white")

    def set_offset(self, items: int, horizontal: int) -> "ListView":
        """Set how many items are skipped at the top and how many cells of
        item text are skipped on the left. Drawing may correct these."""
        self._item_offset = items
        self._horizontal_offset = horizontal
        return self

    def offset(self) -> tuple[int, int]:
        """Return the vertical item offset and the horizontal cell offset."""
        return self._item_offset, self._horizontal_offset

    def set_selected_func(self, handler: Optional[ChangedFunc]) -> "ListView":
        """Set a handler called with (index, main, secondary, shortcut) when an
        item is selected, in addition to the item's own callback."""
        self._selected = handler
        return self

    def set_done_func(self, handler: Optional[Callable[[], None]]) -> "ListView":
        """Set a handler called when the user presses Escape."""
        self._done = handler
        return self

    def set_wrap_around(self, wrap_around: bool) -> "ListView":
        """Choose whether moving past either end wraps to the other end."""
        self._wrap_around = wrap_around
        return self

    def show_secondary_text(self, show: bool) -> "ListView":
        """Choose whether the secondary texts are shown."""
        self._show_secondary = show
        return self

    def set_highlight_full_line(self, highlight: bool) -> "ListView":
        """Choose whether the selection highlight spans the whole row."""
        self._highlight_full_line = highlight
        return self

    def set_selected_focus_only(self, focus_only: bool) -> "ListView":
        """Choose whether the selection is highlighted only while focused."""
        self._selected_focus_only = focus_only
        return self

    def _select(self, index: int) -> None:
        item = self._items[index]
        if item.selected is not None:
            item.selected()
        if self._selected is not None:
            self._selected(index, item.main_text, item.secondary_text, item.shortcut)

    def _adjust_offset(self) -> None:
        _, _, _, height = self.inner_rect()
        if height == 0:
            return
        if self._current < self._item_offset:
            self._item_offset = self._current
        elif self._show_secondary:
            if 2 * (self._current - self._item_offset) >= height - 1:
                self._item_offset = (2 * self._current + 3 - height) // 2
        elif self._current - self._item_offset >= height:
            self._item_offset = self._current + 1 - height

    def draw(self, screen: Screen) -> None:
        Primitive.draw(self, screen)

        x, y, width, height = self.inner_rect()
        bottom_limit = min(y + height, screen.size()[1])

        show_shortcuts = any(item.shortcut for item in self._items)
        if show_shortcuts:
            x += 4
            width -= 4

        self._horizontal_offset = max(self._horizontal_offset, 0)

        max_width = 0
        overflowing = False
        for index, item in enumerate(self._items):
            if index < self._item_offset:
                continue
            if y >= bottom_limit:
                break

            if show_shortcuts and item.shortcut:
                print_text(
                    screen, f"({item.shortcut})", x - 5, y, 4, Align.RIGHT, self.shortcut_style
                )

            _, end, printed = print_text(
                screen,
                item.main_text,
                x,
                y,
                width,
                Align.LEFT,
                self.main_text_style,
                self._horizontal_offset,
            )
            max_width = max(max_width, printed)
            if end < len(item.main_text):
                overflowing = True

            if index == self._current and (not self._selected_focus_only or self.has_focus()):
                highlight_width = width
                if not self._highlight_full_line:
                    highlight_width = min(text_width(item.main_text), highlight_width)
                main_color = self.main_text_style.foreground
                for bx in range(highlight_width):
                    ch, style = screen.get_content(x + bx, y)
                    new_style = self.selected_style
                    if style.foreground != main_color:
                        new_style = new_style.with_foreground(style.foreground)
                    screen.set_content(x + bx, y, ch, new_style)

            y += 1
            if y >= bottom_limit:
                break

            if self._show_secondary:
                _, end, printed = print_text(
                    screen,
                    item.secondary_text,
                    x,
                    y,
                    width,
                    Align.LEFT,
                    self.secondary_text_style,
                    self._horizontal_offset,
                )
                max_width = max(max_width, printed)
                if end < len(item.secondary_text):
                    overflowing = True
                y += 1

        if self._horizontal_offset > 0 and max_width < width:
            self._horizontal_offset -= width - max_width
            self.draw(screen)
        self._overflowing = overflowing

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        if event.key == Key.ESCAPE:
            if self._done is not None:
                self._done()
            return
        if not self._items:
            return

        previous = self._current
        key = event.key
        if key in (Key.TAB, Key.DOWN):
            self._current += 1
        elif key in (Key.BACKTAB, Key.UP):
            self._current -= 1
        elif key == Key.RIGHT:
            if self._overflowing:
                self._horizontal_offset += 2
            else:
                self._current += 1
        elif key == Key.LEFT:
            if self._horizontal_offset > 0:
                self._horizontal_offset -= 2
            else:
                self._current -= 1
        elif key == Key.HOME:
            self._current = 0
        elif key == Key.END:
            self._current = len(self._items) - 1
        elif key == Key.PGDN:
            _, _, _, height = self.inner_rect()
            self._current = min(self._current + height, len(self._items) - 1)
        elif key == Key.PGUP:
            _, _, _, height = self.inner_rect()
            self._current = max(self._current - height, 0)
        elif key == Key.ENTER:
            if 0 <= self._current < len(self._items):
                self._select(self._current)
        elif key == Key.RUNE:
            ch = event.rune
            found = ch == " "
            if not found:
                for index, item in enumerate(self._items):
                    if ch and item.shortcut == ch:
                        self._current = index
                        found = True
                        break
            if found:
                self._select(self._current)

        if self._current < 0:
            self._current = len(self._items) - 1 if self._wrap_around else 0
        elif self._current >= len(self._items):
            self._current = 0 if self._wrap_around else len(self._items) - 1

        if self._current != previous and self._current < len(self._items):
            self._fire_changed(self._current)
            self._adjust_offset()

    def _index_at_point(self, x: int, y: int) -> int:
        rect_x, rect_y, width, height = self.inner_rect()
        if rect_x < 0 or width <= 0 or y < rect_y or y >= rect_y + height:
            return -1
        index = y - rect_y
        if self._show_secondary:
            index //= 2
        index += self._item_offset
        if index >= len(self._items):
            return -1
        return index

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None

        consumed = False
        if action == MouseAction.LEFT_CLICK:
            set_focus(self)
            index = self._index_at_point(*event.position)
            if index != -1:
                self._select(index)
                if index != self._current:
                    self._fire_changed(index)
                    self._adjust_offset()
                self._current = index
            consumed = True
        elif action == MouseAction.SCROLL_UP:
            if self._item_offset > 0:
                self._item_offset -= 1
            consumed = True
        elif action == MouseAction.SCROLL_DOWN:
            lines = len(self._items) - self._item_offset
            if self._show_secondary:
                lines *= 2
            _, _, _, height = self.inner_rect()
            if lines > height:
                self._item_offset += 1
            consumed = True
        return consumed, None
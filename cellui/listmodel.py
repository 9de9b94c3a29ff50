"""The items of a selectable list and the current selection among them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

ChangedFunc = Callable[[int, str, str, str], None]


@dataclass
class ListItem:
    """One entry of a list.

    ``shortcut`` is a single character that selects the item directly, or an
    empty string for none. ``selected`` is called when the item is selected.
    """

    main_text: str
    secondary_text: str = ""
    shortcut: str = ""
    selected: Optional[Callable[[], None]] = None


class ListModel:
    """An ordered collection of list items with one current item."""

    def __init__(self) -> None:
        self._items: list[ListItem] = []
        self._current = 0
        self._changed: Optional[ChangedFunc] = None

    def __len__(self) -> int:
        return len(self._items)

    def _fire_changed(self, index: int) -> None:
        if self._changed is not None:
            item = self._items[index]
            self._changed(index, item.main_text, item.secondary_text, item.shortcut)

    def _adjust_offset(self) -> None:
        """Hook for views to keep the current item in sight."""

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"list index {index} out of range")

    def set_changed_func(self, handler: Optional[ChangedFunc]) -> "ListModel":
        """Set a handler called with (index, main text, secondary text, shortcut)
        whenever the current item changes."""
        self._changed = handler
        return self

    def set_current_item(self, index: int) -> "ListModel":
        """Select an item. Negative indices count from the back; out-of-range
        indices are clamped. Fires a "changed" event if the selection changes."""
        if index < 0:
            index += len(self._items)
        if index >= len(self._items):
            index = len(self._items) - 1
        if index < 0:
            index = 0

        if index != self._current and self._items:
            self._fire_changed(index)
        self._current = index
        self._adjust_offset()
        return self

    def current_item(self) -> int:
        """Return the index of the current item."""
        return self._current

    def remove_item(self, index: int) -> "ListModel":
        """Remove an item. Negative indices count from the back; out-of-range
        indices are clamped, so an item is always removed from a non-empty
        list. Removing the current item fires a "changed" event unless the
        list becomes empty."""
        if not self._items:
            return self

        if index < 0:
            index += len(self._items)
        if index >= len(self._items):
            index = len(self._items) - 1
        if index < 0:
            index = 0

        del self._items[index]
        if not self._items:
            return self

        previous = self._current
        if self._current > index or self._current == len(self._items):
            self._current -= 1

        if previous == index:
            self._fire_changed(self._current)
        return self

    def add_item(
        self,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        selected: Optional[Callable[[], None]] = None,
    ) -> "ListModel":
        """Append an item to the end of the list."""
        return self.insert_item(-1, main_text, secondary_text, shortcut, selected)

    def insert_item(
        self,
        index: int,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        selected: Optional[Callable[[], None]] = None,
    ) -> "ListModel":
        """Insert an item before position ``index``.

        -1 appends, -2 inserts before the last item, and so on; indices beyond
        either end are clamped. The current item keeps pointing at the same
        entry. Inserting into an empty list fires a "changed" event.
        """
        item = ListItem(main_text, secondary_text, shortcut, selected)

        if index < 0:
            index = len(self._items) + index + 1
        index = min(max(index, 0), len(self._items))

        if index <= self._current < len(self._items):
            self._current += 1

        self._items.insert(index, item)

        if len(self._items) == 1:
            self._fire_changed(0)
        return self

    def item_text(self, index: int) -> tuple[str, str]:
        """Return the main and secondary text of an item."""
        self._check_index(index)
        item = self._items[index]
        return item.main_text, item.secondary_text

    def set_item_text(self, index: int, main: str, secondary: str) -> "ListModel":
        """Replace the main and secondary text of an item."""
        self._check_index(index)
        item = self._items[index]
        item.main_text = main
        item.secondary_text = secondary
        return self

    def find_items(
        self,
        main_search: str,
        secondary_search: str,
        must_contain_both: bool = False,
        ignore_case: bool = False,
    ) -> list[int]:
        """Return the indices, ascending, of items whose texts contain the
        search strings. An empty search string is ignored; if both are empty,
        nothing is found. With ``must_contain_both`` both texts must match."""
        if not main_search and not secondary_search:
            return []

        if ignore_case:
            main_search = main_search.lower()
            secondary_search = secondary_search.lower()

        found = []
        for index, item in enumerate(self._items):
            main_text, secondary_text = item.main_text, item.secondary_text
            if ignore_case:
                main_text = main_text.lower()
                secondary_text = secondary_text.lower()

            main_contained = main_search in main_text
            secondary_contained = secondary_search in secondary_text
            if must_contain_both:
                match = main_contained and secondary_contained
            else:
                match = (bool(main_text) and main_contained) or (
                    bool(secondary_text) and secondary_contained
                )
            if match:
                found.append(index)
        return found

    def clear(self) -> "ListModel":
        """Remove all items."""
        self._items = []
        self._current = 0
        return self
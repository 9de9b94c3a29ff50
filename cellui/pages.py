"""A container of named primitives stacked on top of each other."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .primitive import (
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
)


@dataclass
class _Page:
    name: str
    item: Primitive
    resize: bool
    visible: bool


class Pages(Primitive):
    """Named pages drawn back to front; visibility can be switched freely."""

    def __init__(self) -> None:
        super().__init__()
        self._pages: list[_Page] = []
        self._set_focus: Optional[SetFocus] = None
        self._changed: Optional[Callable[[], None]] = None

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, name: object) -> bool:
        return any(page.name == name for page in self._pages)

    def _find(self, name: str) -> Optional[int]:
        return next(
            (index for index, page in enumerate(self._pages) if page.name == name),
            None,
        )

    def _notify(self) -> None:
        if self._changed is not None:
            self._changed()

    def _refocus(self) -> None:
        if self.has_focus():
            self.focus(self._set_focus)

    def set_changed_func(self, handler: Optional[Callable[[], None]]) -> "Pages":
        """Set a handler called when page visibility or order changes."""
        self._changed = handler
        return self

    def add_page(self, name: str, item: Primitive, resize: bool, visible: bool) -> "Pages":
        """Add a page, replacing any earlier page of the same name."""
        had_focus = self.has_focus()
        index = self._find(name)
        if index is not None:
            del self._pages[index]
        self._pages.append(_Page(name, item, resize, visible))
        self._notify()
        if had_focus:
            self.focus(self._set_focus)
        return self

    def add_and_switch_to_page(self, name: str, item: Primitive, resize: bool) -> "Pages":
        """Add a page and make it the only visible one."""
        self.add_page(name, item, resize, True)
        self.switch_to_page(name)
        return self

    def remove_page(self, name: str) -> "Pages":
        """Remove a page. If no visible page remains, the last one becomes visible."""
        had_focus = self.has_focus()
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            if page.visible:
                self._notify()
                if self._pages and not any(p.visible for p in self._pages[:-1]):
                    self._pages[-1].visible = True
        if had_focus:
            self.focus(self._set_focus)
        return self

    def show_page(self, name: str) -> "Pages":
        """Make a page visible in addition to the others."""
        index = self._find(name)
        if index is not None:
            self._pages[index].visible = True
            self._notify()
        self._refocus()
        return self

    def hide_page(self, name: str) -> "Pages":
        """Make a page invisible."""
        index = self._find(name)
        if index is not None:
            self._pages[index].visible = False
            self._notify()
        self._refocus()
        return self

    def switch_to_page(self, name: str) -> "Pages":
        """Make the named page visible and all others invisible."""
        for page in self._pages:
            page.visible = page.name == name
        self._notify()
        self._refocus()
        return self

    def send_to_front(self, name: str) -> "Pages":
        """Move a page to the end so that it is drawn last."""
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            self._pages.append(page)
            if page.visible:
                self._notify()
        self._refocus()
        return self

    def send_to_back(self, name: str) -> "Pages":
        """Move a page to the start so that it is drawn first."""
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            self._pages.insert(0, page)
            if page.visible:
                self._notify()
        self._refocus()
        return self

    def front_page(self) -> tuple[str, Optional[Primitive]]:
        """Return the name and item of the front-most visible page, or ("", None)."""
        for page in reversed(self._pages):
            if page.visible:
                return page.name, page.item
        return "", None

    def has_focus(self) -> bool:
        if any(page.item.has_focus() for page in self._pages):
            return True
        return super().has_focus()

    def focus(self, delegate: Optional[SetFocus]) -> None:
        if delegate is None:
            return
        self._set_focus = delegate
        _, top = self.front_page()
        if top is not None:
            delegate(top)
        else:
            super().focus(delegate)

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        for page in self._pages:
            if not page.visible:
                continue
            if page.resize:
                page.item.set_rect(*self.inner_rect())
            page.item.draw(screen)

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None
        capture: Optional[Primitive] = None
        for page in reversed(self._pages):
            if not page.visible:
                continue
            consumed, capture = page.item.handle_mouse(action, event, set_focus)
            if consumed:
                return True, capture
        return False, capture

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        for page in self._pages:
            if page.item.has_focus():
                page.item.handle_key(event, set_focus)
                return

    def handle_paste(self, text: str, set_focus: SetFocus) -> None:
        for page in self._pages:
            if page.item.has_focus():
                page.item.handle_paste(text, set_focus)
                return
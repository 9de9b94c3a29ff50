"""Core building blocks: keys, mouse events, styles, an in-memory screen and
the base primitive every widget derives from."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from wcwidth import wcwidth


class Align(enum.IntEnum):
    """Horizontal and vertical alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2
    TOP = 0
    BOTTOM = 2


class Key(enum.Enum):
    """Keys a primitive may receive."""

    RUNE = enum.auto()
    ENTER = enum.auto()
    TAB = enum.auto()
    BACKTAB = enum.auto()
    ESCAPE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PGUP = enum.auto()
    PGDN = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    CTRL_V = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``rune`` holds the character for ``Key.RUNE`` events."""

    key: Key
    rune: str = ""
    alt: bool = False


class MouseAction(enum.Enum):
    """What the mouse did."""

    MOVE = enum.auto()
    LEFT_DOWN = enum.auto()
    LEFT_UP = enum.auto()
    LEFT_CLICK = enum.auto()
    LEFT_DOUBLE_CLICK = enum.auto()
    MIDDLE_DOWN = enum.auto()
    MIDDLE_UP = enum.auto()
    MIDDLE_CLICK = enum.auto()
    RIGHT_DOWN = enum.auto()
    RIGHT_UP = enum.auto()
    RIGHT_CLICK = enum.auto()
    SCROLL_UP = enum.auto()
    SCROLL_DOWN = enum.auto()
    SCROLL_LEFT = enum.auto()
    SCROLL_RIGHT = enum.auto()


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a screen cell."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Style:
    """Foreground and background colours of a cell; ``None`` means default."""

    foreground: Any = None
    background: Any = None

    def with_foreground(self, color: Any) -> "Style":
        return replace(self, foreground=color)

    def with_background(self, color: Any) -> "Style":
        return replace(self, background=color)


class Screen:
    """A grid of cells, each holding a character and a style."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("screen size must not be negative")
        self.width = width
        self.height = height
        self._cells = [[(" ", Style()) for _ in range(width)] for _ in range(height)]

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_content(self, x: int, y: int) -> tuple[str, Style]:
        """Return the character and style at a cell (blank outside the screen)."""
        if not self._inside(x, y):
            return " ", Style()
        return self._cells[y][x]

    def set_content(self, x: int, y: int, ch: str, style: Optional[Style] = None) -> None:
        """Set a cell. Writes outside the screen are ignored."""
        if self._inside(x, y):
            self._cells[y][x] = (ch, style if style is not None else Style())

    def row_text(self, y: int) -> str:
        """Return the characters of one row joined together."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside screen")
        return "".join(ch for ch, _ in self._cells[y])


def _clusters(text: str) -> list[tuple[int, int, str, int]]:
    """Split text into (start, end, characters, cell width) clusters."""
    clusters: list[tuple[int, int, str, int]] = []
    for index, char in enumerate(text):
        width = max(wcwidth(char), 0)
        if width == 0 and clusters:
            start, _, chars, cluster_width = clusters[-1]
            clusters[-1] = (start, index + 1, chars + char, cluster_width)
        else:
            clusters.append((index, index + 1, char, width))
    return clusters


def text_width(text: str) -> int:
    """Return the number of screen cells the text occupies."""
    return sum(cluster[3] for cluster in _clusters(text))


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    width: int,
    align: Align = Align.LEFT,
    style: Optional[Style] = None,
    skip: int = 0,
) -> tuple[int, int, int]:
    """Print text into a row of at most ``width`` cells.

    ``skip`` cells are dropped from the start of the text first. Text that does
    not fit is cut according to the alignment. Returns the start and end
    character indices of the printed part and its width in cells. A style
    without background keeps the background already on screen.
    """
    if style is None:
        style = Style()
    if width <= 0 or not text:
        return 0, 0, 0

    clusters = _clusters(text)
    first = 0
    skipped = 0
    while first < len(clusters) and skipped < skip and skipped + clusters[first][3] <= skip:
        skipped += clusters[first][3]
        first += 1

    visible = deque(clusters[first:])
    total = sum(cluster[3] for cluster in visible)
    drop_right = True
    while total > width and visible:
        if align == Align.LEFT or (align == Align.CENTER and drop_right):
            total -= visible.pop()[3]
        else:
            total -= visible.popleft()[3]
        drop_right = not drop_right

    if visible:
        start, end = visible[0][0], visible[-1][1]
    else:
        start = clusters[first][0] if first < len(clusters) else len(text)
        end = start

    if align == Align.RIGHT:
        cx = x + width - total
    elif align == Align.CENTER:
        cx = x + (width - total) // 2
    else:
        cx = x

    for _, _, chars, cluster_width in visible:
        cell_style = style
        if style.background is None:
            cell_style = replace(style, background=screen.get_content(cx, y)[1].background)
        screen.set_content(cx, y, chars, cell_style)
        for extra in range(1, cluster_width):
            screen.set_content(cx + extra, y, "", cell_style)
        cx += cluster_width

    return start, end, total


SetFocus = Callable[["Primitive"], None]


class Primitive:
    """A rectangular area on screen that can draw itself and take focus."""

    def __init__(self) -> None:
        self.x, self.y, self.width, self.height = 0, 0, 15, 10
        self.padding_top = 0
        self.padding_bottom = 0
        self.padding_left = 0
        self.padding_right = 0
        self.background_color: Any = None
        self.transparent = False
        self._has_focus = False

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.x, self.y, self.width, self.height = x, y, width, height

    def rect(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height

    def inner_rect(self) -> tuple[int, int, int, int]:
        """Return the area inside the padding; sizes never go below zero."""
        width = max(self.width - self.padding_left - self.padding_right, 0)
        height = max(self.height - self.padding_top - self.padding_bottom, 0)
        return self.x + self.padding_left, self.y + self.padding_top, width, height

    def set_border_padding(self, top: int, bottom: int, left: int, right: int) -> "Primitive":
        self.padding_top, self.padding_bottom = top, bottom
        self.padding_left, self.padding_right = left, right
        return self

    def set_background_color(self, color: Any) -> "Primitive":
        self.background_color = color
        return self

    def in_rect(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def focus(self, delegate: SetFocus) -> None:
        self._has_focus = True

    def blur(self) -> None:
        self._has_focus = False

    def has_focus(self) -> bool:
        return self._has_focus

    def draw(self, screen: Screen) -> None:
        """Clear the primitive's area with its background unless transparent."""
        if self.transparent or self.width <= 0 or self.height <= 0:
            return
        style = Style(background=self.background_color)
        for row in range(self.y, self.y + self.height):
            for col in range(self.x, self.x + self.width):
                screen.set_content(col, row, " ", style)

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        """A plain primitive ignores keys."""
        return None

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional["Primitive"]]:
        """Take focus on a left press inside the area."""
        if action == MouseAction.LEFT_DOWN and self.in_rect(*event.position):
            set_focus(self)
            return True, None
        return False, None

    def handle_paste(self, text: str, set_focus: SetFocus) -> None:
        """A plain primitive ignores pasted text."""
        return None
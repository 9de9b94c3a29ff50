# cellui

Layout containers and widgets for character-cell terminal interfaces. Everything
draws into an in-memory `Screen` of cells, so layouts can be computed, rendered
and inspected without a real terminal.

## Modules

- `cellui.primitive`: the `Primitive` base class (position, inner rectangle,
  border padding, background colour, focus), the `Screen` cell buffer,
  `Style`, `Align`, `Key`, `KeyEvent`, `MouseAction`, `MouseEvent`, plus
  `text_width` and `print_text`.
- `cellui.boxchars`: the light box-drawing characters and `lookup_joint`,
  which returns the character joining two of them (in either order) or `None`.
- `cellui.semigraphics`: `join_semigraphics` and `print_joined_semigraphics`,
  so that crossing borders become `┼`, `├`, `┬` and so on.
- `cellui.frame`: `Frame` puts space around another primitive and shows header
  and footer text lines.
- `cellui.pages`: `Pages` stacks named primitives on top of one another and
  switches which are visible; `len(pages)` and `"name" in pages` work.
- `cellui.gridlayout`: the arithmetic behind grids: `GridItem`,
  `select_items`, `distribute` and `positions`.
- `cellui.grid`: `Grid` lays primitives out in rows and columns with absolute
  or proportional sizes, gaps, optional borders, minimum sizes, size-dependent
  placements and scrolling offsets.
- `cellui.listmodel`: `ListModel` and `ListItem`, the items of a list and the
  current selection, with insertion, removal, search and change notification.
- `cellui.listview`: `ListView`, a `ListModel` that draws itself and reacts to
  keys (arrows, Tab/Backtab, Home/End, Page Up/Down, Enter, Space, shortcuts,
  Escape) and to mouse clicks and scrolling.

## Installation

```
pip install cellui
```

## Example

```python
from cellui.primitive import Align, Screen
from cellui.frame import Frame
from cellui.grid import Grid
from cellui.listview import ListView

menu = ListView()
menu.add_item("Open", "Open a file", "o", None)
menu.add_item("Quit", "Leave the program", "q", None)

grid = Grid()
grid.set_rows(3, 0)
grid.set_columns(20, 0)
grid.set_borders(True)
grid.add_item(Frame(None).add_text("Header", True, Align.CENTER, "white"),
              0, 0, 1, 2, 0, 0, False)
grid.add_item(menu, 1, 0, 1, 1, 0, 0, True)

screen = Screen(60, 20)
grid.set_rect(0, 0, 60, 20)
grid.draw(screen)
for row in range(screen.size()[1]):
    print(screen.row_text(row))
```

Keyboard input is delivered with `handle_key(event, set_focus)`, mouse input
with `handle_mouse(action, event, set_focus)` and pasted text with
`handle_paste(text, set_focus)`. `set_focus` is a callable receiving the
primitive that should get the focus next.

## What is not included

`cellui` only lays out and draws into its own `Screen` buffer. It does not
talk to a real terminal, read keyboard or mouse input, or run an event loop;
you feed it `KeyEvent` and `MouseEvent` values and copy the `Screen` contents
out yourself. Nor does it offer input fields, forms, buttons, images or modal
dialogs: the widgets are `Frame`, `Pages`, `Grid` and `ListView`.

## Running the tests

```
pip install -e ".[test]"
pytest
```
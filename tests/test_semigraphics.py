import pytest

from cellui import boxchars
from cellui.primitive import Screen, Style
from cellui.semigraphics import join_semigraphics, print_joined_semigraphics


def test_same_character_stays():
    assert join_semigraphics(boxchars.LIGHT_VERTICAL, boxchars.LIGHT_VERTICAL) == boxchars.LIGHT_VERTICAL


def test_horizontal_and_vertical_cross():
    assert (
        join_semigraphics(boxchars.LIGHT_HORIZONTAL, boxchars.LIGHT_VERTICAL)
        == boxchars.LIGHT_VERTICAL_AND_HORIZONTAL
    )


@pytest.mark.parametrize(
    "a,b",
    [
        (boxchars.LIGHT_HORIZONTAL, boxchars.LIGHT_DOWN_AND_RIGHT),
        (boxchars.LIGHT_VERTICAL, boxchars.LIGHT_UP_AND_LEFT),
        (boxchars.LIGHT_DOWN_AND_HORIZONTAL, boxchars.LIGHT_UP_AND_HORIZONTAL),
    ],
)
def test_join_is_order_independent(a, b):
    assert join_semigraphics(a, b) == join_semigraphics(b, a)


def test_corners_join_to_tee():
    assert (
        join_semigraphics(boxchars.LIGHT_DOWN_AND_RIGHT, boxchars.LIGHT_DOWN_AND_LEFT)
        == boxchars.LIGHT_DOWN_AND_HORIZONTAL
    )


def test_unknown_pair_resolves_to_higher_code_point():
    assert join_semigraphics(" ", boxchars.LIGHT_HORIZONTAL) == boxchars.LIGHT_HORIZONTAL
    assert join_semigraphics("\u2588", boxchars.LIGHT_HORIZONTAL) == "\u2588"


def test_print_joins_with_existing_content():
    screen = Screen(3, 3)
    style = Style(foreground="red")
    print_joined_semigraphics(screen, 1, 1, boxchars.LIGHT_HORIZONTAL, style)
    print_joined_semigraphics(screen, 1, 1, boxchars.LIGHT_VERTICAL, style)
    ch, cell_style = screen.get_content(1, 1)
    assert ch == boxchars.LIGHT_VERTICAL_AND_HORIZONTAL
    assert cell_style == style


def test_print_on_blank_cell_places_character():
    screen = Screen(2, 1)
    print_joined_semigraphics(screen, 0, 0, boxchars.LIGHT_VERTICAL)
    assert screen.row_text(0) == boxchars.LIGHT_VERTICAL + " "
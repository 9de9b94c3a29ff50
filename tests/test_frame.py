from cellui.primitive import Align, Key, KeyEvent, MouseAction, MouseEvent, Primitive, Screen
from cellui.frame import Frame


class Recorder(Primitive):
    def __init__(self, consume_mouse=False):
        super().__init__()
        self.drawn = 0
        self.keys = []
        self.pastes = []
        self.consume_mouse = consume_mouse

    def draw(self, screen):
        self.drawn += 1

    def handle_key(self, event, set_focus):
        self.keys.append(event)

    def handle_paste(self, text, set_focus):
        self.pastes.append(text)

    def handle_mouse(self, action, event, set_focus):
        if self.consume_mouse:
            return True, self
        return False, None


def _setup(width=20, height=10):
    child = Recorder()
    frame = Frame(child)
    frame.set_rect(0, 0, width, height)
    return frame, child, Screen(width, height)


def test_without_text_child_fills_inside_borders():
    frame, child, screen = _setup()
    frame.draw(screen)
    assert child.drawn == 1
    assert child.rect() == (
        frame.left,
        frame.top,
        20 - frame.left - frame.right,
        10 - frame.top - frame.bottom,
    )


def test_header_text_printed_and_child_moves_down():
    frame, child, screen = _setup()
    frame.add_text("Hi", True, Align.LEFT, "white")
    frame.draw(screen)
    assert screen.row_text(frame.top)[frame.left:frame.left + 2] == "Hi"
    assert child.rect()[1] == frame.top + 1 + frame.header


def test_footer_text_printed_and_child_shrinks():
    frame, child, screen = _setup()
    frame.add_text("Bye", False, Align.RIGHT, "white")
    frame.draw(screen)
    footer_row = 10 - 1 - frame.bottom
    assert screen.row_text(footer_row).rstrip().endswith("Bye")
    x, y, w, h = child.rect()
    assert y + h - 1 == footer_row - 1 - frame.footer


def test_too_many_header_lines_are_dropped():
    frame, child, screen = _setup(20, 6)
    for n in range(10):
        frame.add_text(f"L{n}", True, Align.LEFT, None)
    frame.draw(screen)
    rows = [screen.row_text(y) for y in range(6)]
    assert not any("L9" in row for row in rows)
    assert "L0" in rows[frame.top]


def test_no_space_draws_nothing():
    frame, child, screen = _setup(2, 10)
    before = child.rect()
    frame.draw(screen)
    assert child.drawn == 0
    assert child.rect() == before


def test_clear_removes_text():
    frame, child, screen = _setup()
    frame.add_text("Gone", True, Align.CENTER, None).clear()
    frame.draw(screen)
    assert all("Gone" not in screen.row_text(y) for y in range(10))


def test_focus_delegates_to_child():
    frame, child, _ = _setup()
    focused = []
    frame.focus(focused.append)
    assert focused == [child]


def test_focus_without_child_focuses_frame():
    frame = Frame(None)
    frame.focus(lambda p: None)
    assert frame.has_focus() is True


def test_has_focus_follows_child():
    frame, child, _ = _setup()
    assert frame.has_focus() is False
    child.focus(lambda p: None)
    assert frame.has_focus() is True


def test_set_primitive_restores_focus():
    frame, child, _ = _setup()
    focused = []

    def delegate(p):
        focused.append(p)
        p.focus(delegate)

    frame.focus(delegate)
    replacement = Recorder()
    frame.set_primitive(replacement)
    assert focused[-1] is replacement
    assert frame.primitive is replacement


def test_mouse_outside_is_ignored():
    frame, _, _ = _setup()
    assert frame.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(50, 50), lambda p: None) == (False, None)


def test_mouse_consumed_by_child():
    child = Recorder(consume_mouse=True)
    frame = Frame(child)
    frame.set_rect(0, 0, 20, 10)
    assert frame.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(5, 5), lambda p: None) == (True, child)


def test_mouse_click_on_frame_takes_focus():
    frame, _, _ = _setup()
    focused = []
    consumed, _ = frame.handle_mouse(MouseAction.LEFT_DOWN, MouseEvent(0, 0), focused.append)
    assert consumed is True
    assert focused == [frame]


def test_keys_and_paste_forwarded():
    frame, child, _ = _setup()
    event = KeyEvent(Key.RUNE, "a")
    frame.handle_key(event, lambda p: None)
    frame.handle_paste("text", lambda p: None)
    assert child.keys == [event]
    assert child.pastes == ["text"]
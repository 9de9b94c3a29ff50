import pytest

from cellui.listmodel import ListItem, ListModel


def make(*names):
    model = ListModel()
    for name in names:
        model.add_item(name, name + "-sub")
    return model


def texts(model):
    return [model.item_text(index)[0] for index in range(len(model))]


def test_add_and_read_back():
    model = make("alpha", "beta")
    assert len(model) == 2
    assert model.item_text(1) == ("beta", "beta-sub")
    assert model.current_item() == 0


def test_first_insert_fires_changed():
    events = []
    model = ListModel().set_changed_func(lambda *args: events.append(args))
    model.add_item("one", "first", "o")
    model.add_item("two")
    assert events == [(0, "one", "first", "o")]


def test_insert_before_current_keeps_selection():
    model = make("a", "b")
    model.set_current_item(1)
    model.insert_item(0, "z")
    assert texts(model) == ["z", "a", "b"]
    assert model.item_text(model.current_item())[0] == "b"


def test_negative_insert_indices():
    model = make("a", "b")
    model.insert_item(-1, "end")
    model.insert_item(-2, "before-end")
    model.insert_item(-100, "start")
    model.insert_item(100, "tail")
    assert texts(model) == ["start", "a", "b", "before-end", "end", "tail"]


def test_set_current_item_from_back_and_clamped():
    model = make("a", "b", "c")
    model.set_current_item(-1)
    assert model.current_item() == 2
    model.set_current_item(50)
    assert model.current_item() == 2
    model.set_current_item(-50)
    assert model.current_item() == 0


def test_set_current_item_fires_only_on_change():
    events = []
    model = make("a", "b")
    model.set_changed_func(lambda *args: events.append(args[0]))
    model.set_current_item(0)
    model.set_current_item(1)
    model.set_current_item(1)
    assert events == [1]


def test_set_current_item_on_empty_list():
    model = ListModel()
    model.set_current_item(3)
    assert model.current_item() == 0


def test_remove_before_current_shifts_selection():
    model = make("a", "b", "c")
    model.set_current_item(2)
    model.remove_item(0)
    assert texts(model) == ["b", "c"]
    assert model.item_text(model.current_item())[0] == "c"


def test_remove_current_fires_changed():
    events = []
    model = make("a", "b", "c")
    model.set_current_item(1)
    model.set_changed_func(lambda *args: events.append(args[:2]))
    model.remove_item(1)
    assert events == [(1, "c")]
    assert model.current_item() == 1


def test_remove_last_current_moves_back():
    model = make("a", "b", "c")
    model.set_current_item(2)
    model.remove_item(-1)
    assert texts(model) == ["a", "b"]
    assert model.current_item() == len(model) - 1


def test_remove_clamps_and_empty_is_noop():
    model = make("a", "b")
    model.remove_item(99)
    assert texts(model) == ["a"]
    model.remove_item(-99)
    assert len(model) == 0
    model.remove_item(0)
    assert len(model) == 0


def test_set_item_text_round_trip():
    model = make("a")
    model.set_item_text(0, "new", "sub")
    assert model.item_text(0) == ("new", "sub")


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_item_text_out_of_range(index):
    model = make("a")
    with pytest.raises(IndexError):
        model.item_text(index)
    with pytest.raises(IndexError):
        model.set_item_text(index, "x", "y")


def test_find_items_either_text():
    model = ListModel()
    model.add_item("Apple", "fruit")
    model.add_item("Carrot", "vegetable")
    model.add_item("apricot", "")
    assert model.find_items("ap", "", False, False) == [2]
    assert model.find_items("ap", "", False, True) == [0, 2]
    assert model.find_items("", "veg", False, False) == [1]


def test_find_items_both_required():
    model = ListModel()
    model.add_item("Apple", "fruit")
    model.add_item("Apple pie", "dessert")
    assert model.find_items("Apple", "fruit", True, False) == [0]
    assert model.find_items("Apple", "", True, False) == [0, 1]


def test_find_items_empty_search_finds_nothing():
    model = make("a", "b")
    assert model.find_items("", "", False, False) == []


def test_empty_texts_do_not_match_without_both():
    model = ListModel()
    model.add_item("", "")
    assert model.find_items("x", "", False, False) == []


def test_clear_resets():
    model = make("a", "b")
    model.set_current_item(1)
    model.clear()
    assert len(model) == 0
    assert model.current_item() == 0


def test_list_item_defaults():
    item = ListItem("main")
    assert (item.secondary_text, item.shortcut, item.selected) == ("", "", None)
import pytest

from sklepik.shopping import ListItem, ShoppingList, format_item


def test_format_item_layout():
    assert format_item("Mleko", 2, 3.5) == "Mleko   ilość: 2   cena: 3.50 zł"


def test_add_appends_unchecked_item():
    shopping = ShoppingList()
    item = shopping.add("Chleb", 1, 6.0)
    assert item == ListItem(format_item("Chleb", 1, 6.0), False)
    assert list(shopping) == [item]
    assert len(shopping) == 1


def test_add_with_empty_name_is_ignored():
    shopping = ShoppingList()
    assert shopping.add("", 3, 1.0) is None
    assert len(shopping) == 0


def test_remove_checked_keeps_unchecked_in_order():
    shopping = ShoppingList()
    for name in ("a", "b", "c", "d"):
        shopping.add(name, 1, 1.0)
    shopping.set_checked(1)
    shopping.set_checked(3)
    removed = shopping.remove_checked()
    assert [i.text for i in removed] == [format_item("b", 1, 1.0), format_item("d", 1, 1.0)]
    assert [i.text for i in shopping] == [format_item("a", 1, 1.0), format_item("c", 1, 1.0)]


def test_unchecking_prevents_removal():
    shopping = ShoppingList()
    shopping.add("a", 1, 1.0)
    shopping.set_checked(0)
    shopping.set_checked(0, False)
    assert shopping.remove_checked() == []
    assert len(shopping) == 1


def test_save_load_round_trip(tmp_path):
    shopping = ShoppingList()
    shopping.add("Żelatyna", 2, 3.0)
    shopping.add("Kiwi", 1, 8.0)
    shopping.set_checked(0)
    path = tmp_path / "lista.txt"
    shopping.save(path)

    loaded = ShoppingList()
    loaded.load(path)
    assert [i.text for i in loaded] == [i.text for i in shopping]
    assert all(not i.checked for i in loaded)


def test_load_skips_blank_lines_and_replaces(tmp_path):
    path = tmp_path / "lista.txt"
    path.write_text("a\n\n   \nb\n", encoding="utf-8")
    shopping = ShoppingList()
    shopping.add("old", 1, 1.0)
    shopping.load(path)
    assert [i.text for i in shopping] == ["a", "b"]


def test_load_missing_file_keeps_list(tmp_path):
    shopping = ShoppingList()
    shopping.add("keep", 1, 1.0)
    with pytest.raises(FileNotFoundError):
        shopping.load(tmp_path / "missing.txt")
    assert [i.text for i in shopping] == [format_item("keep", 1, 1.0)]


def test_save_into_missing_directory_fails(tmp_path):
    with pytest.raises(OSError):
        ShoppingList().save(tmp_path / "nope" / "lista.txt")
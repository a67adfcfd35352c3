import tkinter

import pytest

from sklepik.gui import apply_theme, main, theme_colors


class FakeWidget:
    """Records configuration; rejects options its class does not know."""

    def __init__(self, cls, children=(), known=None):
        self.cls = cls
        self.children = list(children)
        self.known = known
        self.config = {}
        self.options = []

    def winfo_class(self):
        return self.cls

    def winfo_children(self):
        return self.children

    def configure(self, **options):
        for name, value in options.items():
            if self.known is not None and name not in self.known:
                raise tkinter.TclError(f'unknown option "-{name}"')
            self.config[name] = value

    def option_add(self, pattern, value):
        self.options.append((pattern, value))


def _tree():
    listbox = FakeWidget("Listbox")
    button = FakeWidget("Button")
    frame = FakeWidget("Frame", [button], known={"background"})
    label = FakeWidget("Label")
    root = FakeWidget("Tk", [frame, listbox, label], known={"background"})
    return root, frame, listbox, button, label


def test_dark_palette_matches_stylesheet():
    colors = theme_colors(True)
    assert colors["background"] == "#2d2d2d"
    assert colors["foreground"] == "#ffffff"
    assert colors["field_background"] == "#444"
    assert colors["field_foreground"] == "#fff"
    assert colors["active_background"] == "#666"


def test_light_palette_has_same_keys_and_differs():
    light, dark = theme_colors(False), theme_colors(True)
    assert set(light) == set(dark)
    assert light["background"] != dark["background"]
    assert light["field_background"] != dark["field_background"]


def test_apply_dark_registers_option_defaults():
    root, *_ = _tree()
    apply_theme(root, True)
    options = dict(root.options)
    assert options["*Background"] == "#2d2d2d"
    assert options["*Listbox.Background"] == "#444"
    assert options["*Button.activeBackground"] == "#666"


def test_apply_dark_restyles_existing_widgets():
    root, frame, listbox, button, label = _tree()
    apply_theme(root, True)
    assert root.config == {"background": "#2d2d2d"}
    assert frame.config == {"background": "#2d2d2d"}
    assert listbox.config["background"] == "#444"
    assert listbox.config["foreground"] == "#fff"
    assert button.config["background"] == "#444"
    assert button.config["activebackground"] == "#666"
    assert label.config["foreground"] == "#ffffff"


def test_switching_back_to_light_restores_palette():
    root, frame, listbox, button, label = _tree()
    apply_theme(root, True)
    apply_theme(root, False)
    light = theme_colors(False)
    assert frame.config["background"] == light["background"]
    assert listbox.config["background"] == light["field_background"]
    assert button.config["activebackground"] == light["active_background"]
    assert dict(root.options)["*Background"] != "#2d2d2d"


def test_later_option_wins_after_toggle():
    root, *_ = _tree()
    apply_theme(root, True)
    apply_theme(root, False)
    last = [value for pattern, value in root.options if pattern == "*Background"][-1]
    assert last == theme_colors(False)["background"]


def test_main_help_exits_before_opening_window(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "sklepik" in capsys.readouterr().out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
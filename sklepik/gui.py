"""Tkinter windows for the shop: main menu, shopping list and store."""

from __future__ import annotations

import argparse
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from typing import Any, Sequence

from sklepik.shopping import ShoppingList
from sklepik.store import Cart, EmptyCartError, Store, write_receipt

_TEXT_FILETYPES = [("Pliki tekstowe", "*.txt"), ("Wszystkie pliki", "*")]
_FIELD_CLASSES = frozenset({"Entry", "Spinbox", "Listbox", "Button"})
_SORT_LABELS = ("Nazwa A–Z", "Nazwa Z–A", "Cena rosnąco", "Cena malejąco")


def theme_colors(dark: bool) -> dict[str, str]:
    """Return the colour palette for the dark or the light theme."""
    if dark:
        return {
            "background": "#2d2d2d",
            "foreground": "#ffffff",
            "field_background": "#444",
            "field_foreground": "#fff",
            "active_background": "#666",
        }
    return {
        "background": "#f0f0f0",
        "foreground": "#000000",
        "field_background": "#ffffff",
        "field_foreground": "#000000",
        "active_background": "#e0e0e0",
    }


def _restyle(widget: Any, colors: dict[str, str]) -> None:
    field = widget.winfo_class() in _FIELD_CLASSES
    prefix = "field_" if field else ""
    for option, key in (
        ("background", prefix + "background"),
        ("foreground", prefix + "foreground"),
        ("activebackground", "active_background"),
    ):
        try:
            widget.configure(**{option: colors[key]})
        except tk.TclError:
            pass
    for child in widget.winfo_children():
        _restyle(child, colors)


def apply_theme(root: Any, dark: bool) -> None:
    """Apply the theme to every existing widget and to widgets created later."""
    colors = theme_colors(dark)
    root.option_add("*Background", colors["background"])
    root.option_add("*Foreground", colors["foreground"])
    for cls in _FIELD_CLASSES:
        root.option_add(f"*{cls}.Background", colors["field_background"])
        root.option_add(f"*{cls}.Foreground", colors["field_foreground"])
    root.option_add("*Button.activeBackground", colors["active_background"])
    _restyle(root, colors)


def _read_number(spinbox: tk.Spinbox, kind: type, low: float, high: float) -> Any:
    try:
        value = kind(spinbox.get())
    except ValueError:
        value = kind(low)
    return kind(min(max(value, low), high))


def _ask_choice(parent: tk.Misc, title: str, text: str, accept: str, reject: str) -> bool:
    """Show a modal dialog with two buttons; True when accept was pressed."""
    dialog = tk.Toplevel(parent)
    dialog.title(title)
    dialog.transient(parent)
    result = tk.BooleanVar(dialog, False)

    def choose(value: bool) -> None:
        result.set(value)
        dialog.destroy()

    tk.Label(dialog, text=text, justify="left").pack(padx=16, pady=12)
    for label, value in ((accept, True), (reject, False)):
        tk.Button(dialog, text=label, command=lambda v=value: choose(v)).pack(
            side="left", expand=True, padx=4, pady=(0, 12)
        )
    dialog.protocol("WM_DELETE_WINDOW", lambda: choose(False))
    dialog.grab_set()
    chosen = [False]
    result.trace_add("write", lambda *_: chosen.__setitem__(0, result.get()))
    parent.wait_window(dialog)
    return chosen[0]


def _show(window: tk.Toplevel) -> None:
    window.deiconify()
    window.lift()
    window.focus_force()


def _synced(listbox: tk.Listbox, model: Any) -> None:
    chosen = set(listbox.curselection())
    for index in range(len(model)):
        model.set_checked(index, index in chosen)


class StoreWindow(tk.Toplevel):
    """Product catalogue with sorting, a cart and receipt printing."""

    def __init__(self, master: tk.Misc | None = None) -> None:
        super().__init__(master)
        self.title("Sklep")
        self.store = Store()
        box = ttk.Combobox(self, values=_SORT_LABELS, state="readonly")
        box.current(0)
        box.bind("<<ComboboxSelected>>", lambda _e: self.sort(box.current()))
        box.pack(fill="x", padx=8, pady=(8, 4))
        self._listbox = tk.Listbox(self, selectmode=tk.MULTIPLE, width=50, height=20)
        self._listbox.pack(fill="both", expand=True, padx=8, pady=4)
        tk.Button(self, text="Dodaj do koszyka", command=self.add_to_cart).pack(
            fill="x", padx=8, pady=(4, 8)
        )
        self._refresh()

    def _refresh(self) -> None:
        self._listbox.delete(0, tk.END)
        self._listbox.insert(tk.END, *(p.text for p in self.store))

    def add_to_cart(self) -> None:
        """Total the chosen products and offer to pay for them."""
        _synced(self._listbox, self.store)
        try:
            cart = self.store.checkout()
        except EmptyCartError as error:
            messagebox.showinfo("Koszyk pusty", str(error), parent=self)
            return
        if _ask_choice(self, "Koszyk", cart.summary, "Zapłać", "Powrót"):
            self.pay(cart)

    def pay(self, cart: Cart) -> None:
        """Ask where to store the receipt and write it there."""
        path = filedialog.asksaveasfilename(
            parent=self,
            title="Zapisz paragon",
            initialdir=str(Path.home()),
            initialfile="paragon.txt",
            filetypes=[("Pliki tekstowe", "*.txt")],
        )
        if not path:
            return
        try:
            write_receipt(path, cart.items, cart.total)
        except OSError:
            messagebox.showwarning("Błąd", "Nie udało się zapisać paragonu.", parent=self)
            return
        messagebox.showinfo("Paragon zapisany", "Paragon został zapisany pomyślnie.", parent=self)

    def sort(self, index: int) -> None:
        """Reorder the catalogue by the selector's index and clear the selection."""
        self.store.sort(index)
        self._refresh()


class ShoppingListWindow(tk.Toplevel):
    """Editable shopping list that can be saved to and loaded from text files."""

    def __init__(self, master: tk.Misc | None = None) -> None:
        super().__init__(master)
        self.title("Lista zakupów")
        self.shopping = ShoppingList()
        form = tk.Frame(self)
        form.pack(fill="x", padx=8, pady=(8, 4))
        form.columnconfigure(1, weight=1)
        self._name = tk.Entry(form)
        self._quantity = tk.Spinbox(form, from_=0, to=99, increment=1)
        self._price = tk.Spinbox(form, from_=0, to=99.99, increment=0.01, format="%.2f")
        for row, (label, field) in enumerate(
            (("Nazwa", self._name), ("Ilość", self._quantity), ("Cena", self._price))
        ):
            tk.Label(form, text=label).grid(row=row, column=0, sticky="w")
            field.grid(row=row, column=1, sticky="ew")
        self._listbox = tk.Listbox(self, selectmode=tk.MULTIPLE, width=50, height=15)
        self._listbox.pack(fill="both", expand=True, padx=8, pady=4)
        buttons = tk.Frame(self)
        buttons.pack(fill="x", padx=8, pady=(4, 8))
        for label, command in (
            ("Dodaj", self.add),
            ("Usuń", self.delete),
            ("Zapisz", self.save),
            ("Wczytaj", self.load),
            ("Sklep", self.open_store),
        ):
            tk.Button(buttons, text=label, command=command).pack(
                side="left", expand=True, fill="x"
            )

    def _refresh(self) -> None:
        self._listbox.delete(0, tk.END)
        for item in self.shopping:
            self._listbox.insert(tk.END, item.text)
            if item.checked:
                self._listbox.selection_set(tk.END)

    def add(self) -> None:
        """Add the product described by the form to the list."""
        _synced(self._listbox, self.shopping)
        quantity = _read_number(self._quantity, int, 0, 99)
        price = _read_number(self._price, float, 0.0, 99.99)
        if self.shopping.add(self._name.get(), quantity, price) is not None:
            self._refresh()

    def delete(self) -> None:
        """Remove every selected item."""
        _synced(self._listbox, self.shopping)
        self.shopping.remove_checked()
        self._refresh()

    def save(self) -> None:
        """Ask for a file and write the list to it."""
        path = filedialog.asksaveasfilename(
            parent=self, title="Zapisz listę zakupów",
            initialdir=str(Path.home()), filetypes=_TEXT_FILETYPES,
        )
        if not path:
            return
        try:
            self.shopping.save(path)
        except OSError:
            messagebox.showwarning("Błąd", "Nie udało się zapisać pliku.", parent=self)
            return
        messagebox.showinfo("Zapisano", "Lista została zapisana.", parent=self)

    def load(self) -> None:
        """Ask for a file and replace the list with its contents."""
        path = filedialog.askopenfilename(
            parent=self, title="Wczytaj listę zakupów",
            initialdir=str(Path.home()), filetypes=_TEXT_FILETYPES,
        )
        if not path:
            return
        try:
            self.shopping.load(path)
        except (OSError, UnicodeDecodeError):
            messagebox.showwarning("Błąd", "Nie udało się otworzyć pliku.", parent=self)
            return
        self._refresh()
        messagebox.showinfo("Wczytano", "Lista została załadowana.", parent=self)

    def open_store(self) -> StoreWindow:
        """Open a new store window."""
        return StoreWindow(self)


class MainWindow:
    """Start menu leading to the shopping list and the store."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self._windows: dict[type, tk.Toplevel] = {}
        self._dark = tk.BooleanVar(master=root, value=False)
        tk.Button(root, text="Lista zakupów", command=self.open_shopping_list).pack(
            fill="x", padx=16, pady=(16, 4)
        )
        tk.Button(root, text="Sklep", command=self.open_store).pack(fill="x", padx=16, pady=4)
        tk.Checkbutton(
            root, text="Tryb ciemny", variable=self._dark,
            command=lambda: self.set_dark_mode(self._dark.get()),
        ).pack(padx=16, pady=(4, 16))

    def _open(self, kind: type) -> Any:
        window = self._windows.get(kind)
        if window is None or not window.winfo_exists():
            window = self._windows[kind] = kind(self.root)
            window.protocol("WM_DELETE_WINDOW", window.withdraw)
        _show(window)
        return window

    def open_shopping_list(self) -> ShoppingListWindow:
        """Show the shopping list, creating it on first use."""
        return self._open(ShoppingListWindow)

    def open_store(self) -> StoreWindow:
        """Show the store, creating it on first use."""
        return self._open(StoreWindow)

    def set_dark_mode(self, enabled: bool) -> None:
        """Switch the whole application between dark and light colours."""
        self._dark.set(bool(enabled))
        apply_theme(self.root, bool(enabled))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the application and run until its main window is closed."""
    argparse.ArgumentParser(prog="sklepik", description="Sklepik").parse_args(argv)
    root = tk.Tk()
    root.title("Sklepik")
    MainWindow(root)
    root.mainloop()
    return 0
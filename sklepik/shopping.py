"""Shopping list with checkable items, saved as plain text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


def format_item(name: str, quantity: int, price: float) -> str:
    """Render a shopping-list line for a product."""
    return f"{name}   ilość: {quantity}   cena: {price:.2f} zł"


@dataclass
class ListItem:
    """One line of the shopping list and whether it is ticked."""

    text: str
    checked: bool = False


class ShoppingList:
    """An ordered list of shopping items."""

    def __init__(self) -> None:
        self._items: list[ListItem] = []

    def __iter__(self) -> Iterator[ListItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, name: str, quantity: int, price: float) -> ListItem | None:
        """Append a product; an empty name is ignored and None is returned."""
        if not name:
            return None
        item = ListItem(format_item(name, quantity, price))
        self._items.append(item)
        return item

    def set_checked(self, index: int, checked: bool = True) -> None:
        """Tick or untick the item at index."""
        self._items[index].checked = bool(checked)

    def remove_checked(self) -> list[ListItem]:
        """Remove all ticked items and return them in their former order."""
        removed = [item for item in self._items if item.checked]
        self._items = [item for item in self._items if not item.checked]
        return removed

    def save(self, path: str | Path) -> None:
        """Write each item's text on its own line; raises OSError on failure."""
        with open(path, "w", encoding="utf-8") as handle:
            for item in self._items:
                handle.write(f"{item.text}\n")

    def load(self, path: str | Path) -> None:
        """Replace the list with the non-blank lines of a file, all unticked."""
        with open(path, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
        self._items = [ListItem(line) for line in lines if line.strip()]
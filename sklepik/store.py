"""Store catalogue, cart checkout and receipt generation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Iterator, Sequence

_CURRENCY = "zł"
_SEPARATOR = "–"
_PRICE_PATTERN = re.compile(
    rf"{_SEPARATOR}\s*(?P<amount>\d+(?:\.\d*)?)\s*{_CURRENCY}"
)

# Catalogue entries as (name, price) pairs, in the store's default order.
_CATALOG_ENTRIES: tuple[tuple[str, float], ...] = (
    ("Ser Cheddar (200g)", 8.5),
    ("Jogurt naturalny (1L)", 5.0),
    ("Śmietana 18% (300ml)", 3.8),
    ("Ser kozi (150g)", 10.0),
    ("Mleko bez laktozy 1L", 4.5),
    ("Filet z kurczaka (1kg)", 18.0),
    ("Mielona wołowina (500g)", 12.0),
    ("Kiełbasa śląska (1kg)", 16.0),
    ("Boczek wędzony (200g)", 8.0),
    ("Indyk piersi (1kg)", 20.0),
    ("Jabłka (1kg)", 4.0),
    ("Pomarańcze (1kg)", 5.5),
    ("Winogrono (1kg)", 7.0),
    ("Truskawki (500g)", 6.0),
    ("Maliny (150g)", 5.0),
    ("Marchew (1kg)", 2.5),
    ("Ziemniaki (5kg)", 10.0),
    ("Cebula (1kg)", 3.0),
    ("Czosnek (100g)", 3.5),
    ("Sałata lodowa", 3.0),
    ("Bułki kajzerki (6 szt.)", 4.5),
    ("Croissant", 3.5),
    ("Bagietka francuska", 3.0),
    ("Chleb razowy (500g)", 6.0),
    ("Bułki grahamki (4 szt.)", 5.0),
    ("Tuńczyk w puszce (150g)", 6.0),
    ("Fasola czerwona w puszce (400g)", 4.0),
    ("Kukurydza konserwowa (340g)", 3.5),
    ("Pomidory w puszce (400g)", 5.0),
    ("Zupa pomidorowa (400ml)", 6.5),
    ("Chipsy solone (150g)", 5.5),
    ("Orzechy włoskie (200g)", 10.0),
    ("Migdały (200g)", 12.0),
    ("Paluszki słone (200g)", 4.0),
    ("Popcorn naturalny (100g)", 3.0),
    ("Woda gazowana 1.5L", 2.5),
    ("Sok jabłkowy 1L", 4.5),
    ("Kawa mielona 250g", 12.0),
    ("Herbata czarna (50 torebek)", 8.0),
    ("Napój energetyczny 250ml", 4.0),
    ("Ketchup (500ml)", 6.0),
    ("Majonez (400ml)", 7.0),
    ("Musztarda (200g)", 4.5),
    ("Sos sojowy (250ml)", 8.0),
    ("Oliwa z oliwek 500ml", 18.0),
    ("Pizza mrożona (450g)", 12.0),
    ("Mix warzyw mrożonych (1kg)", 8.0),
    ("Frytki mrożone (1kg)", 9.0),
    ("Lody waniliowe (1L)", 10.0),
    ("Szpinak mrożony (500g)", 6.0),
    ("Kasza gryczana (500g)", 5.5),
    ("Płatki owsiane (500g)", 4.0),
    ("Mąka pszenna (1kg)", 3.5),
    ("Makaron pełnoziarnisty (500g)", 6.5),
    ("Komosa ryżowa (200g)", 8.0),
    ("Sos pomidorowy (500g)", 7.0),
    ("Tortille pszenne (6 szt.)", 6.0),
    ("Mleko kokosowe (400ml)", 8.0),
    ("Ryż basmati (1kg)", 9.0),
    ("Cynamon mielony (50g)", 5.0),
    ("Miód naturalny (500g)", 15.0),
    ("Dżem truskawkowy (300g)", 6.0),
    ("Ser feta (200g)", 8.0),
    ("Oliwki zielone (200g)", 7.0),
    ("Kapary (100g)", 9.0),
    ("Jogurt grecki (150g)", 4.5),
    ("Maślanka 1L", 3.8),
    ("Szynka parmeńska (100g)", 12.0),
    ("Kiełbasa krakowska (500g)", 14.0),
    ("Gruszki (1kg)", 5.0),
    ("Kiwi (1kg)", 8.0),
    ("Papryka czerwona (1kg)", 7.0),
    ("Cukinia (1kg)", 5.0),
    ("Rogal z marmoladą", 3.5),
    ("Chleb orkiszowy (500g)", 7.0),
    ("Batonik zbożowy", 2.5),
    ("Prażynki solone", 3.0),
    ("Sok wielowarzywny 1L", 6.0),
    ("Herbata zielona (20 torebek)", 7.0),
    ("Ocet balsamiczny (250ml)", 15.0),
    ("Sos barbecue (300ml)", 9.0),
    ("Pierogi ruskie (1kg)", 12.0),
    ("Mrożone owoce jagodowe (500g)", 10.0),
    ("Kasza jaglana (500g)", 4.5),
    ("Otręby pszenne (500g)", 3.5),
    ("Hummus (200g)", 6.0),
    ("Pesto (190g)", 11.0),
    ("Żelatyna (50g)", 3.0),
    ("Drożdże świeże (100g)", 2.5),
    ("Cukier wanilinowy (50g)", 4.0),
)


def parse_price(text: str) -> float:
    """Return the price written as '– <amount> zł' in text, or 0.0 if absent."""
    match = _PRICE_PATTERN.search(text)
    return float(match["amount"]) if match else 0.0


def format_amount(amount: float) -> str:
    """Format an amount with exactly two decimal places."""
    return f"{amount:.2f}"


@dataclass(frozen=True)
class Product:
    """A catalogue entry: its display text and the price parsed from it."""

    text: str
    price: float

    @classmethod
    def _from_text(cls, text: str) -> "Product":
        return cls(text, parse_price(text))

    @classmethod
    def _from_entry(cls, name: str, price: float) -> "Product":
        return cls(f"{name} {_SEPARATOR} {format_amount(price)} {_CURRENCY}", price)


class SortOrder(IntEnum):
    """Orderings offered by the store's sort selector."""

    NAME_ASC = 0
    NAME_DESC = 1
    PRICE_ASC = 2
    PRICE_DESC = 3


class EmptyCartError(Exception):
    """Raised when checking out with no products selected."""

    def __init__(self, message: str = "Nie wybrano żadnych produktów.") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Cart:
    """Products chosen for purchase and their total price."""

    items: tuple[str, ...]
    total: float

    @property
    def summary(self) -> str:
        return f"Dodano do koszyka.\nŁączna cena: {format_amount(self.total)} {_CURRENCY}"


def catalog() -> list[Product]:
    """Return the built-in product catalogue in its default order."""
    return [Product._from_entry(name, price) for name, price in _CATALOG_ENTRIES]


def sort_products(products: Iterable[Product], order: SortOrder | int) -> list[Product]:
    """Return products sorted by the given order; an unknown order keeps them as is."""
    items = list(products)
    if order not in set(SortOrder):
        return items
    order = SortOrder(order)
    by_name = order in (SortOrder.NAME_ASC, SortOrder.NAME_DESC)
    return sorted(
        items,
        key=(lambda p: p.text.lower()) if by_name else (lambda p: p.price),
        reverse=order in (SortOrder.NAME_DESC, SortOrder.PRICE_DESC),
    )


def format_receipt(items: Sequence[str], total: float, when: datetime | None = None) -> str:
    """Render the text of a purchase receipt."""
    when = when or datetime.now()
    lines = ["🧾 PARAGON", ""]
    lines.extend(f"- {item}" for item in items)
    lines.append("")
    lines.append(f"Suma: {format_amount(total)} {_CURRENCY}")
    lines.append(f"Data zakupu: {when:%Y-%m-%d %H:%M}")
    return "\n".join(lines) + "\n"


def write_receipt(
    path: str | Path, items: Sequence[str], total: float, when: datetime | None = None
) -> None:
    """Write a receipt to path; raises OSError if the file cannot be written."""
    Path(path).write_text(format_receipt(items, total, when), encoding="utf-8")


class Store:
    """The store's product list with per-product selection."""

    def __init__(self, products: Iterable[Product | str] | None = None) -> None:
        source = catalog() if products is None else products
        self._products = [
            Product._from_text(p) if isinstance(p, str) else p for p in source
        ]
        self._checked = [False] * len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def set_checked(self, index: int, checked: bool = True) -> None:
        """Mark or unmark the product at index."""
        self._checked[index] = bool(checked)

    def selected(self) -> list[Product]:
        """Return the checked products in display order."""
        return [p for p, on in zip(self._products, self._checked) if on]

    def sort(self, order: SortOrder | int) -> None:
        """Reorder the products; all selections are cleared."""
        self._products = sort_products(self._products, order)
        self._checked = [False] * len(self._products)

    def checkout(self) -> Cart:
        """Build a cart from the selection; raises EmptyCartError if nothing is selected."""
        chosen = self.selected()
        if not chosen:
            raise EmptyCartError()
        return Cart(tuple(p.text for p in chosen), sum(p.price for p in chosen))
# sklepik

A small desktop grocery shop with two parts:

- **Shopping list**: add products with a quantity and a price, tick them and
  delete the ticked ones, and save the list to a text file or load it from one.
- **Store**: browse a fixed catalogue of products, sort it by name or price,
  tick products, see the total cost of the cart, and pay, which saves a
  receipt to a text file.

The main window also has a dark mode switch. The interface texts are in Polish.

## Installation

```
pip install .
```

The graphical interface (`sklepik.gui`) uses `tkinter` from the Python
standard library, so you need a Python build that includes Tk. The package
has no other dependencies.

## Running

```
sklepik
```

This opens the main window, from which the shopping list and the store are
opened. Each of them is created on first use and hidden, not destroyed, when
its window is closed.

## Using it as a library

The shop logic in `sklepik.shopping` and `sklepik.store` does not need a
window:

```python
from datetime import datetime

from sklepik.shopping import ShoppingList
from sklepik.store import EmptyCartError, SortOrder, Store, catalog, write_receipt

shopping = ShoppingList()
shopping.add("Mleko", 2, 4.5)    # "Mleko   ilość: 2   cena: 4.50 zł"
shopping.set_checked(0, True)
shopping.remove_checked()        # returns the removed items
shopping.add("Chleb", 1, 6.0)
shopping.save("lista.txt")
shopping.load("lista.txt")       # non-blank lines, all unticked

store = Store(catalog())         # Store() uses the catalogue as well
store.sort(SortOrder.PRICE_ASC)  # also NAME_ASC, NAME_DESC, PRICE_DESC
store.set_checked(0, True)
try:
    cart = store.checkout()
except EmptyCartError:
    pass
else:
    print(cart.summary)
    write_receipt("paragon.txt", cart.items, cart.total, datetime.now())
```

Sorting the store clears every selection. `sort_products` sorts any list of
`Product` values the same way; an order it does not know leaves the list as
it is. `format_receipt` returns the receipt text without writing a file.

Prices are read from entries of the form `<name> – <amount> zł` with
`parse_price` (0.0 when there is no price), and amounts are formatted with
two decimal places by `format_amount`. Files are written and read as UTF-8;
saving or writing a receipt raises `OSError` when the file cannot be written.

## Tests

```
pip install .[test]
pytest
```
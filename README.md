# depotrack

Small warehouse bookkeeping in plain Python, with no dependencies beyond the
standard library.

It keeps track of:

- **products** (`depotrack.product.Product`): barcode, name, location, box
  volume, arrival date and whether the product has been shipped;
- **staff** (`depotrack.staff.Staff`): id, full name, age and qualification;
- **the warehouse** (`depotrack.warehouse.Warehouse`): adding and removing
  products and staff, shipping and returning products, saving to and loading
  from line-based text files, and working out storage fees for products kept
  longer than 25 days;
- **shelf placement** (`depotrack.shelving.Cabinet`): a greedy placement of
  boxes onto a set of shelves, by default the standard thirty shelves
  `a1`–`a10` (5x5), `b1`–`b10` (7x7) and `c1`–`c10` (10x10).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the warehouse

```python
from datetime import date
from depotrack.warehouse import Warehouse, ProductNotFoundError

depot = Warehouse()
depot.add_product("1001", "Desk lamp", "a3", 20, "01.03.2024")
depot.add_staff(7, "Jane Doe", 30, "Logistics")

depot.ship_product("1001", 7)
depot.return_product("1001", 7)

for product in depot.list_products():
    print(product)

depot.save_products("products.txt")
depot.save_staff("staff.txt")

for fee in depot.storage_fees(date(2024, 4, 15)):
    print(fee)

try:
    depot.remove_product("9999")
except ProductNotFoundError:
    print("no such product")
```

Operations that cannot be carried out raise a subclass of `WarehouseError`:
`ProductNotFoundError`, `StaffNotFoundError`, `AlreadyShippedError` or
`NotShippedError`. Shipping and returning need both the product and the staff
member to exist.

### Files

`save_products` writes the number of products on the first line, then six
lines per product: barcode, name, location, box volume, arrival date and the
shipped flag (`0` or `1`). `save_staff` writes the count, then four lines per
member: id, full name, age and qualification.

`load_products` and `load_staff` replace what the warehouse holds with the
file's contents and raise `ValueError` on a malformed file. The shipped flag is
read but not restored: loaded products start unshipped.

### Storage fees

`storage_fees(today)` (today's date when left out) returns a `StorageFee` for
every product stored more than 25 days. Only the day and month of the arrival
date (`DD.MM...`) are used and a month counts as thirty days. The fee is
`box_volume / 10 * extra_days * 12`.

## Placing boxes on shelves

```python
from depotrack.shelving import Cabinet

cabinet = Cabinet.from_dimensions([(4, 3), (8, 9), (12, 5)])
cabinet.sort_shelves_by_remaining()
for placement in cabinet.run_placement():
    print(placement)
for name, remaining_width, length in cabinet.remaining_space():
    print(f"{name}: {remaining_width}x{length}")
```

Each box goes on the first shelf whose remaining width and whose length are
at least the box's; a `Placement` with `shelf` set to `None` means no shelf
could take it.

The same runs interactively from the command line. It asks for the number of
boxes and then each box's width and length, read from standard input:

```
depotrack-shelving
```

## What it does not do

The warehouse is a Python API only: there is no command or menu for managing
products and staff, and no database. Keeping data between runs is up to the
caller, through `save_products`/`load_products` and `save_staff`/`load_staff`.
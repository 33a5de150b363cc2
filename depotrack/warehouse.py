"""The warehouse: products, staff, shipping and storage fees."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from depotrack.product import Product
from depotrack.staff import Staff

FREE_STORAGE_DAYS = 25
DAILY_RATE_PER_TEN_VOLUME = 12.0

_DAY_MONTH = re.compile(r"\s*([+-]?\d+)\.([+-]?\d+)")


class WarehouseError(Exception):
    """Base class for warehouse operation failures."""


class ProductNotFoundError(WarehouseError):
    """No product carries the requested barcode."""


class StaffNotFoundError(WarehouseError):
    """No staff member carries the requested id."""


class AlreadyShippedError(WarehouseError):
    """The product has already been shipped."""


class NotShippedError(WarehouseError):
    """The product has not been shipped, so it cannot be returned."""


@dataclass(frozen=True)
class StorageFee:
    """Extra days a product has stayed past the free period and what they cost."""

    barcode: str
    extra_days: int
    fee: float

    def __str__(self) -> str:
        return f"Barkod: {self.barcode} - Ekstra Gun: {self.extra_days} - Ekstra Ucret: {self.fee:g}"


class Warehouse:
    """Keeps track of products and staff."""

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.staff: list[Staff] = []

    def _find_product(self, barcode: str) -> Product:
        for product in self.products:
            if product.barcode == barcode:
                return product
        raise ProductNotFoundError(f"product {barcode!r} not found")

    def _find_staff(self, staff_id: int) -> Staff:
        for member in self.staff:
            if member.staff_id == staff_id:
                return member
        raise StaffNotFoundError(f"staff member {staff_id} not found")

    def add_product(
        self, barcode: str, name: str, location: str, box_volume: int, arrival_date: str
    ) -> Product:
        """Register a new, unshipped product."""
        product = Product(barcode, name, location, box_volume, arrival_date)
        self.products.append(product)
        return product

    def remove_product(self, barcode: str) -> Product:
        """Remove the first product with this barcode and return it."""
        product = self._find_product(barcode)
        self.products.remove(product)
        return product

    def list_products(self) -> list[Product]:
        """All products in the order they were added."""
        return list(self.products)

    def add_staff(self, staff_id: int, full_name: str, age: int, qualification: str) -> Staff:
        """Register a new staff member."""
        member = Staff(staff_id, full_name, age, qualification)
        self.staff.append(member)
        return member

    def remove_staff(self, staff_id: int) -> Staff:
        """Remove the first staff member with this id and return them."""
        member = self._find_staff(staff_id)
        self.staff.remove(member)
        return member

    def list_staff(self) -> list[Staff]:
        """All staff members in the order they were added."""
        return list(self.staff)

    def ship_product(self, barcode: str, staff_id: int) -> Product:
        """Mark a product as shipped by a staff member."""
        product = self._find_product(barcode)
        self._find_staff(staff_id)
        if product.shipped:
            raise AlreadyShippedError(f"product {barcode!r} is already shipped")
        product.shipped = True
        return product

    def return_product(self, barcode: str, staff_id: int) -> Product:
        """Take a shipped product back in through a staff member."""
        product = self._find_product(barcode)
        self._find_staff(staff_id)
        if not product.shipped:
            raise NotShippedError(f"product {barcode!r} has not been shipped")
        product.shipped = False
        return product

    def save_products(self, path: str | Path) -> None:
        """Write products as a count followed by six lines per product."""
        lines = [str(len(self.products))]
        for product in self.products:
            lines += [
                product.barcode,
                product.name,
                product.location,
                str(product.box_volume),
                product.arrival_date,
                str(int(product.shipped)),
            ]
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load_products(self, path: str | Path) -> None:
        """Replace products with those in the file.

        The shipped flag is stored in the file but not restored: loaded
        products start unshipped.
        """
        lines = iter(Path(path).read_text(encoding="utf-8").splitlines())
        try:
            count = int(next(lines))
            products = []
            for _ in range(count):
                barcode = next(lines).strip()
                name = next(lines)
                location = next(lines)
                box_volume = int(next(lines))
                arrival_date = next(lines)
                next(lines)
                products.append(Product(barcode, name, location, box_volume, arrival_date))
        except (StopIteration, ValueError) as exc:
            raise ValueError(f"malformed product file: {path}") from exc
        self.products = products

    def save_staff(self, path: str | Path) -> None:
        """Write staff as a count followed by four lines per member."""
        lines = [str(len(self.staff))]
        for member in self.staff:
            lines += [
                str(member.staff_id),
                member.full_name,
                str(member.age),
                member.qualification,
            ]
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load_staff(self, path: str | Path) -> None:
        """Replace staff with those in the file."""
        lines = iter(Path(path).read_text(encoding="utf-8").splitlines())
        try:
            count = int(next(lines))
            staff = []
            for _ in range(count):
                staff_id = int(next(lines))
                full_name = next(lines)
                age = int(next(lines))
                qualification = next(lines)
                staff.append(Staff(staff_id, full_name, age, qualification))
        except (StopIteration, ValueError) as exc:
            raise ValueError(f"malformed staff file: {path}") from exc
        self.staff = staff

    def storage_fees(self, today: date | None = None) -> list[StorageFee]:
        """Fees for products kept longer than the free period.

        Months are counted as thirty days and only the day and month of the
        arrival date are used.
        """
        today = today or date.today()
        fees = []
        for product in self.products:
            match = _DAY_MONTH.match(product.arrival_date)
            if match is None:
                raise ValueError(f"bad arrival date {product.arrival_date!r}")
            day, month = int(match.group(1)), int(match.group(2))
            elapsed = today.day - day + (today.month - month) * 30
            if elapsed > FREE_STORAGE_DAYS:
                extra = elapsed - FREE_STORAGE_DAYS
                fee = (product.box_volume / 10.0) * extra * DAILY_RATE_PER_TEN_VOLUME
                fees.append(StorageFee(product.barcode, extra, fee))
        return fees
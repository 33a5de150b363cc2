"""Products kept in the warehouse."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """A stored product and whether it has been shipped."""

    barcode: str
    name: str
    location: str
    box_volume: int
    arrival_date: str
    shipped: bool = False

    def __str__(self) -> str:
        return (
            f"Barkod: {self.barcode}\n"
            f"Urun Adi: {self.name}\n"
            f"Konum No: {self.location}\n"
            f"Koli Hacmi: {self.box_volume}\n"
            f"Gelim Tarihi: {self.arrival_date}\n"
            f"Yollanmis mi?: {'Evet' if self.shipped else 'Hayir'}\n"
        )
"""Warehouse staff members."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Staff:
    """A member of staff who can ship and receive products."""

    staff_id: int
    full_name: str
    age: int
    qualification: str

    def __str__(self) -> str:
        return (
            f"ID: {self.staff_id}\n"
            f"Ad-Soyad: {self.full_name}\n"
            f"Yas: {self.age}\n"
            f"Nitelik: {self.qualification}\n"
        )
"""Placing boxes onto shelves by remaining width."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Box:
    """A box with a width, a length and a name."""

    width: int
    length: int
    name: str


@dataclass
class Shelf:
    """A shelf whose free width shrinks as boxes are placed on it."""

    name: str
    width: int
    length: int
    remaining_width: int = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.remaining_width is None:
            self.remaining_width = self.width


@dataclass(frozen=True)
class Placement:
    """Where a box went; shelf is None when no shelf could take it."""

    box: Box
    shelf: Shelf | None

    @property
    def placed(self) -> bool:
        return self.shelf is not None

    def __str__(self) -> str:
        box = self.box
        prefix = f"{box.width}x{box.length} boyutlu {box.name} kutusu"
        if self.shelf is None:
            return f"{prefix} icin uygun raf yok. "
        shelf = self.shelf
        return f"{prefix} {shelf.name}({shelf.width}x{shelf.length}) rafina yerlestirilmeli. "


def default_shelves() -> list[Shelf]:
    """The standard layout: rows a, b and c of ten shelves each."""
    sizes = {"a": 5, "b": 7, "c": 10}
    return [
        Shelf(f"{row}{number}", size, size, size)
        for row, size in sizes.items()
        for number in range(1, 11)
    ]


def fits(box: Box, shelf: Shelf) -> bool:
    """Whether the box fits in the shelf's remaining width and its length."""
    return box.width <= shelf.remaining_width and box.length <= shelf.length


class Cabinet:
    """A set of boxes waiting to be placed onto a set of shelves."""

    def __init__(self, boxes: Iterable[Box], shelves: Iterable[Shelf] | None = None) -> None:
        self.boxes = list(boxes)
        self.shelves = list(shelves) if shelves is not None else default_shelves()

    @classmethod
    def from_dimensions(cls, dimensions: Iterable[tuple[int, int]]) -> Cabinet:
        """Build a cabinet of boxes named a1, a2, ... on the default shelves."""
        boxes = [
            Box(width, length, f"a{index}")
            for index, (width, length) in enumerate(dimensions, start=1)
        ]
        return cls(boxes)

    def sort_shelves_by_remaining(self) -> None:
        """Order shelves by remaining width, widest first."""
        self.shelves.sort(key=lambda shelf: shelf.remaining_width, reverse=True)

    def place(self, box: Box, shelf: Shelf) -> Placement:
        """Put the box on the shelf, using up its width."""
        shelf.remaining_width -= box.width
        return Placement(box, shelf)

    def run_placement(self) -> list[Placement]:
        """Put each box on the first shelf that fits it."""
        placements = []
        for box in self.boxes:
            target = next((shelf for shelf in self.shelves if fits(box, shelf)), None)
            placements.append(self.place(box, target) if target else Placement(box, None))
        return placements

    def remaining_space(self) -> list[tuple[str, int, int]]:
        """Name, remaining width and length of each shelf."""
        return [(shelf.name, shelf.remaining_width, shelf.length) for shelf in self.shelves]


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ValueError("expected an integer") from exc


def main(argv: list[str] | None = None) -> int:
    """Ask for box sizes, place them and show what space is left."""
    tokens = _tokens(sys.stdin)
    try:
        print("Koli sayisini girin: ", end="", flush=True)
        count = _read_int(tokens)
        dimensions = []
        for index in range(1, count + 1):
            print(f"{index}. kutunun genisligini ve uzunlugunu giriniz: ", end="", flush=True)
            dimensions.append((_read_int(tokens), _read_int(tokens)))
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    cabinet = Cabinet.from_dimensions(dimensions)
    cabinet.sort_shelves_by_remaining()
    for placement in cabinet.run_placement():
        print(placement)
    print("\nRaflarda kalan alanlarr:")
    for name, remaining, length in cabinet.remaining_space():
        print(f"Raf {name}: {remaining}x{length}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
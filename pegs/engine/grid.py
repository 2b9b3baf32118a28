"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ..core.constants import DESCRIPTION_ALPHABET, Bounds, Cell
from ..core.exceptions import DescriptionError


class PegGrid:
    """A fixed-size ``width x height`` board of cells, stored row-major."""

    def __init__(self, width: int, height: int, fill: Cell = Cell.OBSTACLE) -> None:
        self.bounds = Bounds(width=width, height=height)
        self.cells: List[Cell] = [fill] * (width * height)

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    @property
    def center(self) -> Tuple[int, int]:
        return (self.width // 2, self.height // 2)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, x: int, y: int) -> Cell:
        return self.cells[y * self.width + x]

    def set(self, x: int, y: int, value: Cell) -> None:
        self.cells[y * self.width + x] = value

    def fill(self, value: Cell) -> None:
        self.cells = [value] * (self.width * self.height)

    def reset(self) -> None:
        """Clear to all obstacles with a single peg in the centre."""

        self.fill(Cell.OBSTACLE)
        cx, cy = self.center
        self.set(cx, cy, Cell.PEG)

    def coords(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def cells_of(self, value: Cell) -> List[Tuple[int, int]]:
        return [(x, y) for x, y in self.coords() if self.get(x, y) == value]

    def count(self, value: Cell) -> int:
        return self.cells.count(value)

    # ------------------------------------------------------------------
    # Shape checks
    # ------------------------------------------------------------------
    def touches_all_edges(self) -> bool:
        """True when every border line holds at least one non-obstacle."""

        w, h = self.width, self.height
        left = any(self.get(0, y) != Cell.OBSTACLE for y in range(h))
        right = any(self.get(w - 1, y) != Cell.OBSTACLE for y in range(h))
        top = any(self.get(x, 0) != Cell.OBSTACLE for x in range(w))
        bottom = any(self.get(x, h - 1) != Cell.OBSTACLE for x in range(w))
        return left and right and top and bottom

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_description(self) -> str:
        return "".join(cell.value for cell in self.cells)

    @classmethod
    def from_description(cls, width: int, height: int, desc: str) -> "PegGrid":
        if len(desc) != width * height:
            raise DescriptionError("Game description is wrong length")
        if any(ch not in DESCRIPTION_ALPHABET for ch in desc):
            raise DescriptionError("Invalid character in game description")
        grid = cls(width, height)
        grid.cells = [Cell(ch) for ch in desc]
        return grid

    def copy(self) -> "PegGrid":
        clone = PegGrid(self.width, self.height)
        clone.cells = list(self.cells)
        return clone

    def to_jsonable(self) -> List[str]:
        desc = self.to_description()
        return [desc[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PegGrid):
            return NotImplemented
        return self.bounds == other.bounds and self.cells == other.cells

    def __repr__(self) -> str:
        return f"PegGrid({self.width}x{self.height}, {self.to_description()!r})"

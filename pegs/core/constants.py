"""Shared constants and enumerations for the peg solitaire engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Cell(str, Enum):
    """The three cell states; values double as descriptor characters."""

    HOLE = "H"
    PEG = "P"
    OBSTACLE = "O"


class BoardType(str, Enum):
    """Board shapes supported by the game."""

    CROSS = "CROSS"
    OCTAGON = "OCTAGON"
    RANDOM = "RANDOM"


@dataclass(frozen=True)
class BoardTypeInfo:
    identifier: BoardType
    title: str
    key: str


BOARD_TYPES: Tuple[BoardTypeInfo, ...] = (
    BoardTypeInfo(BoardType.CROSS, "Cross", "cross"),
    BoardTypeInfo(BoardType.OCTAGON, "Octagon", "octagon"),
    BoardTypeInfo(BoardType.RANDOM, "Random", "random"),
)


def board_type_info(board_type: BoardType) -> BoardTypeInfo:
    for info in BOARD_TYPES:
        if info.identifier == board_type:
            return info
    raise KeyError(board_type)


# (dx, dy) unit steps: left, up, right, down.
AXIS_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))

DESCRIPTION_ALPHABET = frozenset(cell.value for cell in Cell)

MIN_DIMENSION = 4
FIXED_LAYOUT_SIZE = 7


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

"""Incremental maintenance of the candidate index around one cell."""

from __future__ import annotations

from typing import Optional

from ..core.constants import AXIS_STEPS, Cell
from .grid import PegGrid
from .move_index import CandidateMoveIndex


class MoveUpdater:
    """Re-evaluates every reverse move whose footprint covers a cell."""

    def __init__(self, grid: PegGrid, index: CandidateMoveIndex) -> None:
        self.grid = grid
        self.index = index

    def evaluate(self, x: int, y: int, dx: int, dy: int) -> Optional[int]:
        """Cost of the reverse move from ``(x, y)`` along ``(dx, dy)``.

        Returns ``None`` when the footprint leaves the board or the move is
        not currently playable: the origin must be a peg and neither of the
        other two cells may be.
        """

        bounds = self.grid.bounds
        if not bounds.contains(x, y) or not bounds.contains(x + 2 * dx, y + 2 * dy):
            return None
        origin = self.grid.get(x, y)
        middle = self.grid.get(x + dx, y + dy)
        far = self.grid.get(x + 2 * dx, y + 2 * dy)
        if origin != Cell.PEG or middle == Cell.PEG or far == Cell.PEG:
            return None
        return (middle == Cell.OBSTACLE) + (far == Cell.OBSTACLE)

    def refresh(self, x: int, y: int) -> int:
        """Reconcile the (up to) twelve moves that include ``(x, y)``.

        Returns how many index entries were added, removed or re-costed.
        """

        bounds = self.grid.bounds
        changes = 0
        for dx, dy in AXIS_STEPS:
            for pos in range(3):
                ox, oy = x - pos * dx, y - pos * dy
                if not bounds.contains(ox, oy) or not bounds.contains(ox + 2 * dx, oy + 2 * dy):
                    continue
                cost = self.evaluate(ox, oy, dx, dy)
                if self.index.upsert_or_remove((oy, ox, dy, dx), cost):
                    changes += 1
        return changes

    def seed(self) -> int:
        """Populate the index from every peg currently on the grid."""

        changes = 0
        for x, y in self.grid.cells_of(Cell.PEG):
            changes += self.refresh(x, y)
        return changes

"""Closed-form layouts for the fixed board types."""

from __future__ import annotations

from typing import Callable, Dict

from ..core.constants import BoardType, Cell
from .grid import PegGrid


def _cross_cell(cx: int, cy: int, w: int, h: int) -> Cell:
    if cx == 0 and cy == 0:
        return Cell.HOLE
    if cx > 1 and cy > 1:
        return Cell.OBSTACLE
    return Cell.PEG


def _octagon_cell(cx: int, cy: int, w: int, h: int) -> Cell:
    if cx == 0 and cy == 0:
        return Cell.HOLE
    if cx + cy > 1 + max(w, h) // 2:
        return Cell.OBSTACLE
    return Cell.PEG


LAYOUTS: Dict[BoardType, Callable[[int, int, int, int], Cell]] = {
    BoardType.CROSS: _cross_cell,
    BoardType.OCTAGON: _octagon_cell,
}


def build_fixed_layout(board_type: BoardType, width: int, height: int) -> PegGrid:
    """Fill a grid from the per-cell formula of ``board_type``.

    Cells are classified by their distance ``(cx, cy)`` from the centre.
    """

    try:
        rule = LAYOUTS[board_type]
    except KeyError:
        raise ValueError(f"{board_type} has no fixed layout") from None
    grid = PegGrid(width, height)
    mx, my = grid.center
    for x, y in grid.coords():
        grid.set(x, y, rule(abs(x - mx), abs(y - my), width, height))
    return grid

"""Pretty-print helpers for peg solitaire boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..core.constants import Cell

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult
    from ..engine.grid import PegGrid


SYMBOLS = {
    Cell.PEG: "o",
    Cell.HOLE: ".",
    Cell.OBSTACLE: " ",
}


def format_grid(grid: PegGrid) -> str:
    header_cells = [f"{x:>2}" for x in range(grid.width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * grid.width - 1))
    for y in range(grid.height):
        row_render = " ".join(f"{SYMBOLS[grid.get(x, y)]:>2}" for x in range(grid.width))
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: PegGrid, *, label: str | None = None, stream=None) -> None:
    """Print the board with coordinate headers."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_board_stats(result: GenerationResult, *, stream=None) -> None:
    """Print the generated board followed by a short summary."""

    stream = stream or sys.stdout
    grid = result.grid
    print(format_grid(grid), file=stream)
    print("", file=stream)
    print(f"  Size:        {grid.width}x{grid.height}", file=stream)
    print(f"  Pegs:        {grid.count(Cell.PEG)}", file=stream)
    print(f"  Holes:       {grid.count(Cell.HOLE)}", file=stream)
    print(f"  Obstacles:   {grid.count(Cell.OBSTACLE)}", file=stream)
    print(f"  Moves:       {len(result.reverse_moves)}", file=stream)
    print(f"  Attempts:    {result.attempts}", file=stream)
    if result.seed is not None:
        print(f"  Seed:        {result.seed}", file=stream)

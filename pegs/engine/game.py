"""Forward game state: move validation, execution and text rendering."""

from __future__ import annotations

from typing import List, Union

from ..core.constants import AXIS_STEPS, Cell
from ..core.exceptions import MoveError
from ..core.models import ForwardMove, GameParams
from .grid import PegGrid


TEXT_SYMBOLS = {
    Cell.HOLE: "-",
    Cell.PEG: "*",
    Cell.OBSTACLE: " ",
}


class GameState:
    """An immutable-by-convention board position during play."""

    def __init__(self, params: GameParams, grid: PegGrid) -> None:
        self.params = params
        self.grid = grid

    @classmethod
    def from_description(cls, params: GameParams, desc: str) -> "GameState":
        return cls(params, PegGrid.from_description(params.width, params.height, desc))

    def copy(self) -> "GameState":
        return GameState(self.params, self.grid.copy())

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def check_move(self, move: ForwardMove) -> None:
        bounds = self.grid.bounds
        if not bounds.contains(move.sx, move.sy):
            raise MoveError(f"Move source out of range: {move}")
        if not bounds.contains(move.tx, move.ty):
            raise MoveError(f"Move target out of range: {move}")
        if not move.is_straight_jump():
            raise MoveError(f"Move length was wrong: {move}")
        mx, my = move.midpoint
        if (self.grid.get(move.sx, move.sy) != Cell.PEG
                or self.grid.get(mx, my) != Cell.PEG
                or self.grid.get(move.tx, move.ty) != Cell.HOLE):
            raise MoveError(f"Grid contents do not allow {move}")

    def is_legal(self, move: ForwardMove) -> bool:
        try:
            self.check_move(move)
        except MoveError:
            return False
        return True

    def execute(self, move: Union[ForwardMove, str]) -> "GameState":
        """Return the state after ``move``; the receiver is left untouched."""

        if isinstance(move, str):
            move = ForwardMove.decode(move)
        self.check_move(move)
        result = self.copy()
        mx, my = move.midpoint
        result.grid.set(move.sx, move.sy, Cell.HOLE)
        result.grid.set(mx, my, Cell.HOLE)
        result.grid.set(move.tx, move.ty, Cell.PEG)
        return result

    def legal_moves(self) -> List[ForwardMove]:
        moves: List[ForwardMove] = []
        for x, y in self.grid.cells_of(Cell.PEG):
            for dx, dy in AXIS_STEPS:
                move = ForwardMove(sx=x, sy=y, tx=x + 2 * dx, ty=y + 2 * dy)
                if self.is_legal(move):
                    moves.append(move)
        return moves

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------
    @property
    def peg_count(self) -> int:
        return self.grid.count(Cell.PEG)

    @property
    def is_solved(self) -> bool:
        return self.peg_count == 1

    @property
    def is_stuck(self) -> bool:
        return self.peg_count > 1 and not self.legal_moves()

    def text_format(self) -> str:
        lines = []
        for y in range(self.grid.height):
            lines.append("".join(TEXT_SYMBOLS[self.grid.get(x, y)] for x in range(self.grid.width)))
        return "\n".join(lines) + "\n"

    def description(self) -> str:
        return self.grid.to_description()

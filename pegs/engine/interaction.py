"""Drag-and-drop interpretation in grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import Cell
from ..core.models import ForwardMove
from .game import GameState


@dataclass
class InteractionState:
    """Per-session drag state; ``cancel`` whenever the game state changes."""

    dragging: bool = False
    sx: int = 0
    sy: int = 0
    px: int = 0
    py: int = 0

    def press(self, state: GameState, x: int, y: int) -> bool:
        """Start dragging the peg at ``(x, y)``; False if there is none."""

        if self.dragging:
            raise RuntimeError("press received while a drag is already in progress")
        if not state.grid.bounds.contains(x, y) or state.grid.get(x, y) != Cell.PEG:
            return False
        self.dragging = True
        self.sx, self.sy = x, y
        self.px, self.py = x, y
        return True

    def drag(self, x: int, y: int) -> bool:
        if not self.dragging:
            return False
        self.px, self.py = x, y
        return True

    def release(self, state: GameState, x: int, y: int) -> Optional[str]:
        """Finish the drag, returning encoded move text if it is legal."""

        if not self.dragging:
            return None
        self.cancel()
        move = ForwardMove(sx=self.sx, sy=self.sy, tx=x, ty=y)
        if not state.is_legal(move):
            return None
        return move.encode()

    def cancel(self) -> None:
        self.dragging = False

"""Random board generation by playing peg solitaire backwards.

Starting from one peg in the centre, reverse moves (a peg becomes a hole
and two pegs appear beyond it) are applied until no affordable move is
left. Every board produced this way can be played back down to a single
peg by undoing the reverse moves in order.

Moves that reuse existing space are preferred: among the candidates, only
the cheapest cost tier is eligible, where cost counts the obstacles a move
would have to convert. Once the board is half full, two-obstacle moves are
no longer accepted.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.constants import BoardType, Cell
from ..core.models import ForwardMove, GameParams, MoveCandidate
from ..utils.logger import get_logger
from .grid import PegGrid
from .layouts import build_fixed_layout
from .move_index import CandidateMoveIndex
from .updater import MoveUpdater


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int
    height: int
    seed: Optional[int] = None
    board_type: BoardType = BoardType.RANDOM

    @classmethod
    def from_params(cls, params: GameParams, seed: Optional[int] = None) -> "GeneratorConfig":
        return cls(width=params.width, height=params.height, seed=seed,
                   board_type=params.board_type)

    def to_params(self) -> GameParams:
        return GameParams(width=self.width, height=self.height, board_type=self.board_type)


@dataclass
class GenerationResult:
    grid: PegGrid
    reverse_moves: List[MoveCandidate] = field(default_factory=list)
    attempts: int = 1
    seed: Optional[int] = None

    def description(self) -> str:
        return self.grid.to_description()

    def solution(self) -> List[ForwardMove]:
        """Forward moves that take the board back to its starting peg."""

        return [move.to_forward_move() for move in reversed(self.reverse_moves)]


class GenerationEngine:
    """Applies random reverse moves to ``grid`` until none is affordable."""

    def __init__(self, grid: PegGrid, rng: random.Random) -> None:
        self.grid = grid
        self.rng = rng
        self.index = CandidateMoveIndex()
        self.updater = MoveUpdater(grid, self.index)
        self.moves_applied = 0

    def max_cost(self) -> int:
        half = (self.grid.width * self.grid.height) // 2
        return 2 if self.moves_applied < half else 1

    def choose_tier(self) -> Optional[int]:
        """Cheapest cost level that has at least one candidate, if any."""

        for level in range(self.max_cost() + 1):
            if self.index.count_in_cost_range(level, level) > 0:
                return level
        return None

    def step(self) -> Optional[MoveCandidate]:
        """Apply one reverse move; ``None`` once generation is finished."""

        level = self.choose_tier()
        if level is None:
            return None
        available = self.index.count_in_cost_range(level, level)
        move = self.index.select_uniform_among_cost_range(
            level, level, self.rng.randrange(available)
        )
        LOGGER.debug(
            "selecting move %d%+d,%d%+d at cost %d (%d available)",
            move.x, move.dx, move.y, move.dy, move.cost, available,
        )

        (ox, oy), (mx, my), (fx, fy) = move.cells()
        self.grid.set(ox, oy, Cell.HOLE)
        self.grid.set(mx, my, Cell.PEG)
        self.grid.set(fx, fy, Cell.PEG)
        for x, y in move.cells():
            self.updater.refresh(x, y)
        self.moves_applied += 1
        return move

    def run(self) -> List[MoveCandidate]:
        self.index.clear()
        self.moves_applied = 0
        self.updater.seed()
        applied: List[MoveCandidate] = []
        try:
            while True:
                move = self.step()
                if move is None:
                    break
                applied.append(move)
        finally:
            self.index.clear()
        return applied


class BoardGenerator:
    """Retries whole generation runs until the board spans every edge.

    The loop has no attempt cap: termination is probabilistic. Sizes that
    pass parameter validation finish quickly in practice, and a spanning
    board is never traded for a bounded loop.
    """

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng or random.Random(config.seed)

    def generate(self) -> GenerationResult:
        attempt = 0
        while True:
            attempt += 1
            grid = PegGrid(self.config.width, self.config.height)
            grid.reset()
            moves = GenerationEngine(grid, self.rng).run()
            if grid.touches_all_edges():
                LOGGER.info(
                    "Generated %sx%s board after %s attempt(s) with %s reverse moves",
                    grid.width, grid.height, attempt, len(moves),
                )
                return GenerationResult(
                    grid=grid, reverse_moves=moves, attempts=attempt, seed=self.config.seed
                )
            LOGGER.debug("Attempt %s has insufficient extent; trying again", attempt)


def new_game_description(params: GameParams, rng: random.Random) -> str:
    """Board descriptor for ``params``; only random boards consume ``rng``."""

    if params.board_type == BoardType.RANDOM:
        config = GeneratorConfig.from_params(params)
        return BoardGenerator(config, rng=rng).generate().description()
    return build_fixed_layout(params.board_type, params.width, params.height).to_description()

"""Peg Solitaire board generation and play.

This package exposes the public API surface via:

- ``pegs.engine.generator.BoardGenerator``: guaranteed-solvable random boards.
- ``pegs.engine.game.GameState``: forward play on a board descriptor.
- ``pegs.engine.solver.solve_board``: CP-SAT solver for arbitrary positions.
"""

from .core.models import ForwardMove, GameParams
from .engine.game import GameState
from .engine.generator import BoardGenerator, GenerationResult, GeneratorConfig, new_game_description

__all__ = [
    "BoardGenerator",
    "ForwardMove",
    "GameParams",
    "GameState",
    "GenerationResult",
    "GeneratorConfig",
    "new_game_description",
]

__version__ = "0.1.0"

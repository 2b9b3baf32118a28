"""CP-SAT peg solitaire solver using OR-Tools.

The game is unrolled in time: one boolean per playable cell per step for
occupancy, and one boolean per possible jump per step, with exactly one
jump taken per step until a single peg remains.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ortools.sat.python import cp_model

from ..core.constants import AXIS_STEPS, Cell
from ..core.exceptions import MoveError, SolverError, SolverTimeoutError
from ..core.models import Coord, ForwardMove
from ..utils.logger import get_logger
from .game import GameState

LOGGER = get_logger(__name__)


def _candidate_jumps(state: GameState) -> List[ForwardMove]:
    """Every jump whose three cells lie on the playable area."""

    grid = state.grid
    playable = {coord for coord in grid.coords() if grid.get(*coord) != Cell.OBSTACLE}
    jumps = []
    for x, y in grid.coords():
        if (x, y) not in playable:
            continue
        for dx, dy in AXIS_STEPS:
            if (x + dx, y + dy) in playable and (x + 2 * dx, y + 2 * dy) in playable:
                jumps.append(ForwardMove(sx=x, sy=y, tx=x + 2 * dx, ty=y + 2 * dy))
    return jumps


def solve_board(
    state: GameState,
    timeout: float = 20.0,
    target: Optional[Coord] = None,
    num_workers: int = 4,
) -> Optional[List[ForwardMove]]:
    """Find forward moves that leave exactly one peg on the board.

    Args:
        state: Position to solve from.
        timeout: Solver time limit in seconds.
        target: Optional cell the final peg must end on.
        num_workers: CP-SAT search workers.

    Returns:
        The move sequence, ``[]`` if the board is already solved, or ``None``
        when CP-SAT proves no solution exists.

    Raises:
        SolverTimeoutError: ``timeout`` expired before either outcome.
    """

    grid = state.grid
    pegs = state.peg_count
    if pegs == 0:
        raise SolverError("Cannot solve a board without pegs")
    if target is not None and (not grid.bounds.contains(*target)
                               or grid.get(*target) == Cell.OBSTACLE):
        raise SolverError(f"Target {target} is not a playable cell")
    if pegs == 1:
        if target is None or grid.get(*target) == Cell.PEG:
            return []
        return None

    steps = pegs - 1
    playable = [coord for coord in grid.coords() if grid.get(*coord) != Cell.OBSTACLE]
    jumps = _candidate_jumps(state)
    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Occupancy per step
    # ------------------------------------------------------------------
    occupied: List[Dict[Coord, cp_model.IntVar]] = []
    for t in range(steps + 1):
        occupied.append({
            (x, y): model.new_bool_var(f"occ_{t}_{x}_{y}") for x, y in playable
        })
    for coord in playable:
        model.add(occupied[0][coord] == int(grid.get(*coord) == Cell.PEG))

    # ------------------------------------------------------------------
    # Step 2: One jump per step, with its preconditions
    # ------------------------------------------------------------------
    taken: List[List[Tuple[ForwardMove, cp_model.IntVar]]] = []
    for t in range(steps):
        row = []
        for jump in jumps:
            var = model.new_bool_var(f"jump_{t}_{jump.encode()}")
            source, middle, dest = jump.cells()
            model.add_implication(var, occupied[t][source])
            model.add_implication(var, occupied[t][middle])
            model.add_implication(var, ~occupied[t][dest])
            row.append((jump, var))
        model.add_exactly_one([var for _, var in row])
        taken.append(row)

    # ------------------------------------------------------------------
    # Step 3: Transitions
    # ------------------------------------------------------------------
    for t in range(steps):
        emptied: Dict[Coord, list] = {coord: [] for coord in playable}
        filled: Dict[Coord, list] = {coord: [] for coord in playable}
        for jump, var in taken[t]:
            source, middle, dest = jump.cells()
            emptied[source].append(var)
            emptied[middle].append(var)
            filled[dest].append(var)
        for coord in playable:
            model.add(
                occupied[t + 1][coord]
                == occupied[t][coord] - sum(emptied[coord]) + sum(filled[coord])
            )

    # Each jump removes exactly one peg.
    for t in range(steps + 1):
        model.add(sum(occupied[t].values()) == pegs - t)
    if target is not None:
        model.add(occupied[steps][target] == 1)

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = num_workers

    LOGGER.info(
        "CP-SAT: %d pegs, %d playable cells, %d jumps per step, solving (timeout=%0.1fs)...",
        pegs, len(playable), len(jumps), timeout,
    )
    status = solver.solve(model)
    if status == cp_model.MODEL_INVALID:
        raise SolverError(f"Invalid model: {model.validate()}")
    if status == cp_model.INFEASIBLE:
        LOGGER.info("CP-SAT: board proven unsolvable")
        return None
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        raise SolverTimeoutError(f"No solution found within {timeout:g}s")
    LOGGER.info("CP-SAT: solution found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 5: Extract and replay
    # ------------------------------------------------------------------
    solution = []
    for row in taken:
        chosen = [jump for jump, var in row if solver.boolean_value(var)]
        solution.append(chosen[0])

    replay = state
    try:
        for move in solution:
            replay = replay.execute(move)
    except MoveError as exc:
        raise SolverError(f"Solver returned an unplayable sequence: {exc}") from exc
    return solution


def hint(state: GameState, timeout: float = 20.0) -> Optional[ForwardMove]:
    """First move of a full solution, or ``None`` if the board is unsolvable."""

    solution = solve_board(state, timeout=timeout)
    if solution:
        return solution[0]
    return None

import unittest
from unittest import mock

from ortools.sat.python import cp_model

from pegs.core.constants import BoardType, Cell
from pegs.core.exceptions import SolverError, SolverTimeoutError
from pegs.core.models import ForwardMove, GameParams
from pegs.engine.game import GameState
from pegs.engine.generator import BoardGenerator, GeneratorConfig
from pegs.engine.layouts import build_fixed_layout
from pegs.engine.solver import hint, solve_board


PARAMS = GameParams(5, 5, BoardType.RANDOM)


def _state(rows) -> GameState:
    return GameState.from_description(PARAMS, "".join(rows))


class SolverTests(unittest.TestCase):
    def test_single_jump(self) -> None:
        state = _state(["OOOOO", "OOOOO", "PPHOO", "OOOOO", "OOOOO"])
        self.assertEqual(solve_board(state), [ForwardMove(0, 2, 2, 2)])
        self.assertEqual(hint(state), ForwardMove(0, 2, 2, 2))

    def test_target_constrains_final_peg(self) -> None:
        state = _state(["OOOOO", "OOOOO", "PPHHO", "OOOOO", "OOOOO"])
        self.assertEqual(solve_board(state, target=(2, 2)), [ForwardMove(0, 2, 2, 2)])
        self.assertIsNone(solve_board(state, target=(3, 2)))
        with self.assertRaises(SolverError):
            solve_board(state, target=(0, 0))

    def test_already_solved_and_empty_boards(self) -> None:
        self.assertEqual(solve_board(_state(["HHHHH"] * 2 + ["HHPHH"] + ["HHHHH"] * 2)), [])
        with self.assertRaises(SolverError):
            solve_board(_state(["HHHHH"] * 5))

    def test_isolated_pegs_have_no_solution(self) -> None:
        state = _state(["PHHHH", "HHHHH", "HHHHH", "HHHHH", "HHHHP"])
        self.assertIsNone(solve_board(state))
        self.assertIsNone(hint(state))

    def test_generated_board_is_solved(self) -> None:
        result = BoardGenerator(GeneratorConfig(width=5, height=5, seed=21)).generate()
        state = GameState.from_description(PARAMS, result.description())
        solution = solve_board(state, timeout=60.0)
        self.assertIsNotNone(solution)
        assert solution is not None
        for move in solution:
            state = state.execute(move)
        self.assertTrue(state.is_solved)


    def test_timeout_is_not_reported_as_unsolvable(self) -> None:
        state = _state(["OOOOO", "OOOOO", "PPHHP", "OOOOH", "OOOOO"])
        with mock.patch.object(cp_model, "CpSolver") as solver_cls:
            solver_cls.return_value.solve.return_value = cp_model.UNKNOWN
            solver_cls.return_value.status_name.return_value = "UNKNOWN"
            with self.assertRaises(SolverTimeoutError):
                solve_board(state, timeout=1.0)
            with self.assertRaises(SolverTimeoutError):
                hint(state, timeout=1.0)

    def test_infeasible_status_returns_none(self) -> None:
        state = _state(["OOOOO", "OOOOO", "PPHHP", "OOOOH", "OOOOO"])
        with mock.patch.object(cp_model, "CpSolver") as solver_cls:
            solver_cls.return_value.solve.return_value = cp_model.INFEASIBLE
            self.assertIsNone(solve_board(state))

    def test_cross_layout_ends_on_centre_or_reports_timeout(self) -> None:
        params = GameParams(7, 7, BoardType.CROSS)
        state = GameState(params, build_fixed_layout(BoardType.CROSS, 7, 7))
        try:
            solution = solve_board(state, timeout=15.0, target=(3, 3))
        except SolverTimeoutError as exc:
            self.assertIn("within 15s", str(exc))
            return
        self.assertIsNotNone(solution)
        assert solution is not None
        self.assertEqual(len(solution), 31)
        for move in solution:
            state = state.execute(move)
        self.assertEqual(state.grid.cells_of(Cell.PEG), [(3, 3)])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

import random
import unittest

from pegs.core.constants import BoardType, Cell
from pegs.core.models import GameParams
from pegs.engine.game import GameState
from pegs.engine.generator import (BoardGenerator, GenerationEngine, GeneratorConfig,
                                   new_game_description)
from pegs.engine.grid import PegGrid
from pegs.engine.move_index import VALID_COSTS, CandidateMoveIndex
from pegs.engine.updater import MoveUpdater


def _rebuilt_index(grid: PegGrid) -> CandidateMoveIndex:
    index = CandidateMoveIndex()
    updater = MoveUpdater(grid, index)
    for x, y in grid.coords():
        updater.refresh(x, y)
    return index


class GenerationEngineTests(unittest.TestCase):
    def test_index_tracks_grid_after_every_move(self) -> None:
        grid = PegGrid(6, 5)
        grid.reset()
        engine = GenerationEngine(grid, random.Random(7))
        engine.updater.seed()
        steps = 0
        while engine.step() is not None:
            steps += 1
            self.assertTrue(engine.index.check_consistency())
            self.assertTrue(all(c.cost in VALID_COSTS for c in engine.index))
            expected = [c.sort_key for c in _rebuilt_index(grid).by_cost()]
            self.assertEqual([c.sort_key for c in engine.index.by_cost()], expected)
        self.assertGreater(steps, 0)
        self.assertEqual(engine.moves_applied, steps)
        self.assertIsNone(engine.choose_tier())

    def test_full_refresh_after_a_move_changes_nothing(self) -> None:
        grid = PegGrid(7, 7)
        grid.reset()
        engine = GenerationEngine(grid, random.Random(3))
        engine.updater.seed()
        for _ in range(10):
            if engine.step() is None:
                break
            changes = sum(engine.updater.refresh(x, y) for x, y in grid.coords())
            self.assertEqual(changes, 0)

    def test_first_move_expands_from_centre(self) -> None:
        grid = PegGrid(5, 5)
        grid.reset()
        engine = GenerationEngine(grid, random.Random(11))
        engine.updater.seed()
        move = engine.step()
        self.assertIsNotNone(move)
        assert move is not None
        self.assertEqual(move.origin, (2, 2))
        self.assertEqual(move.cost, 2)
        self.assertEqual(grid.get(2, 2), Cell.HOLE)
        self.assertEqual(grid.get(*move.midpoint), Cell.PEG)
        self.assertEqual(grid.get(*move.far_point), Cell.PEG)

    def test_max_cost_narrows_after_half_the_board(self) -> None:
        grid = PegGrid(5, 5)
        engine = GenerationEngine(grid, random.Random(0))
        engine.moves_applied = 11
        self.assertEqual(engine.max_cost(), 2)
        engine.moves_applied = 12
        self.assertEqual(engine.max_cost(), 1)

    def test_run_tears_down_index(self) -> None:
        grid = PegGrid(5, 5)
        grid.reset()
        engine = GenerationEngine(grid, random.Random(5))
        moves = engine.run()
        self.assertEqual(len(moves), engine.moves_applied)
        self.assertEqual(len(engine.index), 0)


class BoardGeneratorTests(unittest.TestCase):
    def _assert_solvable(self, result) -> None:
        grid = result.grid
        params = GameParams(grid.width, grid.height, BoardType.RANDOM)
        state = GameState.from_description(params, result.description())
        for move in result.solution():
            state = state.execute(move)
        self.assertTrue(state.is_solved)
        self.assertEqual(state.grid.cells_of(Cell.PEG), [grid.center])

    def test_five_by_five_boards(self) -> None:
        for seed in range(10):
            result = BoardGenerator(GeneratorConfig(width=5, height=5, seed=seed)).generate()
            desc = result.description()
            self.assertEqual(len(desc), 25)
            self.assertTrue(set(desc) <= {"P", "H", "O"})
            self.assertTrue(result.grid.touches_all_edges())
            self.assertGreaterEqual(result.attempts, 1)
            self.assertTrue(all(m.cost in VALID_COSTS for m in result.reverse_moves))
            self._assert_solvable(result)

    def test_minimum_size_board_terminates(self) -> None:
        for seed in range(5):
            result = BoardGenerator(GeneratorConfig(width=4, height=4, seed=seed)).generate()
            self.assertEqual(len(result.description()), 16)
            self.assertTrue(result.grid.touches_all_edges())
            self._assert_solvable(result)

    def test_rectangular_boards(self) -> None:
        for width, height in [(9, 5), (5, 8)]:
            result = BoardGenerator(GeneratorConfig(width=width, height=height, seed=42)).generate()
            self.assertEqual(len(result.description()), width * height)
            self.assertTrue(result.grid.touches_all_edges())
            self._assert_solvable(result)

    def test_same_seed_gives_identical_board(self) -> None:
        first = BoardGenerator(GeneratorConfig(width=7, height=7, seed=1234)).generate()
        second = BoardGenerator(GeneratorConfig(width=7, height=7, seed=1234)).generate()
        self.assertEqual(first.description(), second.description())
        self.assertEqual(first.reverse_moves, second.reverse_moves)
        self.assertEqual(first.attempts, second.attempts)

    def test_solution_ends_on_the_first_reverse_origin(self) -> None:
        result = BoardGenerator(GeneratorConfig(width=6, height=6, seed=9)).generate()
        solution = result.solution()
        self.assertEqual(len(solution), len(result.reverse_moves))
        last = solution[-1]
        self.assertEqual((last.tx, last.ty), result.grid.center)


class DescriptionTests(unittest.TestCase):
    def test_random_description_is_seeded(self) -> None:
        params = GameParams(6, 6, BoardType.RANDOM)
        first = new_game_description(params, random.Random(8))
        second = new_game_description(params, random.Random(8))
        self.assertEqual(first, second)
        self.assertEqual(len(first), 36)

    def test_fixed_descriptions_ignore_rng(self) -> None:
        params = GameParams(7, 7, BoardType.CROSS)
        desc = new_game_description(params, random.Random(1))
        self.assertEqual(desc, new_game_description(params, random.Random(2)))
        self.assertEqual(desc.count("P"), 32)
        self.assertEqual(desc[3 * 7 + 3], "H")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

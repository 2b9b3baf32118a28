import unittest

from pegs.core.constants import Cell
from pegs.core.exceptions import DescriptionError
from pegs.engine.grid import PegGrid


class GridTests(unittest.TestCase):
    def test_reset_places_single_centre_peg(self) -> None:
        grid = PegGrid(5, 4)
        grid.reset()
        self.assertEqual(grid.center, (2, 2))
        self.assertEqual(grid.cells_of(Cell.PEG), [(2, 2)])
        self.assertEqual(grid.count(Cell.OBSTACLE), 19)

    def test_get_and_set_are_row_major(self) -> None:
        grid = PegGrid(4, 4)
        grid.set(3, 1, Cell.PEG)
        self.assertEqual(grid.get(3, 1), Cell.PEG)
        self.assertEqual(grid.cells[1 * 4 + 3], Cell.PEG)
        self.assertEqual(grid.get(1, 3), Cell.OBSTACLE)

    def test_fill_resets_every_cell(self) -> None:
        grid = PegGrid(4, 4)
        grid.set(0, 0, Cell.PEG)
        grid.fill(Cell.HOLE)
        self.assertEqual(grid.count(Cell.HOLE), 16)

    def test_touches_all_edges_requires_every_border(self) -> None:
        grid = PegGrid(4, 4)
        self.assertFalse(grid.touches_all_edges())
        grid.set(0, 1, Cell.HOLE)   # left
        grid.set(3, 2, Cell.PEG)    # right
        grid.set(1, 0, Cell.PEG)    # top
        self.assertFalse(grid.touches_all_edges())
        grid.set(2, 3, Cell.HOLE)   # bottom
        self.assertTrue(grid.touches_all_edges())

    def test_corner_cell_counts_for_two_edges(self) -> None:
        grid = PegGrid(4, 4)
        grid.set(0, 0, Cell.PEG)
        grid.set(3, 3, Cell.PEG)
        self.assertTrue(grid.touches_all_edges())

    def test_description_uses_peg_hole_obstacle_alphabet(self) -> None:
        grid = PegGrid(4, 4)
        grid.reset()
        grid.set(1, 2, Cell.HOLE)
        desc = grid.to_description()
        self.assertEqual(len(desc), 16)
        self.assertEqual(desc[2 * 4 + 2], "P")
        self.assertEqual(desc[2 * 4 + 1], "H")
        self.assertEqual(set(desc), {"P", "H", "O"})
        self.assertEqual(PegGrid.from_description(4, 4, desc), grid)

    def test_from_description_rejects_bad_input(self) -> None:
        with self.assertRaises(DescriptionError):
            PegGrid.from_description(4, 4, "P" * 15)
        with self.assertRaises(DescriptionError):
            PegGrid.from_description(4, 4, "P" * 15 + "X")

    def test_copy_is_independent(self) -> None:
        grid = PegGrid(4, 4)
        clone = grid.copy()
        clone.set(0, 0, Cell.PEG)
        self.assertEqual(grid.get(0, 0), Cell.OBSTACLE)
        self.assertEqual(clone.to_jsonable()[0], "POOO")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

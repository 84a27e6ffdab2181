import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.maze import Maze
from maze_stepper.core.cell import Cell
from maze_stepper.core.complexity import MazeAnalyzer

class TestMaze(unittest.TestCase):
    def test_single_cell(self):
        maze = Maze.from_seed(1, 1, 0)
        self.assertFalse(maze.step()) # pops the start cell
        self.assertTrue(maze.step())
        self.assertEqual(maze.cell_at(0, 0), Cell(visited=True, right_wall=True, bottom_wall=True))

    def test_two_by_one(self):
        for seed in range(10):
            maze = Maze.from_seed(2, 1, seed)
            self.assertTrue(maze.generate(None))
            self.assertEqual(maze.step_count, 4)

            left, right = maze.cell_at(0, 0), maze.cell_at(1, 0)
            self.assertFalse(left.right_wall)
            self.assertTrue(right.right_wall)
            self.assertTrue(left.visited and right.visited)
            self.assertTrue(left.bottom_wall and right.bottom_wall)

    def test_five_by_five(self):
        maze = Maze.from_seed(5, 5, 2024)
        self.assertTrue(maze.generate())
        self.assertEqual(maze.step_count, 50)
        self.assertEqual(MazeAnalyzer.passage_count(maze.grid), 24)
        self.assertTrue(all(maze.cell_at(x, y).visited for y in range(5) for x in range(5)))
        self.assertEqual(len(MazeAnalyzer.reachable_from(maze.grid, (0, 0))), 25)

    def test_spanning_tree(self):
        for w, h, seed in [(1, 7, 1), (7, 1, 2), (12, 9, 3), (30, 30, 4)]:
            maze = Maze.from_seed(w, h, seed)
            self.assertTrue(maze.generate())
            self.assertTrue(MazeAnalyzer.is_perfect(maze.grid), f"{w}x{h} seed={seed}")

    def test_boundary_before_and_after(self):
        maze = Maze.from_seed(9, 6, 77)
        self.assertTrue(MazeAnalyzer.boundary_intact(maze.grid))
        maze.generate()
        self.assertTrue(MazeAnalyzer.boundary_intact(maze.grid))

    def test_idempotent_completion(self):
        maze = Maze.from_seed(6, 6, 1)
        self.assertTrue(maze.generate())
        snapshot = bytes(maze.bulk_cell_view())
        steps = maze.step_count
        for _ in range(5):
            self.assertTrue(maze.step())
        self.assertTrue(maze.generate(3))
        self.assertEqual(bytes(maze.bulk_cell_view()), snapshot)
        self.assertEqual(maze.step_count, steps)

    def test_determinism(self):
        a = Maze.from_seed(16, 11, 2 ** 63 + 5)
        b = Maze.from_seed(16, 11, 2 ** 63 + 5)
        a.generate()
        while not b.step():
            pass
        self.assertEqual(bytes(a.bulk_cell_view()), bytes(b.bulk_cell_view()))

    def test_different_seeds_differ(self):
        a = Maze.from_seed(20, 20, 1)
        b = Maze.from_seed(20, 20, 2)
        a.generate()
        b.generate()
        self.assertNotEqual(bytes(a.bulk_cell_view()), bytes(b.bulk_cell_view()))

    def test_unseeded(self):
        maze = Maze.new(10, 8)
        self.assertIsNone(maze.seed)
        self.assertEqual((maze.width(), maze.height()), (10, 8))
        self.assertTrue(maze.generate())
        self.assertTrue(MazeAnalyzer.is_perfect(maze.grid))

    def test_unseeded_runs_differ(self):
        a = Maze.new(20, 20)
        b = Maze.new(20, 20)
        a.generate()
        b.generate()
        self.assertNotEqual(bytes(a.bulk_cell_view()), bytes(b.bulk_cell_view()))

    def test_negative_seed_rejected(self):
        with self.assertRaises(ValueError):
            Maze.from_seed(8, 8, -7)

    def test_paused_generation(self):
        maze = Maze.from_seed(10, 10, 3)
        self.assertFalse(maze.generate(25))
        self.assertFalse(maze.is_complete)
        self.assertEqual(maze.step_count, 25)
        self.assertEqual(maze.tail[0], (0, 0))
        self.assertTrue(maze.generate())
        self.assertTrue(maze.is_complete)

    def test_bulk_view_order(self):
        maze = Maze.from_seed(7, 3, 8)
        maze.generate()
        view = maze.bulk_cell_view()
        arr = maze.to_numpy()
        for y in range(3):
            for x in range(7):
                offset = maze.cell_offset(x, y)
                self.assertEqual(offset, x + y * 7)
                self.assertEqual(view[offset], maze.cell_at(x, y).bits)
                self.assertEqual(arr[y, x], view[offset])

    def test_out_of_bounds(self):
        maze = Maze.from_seed(3, 3, 0)
        with self.assertRaises(IndexError):
            maze.cell_at(3, 0)
        with self.assertRaises(IndexError):
            maze.cell_at(0, -1)

    def test_zero_dimension(self):
        maze = Maze.from_seed(0, 4, 0)
        self.assertEqual(maze.width(), 0)
        self.assertEqual(len(maze.bulk_cell_view()), 0)
        with self.assertRaises(IndexError):
            maze.step()

if __name__ == '__main__':
    unittest.main()

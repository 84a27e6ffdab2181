import logging
from typing import List, Optional

import numpy as np

from maze_stepper.core.cell import Cell
from maze_stepper.core.grid import Grid, Position
from maze_stepper.algo.dfs import RecursiveBacktracker

logger = logging.getLogger(__name__)

class Maze:
    """
    Perfect maze over a fixed width x height grid, generated by randomized
    depth-first backtracking.

    Drive it one move at a time with step() (e.g. once per animation frame)
    or in bulk with generate(). All state survives between calls, so a
    generate() that runs out of budget can simply be called again.
    """
    __slots__ = ('grid', 'generator')

    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        self.grid = Grid(width, height)
        self.generator = RecursiveBacktracker(self.grid, seed=seed)
        logger.debug("Created %dx%d maze (seed=%s)", width, height, seed)

    @classmethod
    def new(cls, width: int, height: int) -> "Maze":
        """Seeds the RNG from OS entropy."""
        return cls(width, height)

    @classmethod
    def from_seed(cls, width: int, height: int, seed: int) -> "Maze":
        """
        Same seed and dimensions always reproduce the same maze.
        seed must fit in an unsigned 64-bit integer; anything else raises ValueError.
        """
        return cls(width, height, seed=seed)

    def width(self) -> int:
        return self.grid.width

    def height(self) -> int:
        return self.grid.height

    def cell_offset(self, x: int, y: int) -> int:
        return self.grid.get_index(x, y)

    def cell_at(self, x: int, y: int) -> Cell:
        return self.grid.cell_at(x, y)

    def bulk_cell_view(self) -> memoryview:
        return self.grid.bulk_cell_view()

    def to_numpy(self) -> np.ndarray:
        return self.grid.to_numpy()

    @property
    def seed(self) -> Optional[int]:
        return self.generator.seed

    @property
    def cursor(self) -> Position:
        return self.generator.cursor

    @property
    def tail(self) -> List[Position]:
        return list(self.generator.tail)

    @property
    def step_count(self) -> int:
        return self.generator.step_count

    @property
    def is_complete(self) -> bool:
        return self.generator.is_complete

    def step(self) -> bool:
        return self.generator.step()

    def generate(self, limit: Optional[int] = None) -> bool:
        return self.generator.generate(limit)

    def __repr__(self):
        return f"Maze({self.grid.width}x{self.grid.height}, seed={self.seed}, steps={self.step_count})"

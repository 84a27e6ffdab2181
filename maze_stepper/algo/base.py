import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from maze_stepper.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, seed: Optional[int] = None):
        self.grid = grid
        if seed is not None and not 0 <= seed < 2 ** 64:
            raise ValueError(f"Seed must be an unsigned 64-bit integer, got {seed}")
        self.seed = seed
        # seed=None pulls from OS entropy, so unseeded runs differ
        self.rng = random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def step(self) -> bool:
        """
        Advances generation by one atomic move.
        Returns True once the maze is complete, and keeps returning True.
        """
        pass

    def generate(self, limit: Optional[int] = None) -> bool:
        """
        Steps until completion or until `limit` steps have been taken.
        Returns False when the budget ran out first; calling again resumes.
        """
        if limit is None:
            while True:
                if self.step():
                    return True

        if limit < 0:
            raise ValueError(f"Step limit must be non-negative, got {limit}")
        for _ in range(limit):
            if self.step():
                return True
        return False

    def run(self, batch: int = 100) -> Iterator[str]:
        """
        Yields status strings every `batch` steps, for callers that animate.
        The grid is modified in-place between yields.
        """
        if batch <= 0:
            raise ValueError(f"Batch size must be positive, got {batch}")
        while not self.step():
            if self.step_count % batch == 0:
                yield f"Step {self.step_count}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        return self.generate(None)

import logging
from typing import List, Optional
from maze_stepper.core.cell import Cell
from maze_stepper.core.grid import Direction, Grid, Position
from maze_stepper.algo.base import Generator

logger = logging.getLogger(__name__)

# Order before shuffling; changing it changes every seeded maze
DIRECTIONS = (Direction.LEFT, Direction.RIGHT, Direction.TOP, Direction.BOTTOM)

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carver driven one move at a time.

    `tail` is the backtracking stack. Its bottom entry is the start cell and
    generation is complete exactly when it is empty.
    """
    def __init__(self, grid: Grid, seed: Optional[int] = None):
        super().__init__(grid, seed)

        # Start at (0,0)
        self.cursor = Position(0, 0)
        self.tail: List[Position] = [self.cursor]
        self._completion_counted = False
        if len(grid):
            self.grid.set_visited(0, 0)

    @property
    def is_complete(self) -> bool:
        return not self.tail

    def _pick_direction(self) -> Optional[Direction]:
        directions = list(DIRECTIONS)
        self.rng.shuffle(directions)

        for direction in directions:
            nx, ny = self.cursor.x + direction.dx, self.cursor.y + direction.dy
            if not self.grid.in_bounds(nx, ny):
                continue
            if self.grid.is_visited(nx, ny):
                continue
            return direction
        return None

    def step(self) -> bool:
        if not len(self.grid):
            raise IndexError(f"Cannot step an empty {self.grid.width}x{self.grid.height} grid")

        if self.is_complete:
            if not self._completion_counted:
                self._completion_counted = True
                self.step_count += 1
                logger.debug("Maze %dx%d complete after %d steps",
                             self.grid.width, self.grid.height, self.step_count)
            return True

        direction = self._pick_direction()
        self.step_count += 1

        if direction is not None:
            # Edges belong to the cell on the left / above
            if direction is Direction.RIGHT:
                self.grid.clear_wall(self.cursor.x, self.cursor.y, Cell.RIGHT_WALL)
                self.cursor = direction.apply(self.cursor)
            elif direction is Direction.BOTTOM:
                self.grid.clear_wall(self.cursor.x, self.cursor.y, Cell.BOTTOM_WALL)
                self.cursor = direction.apply(self.cursor)
            elif direction is Direction.LEFT:
                self.cursor = direction.apply(self.cursor)
                self.grid.clear_wall(self.cursor.x, self.cursor.y, Cell.RIGHT_WALL)
            else:
                self.cursor = direction.apply(self.cursor)
                self.grid.clear_wall(self.cursor.x, self.cursor.y, Cell.BOTTOM_WALL)

            self.grid.set_visited(self.cursor.x, self.cursor.y)
            self.tail.append(self.cursor)
            return False

        # Dead end: backtrack
        self.cursor = self.tail.pop()
        return False

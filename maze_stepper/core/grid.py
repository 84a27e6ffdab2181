from array import array
from enum import Enum
from typing import NamedTuple

import numpy as np

from maze_stepper.core.cell import Cell


class Position(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    TOP = (0, -1)
    BOTTOM = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def apply(self, pos: Position) -> Position:
        return Position(pos.x + self.dx, pos.y + self.dy)


class Grid:
    """
    Fixed-size row-major cell store.

    Cell (x, y) lives at offset x + y * width. The store is allocated once
    and never resized, so views handed out by bulk_cell_view() stay valid
    for the lifetime of the grid.
    """
    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [Cell.DEFAULT]) * (width * height)

    def __len__(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return x + y * self.width
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds for {self.width}x{self.height} grid")

    def cell_at(self, x: int, y: int) -> Cell:
        """Returns a detached copy; mutating it does not touch the grid."""
        return Cell.from_bits(self.cells[self.get_index(x, y)])

    # Mutable access, used by the generators

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = self.get_index(x, y)
        if visited:
            self.cells[idx] |= Cell.VISITED
        else:
            self.cells[idx] &= ~Cell.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & Cell.VISITED) != 0

    def clear_wall(self, x: int, y: int, wall: int):
        """wall is Cell.RIGHT_WALL or Cell.BOTTOM_WALL of the owning cell."""
        self.cells[self.get_index(x, y)] &= ~wall

    def has_wall(self, x: int, y: int, wall: int) -> bool:
        return (self.cells[self.get_index(x, y)] & wall) != 0

    # Bulk export

    def bulk_cell_view(self) -> memoryview:
        """Zero-copy, read-only byte view of every cell in row-major order."""
        return memoryview(self.cells).toreadonly()

    def to_numpy(self) -> np.ndarray:
        """
        Read-only (height, width) uint8 array sharing the grid's buffer.
        Later generation steps show through without copying.
        """
        if not self.cells:
            arr = np.zeros((self.height, self.width), dtype=np.uint8)
            arr.flags.writeable = False
            return arr
        arr = np.frombuffer(self.cells, dtype=np.uint8)
        arr = arr.reshape((self.height, self.width))
        arr.flags.writeable = False
        return arr

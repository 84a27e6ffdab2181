class Cell:
    """
    One packed byte of maze state.

    Only the right and bottom edges are stored. The edge to the left of a
    cell lives in its left neighbour's RIGHT_WALL bit, the edge above it in
    the upper neighbour's BOTTOM_WALL bit.
    """
    # Bitmask Constants
    VISITED     = 0b001
    RIGHT_WALL  = 0b010
    BOTTOM_WALL = 0b100

    # Fresh cell: unvisited, both owned walls closed (value 6)
    DEFAULT = RIGHT_WALL | BOTTOM_WALL

    __slots__ = ('bits',)

    def __init__(self, visited: bool = False, right_wall: bool = True, bottom_wall: bool = True):
        self.bits = 0
        self.visited = visited
        self.right_wall = right_wall
        self.bottom_wall = bottom_wall

    @classmethod
    def from_bits(cls, bits: int) -> "Cell":
        cell = cls.__new__(cls)
        cell.bits = bits & 0xFF
        return cell

    def _get(self, flag: int) -> bool:
        return (self.bits & flag) != 0

    def _set(self, flag: int, value: bool):
        if value:
            self.bits |= flag
        else:
            self.bits &= ~flag

    @property
    def visited(self) -> bool:
        return self._get(self.VISITED)

    @visited.setter
    def visited(self, value: bool):
        self._set(self.VISITED, value)

    @property
    def right_wall(self) -> bool:
        return self._get(self.RIGHT_WALL)

    @right_wall.setter
    def right_wall(self, value: bool):
        self._set(self.RIGHT_WALL, value)

    @property
    def bottom_wall(self) -> bool:
        return self._get(self.BOTTOM_WALL)

    @bottom_wall.setter
    def bottom_wall(self, value: bool):
        self._set(self.BOTTOM_WALL, value)

    def copy(self) -> "Cell":
        return Cell.from_bits(self.bits)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.bits == other.bits

    def __repr__(self):
        return (f"Cell(visited={self.visited}, right_wall={self.right_wall}, "
                f"bottom_wall={self.bottom_wall})")

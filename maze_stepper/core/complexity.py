from collections import deque
from typing import Dict, Any, Iterator, Set, Tuple
from maze_stepper.core.cell import Cell
from maze_stepper.core.grid import Grid

class MazeAnalyzer:
    """
    Structural checks over a generated grid.

    Each internal edge is stored once, in the cell to its left or above, so
    an opening on the left/top side of a cell is read from its neighbour.
    """

    @staticmethod
    def open_neighbors(grid: Grid, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yields (nx, ny) for neighbors not blocked by a wall."""
        val = grid.cells[grid.get_index(x, y)]

        if not (val & Cell.RIGHT_WALL) and x < grid.width - 1:
            yield (x + 1, y)
        if not (val & Cell.BOTTOM_WALL) and y < grid.height - 1:
            yield (x, y + 1)
        if x > 0 and not grid.has_wall(x - 1, y, Cell.RIGHT_WALL):
            yield (x - 1, y)
        if y > 0 and not grid.has_wall(x, y - 1, Cell.BOTTOM_WALL):
            yield (x, y - 1)

    @staticmethod
    def passage_count(grid: Grid) -> int:
        """Number of cleared internal edges. Boundary walls never count."""
        count = 0
        for y in range(grid.height):
            for x in range(grid.width):
                val = grid.cells[x + y * grid.width]
                if x < grid.width - 1 and not (val & Cell.RIGHT_WALL):
                    count += 1
                if y < grid.height - 1 and not (val & Cell.BOTTOM_WALL):
                    count += 1
        return count

    @staticmethod
    def reachable_from(grid: Grid, start: Tuple[int, int] = (0, 0)) -> Set[Tuple[int, int]]:
        """Flood fill over cleared edges."""
        if not grid.in_bounds(*start):
            raise IndexError(f"Start {tuple(start)} out of bounds for {grid.width}x{grid.height} grid")
        seen = {tuple(start)}
        queue = deque([tuple(start)])
        while queue:
            cx, cy = queue.popleft()
            for nxt in MazeAnalyzer.open_neighbors(grid, cx, cy):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    @staticmethod
    def boundary_intact(grid: Grid) -> bool:
        for y in range(grid.height):
            if not grid.has_wall(grid.width - 1, y, Cell.RIGHT_WALL):
                return False
        for x in range(grid.width):
            if not grid.has_wall(x, grid.height - 1, Cell.BOTTOM_WALL):
                return False
        return True

    @staticmethod
    def all_visited(grid: Grid) -> bool:
        return all(val & Cell.VISITED for val in grid.cells)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        Spanning tree check: n-1 passages plus connectivity rules out cycles.
        """
        total = grid.width * grid.height
        if total == 0:
            return False
        if not MazeAnalyzer.all_visited(grid):
            return False
        if not MazeAnalyzer.boundary_intact(grid):
            return False
        if MazeAnalyzer.passage_count(grid) != total - 1:
            return False
        return len(MazeAnalyzer.reachable_from(grid, (0, 0))) == total

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        dead_ends = 0
        corridors = 0
        intersections = 0 # 3 or 4 exits

        for y in range(grid.height):
            for x in range(grid.width):
                exits = sum(1 for _ in MazeAnalyzer.open_neighbors(grid, x, y))
                if exits == 1: dead_ends += 1
                elif exits == 2: corridors += 1
                elif exits >= 3: intersections += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": MazeAnalyzer.passage_count(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

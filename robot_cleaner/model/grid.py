"""Grid map management for the robot cleaner simulation."""

from enum import IntEnum
from typing import Iterable, Optional, Tuple

import numpy as np


class CellType(IntEnum):
    """Possible states for a single grid cell."""
    EMPTY = 0
    DIRT = 1
    OBSTACLE = 2
    CLEANED = 3


class GridMap:
    """
    Fixed width x height cleaning surface.

    Origin (0, 0) is the top-left corner, x grows rightward and y grows
    downward. Coordinate convention: (x, y) for API, [y, x] for array indexing.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

        self.cells = np.full((height, width), CellType.EMPTY, dtype=np.int8)

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Optional[CellType]:
        """Return the cell state, or None outside the grid."""
        if not self.is_in_bounds(x, y):
            return None
        return CellType(int(self.cells[y, x]))

    def is_dirt(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) == CellType.DIRT

    def is_obstacle(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) == CellType.OBSTACLE

    def is_cleaned(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) == CellType.CLEANED

    def add_obstacle(self, x: int, y: int) -> None:
        """Mark cell as obstacle (setup only, ignored outside the grid)."""
        if self.is_in_bounds(x, y):
            self.cells[y, x] = CellType.OBSTACLE

    def add_dirt(self, x: int, y: int) -> None:
        """Mark cell as dirty (setup only, ignored outside the grid)."""
        if self.is_in_bounds(x, y):
            self.cells[y, x] = CellType.DIRT

    def add_obstacle_points(self, coords: Iterable[Tuple[int, int]]) -> None:
        for x, y in coords:
            self.add_obstacle(x, y)

    def add_dirt_points(self, coords: Iterable[Tuple[int, int]]) -> None:
        for x, y in coords:
            self.add_dirt(x, y)

    def add_obstacle_rectangle(self, x: int, y: int, w: int, h: int) -> None:
        """Mark rectangular region as obstacle."""
        # Clamp to grid boundaries
        x_end = min(x + w, self.width)
        y_end = min(y + h, self.height)
        x = max(0, x)
        y = max(0, y)
        self.cells[y:y_end, x:x_end] = CellType.OBSTACLE

    def clean(self, x: int, y: int) -> None:
        if self.is_in_bounds(x, y):
            self.cells[y, x] = CellType.CLEANED

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.cells == cell_type))

    def free_cell_count(self) -> int:
        """Number of cells a robot could ever stand on."""
        return self.width * self.height - self.count(CellType.OBSTACLE)

    def coverage(self) -> float:
        """Fraction of non-obstacle cells marked cleaned."""
        free = self.free_cell_count()
        if free == 0:
            return 0.0
        return self.count(CellType.CLEANED) / free

    def obstacle_mask(self) -> np.ndarray:
        return self.cells == CellType.OBSTACLE

    def copy_cells(self) -> np.ndarray:
        return self.cells.copy()

    def __repr__(self) -> str:
        return f"GridMap(width={self.width}, height={self.height})"

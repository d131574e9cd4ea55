"""Text rendering of the grid for the robot cleaner simulation."""

import sys
import time
from typing import TextIO, Optional, TYPE_CHECKING

from ..model.grid import CellType

if TYPE_CHECKING:
    from ..model.grid import GridMap
    from ..model.state import StepRecord


CLEAR_SCREEN = "\033[2J\033[H"


class ConsoleRenderer:
    """
    Redraws the whole grid after every robot step.

    Legend: # = obstacle, D = dirt, . = empty, R = robot, C = cleaned.
    """

    SYMBOLS = {
        CellType.EMPTY: '.',
        CellType.DIRT: 'D',
        CellType.OBSTACLE: '#',
        CellType.CLEANED: 'C',
    }

    def __init__(self, delay: float = 0.1, stream: Optional[TextIO] = None,
                 clear: bool = True):
        self.delay = delay
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear

    def render(self, grid: "GridMap", robot_x: int, robot_y: int) -> str:
        """Return the frame text for a grid and robot position."""
        lines = [
            "Vacuum cleaner robot simulation",
            "-" * 32,
            "Legends: #=Obstacles, D=Dirt, .=Empty, R=Robot, C=Cleaned",
        ]
        for y in range(grid.height):
            row = []
            for x in range(grid.width):
                if x == robot_x and y == robot_y:
                    row.append('R')
                else:
                    row.append(self.SYMBOLS[grid.cell_at(x, y)])
            lines.append(" ".join(row))
        return "\n".join(lines)

    def update(self, record: "StepRecord", grid: "GridMap") -> None:
        """Draw one frame, then pause for the configured delay."""
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(self.render(grid, record.x, record.y) + "\n")
        self.stream.flush()
        if self.delay > 0:
            time.sleep(self.delay)

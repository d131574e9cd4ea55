"""Robot agent that moves over the grid and cleans cells."""

from enum import Enum
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from .grid import GridMap

if TYPE_CHECKING:
    from .strategies import RunOutcome


class StepEvent(Enum):
    """What the robot just did."""
    MOVE = "move"
    CLEAN = "clean"


StepCallback = Callable[[GridMap, int, int, StepEvent], None]


class Robot:
    """
    Single cleaning robot bound to a grid it does not own.

    The robot never leaves the grid and never stands on an obstacle:
    every position change goes through attempt_move, which checks both.
    """

    def __init__(self, grid: GridMap,
                 start: Tuple[int, int] = (0, 0),
                 on_step: Optional[StepCallback] = None):
        if not grid.is_in_bounds(*start):
            raise ValueError(f"Start position {start} is outside the grid")
        self.grid = grid
        self.x, self.y = start
        self.on_step = on_step

        self.moves_attempted = 0
        self.moves_succeeded = 0
        self.cleans = 0
        self.attempts: List[Tuple[int, int]] = []
        self.path: List[Tuple[int, int]] = []

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def _notify(self, event: StepEvent) -> None:
        if self.on_step is not None:
            self.on_step(self.grid, self.x, self.y, event)

    def attempt_move(self, new_x: int, new_y: int) -> bool:
        """Move to (new_x, new_y) if it is in bounds and not an obstacle."""
        self.moves_attempted += 1
        self.attempts.append((new_x, new_y))

        if not self.grid.is_in_bounds(new_x, new_y) or self.grid.is_obstacle(new_x, new_y):
            return False

        self.x, self.y = new_x, new_y
        self.moves_succeeded += 1
        self.path.append((new_x, new_y))
        self._notify(StepEvent.MOVE)
        return True

    def clean_current_spot(self) -> None:
        """
        Clean the cell under the robot.

        The obstacle test duplicates the guard in attempt_move, so in
        practice every non-obstacle cell under the robot gets cleaned.
        """
        if self.grid.is_dirt(self.x, self.y) or not self.grid.is_obstacle(self.x, self.y):
            self.grid.clean(self.x, self.y)
            self.cleans += 1
            self._notify(StepEvent.CLEAN)

    def run_strategy(self, strategy) -> "RunOutcome":
        return strategy.clean(self)

    def __repr__(self) -> str:
        return (f"Robot(pos={self.position}, "
                f"moves={self.moves_succeeded}/{self.moves_attempted})")

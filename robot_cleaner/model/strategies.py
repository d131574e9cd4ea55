"""Cleaning strategies that drive a robot across the grid."""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Type

import numpy as np

from .agent import Robot


class RunOutcome(Enum):
    """How a strategy run ended."""
    COMPLETE = "complete"
    STUCK = "stuck"
    STALLED = "stalled"


class StrategyKind(Enum):
    """Closed set of selectable strategies."""
    SWEEP = "sweep"
    PERIMETER = "perimeter"
    SPIRAL = "spiral"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> "StrategyKind":
        """Resolve a strategy name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown strategy: {name!r} (choose from {choices})") from None


_LABELS = {
    StrategyKind.SWEEP: "Zig-Zag (Row by Row)",
    StrategyKind.PERIMETER: "Perimeter Hugger",
    StrategyKind.SPIRAL: "Spiral Cleaner (Center Out, Complete)",
}

# Right, Down, Left, Up
DIRECTIONS: List[Tuple[int, int]] = [(1, 0), (0, 1), (-1, 0), (0, -1)]


class SweepStrategy:
    """
    Boustrophedon sweep: left-to-right on even rows, right-to-left on odd rows.

    Every x of every row is attempted even when the move is blocked, so a
    blocked move re-cleans the cell the robot is still standing on.
    """

    kind = StrategyKind.SWEEP

    def clean(self, robot: Robot) -> RunOutcome:
        direction = 1
        for y in range(robot.grid.height):
            if direction == 1:
                xs = range(robot.grid.width)
            else:
                xs = range(robot.grid.width - 1, -1, -1)

            for x in xs:
                robot.attempt_move(x, y)
                robot.clean_current_spot()
            direction *= -1

        return RunOutcome.COMPLETE


class PerimeterStrategy:
    """
    Walk the outer ring from the top-left corner.

    Each of the four directions is followed until the first blocked move.
    Interior cells are never visited.
    """

    kind = StrategyKind.PERIMETER

    def clean(self, robot: Robot) -> RunOutcome:
        robot.attempt_move(0, 0)
        robot.clean_current_spot()

        for dx, dy in DIRECTIONS:
            while robot.attempt_move(robot.x + dx, robot.y + dy):
                robot.clean_current_spot()

        return RunOutcome.COMPLETE


class SpiralState(Enum):
    """Phases of a spiral run."""
    ADVANCING = "advancing"
    REDIRECTING = "redirecting"
    TERMINATED = "terminated"


class SpiralStrategy:
    """
    Expanding square spiral from the grid center.

    Segment lengths follow 1, 1, 2, 2, 3, 3, ... with a clockwise turn after
    each segment. A blocked step rotates clockwise up to four times before
    the run gives up as stuck. The run completes once every non-obstacle
    cell has been visited; obstacles are marked visited up front.

    By default the run only ends as complete or stuck; on layouts the
    spiral cannot finish it keeps circling. Passing ``max_idle_steps``
    stops the run as stalled after that many consecutive steps that only
    revisit known cells.
    """

    kind = StrategyKind.SPIRAL

    def __init__(self, max_idle_steps: Optional[int] = None):
        self.max_idle_steps = max_idle_steps
        self.state = SpiralState.ADVANCING
        self.outcome: Optional[RunOutcome] = None
        self.visited: Optional[np.ndarray] = None

    def _step(self, robot: Robot, direction: int) -> bool:
        dx, dy = DIRECTIONS[direction]
        return robot.attempt_move(robot.x + dx, robot.y + dy)

    def _finish(self, outcome: RunOutcome) -> RunOutcome:
        self.state = SpiralState.TERMINATED
        self.outcome = outcome
        return outcome

    def clean(self, robot: Robot) -> RunOutcome:
        grid = robot.grid
        self.state = SpiralState.ADVANCING
        self.outcome = None

        robot.attempt_move(grid.width // 2, grid.height // 2)
        robot.clean_current_spot()

        # Fresh overlay per run, obstacles pre-visited
        visited = grid.obstacle_mask()
        visited[robot.y, robot.x] = True
        self.visited = visited

        if visited.all():
            return self._finish(RunOutcome.COMPLETE)

        idle_limit = self.max_idle_steps

        direction = 0
        segment_length = 1
        steps_taken = 0
        turn_count = 0
        idle_steps = 0

        while True:
            self.state = SpiralState.ADVANCING
            moved = self._step(robot, direction)

            if not moved:
                self.state = SpiralState.REDIRECTING
                tried = 0
                while not moved and tried < 4:
                    direction = (direction + 1) % 4
                    moved = self._step(robot, direction)
                    tried += 1

                if not moved:
                    return self._finish(RunOutcome.STUCK)
                self.state = SpiralState.ADVANCING

            robot.clean_current_spot()
            if visited[robot.y, robot.x]:
                idle_steps += 1
            else:
                idle_steps = 0
                visited[robot.y, robot.x] = True

            steps_taken += 1
            if steps_taken == segment_length:
                direction = (direction + 1) % 4
                steps_taken = 0
                turn_count += 1
                if turn_count % 2 == 0:
                    segment_length += 1

            if visited.all():
                return self._finish(RunOutcome.COMPLETE)
            if idle_limit is not None and idle_steps >= idle_limit:
                return self._finish(RunOutcome.STALLED)


STRATEGIES: Dict[StrategyKind, Type] = {
    StrategyKind.SWEEP: SweepStrategy,
    StrategyKind.PERIMETER: PerimeterStrategy,
    StrategyKind.SPIRAL: SpiralStrategy,
}


def make_strategy(kind, **options):
    """Build a strategy from a StrategyKind or its name."""
    if isinstance(kind, str):
        kind = StrategyKind.parse(kind)
    return STRATEGIES[kind](**options)

"""Simulation engine for the robot cleaner."""

from typing import List, Dict, Iterable, Optional, TYPE_CHECKING

from .grid import GridMap, CellType
from .agent import Robot, StepEvent
from .strategies import StrategyKind, RunOutcome, make_strategy
from .state import SimulationState, StepRecord

if TYPE_CHECKING:
    from ..config import SimulationConfig


class SimulationEngine:
    """
    Builds one grid and one robot, then runs a single strategy to completion.

    Implements:
    1. Grid construction and obstacle/dirt placement
    2. Robot placement at the top-left corner
    3. Strategy selection
    4. Fan-out of every robot step to the registered listeners

    Listeners expose ``update(record, grid)``; they are called synchronously
    after each successful move and each clean.
    """

    def __init__(self, config: "SimulationConfig",
                 listeners: Iterable = (),
                 strategy: Optional[StrategyKind] = None):
        self.config = config
        self.current_step = 0
        self.listeners = list(listeners)
        self.history: List[StepRecord] = []

        kind = strategy or config.strategy
        if kind is None:
            raise ValueError("No cleaning strategy selected")
        self.kind = kind

        # Initialize grid
        self.grid = GridMap(config.grid.width, config.grid.height)
        self._setup_obstacles()
        self.grid.add_dirt_points(config.layout.dirt)
        self.initial_dirt = self.grid.count(CellType.DIRT)

        self.robot = Robot(self.grid, start=(0, 0), on_step=self._on_step)

        options = {}
        if kind is StrategyKind.SPIRAL:
            options['max_idle_steps'] = config.spiral.max_idle_steps
        self.strategy = make_strategy(kind, **options)

        self.outcome: Optional[RunOutcome] = None

    def _setup_obstacles(self) -> None:
        """Configure obstacles from config."""
        for spec in self.config.layout.obstacles:
            if spec.obstacle_type == "rectangle":
                self.grid.add_obstacle_rectangle(
                    spec.data['x'], spec.data['y'],
                    spec.data['width'], spec.data['height']
                )
            elif spec.obstacle_type == "points":
                self.grid.add_obstacle_points(spec.data['coords'])

    def add_listener(self, listener) -> None:
        self.listeners.append(listener)

    def _on_step(self, grid: GridMap, x: int, y: int, event: StepEvent) -> None:
        self.current_step += 1
        record = StepRecord(
            step=self.current_step,
            event=event.value,
            x=x,
            y=y,
            cleaned_cells=grid.count(CellType.CLEANED)
        )
        self.history.append(record)
        for listener in self.listeners:
            listener.update(record, grid)

    def run(self) -> SimulationState:
        """Run the selected strategy until its own completion condition."""
        self.outcome = self.robot.run_strategy(self.strategy)
        return self._create_state_snapshot()

    def is_finished(self) -> bool:
        return self.outcome is not None

    def _create_state_snapshot(self) -> SimulationState:
        return SimulationState(
            strategy=self.kind.value,
            outcome=self.outcome.value if self.outcome else "",
            robot_x=self.robot.x,
            robot_y=self.robot.y,
            cells=self.grid.copy_cells(),
            path=list(self.robot.path),
            metrics=self.get_summary()
        )

    def get_summary(self) -> Dict:
        """Get summary statistics for the run."""
        return {
            'total_steps': self.current_step,
            'moves_attempted': self.robot.moves_attempted,
            'moves_succeeded': self.robot.moves_succeeded,
            'cleans': self.robot.cleans,
            'cleaned_cells': self.grid.count(CellType.CLEANED),
            'free_cells': self.grid.free_cell_count(),
            'initial_dirt': self.initial_dirt,
            'dirt_remaining': self.grid.count(CellType.DIRT),
            'coverage': self.grid.coverage()
        }

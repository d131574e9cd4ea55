"""State snapshot dataclasses for the robot cleaner simulation."""

from dataclasses import dataclass
from typing import List, Dict, Tuple
import numpy as np


@dataclass(frozen=True)
class StepRecord:
    """Immutable record of one robot callback."""
    step: int
    event: str  # "move" or "clean"
    x: int
    y: int
    cleaned_cells: int

    def to_csv_row(self) -> Dict:
        return {
            "step": self.step,
            "event": self.event,
            "x": self.x,
            "y": self.y,
            "cleaned_cells": self.cleaned_cells,
        }


@dataclass
class SimulationState:
    """Snapshot of the simulation once the strategy has finished."""
    strategy: str
    outcome: str                 # "complete", "stuck", "stalled"
    robot_x: int
    robot_y: int
    cells: np.ndarray            # Copy of the grid cells
    path: List[Tuple[int, int]]  # Successful move targets, in order
    metrics: Dict[str, float]    # moves, cleans, coverage, etc.

"""Model package for the robot cleaner simulation."""

from .state import StepRecord, SimulationState
from .grid import GridMap, CellType
from .agent import Robot, StepEvent
from .strategies import (
    StrategyKind,
    RunOutcome,
    SpiralState,
    SweepStrategy,
    PerimeterStrategy,
    SpiralStrategy,
    make_strategy,
)
from .engine import SimulationEngine

__all__ = [
    'StepRecord',
    'SimulationState',
    'GridMap',
    'CellType',
    'Robot',
    'StepEvent',
    'StrategyKind',
    'RunOutcome',
    'SpiralState',
    'SweepStrategy',
    'PerimeterStrategy',
    'SpiralStrategy',
    'make_strategy',
    'SimulationEngine',
]

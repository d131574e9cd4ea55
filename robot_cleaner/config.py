"""Configuration dataclasses and YAML loader for the robot cleaner simulation."""

from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Any, Optional
from pathlib import Path
import yaml

from .model.strategies import StrategyKind


@dataclass
class GridConfig:
    width: int
    height: int


@dataclass
class ObstacleSpec:
    obstacle_type: str  # "rectangle" or "points"
    data: Dict[str, Any]


@dataclass
class LayoutConfig:
    dirt: List[Tuple[int, int]]
    obstacles: List[ObstacleSpec]


@dataclass
class SpiralConfig:
    max_idle_steps: Optional[int] = None


DEFAULT_ROOM_IDLE_LIMIT = 2000


@dataclass
class DisplayConfig:
    enabled: bool = True
    delay: float = 0.1  # seconds paused after each render


@dataclass
class SimulationConfig:
    grid: GridConfig
    layout: LayoutConfig
    strategy: Optional[StrategyKind] = None
    spiral: SpiralConfig = field(default_factory=SpiralConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = True
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def _parse_obstacles(obstacles_raw: List[Dict]) -> List[ObstacleSpec]:
    """Parse obstacle specifications from raw YAML data."""
    obstacles = []
    for o in obstacles_raw:
        obstacle_type = o.get('type', 'points')
        if obstacle_type == 'rectangle':
            data = {
                'x': o['x'],
                'y': o['y'],
                'width': o['width'],
                'height': o['height']
            }
        elif obstacle_type == 'points':
            data = {'coords': [tuple(c) for c in o['coords']]}
        else:
            raise ValueError(f"Unknown obstacle type: {obstacle_type}")
        obstacles.append(ObstacleSpec(obstacle_type=obstacle_type, data=data))
    return obstacles


def _parse_strategy(name: Optional[str]) -> Optional[StrategyKind]:
    if name is None:
        return None
    return StrategyKind.parse(str(name))


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    grid = GridConfig(
        width=raw['grid']['width'],
        height=raw['grid']['height']
    )
    if grid.width <= 0 or grid.height <= 0:
        raise ValueError(f"Grid size must be positive, got {grid.width}x{grid.height}")

    layout_raw = raw.get('layout') or {}
    layout = LayoutConfig(
        dirt=[tuple(c) for c in layout_raw.get('dirt') or []],
        obstacles=_parse_obstacles(layout_raw.get('obstacles') or [])
    )

    spiral_raw = raw.get('spiral') or {}
    display_raw = raw.get('display') or {}

    # Parse export config (optional)
    export_raw = raw.get('export') or {}

    return SimulationConfig(
        grid=grid,
        layout=layout,
        strategy=_parse_strategy(raw.get('strategy')),
        spiral=SpiralConfig(max_idle_steps=spiral_raw.get('max_idle_steps')),
        display=DisplayConfig(
            enabled=display_raw.get('enabled', True),
            delay=display_raw.get('delay', 0.1)
        ),
        csv_enabled=export_raw.get('csv', True),
        snapshot_enabled=export_raw.get('snapshot', True),
        gif_enabled=export_raw.get('gif', False)
    )


def default_config() -> SimulationConfig:
    """
    Built-in 20x15 room used when no config file is given.

    The spiral never reaches every cell of this room, so the spiral run is
    bounded by an idle-step limit.
    """
    return SimulationConfig(
        grid=GridConfig(width=20, height=15),
        layout=LayoutConfig(
            dirt=[(5, 3), (10, 8), (1, 1), (15, 10), (12, 5), (18, 13)],
            obstacles=[
                ObstacleSpec(
                    obstacle_type='points',
                    data={'coords': [(2, 5), (9, 1), (6, 7), (14, 4), (10, 12)]}
                )
            ]
        ),
        spiral=SpiralConfig(max_idle_steps=DEFAULT_ROOM_IDLE_LIMIT)
    )

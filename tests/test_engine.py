"""Tests for the simulation engine."""

import pytest

from robot_cleaner.config import (
    SimulationConfig, GridConfig, LayoutConfig, ObstacleSpec, SpiralConfig,
    default_config,
)
from robot_cleaner.model.engine import SimulationEngine
from robot_cleaner.model.grid import CellType
from robot_cleaner.model.strategies import StrategyKind, RunOutcome, SpiralStrategy


class RecordingListener:
    def __init__(self):
        self.records = []

    def update(self, record, grid):
        assert grid.is_in_bounds(record.x, record.y)
        assert not grid.is_obstacle(record.x, record.y)
        self.records.append(record)


def _config(width, height, obstacles=(), dirt=(), strategy=None):
    return SimulationConfig(
        grid=GridConfig(width=width, height=height),
        layout=LayoutConfig(
            dirt=list(dirt),
            obstacles=[ObstacleSpec(obstacle_type='points',
                                    data={'coords': list(obstacles)})]
        ),
        strategy=strategy,
    )


def test_sweep_end_to_end_with_center_obstacle():
    config = _config(3, 3, obstacles=[(1, 1)], strategy=StrategyKind.SWEEP)
    engine = SimulationEngine(config)
    state = engine.run()

    assert state.outcome == "complete"
    assert state.metrics['moves_attempted'] == 9
    assert state.metrics['moves_succeeded'] == 8
    assert state.metrics['cleaned_cells'] == 8
    assert state.cells[1, 1] == CellType.OBSTACLE
    assert state.metrics['coverage'] == pytest.approx(1.0)


def test_listeners_receive_every_step():
    listener = RecordingListener()
    config = _config(4, 4, dirt=[(3, 3)], strategy=StrategyKind.SPIRAL)
    engine = SimulationEngine(config, listeners=[listener])
    engine.run()

    assert listener.records == engine.history
    assert [r.step for r in listener.records] == list(range(1, len(listener.records) + 1))
    assert {r.event for r in listener.records} == {"move", "clean"}
    assert listener.records[-1].cleaned_cells == 16


def test_rectangle_obstacles_and_dirt_are_applied():
    config = SimulationConfig(
        grid=GridConfig(width=6, height=4),
        layout=LayoutConfig(
            dirt=[(0, 3), (5, 0)],
            obstacles=[ObstacleSpec(obstacle_type='rectangle',
                                    data={'x': 2, 'y': 1, 'width': 2, 'height': 2})]
        ),
        strategy=StrategyKind.PERIMETER,
    )
    engine = SimulationEngine(config)
    assert engine.grid.count(CellType.OBSTACLE) == 4
    assert engine.initial_dirt == 2

    state = engine.run()
    # Both dirt cells sit on the outer ring
    assert state.metrics['dirt_remaining'] == 0


def test_strategy_argument_overrides_config():
    config = _config(3, 3, strategy=StrategyKind.SWEEP)
    engine = SimulationEngine(config, strategy=StrategyKind.PERIMETER)
    assert engine.kind is StrategyKind.PERIMETER
    assert engine.run().strategy == "perimeter"


def test_missing_strategy_is_rejected():
    with pytest.raises(ValueError):
        SimulationEngine(_config(3, 3))


def test_spiral_idle_limit_comes_from_config():
    config = _config(3, 3, strategy=StrategyKind.SPIRAL)
    config.spiral = SpiralConfig(max_idle_steps=11)
    engine = SimulationEngine(config)
    assert isinstance(engine.strategy, SpiralStrategy)
    assert engine.strategy.max_idle_steps == 11


def test_is_finished_after_run():
    engine = SimulationEngine(_config(2, 2, strategy=StrategyKind.SWEEP))
    assert not engine.is_finished()
    engine.run()
    assert engine.is_finished()
    assert engine.outcome is RunOutcome.COMPLETE


@pytest.mark.parametrize("kind", list(StrategyKind))
def test_default_room_runs_for_every_strategy(kind):
    config = default_config()
    config.strategy = kind
    listener = RecordingListener()
    engine = SimulationEngine(config, listeners=[listener])
    state = engine.run()

    assert state.outcome in {o.value for o in RunOutcome}
    assert engine.grid.count(CellType.OBSTACLE) == 5
    assert state.metrics['total_steps'] == len(listener.records)
    assert 0.0 < state.metrics['coverage'] <= 1.0


def test_sweep_cleans_every_free_cell_of_default_room():
    config = default_config()
    config.strategy = StrategyKind.SWEEP
    state = SimulationEngine(config).run()

    assert state.metrics['moves_attempted'] == 20 * 15
    assert state.metrics['moves_succeeded'] == 20 * 15 - 5
    assert state.metrics['dirt_remaining'] == 0
    assert state.metrics['cleaned_cells'] == 20 * 15 - 5


def test_spiral_runs_unbounded_unless_configured():
    engine = SimulationEngine(_config(1, 8, strategy=StrategyKind.SPIRAL))
    assert engine.strategy.max_idle_steps is None

    state = engine.run()
    assert state.outcome == "complete"
    assert state.metrics['cleaned_cells'] == 8


def test_default_room_spiral_stalls_at_configured_limit():
    config = default_config()
    config.strategy = StrategyKind.SPIRAL
    state = SimulationEngine(config).run()

    assert state.outcome == "stalled"
    assert state.metrics['cleaned_cells'] < state.metrics['free_cells']

"""Tests for configuration loading."""

from pathlib import Path

import pytest

from robot_cleaner.config import load_config, default_config
from robot_cleaner.model.strategies import StrategyKind


CONFIG_YAML = """
grid:
  width: 8
  height: 6
strategy: Spiral
layout:
  dirt:
    - [1, 2]
    - [7, 5]
  obstacles:
    - type: points
      coords: [[3, 3], [4, 4]]
    - type: rectangle
      x: 0
      y: 0
      width: 2
      height: 1
spiral:
  max_idle_steps: 50
display:
  enabled: false
  delay: 0
export:
  csv: false
  gif: true
"""


def _write(tmp_path, text):
    path = tmp_path / "room.yaml"
    path.write_text(text)
    return path


def test_load_full_config(tmp_path):
    config = load_config(_write(tmp_path, CONFIG_YAML))

    assert config.grid.width == 8
    assert config.grid.height == 6
    assert config.strategy is StrategyKind.SPIRAL
    assert config.layout.dirt == [(1, 2), (7, 5)]
    assert [o.obstacle_type for o in config.layout.obstacles] == ['points', 'rectangle']
    assert config.layout.obstacles[0].data['coords'] == [(3, 3), (4, 4)]
    assert config.layout.obstacles[1].data == {'x': 0, 'y': 0, 'width': 2, 'height': 1}
    assert config.spiral.max_idle_steps == 50
    assert config.display.enabled is False
    assert config.display.delay == 0
    assert config.csv_enabled is False
    assert config.snapshot_enabled is True
    assert config.gif_enabled is True


def test_minimal_config_uses_defaults(tmp_path):
    config = load_config(_write(tmp_path, "grid: {width: 3, height: 2}\n"))

    assert config.strategy is None
    assert config.layout.dirt == []
    assert config.layout.obstacles == []
    assert config.spiral.max_idle_steps is None
    assert config.display.enabled is True
    assert config.display.delay == pytest.approx(0.1)
    assert config.out_dir == Path("./output")


def test_unknown_obstacle_type(tmp_path):
    text = "grid: {width: 3, height: 3}\nlayout:\n  obstacles:\n    - type: circle\n"
    with pytest.raises(ValueError, match="circle"):
        load_config(_write(tmp_path, text))


def test_unknown_strategy(tmp_path):
    text = "grid: {width: 3, height: 3}\nstrategy: random\n"
    with pytest.raises(ValueError, match="random"):
        load_config(_write(tmp_path, text))


def test_non_positive_grid(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "grid: {width: 0, height: 3}\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_default_config():
    config = default_config()
    assert (config.grid.width, config.grid.height) == (20, 15)
    assert len(config.layout.dirt) == 6
    assert len(config.layout.obstacles[0].data['coords']) == 5
    assert config.strategy is None


def test_shipped_config_loads():
    path = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
    config = load_config(path)
    assert config.strategy is StrategyKind.SPIRAL
    assert len(config.layout.dirt) == 6


def test_null_sections_fall_back_to_defaults(tmp_path):
    text = "grid: {width: 4, height: 4}\nlayout: null\nspiral: null\nexport: null\n"
    config = load_config(_write(tmp_path, text))
    assert config.layout.dirt == []
    assert config.layout.obstacles == []
    assert config.spiral.max_idle_steps is None


def test_null_layout_lists(tmp_path):
    text = "grid: {width: 4, height: 4}\nlayout:\n  dirt: null\n  obstacles: null\n"
    config = load_config(_write(tmp_path, text))
    assert config.layout.dirt == []
    assert config.layout.obstacles == []


def test_built_in_room_bounds_the_spiral():
    assert default_config().spiral.max_idle_steps == 2000
    path = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
    assert load_config(path).spiral.max_idle_steps == 2000

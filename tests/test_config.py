"""Tests for SimulationConfig."""

import json

import pytest

from snake_sim.config import SimulationConfig
from snake_sim.simulation import Simulation


class TestSimulationConfig:
    def test_defaults(self):
        cfg = SimulationConfig()
        assert cfg.width == 10
        assert cfg.height == 10
        assert cfg.spawn_body == ((3, 3), (3, 2))
        assert cfg.tick_interval == pytest.approx(0.15)
        assert cfg.seed is None

    def test_frozen(self):
        cfg = SimulationConfig()
        with pytest.raises(AttributeError):
            cfg.width = 20  # type: ignore[misc]

    def test_grid_too_small(self):
        with pytest.raises(ValueError, match="width must be at least 1"):
            SimulationConfig(width=0)

    def test_small_grid_with_fitting_spawn(self):
        cfg = SimulationConfig(
            width=2, height=2, spawn_head=(0, 1), spawn_tail=(0, 0),
        )
        sim = Simulation(cfg)
        assert sim.snapshot().cells == ((0, 1), (0, 0))

    @pytest.mark.parametrize("width", [10.5, 10.0, "10", True])
    def test_non_int_width_rejected(self, width):
        with pytest.raises(ValueError, match="width must be an int"):
            SimulationConfig(width=width)

    def test_non_int_height_rejected(self):
        with pytest.raises(ValueError, match="height must be an int"):
            SimulationConfig(height=9.5)

    def test_load_rejects_float_dimensions(self, tmp_path):
        path = tmp_path / "config.json"
        raw = SimulationConfig().to_dict()
        raw["width"] = 10.0
        path.write_text(json.dumps(raw))
        with pytest.raises(ValueError, match="width must be an int"):
            SimulationConfig.load(path)

    def test_spawn_outside_grid(self):
        with pytest.raises(ValueError, match="outside the grid"):
            SimulationConfig(spawn_head=(10, 3), spawn_tail=(9, 3))

    def test_spawn_not_adjacent(self):
        with pytest.raises(ValueError, match="adjacent"):
            SimulationConfig(spawn_head=(3, 3), spawn_tail=(3, 1))

    def test_invalid_attempts(self):
        with pytest.raises(ValueError, match="max_spawn_attempts"):
            SimulationConfig(max_spawn_attempts=0)

    def test_invalid_tick_interval(self):
        with pytest.raises(ValueError, match="tick_interval"):
            SimulationConfig(tick_interval=0)

    def test_save_load_roundtrip(self, tmp_path):
        cfg = SimulationConfig(width=12, height=8, seed=5, tick_interval=0.1)
        path = tmp_path / "sub" / "config.json"
        cfg.save(path)
        assert path.exists()
        assert SimulationConfig.load(path) == cfg

    def test_to_dict_is_json(self):
        d = SimulationConfig().to_dict()
        assert d["spawn_head"] == [3, 3]
        json.dumps(d)

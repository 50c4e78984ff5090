import pytest

from cubesnake.cli import parse_args
from cubesnake.config import GameConfig


def test_defaults():
    args, config = parse_args([])
    assert config == GameConfig()
    assert config.window_size == (600, 400)
    assert not args.headless
    assert args.frames is None


def test_flags_reach_config():
    args, config = parse_args(["--width", "40", "--height", "25", "--tick-ms", "80", "--seed", "3", "--mute"])
    assert (config.width, config.height) == (40, 25)
    assert config.tick_ms == 80
    assert config.seed == 3
    assert config.muted


def test_grid_too_small_for_start_snake_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--width", "8"])


@pytest.mark.parametrize("kwargs", [{"height": 12}, {"cell_size": 2}, {"tick_ms": 0}])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)

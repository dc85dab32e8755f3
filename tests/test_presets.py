import pytest

from boids import Flock
from config import boids as config
from tools.presets import (
    CATEGORY_ORDER, PRESETS, get_preset_by_index, get_preset_config, get_preset_list, print_preset_menu
)

REQUIRED_KEYS = {"name", "description", "category", "num_boids", "sphere_radius", "total_frames", "dt_per_frame"}


@pytest.mark.parametrize("key", sorted(PRESETS))
def test_preset_schema(key):
    preset = PRESETS[key]
    assert REQUIRED_KEYS <= set(preset)
    assert preset["category"] in CATEGORY_ORDER
    assert set(Flock.PARAMETERS) <= set(preset)


@pytest.mark.parametrize("key", sorted(PRESETS))
def test_preset_builds_valid_flock(key):
    preset = {**PRESETS[key], "num_boids": 6}
    flock = Flock.from_config(preset, seed=5)
    assert flock.num_boids == 6
    for name in ("alignment_weight", "cohesion_weight", "separation_weight"):
        assert config.LIMITS["min_weight"] <= getattr(flock, name) <= config.LIMITS["max_weight"]
        assert getattr(flock, name) == preset[name]
    flock.update(preset["dt_per_frame"])


def test_preset_list_sorted_by_category():
    categories = [CATEGORY_ORDER.index(preset["category"]) for _, preset in get_preset_list()]
    assert categories == sorted(categories)
    assert len(categories) == len(PRESETS)


def test_get_preset_by_index():
    key, preset = get_preset_by_index(0)
    assert PRESETS[key] is preset
    assert get_preset_by_index(len(PRESETS)) == (None, None)
    assert get_preset_by_index(-1) == (None, None)


def test_get_preset_config_is_a_copy():
    cfg = get_preset_config("classic")
    assert cfg["session_name"] == "classic"
    cfg["num_boids"] = 1
    assert PRESETS["classic"]["num_boids"] != 1
    assert "session_name" not in PRESETS["classic"]


def test_unknown_preset():
    assert get_preset_config("no_such_preset") is None


def test_print_preset_menu(capsys):
    print_preset_menu()
    out = capsys.readouterr().out
    for preset in PRESETS.values():
        assert preset["name"] in out

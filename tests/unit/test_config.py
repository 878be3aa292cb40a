"""Tests for ArrayConfig validation and YAML loading."""

import numpy as np
import pytest
from pydantic import ValidationError

from fixed_arrays import ArrayConfig, load_config


def test_defaults():
    cfg = ArrayConfig()
    assert cfg.initial_capacity == 16
    assert cfg.dtype == "float64"
    assert cfg.push_policy == "double_size"
    assert cfg.set_policy == "double_capacity"
    assert cfg.seed is None
    assert cfg.log_growth is False


@pytest.mark.parametrize("field, value", [
    ("initial_capacity", 0),
    ("push_policy", "triple"),
    ("set_policy", "double"),
    ("dtype", "not-a-dtype"),
])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        ArrayConfig(**{field: value})


def test_seeded_rng_is_reproducible():
    cfg = ArrayConfig(seed=11)
    assert cfg.make_rng().integers(0, 10**6) == cfg.make_rng().integers(0, 10**6)


def test_load_yaml(tmp_path):
    path = tmp_path / "arrays.yaml"
    path.write_text(
        "initial_capacity: 4\n"
        "dtype: int32\n"
        "push_policy: double_capacity\n"
        "seed: 3\n"
        "log_growth: true\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.initial_capacity == 4
    assert np.dtype(cfg.dtype) == np.int32
    assert cfg.push_policy == "double_capacity"
    assert cfg.seed == 3
    assert cfg.log_growth is True


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ArrayConfig()


def test_no_path_gives_defaults():
    assert load_config(None) == ArrayConfig()

"""
Configuration for growable buffers.

Settings are validated with pydantic and can be loaded from YAML:

    initial_capacity: 64
    dtype: float32
    push_policy: double_size
    set_policy: double_capacity
    seed: 0
    log_growth: true
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

import numpy as np
import yaml
from pydantic import BaseModel, Field, PositiveInt, field_validator

from .core.randomization import make_rng

POLICY_PATTERN = "^(double_capacity|double_size)$"


class ArrayConfig(BaseModel):
    initial_capacity: PositiveInt = 16
    dtype: str = "float64"
    push_policy: str = Field("double_size", pattern=POLICY_PATTERN)
    set_policy: str = Field("double_capacity", pattern=POLICY_PATTERN)
    seed: Optional[int] = None   # None: fresh generator per make_rng() call
    log_growth: bool = False

    @field_validator("dtype")
    @classmethod
    def _known_dtype(cls, value: str) -> str:
        try:
            np.dtype(value)
        except TypeError as e:
            raise ValueError(f"Unknown dtype '{value}': {e}") from e
        return value

    def make_rng(self) -> np.random.Generator:
        return make_rng(self.seed)


def load_config(path: Optional[Union[str, Path]]) -> ArrayConfig:
    """Load an ``ArrayConfig`` from a YAML file; no path or an empty file gives defaults."""
    if not path:
        return ArrayConfig()
    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    return ArrayConfig(**raw)

"""
arrange/config.py
-----------------
Tunables for the arrangement engine.

LayoutConfig is immutable and passed explicitly into every entrypoint, so
alternate tunables never leak through module state. load_config() layers a
JSON file and ARRANGE_* environment variables over the defaults.
"""

import os
from typing import Dict, Optional, Tuple

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from common.io_utils import log, read_json
from .archetypes import DEFAULT_RULES, ArchetypeRule
from .footprint import BASE_RADII, Category


# Environment variable -> LayoutConfig field
ENV_OVERRIDES = {
    "ARRANGE_GAP_METERS": "gap_meters",
    "ARRANGE_ITERATIONS": "iterations",
    "ARRANGE_DAMPING": "damping",
}


class LayoutConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    gap_meters: float = 0.18

    # Room bounds on the ground plane (meters, camera-relative)
    min_x: float = -2.4
    max_x: float = 2.4
    min_z: float = -3.0
    max_z: float = -0.8

    # Relaxation
    iterations: int = Field(default=120, ge=0)
    damping: float = Field(default=0.65, gt=0.0, le=1.0)

    # Footprints
    min_radius: float = Field(default=0.20, gt=0.0)
    max_radius: float = 1.50
    base_radii: Dict[Category, float] = Field(default_factory=lambda: dict(BASE_RADII))

    # Where targets start before their archetype recipe places them
    provisional_x: float = 0.0
    provisional_z: float = -1.6

    archetype_rules: Tuple[ArchetypeRule, ...] = DEFAULT_RULES

    @model_validator(mode="after")
    def _check_ranges(self):
        if self.min_x >= self.max_x:
            raise ValueError(f"min_x ({self.min_x}) must be below max_x ({self.max_x})")
        if self.min_z >= self.max_z:
            raise ValueError(f"min_z ({self.min_z}) must be below max_z ({self.max_z})")
        if self.min_radius > self.max_radius:
            raise ValueError("min_radius must not exceed max_radius")
        if Category.OTHER not in self.base_radii:
            raise ValueError("base_radii needs an entry for 'other'")
        return self

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, max_x, min_z, max_z)"""
        return self.min_x, self.max_x, self.min_z, self.max_z


DEFAULT_CONFIG = LayoutConfig()


def load_config(path: Optional[str] = None) -> LayoutConfig:
    """
    Build a LayoutConfig from defaults, an optional JSON file and the
    environment (a .env file is honoured). Environment wins over the file.
    """
    load_dotenv(find_dotenv(usecwd=True))
    overrides = {}
    if path:
        overrides.update(read_json(path))
        log(f"Loaded layout config overrides from {path}", "DEBUG")

    for env_name, field in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw:
            overrides[field] = raw

    return LayoutConfig(**overrides)

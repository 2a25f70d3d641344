"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .constants import SWEEP_HALF_RANGE_DEG, SWEEP_STEP_DEG
from .materials import get_material
from .types import DEFAULT_PARAMS, MechanismParams


class MechanismConfig(BaseModel):
    """Linkage geometry (cm), rocker section (m) and material."""

    r1: float = Field(default=DEFAULT_PARAMS.r1, gt=0)
    r2: float = Field(default=DEFAULT_PARAMS.r2, gt=0)
    r3: float = Field(default=DEFAULT_PARAMS.r3, gt=0)
    L4: float = Field(default=DEFAULT_PARAMS.L4, gt=0)
    E: float = Field(default=DEFAULT_PARAMS.E, gt=0)
    b: float = Field(default=DEFAULT_PARAMS.b, gt=0)
    h: float = Field(default=DEFAULT_PARAMS.h, gt=0)
    theta20: float = Field(default=DEFAULT_PARAMS.theta20, allow_inf_nan=False)
    theta40: float = Field(default=DEFAULT_PARAMS.theta40, allow_inf_nan=False)
    # Overrides E when set
    material: str | None = None

    @field_validator("material")
    @classmethod
    def _known_material(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                get_material(v)
            except KeyError as exc:
                raise ValueError(str(exc)) from exc
        return v


class SweepConfig(BaseModel):
    """Crank sweep discretization around theta20."""

    half_range_deg: float = Field(default=SWEEP_HALF_RANGE_DEG, gt=0, le=720)
    step_deg: float = Field(default=SWEEP_STEP_DEG, gt=0, le=90)
    valid_only: bool = False


class PRBConfig(BaseModel):
    """Root configuration object."""

    mechanism: MechanismConfig = Field(default_factory=MechanismConfig)
    sweep: SweepConfig = Field(default_factory=SweepConfig)

    def to_params(self) -> MechanismParams:
        """Build the Parameter Set described by this configuration."""
        data = self.mechanism.model_dump(exclude={"material"})
        params = MechanismParams(**data)
        if self.mechanism.material is not None:
            params = params.with_material(self.mechanism.material)
        return params


def load_config(path: str | Path) -> PRBConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed PRBConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return PRBConfig.model_validate(data or {})


def save_config(config: PRBConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> PRBConfig:
    """Return default configuration (Howell 11.3.2 scenario)."""
    return PRBConfig()


def merge_config(base: PRBConfig, overrides: dict[str, Any]) -> PRBConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return PRBConfig.model_validate(merged)

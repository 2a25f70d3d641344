"""Core types for the PRB model.

This module defines the canonical records passed between the evaluator,
the joint projector and any presentation layer:

- MechanismParams: immutable Parameter Set (geometry, reference angles, beam)
- PRBDetails: derived PRB constants, recomputed on every evaluation
- MechanismState: result of one evaluation at a single crank angle
- JointPositions: Cartesian pin coordinates for rendering
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import asdict, dataclass, fields
from typing import Any

import numpy as np

from .materials import get_material

Point = tuple[float, float]

_POSITIVE_FIELDS = ("r1", "r2", "r3", "L4", "E", "b", "h")


@dataclass(frozen=True)
class MechanismParams:
    """Geometry and material of the compliant four-bar.

    Attributes:
        r1: Ground link length (cm).
        r2: Crank length (cm).
        r3: Coupler length (cm).
        L4: Full, undeflected length of the flexible rocker (cm).
        E: Young's modulus of the rocker (Pa).
        b: Out-of-plane width of the rocker (m).
        h: In-plane bending thickness of the rocker (m).
        theta20: Undeflected crank angle (deg).
        theta40: Undeflected PRB rocker angle (deg).

    Only per-field plausibility is checked here. Whether the linkage can
    close at a given crank angle is reported by the evaluator instead.
    """

    r1: float
    r2: float
    r3: float
    L4: float
    E: float
    b: float
    h: float
    theta20: float
    theta40: float

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")

    def replace(self, **changes: float) -> MechanismParams:
        """Return a new validated Parameter Set with fields replaced."""
        return dataclasses.replace(self, **changes)

    def with_material(self, name: str) -> MechanismParams:
        """Return a copy using the Young's modulus of a catalog material."""
        return self.replace(E=get_material(name).E)

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MechanismParams:
        """Build from a mapping with exactly the Parameter Set keys."""
        names = {f.name for f in fields(cls)}
        unknown = set(data) - names
        if unknown:
            raise ValueError(f"Unknown parameter(s): {sorted(unknown)}")
        missing = names - set(data)
        if missing:
            raise ValueError(f"Missing parameter(s): {sorted(missing)}")
        return cls(**{k: float(v) for k, v in data.items()})


# Howell, "Compliant Mechanisms", section 11.3.2 (r3 = 3.71 cm)
DEFAULT_PARAMS = MechanismParams(
    r1=3.0,
    r2=1.5,
    r3=3.71,
    L4=4.32,
    E=1.4e9,
    b=0.005,
    h=0.0015,
    theta20=90.0,
    theta40=90.0,
)


@dataclass(frozen=True)
class PRBDetails:
    """Derived PRB constants.

    Attributes:
        gamma: Characteristic pivot ratio.
        kTheta: Dimensionless stiffness coefficient.
        r4: Reduced rigid rocker length (same unit as L4).
        I: Second moment of area of the rocker section (m^4).
        K: Torsional spring stiffness (N*m/rad).
    """

    gamma: float
    kTheta: float
    r4: float
    I: float  # noqa: E741
    K: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class MechanismState:
    """Static state of the mechanism at one crank angle.

    Attributes:
        theta2: Crank angle as supplied (deg, not wrapped).
        theta3: Coupler angle (deg, in (-180, 180]); 0 when invalid.
        theta4: PRB rocker angle (deg, in (-180, 180]); 0 when invalid.
        delta_theta2: theta2 - theta20 (deg).
        energy: Stored spring energy (J); 0 when invalid.
        torque: Equivalent static input torque (N*m); 0 when invalid.
        is_valid: False when the rigid-equivalent four-bar cannot assemble.
        prb: Derived PRB constants used for this evaluation.
        delta_theta4: Wrapped spring deflection (rad); 0 when invalid.
        h42: Kinematic coefficient d(theta4)/d(theta2); may be +/-inf or nan
            at a toggle point, 0 when invalid.
    """

    theta2: float
    theta3: float
    theta4: float
    delta_theta2: float
    energy: float
    torque: float
    is_valid: bool
    prb: PRBDetails
    delta_theta4: float = 0.0
    h42: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Flatten to plain Python types (PRB constants nested under 'prb')."""
        return {
            "theta2": self.theta2,
            "theta3": self.theta3,
            "theta4": self.theta4,
            "delta_theta2": self.delta_theta2,
            "delta_theta4": self.delta_theta4,
            "energy": self.energy,
            "torque": self.torque,
            "h42": self.h42,
            "is_valid": self.is_valid,
            "prb": self.prb.to_dict(),
        }


@dataclass(frozen=True)
class JointPositions:
    """Pin coordinates in the length unit of the Parameter Set.

    A0 is the fixed crank pivot (origin), A the crank/coupler pin,
    B the coupler/rocker pin and B0 the fixed rocker pivot at (r1, 0).
    """

    A0: Point
    A: Point
    B: Point
    B0: Point

    def as_array(self) -> np.ndarray:
        """Return a (4, 2) array in A0, A, B, B0 order."""
        return np.array([self.A0, self.A, self.B, self.B0], dtype=np.float64)

    def to_dict(self) -> dict[str, list[float]]:
        return {"A0": list(self.A0), "A": list(self.A), "B": list(self.B), "B0": list(self.B0)}

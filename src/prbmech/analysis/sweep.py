"""Crank-angle sweeps over a fixed Parameter Set.

Each angle is evaluated independently; the sweep only collects the
per-angle states into arrays for charting and summary statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..core.constants import SWEEP_HALF_RANGE_DEG, SWEEP_STEP_DEG
from ..core.evaluator import compute_prb_details, evaluate_batch
from ..core.logging import get_logger
from ..core.types import MechanismParams, PRBDetails

logger = get_logger(__name__)

ARRAY_FIELDS = ("theta2", "theta3", "theta4", "delta_theta2", "energy", "torque", "is_valid")


def crank_sweep_angles(
    params: MechanismParams,
    half_range: float = SWEEP_HALF_RANGE_DEG,
    step: float = SWEEP_STEP_DEG,
) -> np.ndarray:
    """Crank angles from theta20 - half_range to theta20 + half_range inclusive.

    Args:
        params: Parameter Set (only theta20 is used).
        half_range: Half width of the sweep (deg).
        step: Angular increment (deg).

    Returns:
        1-D float64 array of crank angles (deg).
    """
    if step <= 0:
        raise ValueError(f"step must be > 0, got {step}")
    if half_range <= 0:
        raise ValueError(f"half_range must be > 0, got {half_range}")

    # Integer offsets keep the endpoints exact for steps that divide the range
    n = int(np.floor(2.0 * half_range / step + 1e-9))
    offsets = -half_range + step * np.arange(n + 1, dtype=np.float64)
    return params.theta20 + offsets


@dataclass
class SweepResult:
    """Arrays of mechanism states over a crank sweep.

    Attributes:
        theta2, theta3, theta4, delta_theta2: Angles (deg).
        energy: Stored energy (J).
        torque: Equivalent input torque (N*m); may hold +/-inf or nan near toggle.
        is_valid: Assembly flag per point.
        prb: PRB constants shared by every point.
    """

    theta2: np.ndarray
    theta3: np.ndarray
    theta4: np.ndarray
    delta_theta2: np.ndarray
    energy: np.ndarray
    torque: np.ndarray
    is_valid: np.ndarray
    prb: PRBDetails

    def __post_init__(self) -> None:
        for name in ARRAY_FIELDS:
            dtype = bool if name == "is_valid" else np.float64
            setattr(self, name, np.asarray(getattr(self, name), dtype=dtype))

    def __len__(self) -> int:
        return len(self.theta2)

    def valid(self) -> SweepResult:
        """Return a new result holding only assembled points."""
        mask = self.is_valid
        return SweepResult(
            **{name: getattr(self, name)[mask] for name in ARRAY_FIELDS},
            prb=self.prb,
        )

    def summary(self) -> dict[str, Any]:
        """Raw statistics of the sweep (no stability classification)."""
        mask = self.is_valid
        n_valid = int(mask.sum())
        out: dict[str, Any] = {
            "n_points": len(self),
            "n_valid": n_valid,
            "n_invalid": len(self) - n_valid,
            "energy_max": None,
            "theta2_at_energy_max": None,
            "torque_min": None,
            "torque_max": None,
            "n_nonfinite_torque": int(np.sum(~np.isfinite(self.torque[mask]))),
            "prb": self.prb.to_dict(),
        }
        if n_valid:
            energy = self.energy[mask]
            i_max = int(np.argmax(energy))
            out["energy_max"] = float(energy[i_max])
            out["theta2_at_energy_max"] = float(self.theta2[mask][i_max])
            torque = self.torque[mask]
            finite = torque[np.isfinite(torque)]
            if finite.size:
                out["torque_min"] = float(finite.min())
                out["torque_max"] = float(finite.max())
        return out

    def to_records(self) -> list[dict[str, Any]]:
        """Per-point dicts with plain Python values."""
        return [
            {
                name: (bool(getattr(self, name)[i]) if name == "is_valid" else float(getattr(self, name)[i]))
                for name in ARRAY_FIELDS
            }
            for i in range(len(self))
        ]


def run_sweep(
    params: MechanismParams,
    angles: np.ndarray | None = None,
) -> SweepResult:
    """Evaluate the mechanism over a crank sweep.

    Args:
        params: Parameter Set.
        angles: Crank angles (deg). Defaults to crank_sweep_angles(params).

    Returns:
        SweepResult with one entry per angle, invalid points included.
    """
    if angles is None:
        angles = crank_sweep_angles(params)

    with logger.timer("run_sweep"):
        states = evaluate_batch(angles, params)

    result = SweepResult(
        **{name: [getattr(s, name) for s in states] for name in ARRAY_FIELDS},
        prb=compute_prb_details(params),
    )
    n_invalid = len(result) - int(result.is_valid.sum())
    if n_invalid:
        logger.debug("sweep has unassemblable points", n_invalid=n_invalid, n_points=len(result))
    return result

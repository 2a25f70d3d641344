"""Kinematics and energy evaluation — THE canonical interface.

Interface:
    evaluate(theta2_deg, params) -> MechanismState

Flow:
    1. compute_prb_details(params) -> PRBDetails (r4, I, K)
    2. Place the crank pin A and close the loop A -> B -> B0 in closed form
       (two-circle intersection, fixed "rocker up" branch)
    3. Spring deflection, stored energy, kinematic coefficient h42
    4. Equivalent input torque T = K * dtheta4 * h42

The function is pure and total: an unassemblable crank angle is reported
through ``is_valid=False`` and the toggle singularity in h42 propagates
+/-inf or nan instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .angles import normalize_degrees, normalize_radians
from .constants import LENGTH_UNIT_TO_M, PRB_GAMMA, PRB_K_THETA
from .types import MechanismParams, MechanismState, PRBDetails


def compute_prb_details(params: MechanismParams) -> PRBDetails:
    """Compute the PRB constants of the flexible rocker.

    The stiffness uses L4 in metres while r4 stays in the linkage unit.
    """
    r4 = PRB_GAMMA * params.L4
    L4_m = params.L4 * LENGTH_UNIT_TO_M
    I_val = params.b * params.h**3 / 12.0
    K_val = PRB_GAMMA * PRB_K_THETA * (params.E * I_val / L4_m)
    return PRBDetails(gamma=PRB_GAMMA, kTheta=PRB_K_THETA, r4=r4, I=I_val, K=K_val)


def evaluate(theta2_deg: float, params: MechanismParams) -> MechanismState:
    """Evaluate the mechanism at a single crank angle.

    Args:
        theta2_deg: Crank angle (deg). Reported back unwrapped.
        params: Parameter Set.

    Returns:
        MechanismState. When the four-bar cannot assemble, theta3, theta4,
        energy and torque are all zero and is_valid is False.
    """
    prb = compute_prb_details(params)
    r1, r2, r3 = params.r1, params.r2, params.r3
    r4 = prb.r4
    K = prb.K

    theta2 = np.deg2rad(np.float64(theta2_deg))
    theta40 = np.deg2rad(np.float64(params.theta40))

    # Crank pin A, rocker pivot B0 = (r1, 0)
    Ax = r2 * np.cos(theta2)
    Ay = r2 * np.sin(theta2)
    dx = Ax - r1
    dy = Ay
    dist_sq = dx * dx + dy * dy
    dist = np.sqrt(dist_sq)

    is_valid = not (dist > r3 + r4 or dist < abs(r3 - r4))
    t3 = np.float64(0.0)
    t4 = np.float64(0.0)
    delta_theta4 = 0.0
    energy = 0.0
    h42 = 0.0
    torque = 0.0

    if is_valid:
        with np.errstate(divide="ignore", invalid="ignore"):
            # Interior angle at B0 between B0->A and B0->B
            cos_beta = (r4 * r4 + dist_sq - r3 * r3) / (2.0 * r4 * dist)
            beta = np.arccos(np.clip(cos_beta, -1.0, 1.0))
            phi = np.arctan2(dy, dx)

            # Rocker-up branch (Howell 11.3.2)
            t4 = phi - beta

            Bx = r1 + r4 * np.cos(t4)
            By = r4 * np.sin(t4)
            t3 = np.arctan2(By - Ay, Bx - Ax)

            delta_theta4 = normalize_radians(float(t4 - theta40))
            energy = float(0.5 * K * delta_theta4**2)

            # Singular at toggle (theta3 == theta4 mod pi)
            h42 = float((r2 * np.sin(t3 - theta2)) / (r4 * np.sin(t3 - t4)))
            torque = float(np.float64(K * delta_theta4) * h42)

    return MechanismState(
        theta2=float(theta2_deg),
        theta3=normalize_degrees(float(np.rad2deg(t3))),
        theta4=normalize_degrees(float(np.rad2deg(t4))),
        delta_theta2=float(theta2_deg) - params.theta20,
        energy=energy,
        torque=torque,
        is_valid=bool(is_valid),
        prb=prb,
        delta_theta4=delta_theta4,
        h42=h42,
    )


def evaluate_batch(
    theta2_deg: np.ndarray | Sequence[float], params: MechanismParams
) -> list[MechanismState]:
    """Evaluate each crank angle independently, preserving order.

    Args:
        theta2_deg: Crank angles (deg), scalar or 1-D array-like.
        params: Shared Parameter Set.

    Returns:
        One MechanismState per angle.
    """
    angles = np.atleast_1d(np.asarray(theta2_deg, dtype=np.float64))
    return [evaluate(float(t), params) for t in angles]

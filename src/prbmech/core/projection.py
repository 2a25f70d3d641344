"""Joint position projection for rendering and geometric checks."""

from __future__ import annotations

import math

from .types import JointPositions, MechanismParams, MechanismState


def project(state: MechanismState, params: MechanismParams) -> JointPositions:
    """Convert an evaluated state into pin coordinates.

    A is rebuilt from theta2 and B from theta3; theta4 is not re-solved.
    The result is only meaningful for a valid state produced from the same
    Parameter Set.
    """
    theta2 = math.radians(state.theta2)
    theta3 = math.radians(state.theta3)

    A = (params.r2 * math.cos(theta2), params.r2 * math.sin(theta2))
    B = (A[0] + params.r3 * math.cos(theta3), A[1] + params.r3 * math.sin(theta3))

    return JointPositions(A0=(0.0, 0.0), A=A, B=B, B0=(params.r1, 0.0))


def link_lengths(joints: JointPositions) -> dict[str, float]:
    """Distances between consecutive pins (crank, coupler, rocker, ground)."""
    return {
        "crank": math.dist(joints.A0, joints.A),
        "coupler": math.dist(joints.A, joints.B),
        "rocker": math.dist(joints.B, joints.B0),
        "ground": math.dist(joints.B0, joints.A0),
    }

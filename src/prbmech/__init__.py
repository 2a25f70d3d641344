"""prbmech — Pseudo-Rigid-Body model of a compliant bistable four-bar."""

from .core import (
    DEFAULT_PARAMS,
    JointPositions,
    MechanismParams,
    MechanismState,
    PRBDetails,
    evaluate,
    project,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PARAMS",
    "JointPositions",
    "MechanismParams",
    "MechanismState",
    "PRBDetails",
    "evaluate",
    "project",
    "__version__",
]

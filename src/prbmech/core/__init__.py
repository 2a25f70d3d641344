"""Core module — types, evaluator, projection, utilities."""

from .angles import normalize_degrees, normalize_radians
from .evaluator import compute_prb_details, evaluate, evaluate_batch
from .materials import MATERIALS, Material, get_material
from .projection import link_lengths, project
from .types import DEFAULT_PARAMS, JointPositions, MechanismParams, MechanismState, PRBDetails

__all__ = [
    "DEFAULT_PARAMS",
    "MATERIALS",
    "JointPositions",
    "Material",
    "MechanismParams",
    "MechanismState",
    "PRBDetails",
    "compute_prb_details",
    "evaluate",
    "evaluate_batch",
    "get_material",
    "link_lengths",
    "normalize_degrees",
    "normalize_radians",
    "project",
]

"""Core constants for the PRB model.

This module defines system-wide invariants such as:
- Pseudo-Rigid-Body coefficients for a fixed-guided cantilever
- Unit conversion used by the stiffness formula
- Default sweep discretization
- Model version (for archive guards)
"""

from __future__ import annotations

# PRB coefficients
# Characteristic pivot ratio: r4 = gamma * L4
PRB_GAMMA = 0.85
# Dimensionless stiffness coefficient
PRB_K_THETA = 2.65

# Link lengths are given in centimetres; only the stiffness formula needs metres
LENGTH_UNIT_TO_M = 0.01

# Sweep discretization
# theta2 runs from theta20 - SWEEP_HALF_RANGE_DEG to theta20 + SWEEP_HALF_RANGE_DEG
SWEEP_HALF_RANGE_DEG = 180.0
SWEEP_STEP_DEG = 1.0

# Model Versioning for sweep archives
# Update when the kinematics or energy formulation changes
MODEL_VERSION_PRB = "v1.0_howell_11.3.2"

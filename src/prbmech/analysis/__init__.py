"""Analysis module — crank-angle sweeps and their archives."""

from .sweep import SweepResult, crank_sweep_angles, run_sweep
from .sweep_io import load_sweep, save_sweep

__all__ = ["SweepResult", "crank_sweep_angles", "run_sweep", "load_sweep", "save_sweep"]

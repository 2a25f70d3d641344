"""Sweep archive IO with version guards."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np

from ..core.constants import MODEL_VERSION_PRB
from ..core.types import MechanismParams, PRBDetails
from .sweep import ARRAY_FIELDS, SweepResult

ARRAYS_FILENAME = "sweep.npz"
META_FILENAME = "summary.json"


def save_sweep(outdir: Path, result: SweepResult, params: MechanismParams) -> None:
    """Save sweep arrays plus metadata."""
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    np.savez(outdir / ARRAYS_FILENAME, **{name: getattr(result, name) for name in ARRAY_FIELDS})

    summary = {
        "model_version": MODEL_VERSION_PRB,
        "params": params.to_dict(),
        "summary": result.summary(),
    }
    with open(outdir / META_FILENAME, "w") as f:
        json.dump(summary, f, indent=2)


def load_sweep(outdir: Path) -> tuple[SweepResult, MechanismParams, dict[str, Any]]:
    """Load a sweep archive. Raises on a missing file or model version mismatch."""
    outdir = Path(outdir)
    summary_path = outdir / META_FILENAME
    arrays_path = outdir / ARRAYS_FILENAME
    for path in (summary_path, arrays_path):
        if not path.exists():
            raise FileNotFoundError(f"Missing {path.name} in {outdir}")

    with open(summary_path) as f:
        summary = json.load(f)

    version = summary.get("model_version")
    if version != MODEL_VERSION_PRB:
        raise ValueError(f"Model version mismatch: archive {version}, expected {MODEL_VERSION_PRB}")

    params = MechanismParams.from_dict(summary["params"])
    with np.load(arrays_path, allow_pickle=False) as data:
        arrays = {name: data[name] for name in ARRAY_FIELDS}

    lengths = {len(a) for a in arrays.values()}
    if len(lengths) != 1:
        raise ValueError(f"Inconsistent array lengths in {arrays_path.name}: {sorted(lengths)}")

    result = SweepResult(**arrays, prb=PRBDetails(**summary["summary"]["prb"]))
    return result, params, summary

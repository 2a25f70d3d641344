"""Shared fixtures for the prbmech test suite."""

from __future__ import annotations

import numpy as np
import pytest

from prbmech.core.types import DEFAULT_PARAMS, MechanismParams


@pytest.fixture
def default_params() -> MechanismParams:
    return DEFAULT_PARAMS


@pytest.fixture
def short_coupler_params() -> MechanismParams:
    """Linkage that only assembles over part of the crank rotation.

    r4 = 0.85 * 2.0 = 1.7, so the loop closes for 0.7 <= d <= 2.7 while
    the crank pin sweeps 1.5 <= d <= 4.5.
    """
    return DEFAULT_PARAMS.replace(r1=3.0, r2=1.5, r3=1.0, L4=2.0)


@pytest.fixture
def random_params() -> list[MechanismParams]:
    rng = np.random.default_rng(42)
    out = []
    for _ in range(25):
        out.append(
            MechanismParams(
                r1=float(rng.uniform(1.0, 10.0)),
                r2=float(rng.uniform(0.5, 5.0)),
                r3=float(rng.uniform(1.0, 10.0)),
                L4=float(rng.uniform(1.0, 10.0)),
                E=float(rng.choice([1.4e9, 207e9, 70e9, 2.8e9, 160e9])),
                b=float(rng.uniform(0.001, 0.02)),
                h=float(rng.uniform(0.0001, 0.005)),
                theta20=float(rng.uniform(-180.0, 180.0)),
                theta40=float(rng.uniform(0.0, 180.0)),
            )
        )
    return out

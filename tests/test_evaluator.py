"""Test the kinematics and energy evaluator."""

import math
import warnings

import numpy as np
import pytest

from prbmech.core.constants import LENGTH_UNIT_TO_M, PRB_GAMMA, PRB_K_THETA
from prbmech.core.evaluator import compute_prb_details, evaluate, evaluate_batch
from prbmech.core.types import DEFAULT_PARAMS


def test_prb_details_reference_values(default_params):
    prb = compute_prb_details(default_params)
    assert prb.gamma == PRB_GAMMA == 0.85
    assert prb.kTheta == PRB_K_THETA == 2.65
    assert prb.r4 == pytest.approx(3.672)
    assert prb.I == pytest.approx(0.005 * 0.0015**3 / 12.0)
    # L4 enters the stiffness in metres
    expected_K = 0.85 * 2.65 * 1.4e9 * prb.I / (4.32 * LENGTH_UNIT_TO_M)
    assert prb.K == pytest.approx(expected_K, rel=1e-12)
    assert prb.K == pytest.approx(0.102653, rel=1e-4)


def test_stiffness_scaling(default_params):
    K = compute_prb_details(default_params).K
    assert compute_prb_details(default_params.replace(h=2 * default_params.h)).K == pytest.approx(8 * K, rel=1e-12)
    assert compute_prb_details(default_params.replace(E=2 * default_params.E)).K == pytest.approx(2 * K, rel=1e-12)
    assert compute_prb_details(default_params.replace(b=2 * default_params.b)).K == pytest.approx(2 * K, rel=1e-12)


def test_reference_configuration(default_params):
    state = evaluate(90.0, default_params)
    assert state.is_valid
    assert state.theta2 == 90.0
    assert state.delta_theta2 == 0.0
    assert state.theta4 == pytest.approx(90.0, abs=0.2)
    assert state.energy == pytest.approx(0.0, abs=1e-5)
    assert state.energy >= 0.0
    assert state.prb == compute_prb_details(default_params)


def test_round_trip_at_exact_undeflected_angle(default_params):
    """With theta40 set to the solved rocker angle, the spring is unloaded."""
    theta4_solved = evaluate(default_params.theta20, default_params).theta4
    params = default_params.replace(theta40=theta4_solved)

    state = evaluate(params.theta20, params)
    assert state.theta4 == pytest.approx(params.theta40, abs=1e-9)
    assert state.delta_theta4 == pytest.approx(0.0, abs=1e-12)
    assert state.energy == pytest.approx(0.0, abs=1e-20)
    assert state.torque == pytest.approx(0.0, abs=1e-12)


def test_half_turn_from_reference(default_params):
    ref = evaluate(90.0, default_params)
    state = evaluate(-90.0, default_params)

    assert state.is_valid
    assert state.delta_theta2 == -180.0
    assert math.isfinite(state.energy)
    assert state.energy > 0.0
    assert state.theta4 == pytest.approx(143.0, abs=0.3)
    assert state.theta3 != pytest.approx(ref.theta3, abs=1.0)
    assert state.theta4 != pytest.approx(ref.theta4, abs=1.0)
    # Deflection is wrapped, so it stays within a half turn
    assert abs(state.delta_theta4) <= math.pi
    assert state.energy == pytest.approx(0.5 * state.prb.K * state.delta_theta4**2)


def test_theta2_reported_unwrapped(default_params):
    a = evaluate(90.0, default_params)
    b = evaluate(450.0, default_params)
    assert b.theta2 == 450.0
    assert b.delta_theta2 == 360.0
    assert b.theta3 == pytest.approx(a.theta3, abs=1e-9)
    assert b.theta4 == pytest.approx(a.theta4, abs=1e-9)
    assert b.energy == pytest.approx(a.energy, abs=1e-15)


def test_output_angles_wrapped(default_params):
    for theta2 in np.arange(-720.0, 720.0, 7.5):
        state = evaluate(float(theta2), default_params)
        assert -180.0 < state.theta3 <= 180.0
        assert -180.0 < state.theta4 <= 180.0


def test_torque_is_energy_gradient(default_params):
    """T = dV/dtheta2 (virtual work), checked by central differences."""
    for theta2 in (-60.0, 0.0, 45.0, 130.0, 200.0):
        step = 1e-4
        v_plus = evaluate(theta2 + step, default_params).energy
        v_minus = evaluate(theta2 - step, default_params).energy
        dV = (v_plus - v_minus) / np.deg2rad(2 * step)
        assert evaluate(theta2, default_params).torque == pytest.approx(dV, rel=1e-4, abs=1e-9)


def _crank_pin_distance(theta2_deg, params):
    t = math.radians(theta2_deg)
    return math.hypot(params.r2 * math.cos(t) - params.r1, params.r2 * math.sin(t))


def test_assembly_boundary(short_coupler_params):
    params = short_coupler_params
    r4 = compute_prb_details(params).r4
    lo, hi = abs(params.r3 - r4), params.r3 + r4

    n_valid = n_invalid = 0
    for theta2 in np.arange(-180.0, 180.0, 0.5):
        d = _crank_pin_distance(float(theta2), params)
        if min(abs(d - lo), abs(d - hi)) < 1e-6:
            continue
        state = evaluate(float(theta2), params)
        assert state.is_valid == (lo < d < hi), f"theta2={theta2}, d={d}"
        if state.is_valid:
            n_valid += 1
        else:
            n_invalid += 1
            assert (state.theta3, state.theta4, state.energy, state.torque) == (0.0, 0.0, 0.0, 0.0)
            assert state.delta_theta2 == float(theta2) - params.theta20
    assert n_valid > 0 and n_invalid > 0


def test_energy_non_negative(random_params):
    for params in random_params:
        for theta2 in np.arange(-180.0, 180.0, 15.0):
            state = evaluate(float(theta2), params)
            if state.is_valid:
                assert state.energy >= 0.0
            else:
                assert state.energy == 0.0


def test_toggle_singularity_does_not_raise():
    """Coupler and rocker collinear: h42 blows up without an exception."""
    # 3-4-5 triangle: |A - B0| = 5 = r3 + r4 at theta2 = 90
    params = DEFAULT_PARAMS.replace(r1=3.0, r2=4.0, r3=3.3, L4=2.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        state = evaluate(90.0, params)
    assert state.is_valid
    assert not math.isfinite(state.h42) or abs(state.h42) > 1e4


def test_evaluation_is_deterministic(default_params):
    a = evaluate(33.3, default_params)
    b = evaluate(33.3, default_params)
    assert a == b
    assert a is not b


def test_evaluate_batch_matches_single(default_params):
    angles = np.array([-90.0, 0.0, 90.0, 270.0])
    states = evaluate_batch(angles, default_params)
    assert [s.theta2 for s in states] == angles.tolist()
    for s, t in zip(states, angles):
        assert s == evaluate(float(t), default_params)
    assert len(evaluate_batch(45.0, default_params)) == 1
    assert evaluate_batch([], default_params) == []


def test_state_to_dict(default_params):
    d = evaluate(0.0, default_params).to_dict()
    assert set(d) == {
        "theta2", "theta3", "theta4", "delta_theta2", "delta_theta4",
        "energy", "torque", "h42", "is_valid", "prb",
    }
    assert set(d["prb"]) == {"gamma", "kTheta", "r4", "I", "K"}

import math

import numpy as np
import pytest

from threebody import (
    GRAVITATIONAL_CONSTANT,
    Body,
    Integrator,
    Step,
    accelerations,
    advance,
    drift,
    kick,
    pair_force,
    to_arrays,
)


def test_pair_force_points_toward_other():
    fx, fy = pair_force(Body(1.0, 0.0, 0.0), Body(1.0, 3.0, 4.0), G=1.0)
    assert fx == pytest.approx(0.024)
    assert fy == pytest.approx(0.032)


def test_pair_force_is_opposite_for_reversed_pair():
    a = Body(2.0, -1.0, 0.5)
    b = Body(3.0, 2.0, -1.5)
    fab = pair_force(a, b, G=1.0)
    fba = pair_force(b, a, G=1.0)
    assert fab[0] == pytest.approx(-fba[0])
    assert fab[1] == pytest.approx(-fba[1])
    assert fab[0] > 0.0 and fab[1] < 0.0


def test_pair_force_scales_with_masses():
    f1 = pair_force(Body(1.0, 0.0, 0.0), Body(1.0, 2.0, 0.0), G=1.0)
    f6 = pair_force(Body(2.0, 0.0, 0.0), Body(3.0, 2.0, 0.0), G=1.0)
    assert f6[0] == pytest.approx(6 * f1[0])


def test_pair_force_coincident_is_non_finite():
    fx, fy = pair_force(Body(1.0, 0.5, 0.5), Body(1.0, 0.5, 0.5), G=1.0)
    assert math.isinf(fx)
    assert math.isnan(fy)


def test_kick_matches_sequential_accumulation(reference_state):
    dt = 0.5
    bodies = list(reference_state.bodies)
    for i in range(3):
        for j in range(3):
            if i == j:
                continue
            fx, fy = pair_force(bodies[i], bodies[j], GRAVITATIONAL_CONSTANT)
            b = bodies[i]
            bodies[i] = Body(b.mass, b.x, b.y, b.vx + fx / b.mass * dt, b.vy + fy / b.mass * dt)
    assert kick(reference_state.bodies, dt) == tuple(bodies)


def test_kick_leaves_positions_alone(reference_state):
    kicked = kick(reference_state.bodies, 0.5)
    for before, after in zip(reference_state.bodies, kicked):
        assert after.position == before.position
        assert after.mass == before.mass


def test_drift_leaves_velocities_alone():
    bodies = (
        Body(1.0, 0.0, 0.0, 1.0, -2.0),
        Body(1.0, 1.0, 1.0, 0.0, 0.5),
        Body(1.0, -1.0, 2.0, 3.0, 0.0),
    )
    moved = drift(bodies, 0.5)
    assert [b.position for b in moved] == [(0.5, -1.0), (1.0, 1.25), (0.5, 2.0)]
    assert [b.velocity for b in moved] == [b.velocity for b in bodies]


def test_symmetric_neighbours_cancel():
    bodies = (
        Body(1.0, 0.0, 0.0),
        Body(1.0, -1.0, 0.0),
        Body(1.0, 1.0, 0.0),
    )
    middle = kick(bodies, 0.5, G=1.0)[0]
    assert middle.vx == 0.0
    assert middle.vy == pytest.approx(0.0, abs=1e-12)


def test_no_gravity_means_no_kick(reference_state):
    assert kick(reference_state.bodies, 0.5, G=0.0) == reference_state.bodies


def test_kick_agrees_with_vectorised_accelerations(reference_state):
    dt = 0.5
    kicked = kick(reference_state.bodies, dt)
    mass, pos, _ = to_arrays(reference_state)
    acc = accelerations(pos, mass)
    for i, b in enumerate(kicked):
        assert b.vx == pytest.approx(acc[i, 0] * dt, rel=1e-9)
        assert b.vy == pytest.approx(acc[i, 1] * dt, rel=1e-9)


def test_accelerations_single_body_is_zero():
    acc = accelerations(np.array([[1.0, 2.0]]), np.array([5.0]))
    assert np.all(acc == 0.0)


def test_advance_keeps_counters(reference_state):
    s = Step(time=3.0, step=6, bodies=reference_state.bodies)
    out = advance(s, 0.5)
    assert out.time == 3.0
    assert out.step == 6
    assert out.bodies != s.bodies


def test_advance_kicks_before_drifting(reference_state):
    out = advance(reference_state, 0.5)
    b = out.bodies[0]
    start = reference_state.bodies[0]
    assert b.x == start.x + b.vx * 0.5
    assert b.y == start.y + b.vy * 0.5


def test_integrator_object(reference_state):
    integ = Integrator(0.5)
    out = integ.step(reference_state)
    assert integ.ticks == 1
    assert out == advance(reference_state, 0.5)
    assert integ.drift(integ.kick(reference_state.bodies)) == out.bodies

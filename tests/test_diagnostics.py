import math

import pytest

from threebody import Body, Diagnostics, Step


def test_energies(right_triangle_state):
    diag = Diagnostics(right_triangle_state, G=1.0)
    assert diag.kinetic_energy() == pytest.approx(3.5)
    assert diag.potential_energy() == pytest.approx(-3.0 - math.sqrt(2.0))
    assert diag.energy() == pytest.approx(0.5 - math.sqrt(2.0))


def test_momenta(right_triangle_state):
    diag = Diagnostics(right_triangle_state, G=1.0)
    assert diag.linear_momentum().tolist() == pytest.approx([-1.0, 2.0])
    assert diag.angular_momentum() == pytest.approx(4.0)


def test_center_of_mass(right_triangle_state):
    diag = Diagnostics(right_triangle_state, G=1.0)
    assert diag.center_of_mass().tolist() == pytest.approx([0.25, 0.5])
    assert diag.center_of_mass_velocity().tolist() == pytest.approx([-0.25, 0.5])


def test_min_separation(right_triangle_state):
    assert Diagnostics(right_triangle_state).min_separation() == pytest.approx(1.0)


def test_coincident_potential_is_unbounded():
    bodies = (Body(1.0, 0.0, 0.0), Body(1.0, 0.0, 0.0), Body(1.0, 1.0, 0.0))
    diag = Diagnostics(Step(time=0.0, step=0, bodies=bodies), G=1.0)
    assert diag.potential_energy() == -math.inf
    assert diag.min_separation() == 0.0


def test_energy_drift_reference_run(reference_run):
    assert Diagnostics.energy_drift(reference_run) < 1e-6


def test_energy_drift_short_sequences(reference_run):
    assert Diagnostics.energy_drift([]) == 0.0
    assert Diagnostics.energy_drift(reference_run[:1]) == 0.0

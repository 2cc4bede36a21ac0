import pytest

from threebody import Body, Step, initial_step, simulate


@pytest.fixture
def reference_state():
    return initial_step()


@pytest.fixture
def reference_run(reference_state):
    return simulate(reference_state, 5, 0.5)


@pytest.fixture
def right_triangle_state():
    bodies = (
        Body(mass=1.0, x=0.0, y=0.0, vx=1.0, vy=0.0),
        Body(mass=1.0, x=1.0, y=0.0, vx=0.0, vy=2.0),
        Body(mass=2.0, x=0.0, y=1.0, vx=-1.0, vy=0.0),
    )
    return Step(time=0.0, step=0, bodies=bodies)

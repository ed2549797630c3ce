import numpy as np
import pytest
from electrostatics_sim.errors import PreconditionError
from electrostatics_sim.grid import snap


def test_snap_rounds_each_coordinate():
    assert np.allclose(snap((0.4, 1.6, -2.7), 1.0), [0.0, 2.0, -3.0])
    assert np.allclose(snap((0.26, 0.74, -0.1), 0.5), [0.5, 0.5, 0.0])
    assert np.allclose(snap((3.3, 0.0, 1.1), 0.25), [3.25, 0.0, 1.0])


def test_snap_ties_round_up():
    assert np.allclose(snap((0.5, -0.5, 1.5), 1.0), [1.0, 0.0, 2.0])


def test_snap_does_not_modify_input():
    p = np.array([0.4, 0.4, 0.4])
    out = snap(p, 1.0)
    assert np.array_equal(p, [0.4, 0.4, 0.4])
    assert out is not p


@pytest.mark.parametrize("step", [0.0, -1.0, float("nan")])
def test_snap_rejects_non_positive_step(step):
    with pytest.raises(PreconditionError):
        snap((1.0, 2.0, 3.0), step)

import numpy as np
import pytest
from electrostatics_sim.core import electric_field, potential, field_contributions
from electrostatics_sim.core.laws import source_field, source_potential
from electrostatics_sim.types import ChargeSource, Geometry, RingSampling


def _mixed_sources():
    return [
        ChargeSource(Geometry.POINT, q=2.0, position=(-1.0, 0.0, 0.0)),
        ChargeSource(Geometry.RING, q=-3.0, position=(0.0, 1.0, 0.0), radius=1.5),
        ChargeSource(Geometry.CONDUCTING_SPHERE, q=4.0, position=(2.0, 0.0, 1.0), radius=0.8),
        ChargeSource(Geometry.NON_CONDUCTING_SPHERE, q=-1.0, position=(0.0, -2.0, 0.0), radius=1.2),
    ]


def test_superposition_field():
    sources = _mixed_sources()
    p = np.array([0.4, -1.3, 0.2])
    total = electric_field(p, sources, k=10.0)
    expected = sum(source_field(p, s, 10.0) for s in sources)
    assert np.allclose(total.vector, expected)
    assert total.magnitude == pytest.approx(np.linalg.norm(expected))


def test_superposition_potential():
    sources = _mixed_sources()
    p = (0.4, -1.3, 0.2)
    expected = sum(potential(p, [s], k=10.0) for s in sources)
    assert potential(p, sources, k=10.0) == pytest.approx(expected)
    assert potential(p, sources, k=10.0) == pytest.approx(
        sum(source_potential(np.array(p), s, 10.0) for s in sources)
    )


def test_empty_sources():
    e = electric_field((1.0, 2.0, 3.0), [], k=10.0)
    assert np.array_equal(e.vector, np.zeros(3))
    assert e.magnitude == 0.0
    assert potential((1.0, 2.0, 3.0), [], k=10.0) == 0.0


def test_field_contributions_sum_to_total():
    sources = _mixed_sources()
    p = (1.0, 0.5, -0.5)
    parts = field_contributions(p, sources, k=10.0)
    assert [sid for sid, _ in parts] == [s.id for s in sources]
    summed = sum(r.vector for _, r in parts)
    assert np.allclose(summed, electric_field(p, sources, k=10.0).vector)


def test_sampling_parameter_is_used():
    """Off-axis ring values depend on the sample count."""
    ring = [ChargeSource(Geometry.RING, q=5.0, radius=1.0)]
    p = (1.2, 0.1, 0.0)
    coarse = electric_field(p, ring, 1.0, RingSampling(field=4)).vector
    fine = electric_field(p, ring, 1.0, RingSampling(field=400)).vector
    assert not np.allclose(coarse, fine)
    assert potential(p, ring, 1.0, RingSampling(potential=4)) != pytest.approx(
        potential(p, ring, 1.0, RingSampling(potential=400))
    )


def test_inputs_not_modified():
    sources = _mixed_sources()
    before = [s.position.copy() for s in sources]
    p = np.array([0.1, 0.2, 0.3])
    r = electric_field(p, sources, k=10.0)
    r.vector[:] = 99.0
    assert np.array_equal(p, [0.1, 0.2, 0.3])
    for s, pos in zip(sources, before):
        assert np.array_equal(s.position, pos)

import numpy as np
import pytest
from electrostatics_sim.core import net_force, electric_field
from electrostatics_sim.types import ChargeSource, Geometry, RingSampling


def test_lone_source_has_exactly_zero_force():
    for g in Geometry:
        s = ChargeSource(g, q=5.0, radius=1.0)
        f = net_force(s, [s], k=10.0)
        assert np.array_equal(f.vector, np.zeros(3))
        assert f.magnitude == 0.0
        assert net_force(s, [], k=10.0).magnitude == 0.0


def test_self_excluded_by_identity():
    """A copy of the target (same id) is not treated as another source."""
    a = ChargeSource(Geometry.POINT, q=1.0)
    b = ChargeSource(Geometry.POINT, q=2.0, position=(3.0, 0.0, 0.0))
    assert net_force(a, [a.copy()], k=1.0).magnitude == 0.0
    assert np.array_equal(net_force(a, [a, b], k=1.0).vector, net_force(a, [b], k=1.0).vector)


def test_coulomb_pair():
    """F = k q1 q2 / r² along the separation; equal and opposite."""
    a = ChargeSource(Geometry.POINT, q=2.0)
    b = ChargeSource(Geometry.POINT, q=3.0, position=(2.0, 0.0, 0.0))
    fa = net_force(a, [a, b], k=1.0)
    fb = net_force(b, [a, b], k=1.0)
    assert np.allclose(fb.vector, [1.5, 0.0, 0.0])
    assert np.allclose(fa.vector, -fb.vector)
    assert fa.magnitude == pytest.approx(1.5)


def test_opposite_charges_attract():
    a = ChargeSource(Geometry.POINT, q=5.0, position=(-2.0, 0.0, 0.0))
    b = ChargeSource(Geometry.POINT, q=-5.0, position=(2.0, 0.0, 0.0))
    assert net_force(a, [a, b], k=10.0).vector[0] > 0
    assert net_force(b, [a, b], k=10.0).vector[0] < 0


@pytest.mark.parametrize("geometry", [Geometry.CONDUCTING_SPHERE, Geometry.NON_CONDUCTING_SPHERE])
def test_sphere_target_uses_field_at_centre(geometry):
    src = ChargeSource(Geometry.POINT, q=1.0)
    sphere = ChargeSource(geometry, q=2.0, position=(3.0, 0.0, 0.0), radius=0.8)
    f = net_force(sphere, [src, sphere], k=1.0)
    e = electric_field(sphere.position, [src], k=1.0).vector
    assert np.allclose(f.vector, 2.0 * e)
    assert np.allclose(f.vector, [2.0 / 9.0, 0.0, 0.0])


def test_ring_target_reaction_on_axis():
    """
    Point charge on a ring's axis: the force on the ring is equal and
    opposite to the force the ring exerts on the point.
    """
    ring = ChargeSource(Geometry.RING, q=4.0, radius=1.0)
    point = ChargeSource(Geometry.POINT, q=-2.0, position=(0.0, 1.5, 0.0))
    sources = [ring, point]

    f_ring = net_force(ring, sources, k=1.0).vector
    f_point = net_force(point, sources, k=1.0).vector

    assert np.allclose(f_ring, -f_point, rtol=1e-9, atol=1e-12)
    assert f_ring[1] > 0  # attracted upward toward the negative charge
    assert abs(f_ring[0]) < 1e-12 and abs(f_ring[2]) < 1e-12


def test_ring_target_in_uniform_field_region():
    """Far from the source the field over the ring is nearly uniform: F ≈ q E(center)."""
    far = ChargeSource(Geometry.POINT, q=1000.0, position=(200.0, 0.0, 0.0))
    ring = ChargeSource(Geometry.RING, q=1.0, radius=0.5)
    f = net_force(ring, [far, ring], k=1.0).vector
    centroid = electric_field(ring.position, [far], k=1.0).vector
    assert np.allclose(f, centroid, rtol=1e-3)


def test_ring_force_sample_count():
    """sampling.force controls the discretization of a ring target."""
    near = ChargeSource(Geometry.POINT, q=1.0, position=(1.3, 0.0, 0.2))
    ring = ChargeSource(Geometry.RING, q=1.0, radius=1.0)
    coarse = net_force(ring, [near, ring], 1.0, RingSampling(force=3)).vector
    fine = net_force(ring, [near, ring], 1.0, RingSampling(force=200)).vector
    assert not np.allclose(coarse, fine)


def test_fixed_sources_still_push():
    pinned = ChargeSource(Geometry.POINT, q=5.0, is_fixed=True)
    free = ChargeSource(Geometry.POINT, q=1.0, position=(1.0, 0.0, 0.0))
    assert net_force(free, [pinned, free], k=1.0).vector[0] == pytest.approx(5.0)

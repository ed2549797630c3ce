import numpy as np
import pytest
from electrostatics_sim.core import step, kinetic_energy, linear_momentum, potential_energy
from electrostatics_sim.types import ChargeSource, Geometry


def _pair():
    a = ChargeSource(Geometry.POINT, q=1.0, position=(-1.0, 0.5, 0.25))
    b = ChargeSource(Geometry.POINT, q=-1.0, position=(1.0, -0.5, -0.25))
    return [a, b]


def test_mirror_symmetry_preserved():
    """Equal masses, opposite charges, symmetric about the origin, from rest."""
    sources = _pair()
    for _ in range(100):
        sources = step(sources, dt=0.01, k=1.0)
        a, b = sources
        assert np.allclose(a.position, -b.position, atol=1e-12)
        assert np.allclose(a.velocity, -b.velocity, atol=1e-12)
        assert np.allclose(linear_momentum(sources), 0.0, atol=1e-12)

    # They attracted each other
    assert np.linalg.norm(sources[0].position) < np.linalg.norm([-1.0, 0.5, 0.25])


def test_fixed_source_never_moves():
    pinned = ChargeSource(Geometry.POINT, q=5.0, position=(0.5, 0.0, 0.0),
                          velocity=(0.3, 0.0, 0.0), is_fixed=True)
    free = ChargeSource(Geometry.POINT, q=-1.0, position=(2.5, 0.0, 0.0))
    sources = [pinned, free]
    for _ in range(50):
        sources = step(sources, dt=0.02, k=1.0)
        assert np.array_equal(sources[0].position, [0.5, 0.0, 0.0])
        assert np.array_equal(sources[0].velocity, [0.3, 0.0, 0.0])
    assert sources[1].position[0] < 2.5


def test_zero_dt_only_damps():
    sources = [
        ChargeSource(Geometry.POINT, q=1.0, position=(0.0, 0.0, 0.0), velocity=(1.0, -2.0, 0.5)),
        ChargeSource(Geometry.RING, q=-2.0, position=(2.0, 0.0, 0.0), velocity=(0.1, 0.0, 0.0), mass=2.0),
        ChargeSource(Geometry.CONDUCTING_SPHERE, q=3.0, position=(0.0, 3.0, 0.0), radius=0.8),
    ]
    out = step(sources, dt=0.0, k=10.0, damping=0.9)
    for s, o in zip(sources, out):
        assert np.array_equal(o.position, s.position)
        assert np.array_equal(o.velocity, s.velocity * 0.9)


def test_semi_implicit_update():
    """v' = (v + F/m dt) damping; x' = x + v' dt"""
    a = ChargeSource(Geometry.POINT, q=2.0, mass=4.0, velocity=(0.0, 1.0, 0.0))
    b = ChargeSource(Geometry.POINT, q=3.0, position=(2.0, 0.0, 0.0), is_fixed=True)
    dt, damping = 0.1, 0.5
    new_a, new_b = step([a, b], dt=dt, k=1.0, damping=damping)

    force = np.array([-1.5, 0.0, 0.0])  # repelled from b
    v = (a.velocity + force / 4.0 * dt) * damping
    assert np.allclose(new_a.velocity, v)
    assert np.allclose(new_a.position, a.position + v * dt)


def test_free_drift_with_damping():
    s = ChargeSource(Geometry.POINT, q=1.0, velocity=(1.0, 0.0, 0.0))
    (out,) = step([s], dt=0.1, k=10.0)
    assert np.allclose(out.velocity, [0.98, 0.0, 0.0])
    assert np.allclose(out.position, [0.098, 0.0, 0.0])
    assert kinetic_energy([out]) < kinetic_energy([s])


def test_output_is_fresh_collection():
    sources = _pair() + [ChargeSource(Geometry.RING, q=1.0, position=(0.0, 3.0, 0.0), is_fixed=True)]
    positions = [s.position.copy() for s in sources]
    velocities = [s.velocity.copy() for s in sources]

    out = step(sources, dt=0.05, k=10.0)

    assert len(out) == len(sources)
    assert [o.id for o in out] == [s.id for s in sources]
    for s, o, p, v in zip(sources, out, positions, velocities):
        assert o is not s
        assert o.position is not s.position
        assert o.velocity is not s.velocity
        assert np.array_equal(s.position, p)
        assert np.array_equal(s.velocity, v)


def test_deterministic():
    sources = _pair() + [ChargeSource(Geometry.RING, q=2.0, position=(0.3, 1.0, -0.2))]
    a = step(sources, dt=0.05, k=10.0)
    b = step(sources, dt=0.05, k=10.0)
    for x, y in zip(a, b):
        assert np.array_equal(x.position, y.position)
        assert np.array_equal(x.velocity, y.velocity)


def test_damped_pair_loses_energy():
    """Repelling pair from rest: total energy only decreases under damping."""
    a = ChargeSource(Geometry.POINT, q=1.0, position=(-0.5, 0.0, 0.0))
    b = ChargeSource(Geometry.POINT, q=1.0, position=(0.5, 0.0, 0.0))
    sources = [a, b]
    e0 = kinetic_energy(sources) + potential_energy(sources, k=1.0)
    for _ in range(200):
        sources = step(sources, dt=0.01, k=1.0, damping=0.95)
    e1 = kinetic_energy(sources) + potential_energy(sources, k=1.0)
    assert e1 < e0
    assert sources[1].position[0] - sources[0].position[0] > 1.0


def test_potential_energy_pair():
    a = ChargeSource(Geometry.POINT, q=2.0)
    b = ChargeSource(Geometry.POINT, q=-3.0, position=(0.0, 0.0, 2.0))
    assert potential_energy([a, b], k=1.0) == pytest.approx(-3.0)

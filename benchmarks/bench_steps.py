"""
Microbenchmark: time per step vs number of sources.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from electrostatics_sim.core import step
from electrostatics_sim.scene import make_source
from electrostatics_sim.types import Geometry

GEOMETRIES = list(Geometry)


def run(n: int, steps: int = 50):
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # spawn sources on a grid with small random jitter, cycling geometries
    side = int(np.ceil(np.sqrt(n)))
    sources = []
    for i in range(n):
        ix, iz = i % side, i // side
        x = 3.0 * ix + 0.1 * float(rng.normal())
        z = 3.0 * iz + 0.1 * float(rng.normal())
        q = 5.0 if i % 2 == 0 else -5.0
        sources.append(make_source(GEOMETRIES[i % len(GEOMETRIES)], (x, 0.0, z), q=q))

    t0 = time.perf_counter()
    for _ in range(steps):
        sources = step(sources, dt=1 / 60, k=10.0)
    t1 = time.perf_counter()
    return (t1 - t0) / steps


if __name__ == "__main__":
    for n in [4, 10, 25, 50]:
        per_step = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")

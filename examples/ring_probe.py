# examples/ring_probe.py
from electrostatics_sim.scene import Scene
from electrostatics_sim.types import Geometry

scene = Scene()
ring = scene.place(Geometry.RING, (0.0, 0.0, 0.0))
scene.place(Geometry.CONDUCTING_SPHERE, (4.0, 0.0, 0.0), q=-5.0)

for height in (0.5, 1.0, 2.0, 3.0):
    probe = scene.place_probe((0.0, height, 0.0))
    obs = scene.observe(probe.id)
    print(f"y={height:3.1f}  |E|={obs.field_magnitude:8.3f}  V={obs.potential:8.3f}")

print("force on ring:", scene.force_on(ring.id).vector)

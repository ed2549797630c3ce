# examples/dipole_release.py
from electrostatics_sim.scene import Scene
from electrostatics_sim.core import kinetic_energy

# +5 at x=-2 and -5 at x=+2; released from rest they attract and, with
# damping, settle into a slow approach.
scene = Scene.with_dipole()

frame_dt = 1 / 60
while scene.time < 1.0:
    scene.step(frame_dt)

for s in scene.sources:
    print(s.geometry.value, "q", s.q, "pos", s.position, "v", s.velocity)
print("kinetic energy:", kinetic_energy(scene.sources))

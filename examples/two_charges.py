from electrostatic_lab import Simulation
from electrostatic_lab.controls import clamp_dt

sim = Simulation(width=1000, height=600)

# Opposite charges attract until they meet the force floor and bounce around
for frame in range(600):
    sim.step(clamp_dt(1 / 60))
    if frame % 60 == 0:
        a, b = sim.particles
        print(f"t={sim.time:5.2f}  r={sim.separation():7.2f}  F={sim.force_magnitude():8.2f}"
              f"  a=({a.position.x:.1f}, {a.position.y:.1f})  b=({b.position.x:.1f}, {b.position.y:.1f})")

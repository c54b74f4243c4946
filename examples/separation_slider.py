from electrostatic_lab import Simulation
from electrostatic_lab.controls import set_charge, set_friction

sim = Simulation()
a, b = sim.particles
set_charge(b, 5)          # like charges: repulsion
set_friction(sim, 0.05)

# Drag the separation slider across its range and let go each time
for distance in range(60, 501, 110):
    sim.set_separation(distance)
    print(f"set r={distance:3d}  F={sim.force_magnitude():8.2f}", end="")
    for _ in range(30):
        sim.step(1 / 60)
    print(f"  ->  r={sim.separation():7.2f} after 0.5 s")

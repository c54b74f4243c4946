import numpy as np

from electrostatic_lab import Simulation
from electrostatic_lab.core import field_grid, force_curve

sim = Simulation(width=400, height=200)
points, directions, mags = field_grid(sim.particles, sim.width, sim.height, spacing=40)

# Coarse ASCII arrows, one row per y sample
arrows = np.array(["→", "↘", "↓", "↙", "←", "↖", "↑", "↗"])
nx = int(sim.width // 40) + 1
ny = int(sim.height // 40) + 1
angles = np.arctan2(directions[:, 1], directions[:, 0])
octant = np.round(angles / (np.pi / 4)).astype(int) % 8
glyphs = np.where(mags > 1e-7, arrows[octant], "·").reshape(nx, ny)
for row in glyphs.T:
    print(" ".join(row))

a, b = sim.particles
distances, forces = force_curve(a.charge, b.charge, num=5)
for d, f in zip(distances, forces):
    print(f"r={d:6.1f}  |F|={f:8.2f}")

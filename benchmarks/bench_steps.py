"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from electrostatic_lab import Simulation
from electrostatic_lab.core import field_grid
from electrostatic_lab.profiler import Profiler

def run(n: int, steps: int = 300):
    prof = Profiler()
    sim = Simulation(width=1600, height=1200, populate=False, profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    for _ in range(n):
        sim.add_particle(
            float(rng.uniform(100, 1500)),
            float(rng.uniform(100, 1100)),
            mass=float(rng.uniform(0.1, 5.0)),
            charge=float(rng.integers(-10, 11)),
        )

    # warmup
    for _ in range(30):
        sim.step(1 / 60)

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step(1 / 60)
    t1 = time.perf_counter()

    t2 = time.perf_counter()
    field_grid(sim.particles, sim.width, sim.height, spacing=20)
    t3 = time.perf_counter()

    return (t1 - t0) / steps, t3 - t2, prof.stats.summary()

if __name__ == "__main__":
    for n in [2, 10, 50, 100]:
        per_step, field_s, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}  field grid={1e3*field_s:7.2f} ms")
        for k in ["forces", "integrate", "bounds"]:
            if k in summary:
                print(" ", k, summary[k])
        print()

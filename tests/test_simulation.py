import logging
import math

import pytest

from electrostatic_lab import Simulation
from electrostatic_lab.constants import DEFAULT_FRICTION
from electrostatic_lab.profiler import Profiler
from electrostatic_lab.types import Vector2


def test_default_scenario():
    sim = Simulation()
    assert [p.id for p in sim.particles] == ["obj1", "obj2"]
    a, b = sim.particles
    # min(800, 600) * 0.6 = 360, clamped to 300
    assert a.position == Vector2(250, 300)
    assert b.position == Vector2(550, 300)
    assert (a.mass, b.mass) == (1.0, 1.0)
    assert (a.charge, b.charge) == (5.0, -5.0)
    assert sim.friction == DEFAULT_FRICTION


def test_default_separation_clamped_low():
    sim = Simulation(width=200, height=200)
    assert sim.separation() == pytest.approx(150.0)


def test_default_separation_scales():
    sim = Simulation(width=1000, height=400)
    assert sim.separation() == pytest.approx(240.0)


def test_reinitialize_replaces_particles_with_fresh_ids():
    sim = Simulation()
    old = list(sim.particles)
    sim.friction = 0.08
    sim.initialize_default()
    assert [p.id for p in sim.particles] == ["obj3", "obj4"]
    assert all(p not in old for p in sim.particles)
    assert sim.friction == DEFAULT_FRICTION


def test_attraction_scenario():
    """+5 / -5 at distance 100, no friction: one step pulls them together."""
    sim = Simulation(width=800, height=600, friction=0.0, populate=False)
    a = sim.add_particle(300, 300, mass=1.0, charge=5.0)
    b = sim.add_particle(400, 300, mass=1.0, charge=-5.0)
    sim.step(1 / 60)
    assert a.position.distance_to(b.position) < 100.0
    assert a.position.x > 300 and b.position.x < 400
    assert a.position.y == 300 and b.position.y == 300
    assert sim.time == pytest.approx(1 / 60)


def test_attraction_scenario_at_origin():
    """
    Forces and integration only, so wall clamping cannot mask the direction:
    A at the origin moves right, B at (100, 0) moves left, y stays 0.
    """
    sim = Simulation(friction=0.0, populate=False)
    a = sim.add_particle(0, 0, charge=5.0)
    b = sim.add_particle(100, 0, charge=-5.0)
    sim.compute_pairwise_forces()
    assert a.acceleration.x > 0 and a.acceleration.y == 0.0
    assert b.acceleration.x < 0 and b.acceleration.y == 0.0
    for p in sim.particles:
        p.integrate(1 / 60, sim.friction)
    assert a.position.x > 0.0
    assert b.position.x < 100.0
    assert a.position.y == 0.0 and b.position.y == 0.0
    assert a.position.distance_to(b.position) < 100.0


def test_tuple_writes_are_accepted_between_steps():
    """Drag-repositioning may assign plain tuples; the next step still runs."""
    sim = Simulation(friction=0.0)
    a, b = sim.particles
    a.position = (300.0, 300.0)
    b.velocity = [0.0, 0.0]
    assert a.position == Vector2(300, 300)
    assert isinstance(b.velocity, Vector2)
    sim.step(1 / 60)
    assert a.position.x > 300.0
    assert isinstance(a.position, Vector2)


def test_repulsion_and_neutral():
    sim = Simulation(friction=0.0, populate=False)
    a = sim.add_particle(300, 300, charge=5.0)
    b = sim.add_particle(400, 300, charge=5.0)
    c = sim.add_particle(400, 100, charge=0.0)
    for _ in range(10):
        sim.step(1 / 60)
    assert a.position.distance_to(b.position) > 100.0
    # c feels nothing from anyone and exerts nothing
    assert c.position == Vector2(400, 100)
    assert c.velocity == Vector2(0, 0)


def test_locked_particle_stays_put():
    sim = Simulation(friction=0.0)
    a, b = sim.particles
    a.locked = True
    start = a.position
    for _ in range(30):
        sim.step(1 / 60)
    assert a.position == start
    assert a.velocity == Vector2(0, 0)
    assert b.position.x < 550


def test_set_separation_exact():
    sim = Simulation()
    for _ in range(5):
        sim.step(1 / 60)
    sim.set_separation(200)
    a, b = sim.particles
    assert a.position.distance_to(b.position) == pytest.approx(200)
    assert a.velocity == Vector2(0, 0) and b.velocity == Vector2(0, 0)
    assert a.acceleration == Vector2(0, 0) and b.acceleration == Vector2(0, 0)
    # Midpoint kept
    mid = (a.position + b.position) * 0.5
    assert mid.x == pytest.approx(400) and mid.y == pytest.approx(300)


def test_set_separation_keeps_axis():
    sim = Simulation(populate=False)
    a = sim.add_particle(300, 300)
    b = sim.add_particle(360, 380)  # axis (0.6, 0.8)
    sim.set_separation(50)
    d = b.position - a.position
    assert d.x == pytest.approx(30)
    assert d.y == pytest.approx(40)


def test_set_separation_coincident_is_horizontal():
    sim = Simulation(populate=False)
    a = sim.add_particle(400, 300)
    b = sim.add_particle(400, 300)
    sim.set_separation(100)
    assert not any(math.isnan(v) for v in (*a.position, *b.position))
    assert a.position == Vector2(350, 300)
    assert b.position == Vector2(450, 300)


def test_set_separation_respects_bounds():
    sim = Simulation()
    sim.set_separation(2000)
    a, b = sim.particles
    assert a.position.x == pytest.approx(a.radius)
    assert b.position.x == pytest.approx(800 - b.radius)


def test_set_separation_needs_two():
    sim = Simulation(populate=False)
    p = sim.add_particle(100, 100)
    sim.set_separation(300)
    assert p.position == Vector2(100, 100)


def test_resize_shifts_positions_and_trails():
    sim = Simulation(width=800, height=600)
    for _ in range(12):
        sim.step(1 / 60)
    before = [(p.position, list(p.trail)) for p in sim.particles]
    assert all(len(trail) == 2 for _, trail in before)

    sim.resize(1000, 600)

    assert (sim.width, sim.height) == (1000, 600)
    for p, (pos, trail) in zip(sim.particles, before):
        assert p.position.x == pytest.approx(pos.x + 100)
        assert p.position.y == pos.y
        assert len(p.trail) == len(trail)
        for new, old in zip(p.trail, trail):
            assert new.x == pytest.approx(old.x + 100)
            assert new.y == old.y


def test_resize_shrink_both_axes():
    sim = Simulation(width=800, height=600)
    sim.resize(600, 500)
    a, b = sim.particles
    assert a.position == Vector2(150, 250)
    assert b.position == Vector2(450, 250)


def test_readouts():
    sim = Simulation()
    assert sim.separation() == pytest.approx(300)
    assert sim.force_magnitude() == pytest.approx(20000 * 25 / 300**2)

    sim.set_separation(10)
    # Clamped at MIN_DISTANCE
    assert sim.force_magnitude() == pytest.approx(20000 * 25 / 60**2)

    empty = Simulation(populate=False)
    assert empty.separation() == 0.0
    assert empty.force_magnitude() == 0.0


def test_snapshot():
    sim = Simulation()
    sim.step(1 / 60)
    snap = sim.snapshot()
    assert snap["width"] == 800 and snap["height"] == 600
    assert snap["time"] == pytest.approx(1 / 60)
    assert [p["id"] for p in snap["particles"]] == ["obj1", "obj2"]
    assert snap["particles"][0]["charge"] == 5.0


def test_profiler_sections():
    prof = Profiler()
    sim = Simulation(profiler=prof)
    for _ in range(3):
        sim.step(1 / 60)
    summary = prof.stats.summary()
    for name in ("forces", "integrate", "bounds"):
        assert summary[name]["n"] == 3
        assert summary[name]["max_ms"] >= 0.0


def test_lock_is_reentrant():
    """External edits grouped under the lock may call back into the simulation."""
    sim = Simulation()
    with sim.lock:
        sim.particles[0].charge = -5.0
        sim.step(1 / 60)
        sim.set_separation(200)
    assert sim.separation() == pytest.approx(200)


def test_manipulation_logs_at_debug(caplog):
    sim = Simulation(populate=False)
    with caplog.at_level(logging.DEBUG, logger="electrostatic_lab.simulation"):
        sim.initialize_default()
        sim.resize(1000, 700)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Initialized default pair" in m for m in messages)
    assert any("Resized 800x600 -> 1000x700" in m for m in messages)

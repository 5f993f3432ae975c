"""Tests for physics engine."""

import math

import numpy as np
import pytest

from gravity_sim.physics.body import Body, mass_to_radius
from gravity_sim.physics.diagnostics import center_of_mass, live_count, total_mass, total_momentum
from gravity_sim.physics.force_model import Acceleration, ForceModel, Merge
from gravity_sim.physics.integrators.euler import SemiImplicitEulerIntegrator
from gravity_sim.physics.simulator import Simulator
from gravity_sim.physics.state import SimulationState, Snapshot
from gravity_sim.utils.config import ViewState


def test_mass_to_radius():
    """Radius is the square root of mass."""
    assert mass_to_radius(0.0) == 0.0
    assert mass_to_radius(4.0) == 2.0
    assert np.isclose(mass_to_radius(10.0), math.sqrt(10.0))


def test_single_body_drifts():
    """An isolated body moves by velocity*timescale and keeps everything else."""
    body = Body.create(10.0, -5.0, 2.0, 3.0, 4.0, color=(1, 2, 3))
    sim = Simulator([body], view=ViewState(timescale=0.5))

    sim.step()

    (moved,) = sim.slots
    assert moved.x == 11.0
    assert moved.y == -3.5
    assert (moved.x_vel, moved.y_vel) == (2.0, 3.0)
    assert moved.mass == 4.0
    assert moved.radius == 2.0
    assert moved.color == (1, 2, 3)


def test_two_body_acceleration():
    """Acceleration magnitude is G*m_other/d^2 and points at the other body."""
    G = 100.0
    d = 100.0
    timescale = 0.25
    light = Body.create(0.0, 0.0, 0.0, 0.0, 1.0)
    heavy = Body.create(d, 0.0, 0.0, 0.0, 1000.0)
    sim = Simulator([light, heavy], view=ViewState(timescale=timescale), G=G)

    sim.step()

    new_light, new_heavy = sim.slots
    a_light = np.hypot(new_light.x_vel, new_light.y_vel) / timescale
    a_heavy = np.hypot(new_heavy.x_vel, new_heavy.y_vel) / timescale
    assert np.isclose(a_light, G * 1000.0 / d ** 2)
    assert np.isclose(a_heavy, G * 1.0 / d ** 2)

    # Pulled towards each other
    assert new_light.x_vel > 0
    assert new_heavy.x_vel < 0
    assert np.isclose(new_light.y_vel, 0.0, atol=1e-12)


def test_force_model_direct():
    """ForceModel returns an Acceleration for separated bodies."""
    a = Body.create(0.0, 0.0, 0.0, 0.0, 1.0)
    b = Body.create(0.0, 20.0, 0.0, 0.0, 4.0)
    snapshot = Snapshot.of([a, b])

    result = ForceModel(G=1.0).evaluate(0, a, a, snapshot)

    assert isinstance(result, Acceleration)
    assert np.isclose(result.ax, 0.0, atol=1e-12)
    assert np.isclose(result.ay, 4.0 / 400.0)


def test_force_model_reports_first_overlap():
    """The first overlapping body in slot order ends the evaluation."""
    a = Body.create(0.0, 0.0, 0.0, 0.0, 4.0)
    far = Body.create(500.0, 0.0, 0.0, 0.0, 4.0)
    near1 = Body.create(2.0, 0.0, 0.0, 0.0, 1.0)
    near2 = Body.create(-2.0, 0.0, 0.0, 0.0, 1.0)
    snapshot = Snapshot.of([far, near1, a, near2])

    result = ForceModel().evaluate(2, a, a, snapshot)

    assert result == Merge(1)


def test_equal_mass_merge():
    """Equal masses: one slot becomes empty, the other holds the sum."""
    a = Body.create(0.0, 0.0, 0.0, 0.0, 4.0, color=(10, 20, 30))
    b = Body.create(3.0, 0.0, 0.0, 0.0, 4.0, color=(40, 50, 60))
    sim = Simulator([a, b])

    sim.step()

    survivor, absorbed = sim.slots
    assert absorbed is None
    assert survivor.mass == 8.0
    assert survivor.radius == mass_to_radius(8.0)
    assert survivor.x == 1.5
    assert survivor.color == (10, 20, 30)


def test_heavier_body_absorbs_lighter():
    """The lighter body vanishes regardless of slot order."""
    light = Body.create(0.0, 0.0, 1.0, 0.0, 4.0)
    heavy = Body.create(3.0, 0.0, 0.0, 0.0, 9.0, color=(7, 8, 9))
    sim = Simulator([light, heavy], view=ViewState(timescale=0.0))

    sim.step()

    assert sim.slots[0] is None
    merged = sim.slots[1]
    assert merged.mass == 13.0
    assert merged.color == (7, 8, 9)
    assert np.isclose(merged.x, (3.0 * 9.0) / 13.0)
    assert np.isclose(merged.x_vel, 4.0 / 13.0)


def test_coincident_bodies_are_ignored():
    """Pairs closer than distance 1 neither attract nor merge."""
    a = Body.create(0.0, 0.0, 1.0, 0.0, 5.0)
    b = Body.create(0.5, 0.0, 0.0, 1.0, 5.0)
    sim = Simulator([a, b], view=ViewState(timescale=1.0))

    sim.step()

    new_a, new_b = sim.slots
    assert (new_a.x, new_a.y, new_a.x_vel, new_a.y_vel) == (1.0, 0.0, 1.0, 0.0)
    assert (new_b.x, new_b.y, new_b.x_vel, new_b.y_vel) == (0.5, 1.0, 0.0, 1.0)


def test_absorbed_slot_stays_empty():
    """Updating an empty slot yields an empty slot."""
    integrator = SemiImplicitEulerIntegrator()
    snapshot = Snapshot.of([None, Body.create(0.0, 0.0, 0.0, 0.0, 1.0)])

    assert integrator.update(0, None, snapshot, 0.25) is None
    assert integrator.name == "euler"
    assert integrator.order == 1


def test_buffers_keep_capacity():
    """Absorbed bodies leave empty slots; buffers are never compacted."""
    bodies = [
        Body.create(0.0, 0.0, 0.0, 0.0, 9.0),
        Body.create(2.0, 0.0, 0.0, 0.0, 1.0),
        Body.create(300.0, 0.0, 0.0, 0.0, 1.0),
    ]
    sim = Simulator(bodies)

    sim.run(3)

    assert len(sim.slots) == 3
    assert sim.state.capacity == 3
    assert sim.slots[1] is None
    assert live_count(sim.slots) == 2
    assert len(sim.bodies) == 2


def test_step_reads_only_current_buffer():
    """Mirror-image bodies stay mirror images: no slot sees a half-updated step."""
    a = Body.create(-50.0, 0.0, 1.0, 0.0, 3.0)
    b = Body.create(50.0, 0.0, -1.0, 0.0, 3.0)
    sim = Simulator([a, b], view=ViewState(timescale=0.25))

    for _ in range(5):
        sim.step()
        new_a, new_b = sim.slots
        assert new_a.x == -new_b.x
        assert new_a.x_vel == -new_b.x_vel


def test_state_swap():
    """Writes land in scratch and only become visible after swap."""
    a = Body.create(0.0, 0.0, 0.0, 0.0, 1.0)
    b = Body.create(1.0, 1.0, 0.0, 0.0, 1.0)
    state = SimulationState([a])

    state.write(0, b)
    assert state.current == (a,)

    state.swap()
    assert state.current == (b,)

    state.write(0, None)
    state.swap()
    assert state.current == (None,)
    assert state.live_bodies() == ()


def test_mass_conserved_through_merge():
    """Total mass is unchanged by steps that include a merge."""
    bodies = [
        Body.create(0.0, 0.0, 0.0, 0.0, 10.0),
        Body.create(50.0, 0.0, -2.0, 0.0, 5.0),
        Body.create(0.0, 400.0, 0.0, 0.0, 2.0),
    ]
    sim = Simulator(bodies, G=1.0)
    initial = total_mass(sim.slots)

    for _ in range(200):
        sim.step()
        assert np.isclose(total_mass(sim.slots), initial)

    assert live_count(sim.slots) == 2
    assert sim.slots[1] is None
    assert sim.slots[0].mass == 15.0


def test_momentum_conserved_by_merge():
    """Without gravity a merge conserves linear momentum."""
    bodies = [
        Body.create(0.0, 0.0, 0.5, 0.0, 6.0),
        Body.create(3.0, 1.0, -1.0, 2.0, 3.0),
    ]
    sim = Simulator(bodies, G=0.0)
    before = total_momentum(sim.slots)

    sim.step()

    assert live_count(sim.slots) == 1
    assert np.allclose(total_momentum(sim.slots), before)


def test_merge_lands_on_center_of_mass():
    """The merged body sits at the pair's center of mass."""
    bodies = [
        Body.create(-1.0, 0.0, 0.0, 0.0, 8.0),
        Body.create(2.0, 2.0, 0.0, 0.0, 2.0),
    ]
    sim = Simulator(bodies, view=ViewState(timescale=0.0), G=0.0)
    before = center_of_mass(sim.slots)

    sim.step()

    (merged,) = sim.bodies
    assert np.allclose((merged.x, merged.y), before)
    assert np.allclose(center_of_mass(sim.slots), before)


def test_chained_overlap_drops_end_of_chain():
    """A chain A-B-C merges A with B and loses C for good."""
    bodies = [
        Body.create(0.0, 0.0, 0.0, 0.0, 9.0),
        Body.create(4.0, 0.0, 0.0, 0.0, 4.0),
        Body.create(6.5, 0.0, 0.0, 0.0, 1.0),
    ]
    sim = Simulator(bodies, view=ViewState(timescale=0.0), G=0.0)
    assert total_mass(sim.slots) == 14.0

    sim.step()

    merged, absorbed, dropped = sim.slots
    assert absorbed is None
    assert dropped is None
    assert merged.mass == 13.0
    assert np.isclose(merged.x, 16.0 / 13.0)

    sim.run(3)
    assert live_count(sim.slots) == 1
    assert total_mass(sim.slots) == 13.0


def test_deterministic():
    """Identical inputs give identical outputs."""
    rng = np.random.default_rng(7)
    bodies = [Body.random(rng, 60.0, 40.0) for _ in range(12)]

    sim1 = Simulator(bodies)
    sim2 = Simulator(bodies)
    sim1.run(50)
    sim2.run(50)

    assert sim1.slots == sim2.slots


def test_pause_and_single_step():
    """Paused simulators only advance on explicit step()."""
    body = Body.create(0.0, 0.0, 1.0, 0.0, 1.0)
    sim = Simulator([body])

    assert sim.paused
    assert sim.tick() is False
    assert sim.step_count == 0

    sim.step()
    assert sim.step_count == 1
    assert sim.paused

    sim.resume()
    assert sim.tick() is True
    assert sim.step_count == 2
    assert np.isclose(sim.time, 0.5)

    sim.toggle_pause()
    assert sim.paused


def test_scale_timescale():
    """Timescale changes multiplicatively."""
    sim = Simulator([Body.create(0.0, 0.0, 0.0, 0.0, 1.0)])

    sim.scale_timescale(1.1)
    assert np.isclose(sim.timescale, 0.275)

    sim.scale_timescale(1 / 1.1)
    assert np.isclose(sim.timescale, 0.25)

    with pytest.raises(ValueError):
        sim.scale_timescale(0.0)


def test_step_callback():
    """on_step_callback runs after every step."""
    sim = Simulator([Body.create(0.0, 0.0, 0.0, 0.0, 1.0)])
    seen = []
    sim.on_step_callback = lambda s: seen.append(s.step_count)

    sim.run(3)

    assert seen == [1, 2, 3]

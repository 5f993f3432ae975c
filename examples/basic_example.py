"""Basic example of using the gravity simulator."""

from gravity_sim import Body, Simulator, ViewState
from gravity_sim.physics.diagnostics import live_count, total_mass
from gravity_sim.presets import RandomField

def main():
    """Run a small random system until some bodies have merged."""
    bodies = RandomField(n_bodies=30, seed=42, half_width=150.0, half_height=100.0).generate()

    # A heavy body at the center to pull everything in
    bodies.append(Body.create(0.0, 0.0, 0.0, 0.0, 400.0, color=(255, 220, 0)))

    sim = Simulator(bodies, view=ViewState(timescale=0.1))

    print("Running simulation...")
    print(f"Initial bodies: {live_count(sim.slots)}, mass: {total_mass(sim.slots):.2f}")

    for step in range(2000):
        sim.step()
        if step % 500 == 0:
            print(f"Step {step}: Time={sim.time:.2f}, Bodies={live_count(sim.slots)}")

    print(f"Final bodies: {live_count(sim.slots)}, mass: {total_mass(sim.slots):.2f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()

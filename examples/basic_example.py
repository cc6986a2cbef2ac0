"""Basic example of using the swarm simulator."""

from swarm_sim import SimulationConfig, Simulator, get_strategy
from swarm_sim.physics.diagnostics import kinetic_energy


def main():
    """Run a seeded swarm with the batched strategy on NumPy."""
    config = SimulationConfig(ship_count=2000, planet_count=10, area_size=50.0)

    # Batched strategy: one vectorized batch per tick
    strategy = get_strategy("batched", backend="numpy")

    with Simulator.from_config(config, rng=42, strategy=strategy, dt=0.02) as sim:
        print("Running simulation...")
        print(f"Initial kinetic energy: {kinetic_energy(sim.world):.3f}")

        for step in range(500):
            sim.step()
            if step % 100 == 0:
                print(f"Step {step}: Time={sim.time:.2f}, K={kinetic_energy(sim.world):.3f}")

        positions, velocities, _, _ = sim.get_state()
        print(f"Ship 0 ended at {positions[0]} moving {velocities[0]}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()

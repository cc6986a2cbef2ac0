"""Physics engine: vector type, world state and the per-ship rule."""

from swarm_sim.physics.vector import Vector3
from swarm_sim.physics.world import Planet, Ship, World
from swarm_sim.physics.engine import step, update_ship

__all__ = ["Vector3", "Planet", "Ship", "World", "step", "update_ship"]

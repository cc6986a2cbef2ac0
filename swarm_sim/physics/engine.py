"""Per-ship gravity and integration rule (scalar reference).

Every ship is advanced independently of every other ship: it reads its own
position and velocity plus the (immutable) planets and nothing else. Both
execution strategies rely on that independence. The batched twin of this
rule lives in ``swarm_sim.physics.kernel`` and must stay formula-identical.

One tick for one ship:

1. Sum ``normalize(to_planet) * G * m / max(d, MIN_DISTANCE)**2`` over planets
   in index order.
2. Semi-implicit Euler with unit ship mass: ``v += F*dt``, then ``x += v*dt``.
3. For x and y independently, if the *new* position is outside
   ``[-area, area]``, scale that velocity component by ``BOUNCE_FACTOR`` and
   clamp the position onto the boundary.
"""

from typing import Optional, Sequence, Tuple

from swarm_sim.physics.vector import Vector3
from swarm_sim.physics.world import Planet, World
from swarm_sim.utils.config import SimulationConfig

# Distance floor that keeps the force finite for coincident ship/planet
MIN_DISTANCE = 0.1

# Velocity multiplier applied to an axis that left the area
BOUNCE_FACTOR = -0.5

# Only x and y are bounded; z is always 0
BOUNDED_AXES = (0, 1)


def gravitational_force_magnitude(distance: float, mass: float, G: float) -> float:
    """Inverse-square attraction with the distance floored at ``MIN_DISTANCE``."""
    if distance < MIN_DISTANCE:
        distance = MIN_DISTANCE
    return G * mass / (distance * distance)


def gravitational_force(ship_position: Vector3, planet_position: Vector3, mass: float, G: float) -> Vector3:
    """Force a single planet exerts on a ship (unit ship mass).

    The direction is taken from the unclamped separation, so a ship sitting
    exactly on a planet receives a zero vector rather than NaN.
    """
    to_planet = planet_position - ship_position
    magnitude = gravitational_force_magnitude(to_planet.magnitude, mass, G)
    return to_planet.normalized() * magnitude


def total_force(ship_position: Vector3, planets: Sequence[Planet], G: float) -> Vector3:
    """Sum of planet forces on one ship, in planet index order."""
    force = Vector3.zero()
    for planet in planets:
        force = force + gravitational_force(ship_position, planet.position, planet.mass, G)
    return force


def integrate(position: Vector3, velocity: Vector3, force: Vector3, dt: float) -> Tuple[Vector3, Vector3]:
    """Semi-implicit Euler: velocity first, then position with the new velocity."""
    velocity = velocity + force * dt
    position = position + velocity * dt
    return position, velocity


def reflect(position: Vector3, velocity: Vector3, area_size: float) -> Tuple[Vector3, Vector3]:
    """Bounce off the square boundary, each bounded axis on its own.

    A ship past a corner is reflected and clamped on both axes in one call.
    Fast ships may end a tick well beyond the wall before this runs; they are
    clamped back onto it, not traced to the crossing point.
    """
    for axis in BOUNDED_AXES:
        p = position[axis]
        if p < -area_size or p > area_size:
            velocity = velocity.with_axis(axis, velocity[axis] * BOUNCE_FACTOR)
            position = position.with_axis(axis, min(max(p, -area_size), area_size))
    return position, velocity


def update_ship(
    position: Vector3,
    velocity: Vector3,
    planets: Sequence[Planet],
    dt: float,
    G: float,
    area_size: float,
) -> Tuple[Vector3, Vector3]:
    """Advance one ship by one tick. Pure: returns the new (position, velocity)."""
    force = total_force(position, planets, G)
    position, velocity = integrate(position, velocity, force, dt)
    return reflect(position, velocity, area_size)


def update_range(world: World, planets: Sequence[Planet], start: int, stop: int, dt: float, config: SimulationConfig):
    """Compute new states for ships ``start..stop-1`` without writing them.

    Returns a list of (position, velocity) pairs in index order.
    """
    G = config.gravitational_constant
    area = config.area_size
    results = []
    for i in range(start, stop):
        ship = world.ship(i)
        results.append(update_ship(ship.position, ship.velocity, planets, dt, G, area))
    return results


def step(world: World, dt: float, config: SimulationConfig, planets: Optional[Sequence[Planet]] = None):
    """Advance every ship by ``dt`` in index order, mutating ``world`` in place.

    Planets are read-only input. This is the sequential reference that every
    execution strategy must reproduce.

    Args:
        world: World to update
        dt: Time step
        config: Physical parameters
        planets: Pre-built planet records for ``world`` (built here if omitted)
    """
    if planets is None:
        planets = world.planets
    G = config.gravitational_constant
    area = config.area_size
    for i in range(world.ship_count):
        ship = world.ship(i)
        position, velocity = update_ship(ship.position, ship.velocity, planets, dt, G, area)
        world.set_ship(i, position, velocity)

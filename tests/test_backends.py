"""Tests for compute backends and the batched kernel."""

import pytest
import numpy as np
from swarm_sim.backends.factory import get_backend, list_available_backends
from swarm_sim.backends.numpy_backend import NumPyBackend
from swarm_sim.physics import engine
from swarm_sim.physics.kernel import reflect_all, total_forces, update_ships
from swarm_sim.physics.vector import Vector3


def test_numpy_backend_basic():
    """Test basic NumPy backend operations."""
    backend = NumPyBackend()

    # Test array creation
    arr = backend.array([1, 2, 3])
    assert backend.to_numpy(arr).shape == (3,)
    assert backend.to_numpy(arr).dtype == np.float64

    # Test zeros
    zeros = backend.zeros_like(backend.array(np.ones((3, 3))))
    assert np.allclose(backend.to_numpy(zeros), 0)

    # Test operations
    a = backend.array([1.0, 2.0, 3.0])
    b = backend.array([4.0, 5.0, 6.0])

    assert np.allclose(backend.to_numpy(backend.add(a, b)), [5, 7, 9])
    assert np.allclose(backend.to_numpy(backend.subtract(b, a)), [3, 3, 3])
    assert np.allclose(backend.to_numpy(backend.multiply(a, b)), [4, 10, 18])
    assert np.allclose(backend.to_numpy(backend.divide(b, a)), [4, 2.5, 2])
    assert np.allclose(backend.to_numpy(backend.sqrt(b)), np.sqrt([4, 5, 6]))
    assert np.allclose(backend.to_numpy(backend.maximum(a, 2.0)), [2, 2, 3])
    assert np.allclose(backend.to_numpy(backend.clip(b, 4.5, 5.5)), [4.5, 5, 5.5])
    assert np.allclose(backend.to_numpy(backend.where(a > 1.5, a, 0.0)), [0, 2, 3])


def test_numpy_backend_shapes():
    """Stack, concatenate and expand_dims."""
    backend = NumPyBackend()
    x = backend.array([1.0, 2.0])
    assert backend.stack([x, x, x], axis=1).shape == (2, 3)
    assert backend.concatenate([x, x], axis=0).shape == (4,)
    assert backend.expand_dims(x, 1).shape == (2, 1)
    assert not backend.is_accelerator


def test_numpy_backend_reuses_host_arrays(seeded_world):
    """float64 host arrays are passed through without a per-tick copy."""
    backend = NumPyBackend()
    positions = backend.array(seeded_world.ship_positions)
    assert positions is seeded_world.ship_positions

    as_float32 = NumPyBackend(np.float32).array(seeded_world.ship_positions)
    assert as_float32.dtype == np.float32
    assert not np.shares_memory(as_float32, seeded_world.ship_positions)


def test_backend_factory():
    """Test backend factory."""
    # NumPy should always be available
    backends = list_available_backends()
    assert backends[0] == "numpy"

    # Should be able to get NumPy backend
    backend = get_backend("numpy")
    assert backend.name == "numpy"
    assert get_backend("NumPy").name == "numpy"

    # Auto-select should work
    backend = get_backend()
    assert backend is not None
    assert get_backend(prefer_gpu=False).name == "numpy"


def test_backend_factory_unknown():
    with pytest.raises(ValueError, match="Unknown backend"):
        get_backend("abacus")


def test_kernel_matches_scalar_rule(seeded_world, small_config):
    """Batched update on float64 NumPy equals the per-ship rule."""
    backend = NumPyBackend()
    planets = seeded_world.planets
    dt, G, area = 0.02, small_config.gravitational_constant, small_config.area_size

    new_positions, new_velocities = update_ships(
        backend.array(seeded_world.ship_positions),
        backend.array(seeded_world.ship_velocities),
        backend.array(seeded_world.planet_positions),
        backend.array(seeded_world.planet_masses),
        dt, G, area, backend,
    )
    for i, ship in enumerate(seeded_world.ships):
        position, velocity = engine.update_ship(ship.position, ship.velocity, planets, dt, G, area)
        assert np.allclose(new_positions[i], position.to_tuple(), rtol=0, atol=1e-12)
        assert np.allclose(new_velocities[i], velocity.to_tuple(), rtol=0, atol=1e-12)


def test_kernel_does_not_modify_inputs(seeded_world, small_config):
    backend = NumPyBackend()
    positions = backend.array(seeded_world.ship_positions)
    velocities = backend.array(seeded_world.ship_velocities)
    before = positions.copy(), velocities.copy()

    update_ships(positions, velocities,
                 backend.array(seeded_world.planet_positions),
                 backend.array(seeded_world.planet_masses),
                 0.02, 9.8, 50.0, backend)

    assert np.array_equal(positions, before[0])
    assert np.array_equal(velocities, before[1])


def test_kernel_coincident_and_empty():
    """Zero separation yields no direction; no planets yields no force."""
    backend = NumPyBackend()
    positions = backend.array([[1.0, 1.0, 0.0], [4.0, 1.0, 0.0]])

    forces = total_forces(positions, backend.array([[1.0, 1.0, 0.0]]), backend.array([9.0]), 9.8, backend)
    assert np.all(np.isfinite(forces))
    assert np.array_equal(forces[0], [0.0, 0.0, 0.0])
    expected = engine.gravitational_force(Vector3(4, 1, 0), Vector3(1, 1, 0), 9.0, 9.8)
    assert np.allclose(forces[1], expected.to_tuple())

    no_planets = total_forces(positions, backend.array(np.zeros((0, 3))), backend.array([]), 9.8, backend)
    assert np.array_equal(no_planets, np.zeros((2, 3)))


def test_reflect_all():
    """Each bounded axis is bounced and clamped independently."""
    backend = NumPyBackend()
    positions = backend.array([[11.0, -13.0, 4.0], [0.0, 10.5, 0.0], [3.0, 3.0, 0.0]])
    velocities = backend.array([[4.0, -2.0, 1.0], [1.0, 1.0, 0.0], [1.0, 1.0, 0.0]])

    new_positions, new_velocities = reflect_all(positions, velocities, 10.0, backend)

    assert np.array_equal(new_positions, [[10, -10, 4], [0, 10, 0], [3, 3, 0]])
    assert np.array_equal(new_velocities, [[-2, 1, 1], [1, -0.5, 0], [1, 1, 0]])


def test_jax_backend():
    """JAX backend on the host CPU."""
    pytest.importorskip("jax")
    backend = get_backend("jax", device="cpu")
    assert backend.name == "jax"
    assert not backend.is_accelerator
    a = backend.array([1.0, 4.0])
    assert np.allclose(backend.to_numpy(backend.sqrt(a)), [1.0, 2.0])
    backend.synchronize()


def test_pytorch_backend():
    """PyTorch backend on the host CPU."""
    pytest.importorskip("torch")
    backend = get_backend("pytorch", device="cpu")
    assert backend.name == "pytorch"
    assert backend.device == "cpu"
    readonly = np.ones(3)
    readonly.flags.writeable = False
    a = backend.array(readonly)
    assert np.allclose(backend.to_numpy(backend.maximum(a, 2.0)), [2.0, 2.0, 2.0])

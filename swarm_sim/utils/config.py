"""Configuration management."""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def _check_type(name: str, value: Any, types, optional: bool = False):
    """Raise ValueError unless value is one of types (bool never counts as a number)."""
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, types):
        raise ValueError(f"Config field '{name}' has invalid value {value!r}")


@dataclass(frozen=True)
class SimulationConfig:
    """Physical parameters of a run.

    Governs both the initializer and the engine and is never mutated once the
    world has been built. Ranges are preconditions: callers keep every
    ``min_*`` at or below its ``max_*`` and counts non-negative.
    """
    ship_count: int = 100
    planet_count: int = 10
    area_size: float = 50.0
    min_planet_radius: float = 1.0
    max_planet_radius: float = 5.0
    min_ship_speed: float = 1.0
    max_ship_speed: float = 5.0
    gravitational_constant: float = 9.8

    def __post_init__(self):
        for name in ('ship_count', 'planet_count'):
            _check_type(name, getattr(self, name), int)
        for name in ('area_size', 'min_planet_radius', 'max_planet_radius',
                     'min_ship_speed', 'max_ship_speed', 'gravitational_constant'):
            _check_type(name, getattr(self, name), (int, float))


@dataclass
class Config:
    """Run configuration: physics plus how and how long to execute it."""
    simulation: SimulationConfig = field(default_factory=SimulationConfig)

    # Execution
    strategy: str = "sequential"
    backend: str = "numpy"
    workers: Optional[int] = None
    chunk_size: Optional[int] = None

    # Time stepping
    dt: float = 0.02
    steps: int = 500

    # Reproducibility
    seed: Optional[int] = None

    # Diagnostics are logged every N steps (0 disables)
    log_interval: int = 0

    def __post_init__(self):
        if isinstance(self.simulation, dict):
            self.simulation = SimulationConfig(**self.simulation)
        elif not isinstance(self.simulation, SimulationConfig):
            raise ValueError(f"simulation must be a mapping, got {type(self.simulation).__name__}")
        for name in ('strategy', 'backend'):
            _check_type(name, getattr(self, name), str)
        for name in ('steps', 'log_interval'):
            _check_type(name, getattr(self, name), int)
        for name in ('workers', 'chunk_size', 'seed'):
            _check_type(name, getattr(self, name), int, optional=True)
        _check_type('dt', self.dt, (int, float))


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a Config from a plain mapping (as read from JSON/YAML)."""
    return Config(**(data or {}))


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json, .yaml or .yml)

    Returns:
        Config object

    Raises:
        ValueError: If the file suffix is not supported, the file cannot be
            parsed, or a field has the wrong type
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. Use .json, .yaml or .yml"
            )

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return config_from_dict(data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    if output_path.suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(
            f"Unsupported config format: {output_path.suffix}. Use .json, .yaml or .yml"
        )

    with open(output_path, 'w') as f:
        if output_path.suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False)

"""Configuration management."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Tuple

import yaml


@dataclass
class Config:
    """Simulation configuration."""
    # Initial conditions
    num_bodies: int = 5
    save_file: Optional[str] = None
    output_path: str = "save.csv"
    seed: Optional[int] = None
    velocity_limit: float = 1.0
    mass_limit: float = 10.0

    # World / window size; random bodies are placed inside it
    screen_width: int = 1200
    screen_height: int = 800

    # Physics
    G: float = 100.0
    timescale: float = 0.25

    # Frame loop
    frame_time_ms: int = 16
    pixel_decay_rate: int = 2

    @property
    def half_extent(self) -> Tuple[float, float]:
        """Half width and half height of the world."""
        return self.screen_width / 2, self.screen_height / 2


@dataclass
class ViewState:
    """Runtime settings changed by the controls.

    Read by the simulator (timescale, paused) and the renderer
    (camera, zoom, trails).
    """
    timescale: float = 0.25
    zoomscale: float = 1.0
    movescale: float = 25.0
    center_x: float = 0.0
    center_y: float = 0.0
    paused: bool = True
    trail_decay: bool = False

    @classmethod
    def from_config(cls, config: Config) -> "ViewState":
        return cls(timescale=config.timescale)

    def visible_bounds(self, width: float, height: float) -> Tuple[float, float, float, float]:
        """World-space (x_min, x_max, y_min, y_max) shown on a width x height screen."""
        half_w = self.zoomscale * width / 2
        half_h = self.zoomscale * height / 2
        return (
            self.center_x - half_w,
            self.center_x + half_w,
            self.center_y - half_h,
            self.center_y + half_h,
        )


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object

    Raises:
        ValueError: If the file is not a mapping or contains keys Config
            does not know
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must hold a mapping")

    known = {field.name for field in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {unknown}")

    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)

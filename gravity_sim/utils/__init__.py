"""Utility functions for reproducibility and configuration."""

from gravity_sim.utils.reproducibility import make_rng
from gravity_sim.utils.config import Config, ViewState, load_config, save_config

__all__ = ["make_rng", "Config", "ViewState", "load_config", "save_config"]

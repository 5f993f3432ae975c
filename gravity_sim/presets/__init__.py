"""Preset scenario generators."""

from gravity_sim.presets.base import Preset
from gravity_sim.presets.random_field import RandomField

__all__ = ["Preset", "RandomField"]

"""
Gravity Simulator - a 2D N-body gravity sandbox with inelastic merging.

Features:
- Direct-summation gravity with a semi-implicit Euler step
- Perfectly inelastic merging of overlapping bodies
- Double-buffered state: a step never reads what it is writing
- CSV save files, JSON/YAML configuration
- Interactive matplotlib viewer and a headless CLI
"""

__version__ = "0.1.0"

from gravity_sim.physics.body import Body
from gravity_sim.physics.simulator import Simulator
from gravity_sim.utils.config import Config, ViewState

__all__ = [
    "Body",
    "Simulator",
    "Config",
    "ViewState",
]

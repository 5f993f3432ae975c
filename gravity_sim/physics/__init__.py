"""Physics engine for N-body simulations."""

from gravity_sim.physics.body import Body, BodyParseError, mass_to_radius
from gravity_sim.physics.state import SimulationState
from gravity_sim.physics.simulator import Simulator

__all__ = ["Body", "BodyParseError", "mass_to_radius", "SimulationState", "Simulator"]

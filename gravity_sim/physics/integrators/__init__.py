"""Numerical integrators for N-body simulations."""

from gravity_sim.physics.integrators.base import Integrator
from gravity_sim.physics.integrators.euler import SemiImplicitEulerIntegrator

__all__ = ["Integrator", "SemiImplicitEulerIntegrator"]

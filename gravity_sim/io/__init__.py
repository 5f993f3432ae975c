"""I/O utilities for state management."""

from gravity_sim.io.state_io import format_state, load_state, save_state

__all__ = ["save_state", "load_state", "format_state"]

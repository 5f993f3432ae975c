"""Input handling for interactive runs."""

from gravity_sim.ui.controls import KEY_BINDINGS, Controls

__all__ = ["Controls", "KEY_BINDINGS"]

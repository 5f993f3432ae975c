"""Runtime controls for a running simulation.

Each action mutates the shared ViewState or drives the simulator; the
key bindings mirror the classic keyboard layout (WASD to pan, Q/E to
zoom, arrows for pan rate and speed).
"""

from typing import Callable, Dict, Optional

from gravity_sim.io.state_io import format_state, save_state
from gravity_sim.physics.simulator import Simulator
from gravity_sim.utils.config import Config

TIMESCALE_FACTOR = 1.1
ZOOM_FACTOR = 1.2
MOVESCALE_STEP = 1.0

KEY_BINDINGS: Dict[str, str] = {
    " ": "toggle_pause",
    "space": "toggle_pause",
    "x": "toggle_trails",
    "c": "single_step",
    "q": "zoom_out",
    "e": "zoom_in",
    "w": "pan_up",
    "s": "pan_down",
    "a": "pan_left",
    "d": "pan_right",
    "up": "faster_pan",
    "down": "slower_pan",
    "left": "slow_down",
    "right": "speed_up",
    "p": "print_state",
    "o": "save_state",
}


class Controls:
    """Actions available to the input layer."""

    def __init__(
        self,
        simulator: Simulator,
        config: Optional[Config] = None,
        on_view_change: Optional[Callable[[], None]] = None,
        output: Callable[[str], None] = print,
    ):
        """Initialize controls.

        Args:
            simulator: Simulator to drive; its ViewState is the one mutated
            config: Config for screen size and save path
            on_view_change: Called after the camera moves or zooms
                (e.g. to clear trails)
            output: Sink for the print-state table
        """
        self.simulator = simulator
        self.view = simulator.view
        self.config = config or Config()
        self.on_view_change = on_view_change
        self.output = output

    def handle_key(self, key: str) -> bool:
        """Dispatch a key name to its action.

        Returns:
            True if the key is bound
        """
        action = KEY_BINDINGS.get(key.lower() if key else key)
        if action is None:
            return False
        getattr(self, action)()
        return True

    def _view_changed(self):
        if self.on_view_change is not None:
            self.on_view_change()

    def toggle_pause(self):
        self.simulator.toggle_pause()

    def toggle_trails(self):
        self.view.trail_decay = not self.view.trail_decay

    def single_step(self):
        """Advance one timestep without changing the paused state."""
        self.simulator.step()

    def speed_up(self):
        self.simulator.scale_timescale(TIMESCALE_FACTOR)

    def slow_down(self):
        self.simulator.scale_timescale(1 / TIMESCALE_FACTOR)

    def zoom_out(self):
        self.view.zoomscale *= ZOOM_FACTOR
        self._view_changed()

    def zoom_in(self):
        self.view.zoomscale /= ZOOM_FACTOR
        self._view_changed()

    def pan(self, dx: int, dy: int):
        """Move the camera by whole pan steps.

        One step is ``movescale * zoomscale`` world units, so panning
        feels the same at every zoom level. Screen y grows downwards.
        """
        step = self.view.movescale * self.view.zoomscale
        self.view.center_x += dx * step
        self.view.center_y += dy * step
        self._view_changed()

    def pan_up(self):
        self.pan(0, -1)

    def pan_down(self):
        self.pan(0, 1)

    def pan_left(self):
        self.pan(-1, 0)

    def pan_right(self):
        self.pan(1, 0)

    def faster_pan(self):
        self.view.movescale += MOVESCALE_STEP

    def slower_pan(self):
        if self.view.movescale > 0:
            self.view.movescale -= MOVESCALE_STEP

    def print_state(self):
        self.output("\n\n")
        self.output(format_state(
            self.simulator, self.config.screen_width, self.config.screen_height
        ))

    def save_state(self) -> bool:
        return save_state(self.simulator.slots, self.config.output_path)

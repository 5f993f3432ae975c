"""Main simulator controller."""

from typing import Callable, Iterable, Optional, Tuple

from gravity_sim.physics.body import Body
from gravity_sim.physics.force_model import ForceModel
from gravity_sim.physics.integrators.base import Integrator
from gravity_sim.physics.integrators.euler import SemiImplicitEulerIntegrator
from gravity_sim.physics.state import SimulationState, Slot
from gravity_sim.utils.config import ViewState


class Simulator:
    """Main simulation controller.

    Owns the two body buffers and advances them one global timestep at a
    time. Starts paused; the paused flag lives on the shared ViewState so
    the controls and the frame loop agree on it.
    """

    def __init__(
        self,
        bodies: Iterable[Slot],
        view: Optional[ViewState] = None,
        integrator: Optional[Integrator] = None,
        G: float = 100.0,
    ):
        """Initialize simulator.

        Args:
            bodies: Initial bodies; their count fixes the buffer capacity
            view: Shared view settings (default: a fresh paused ViewState)
            integrator: Integrator to use (default: semi-implicit Euler
                with gravitational constant ``G``)
            G: Gravitational constant, ignored if ``integrator`` is given
        """
        self.state = SimulationState(bodies)
        self.view = view if view is not None else ViewState()
        self.integrator = integrator or SemiImplicitEulerIntegrator(ForceModel(G))
        self.time = 0.0
        self.step_count = 0

        # Callbacks
        self.on_step_callback: Optional[Callable] = None

    @property
    def paused(self) -> bool:
        return self.view.paused

    @property
    def timescale(self) -> float:
        return self.view.timescale

    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Live bodies of the current buffer (read-only)."""
        return self.state.live_bodies()

    @property
    def slots(self) -> Tuple[Slot, ...]:
        """All slots of the current buffer, None for absorbed bodies."""
        return self.state.current

    def step(self):
        """Perform exactly one timestep, whether paused or not.

        Every slot is computed from the current buffer only and written
        to scratch; the buffers are swapped once all slots are done.
        """
        snapshot = self.state.snapshot()
        timescale = self.view.timescale
        for i, body in enumerate(snapshot.slots):
            self.state.write(i, self.integrator.update(i, body, snapshot, timescale))
        self.state.swap()

        self.time += timescale
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def tick(self) -> bool:
        """Frame-loop entry: step only while running.

        Returns:
            True if a step was performed
        """
        if self.paused:
            return False
        self.step()
        return True

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def pause(self):
        """Pause simulation."""
        self.view.paused = True

    def resume(self):
        """Resume simulation."""
        self.view.paused = False

    def toggle_pause(self):
        self.view.paused = not self.view.paused

    def scale_timescale(self, factor: float):
        """Multiply the timestep by ``factor``.

        Args:
            factor: Positive multiplier (e.g. 1.1 to speed up)
        """
        if factor <= 0:
            raise ValueError(f"Timescale factor must be positive, got {factor}")
        self.view.timescale *= factor

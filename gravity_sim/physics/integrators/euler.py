"""Semi-implicit Euler integrator with collision merging (O(h) accuracy)."""

from dataclasses import replace
from typing import Optional

from gravity_sim.physics.body import Body
from gravity_sim.physics.collision import CollisionResolver
from gravity_sim.physics.force_model import ForceModel, Merge
from gravity_sim.physics.integrators.base import Integrator
from gravity_sim.physics.state import Snapshot


class SemiImplicitEulerIntegrator(Integrator):
    """Position-then-force first-order step.

    r_new = r + v*dt, then v_new = v + a*dt with a summed over the current
    buffer. Cheap and crude; energy drifts, so small timescales are needed
    for roughly accurate orbits.
    """

    def __init__(
        self,
        force_model: Optional[ForceModel] = None,
        resolver: Optional[CollisionResolver] = None,
    ):
        self.force_model = force_model or ForceModel()
        self.resolver = resolver or CollisionResolver()

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def update(
        self,
        index: int,
        body: Optional[Body],
        snapshot: Snapshot,
        timescale: float,
    ) -> Optional[Body]:
        """Advance one slot by one timestep.

        A merge outcome replaces the computed kinematics entirely: the
        body is either absorbed or becomes the merged body.
        """
        # Absorbed bodies never come back
        if body is None:
            return None

        moved = body.advanced(timescale)
        result = self.force_model.evaluate(index, body, moved, snapshot)

        if isinstance(result, Merge):
            partner = snapshot.slots[result.partner]
            return self.resolver.resolve(index, moved, result.partner, partner)

        return replace(
            moved,
            x_vel=moved.x_vel + result.ax * timescale,
            y_vel=moved.y_vel + result.ay * timescale,
        )

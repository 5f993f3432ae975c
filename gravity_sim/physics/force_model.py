"""Pairwise gravitational acceleration with collision detection.

Direct O(n^2) summation: each body is evaluated against every other live
body of the current buffer. A pair closer than distance 1 is skipped to
avoid the singularity at zero separation. A pair whose circles overlap
ends the evaluation with a merge instead of an acceleration.
"""

from typing import NamedTuple, Union

import numpy as np

from gravity_sim.physics.body import Body
from gravity_sim.physics.state import Snapshot

# Pairs with squared distance below this contribute nothing
MIN_DISTANCE_SQUARED = 1.0


class Acceleration(NamedTuple):
    ax: float
    ay: float


class Merge(NamedTuple):
    """The body overlaps the live body in slot ``partner``."""
    partner: int


ForceResult = Union[Acceleration, Merge]


class ForceModel:
    """Newtonian gravity between bodies of one snapshot."""

    def __init__(self, G: float = 100.0):
        """Initialize force model.

        Args:
            G: Gravitational constant (simulation units)
        """
        self.G = G

    def evaluate(
        self,
        index: int,
        body: Body,
        advanced: Body,
        snapshot: Snapshot,
    ) -> ForceResult:
        """Sum the acceleration on one body or report its first overlap.

        Separations are measured from the body's position before this
        step's advance. The direction of the pull uses the advanced
        position, pointing from the body towards each other body.

        Args:
            index: Slot of ``body`` in the snapshot (excluded from the sum)
            body: Body as stored in the current buffer
            advanced: Same body after its position advance
            snapshot: Column view of the current buffer

        Returns:
            Merge(partner) for the first overlapping body in slot order,
            otherwise the summed Acceleration
        """
        others = snapshot.live.copy()
        others[index] = False

        d2 = (body.x - snapshot.x) ** 2 + (body.y - snapshot.y) ** 2
        considered = others & (d2 >= MIN_DISTANCE_SQUARED)

        overlapping = considered & (d2 < (body.radius + snapshot.radius) ** 2)
        if overlapping.any():
            return Merge(int(np.flatnonzero(overlapping)[0]))

        if not considered.any():
            return Acceleration(0.0, 0.0)

        d2 = d2[considered]
        magnitude = -self.G * snapshot.mass[considered] / d2
        angle = np.arctan2(
            advanced.y - snapshot.y[considered],
            advanced.x - snapshot.x[considered],
        )
        ax = np.sum(magnitude * np.cos(angle))
        ay = np.sum(magnitude * np.sin(angle))
        return Acceleration(float(ax), float(ay))

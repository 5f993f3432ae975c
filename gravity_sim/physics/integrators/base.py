"""Abstract base class for per-body integrators."""

from abc import ABC, abstractmethod
from typing import Optional

from gravity_sim.physics.body import Body
from gravity_sim.physics.state import Snapshot


class Integrator(ABC):
    """Abstract interface for integrators that advance one body at a time."""

    @abstractmethod
    def update(
        self,
        index: int,
        body: Optional[Body],
        snapshot: Snapshot,
        timescale: float,
    ) -> Optional[Body]:
        """Compute the next-frame value of one slot.

        Args:
            index: Slot being updated
            body: Body in that slot of the current buffer, None if absorbed
            snapshot: Column view of the current buffer
            timescale: Time step

        Returns:
            Next-frame body, or None if the slot is (or becomes) empty
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass

"""Double-buffered body storage."""

from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from gravity_sim.physics.body import Body

Slot = Optional[Body]


class Snapshot(NamedTuple):
    """Column view of one buffer, built once per step for the force model.

    Absorbed slots carry zeros and ``live[i] == False``.
    """
    slots: Tuple[Slot, ...]
    live: np.ndarray
    x: np.ndarray
    y: np.ndarray
    mass: np.ndarray
    radius: np.ndarray

    @classmethod
    def of(cls, slots: Iterable[Slot]) -> "Snapshot":
        slots = tuple(slots)
        n = len(slots)
        live = np.zeros(n, dtype=bool)
        columns = np.zeros((4, n), dtype=np.float64)
        for i, body in enumerate(slots):
            if body is None:
                continue
            live[i] = True
            columns[:, i] = (body.x, body.y, body.mass, body.radius)
        return cls(slots, live, columns[0], columns[1], columns[2], columns[3])

    def __len__(self) -> int:
        return len(self.slots)


class SimulationState:
    """Two fixed-length buffers of body slots.

    ``current`` is the authoritative buffer read by rendering and by the
    next step. ``scratch`` is only ever written by the step in progress.
    After a step the roles are swapped by flipping an index; neither
    buffer is ever resized or compacted, absorbed bodies stay as ``None``
    slots.
    """

    def __init__(self, bodies: Iterable[Slot]):
        initial = list(bodies)
        self._buffers: List[List[Slot]] = [initial, [None] * len(initial)]
        self._current = 0

    @property
    def capacity(self) -> int:
        return len(self._buffers[0])

    @property
    def current(self) -> Tuple[Slot, ...]:
        """Read-only copy of the current buffer, tombstones included."""
        return tuple(self._buffers[self._current])

    def live_bodies(self) -> Tuple[Body, ...]:
        return tuple(b for b in self._buffers[self._current] if b is not None)

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self._buffers[self._current])

    def write(self, index: int, slot: Slot):
        """Write the next-frame value of slot ``index`` into scratch."""
        self._buffers[1 - self._current][index] = slot

    def swap(self):
        """Publish scratch as current; the old current becomes scratch."""
        self._current = 1 - self._current


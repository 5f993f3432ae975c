"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List

from gravity_sim.physics.body import Body
from gravity_sim.utils.reproducibility import make_rng


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(self, n_bodies: int = 5, seed: int = None):
        """Initialize preset.

        Args:
            n_bodies: Number of bodies
            seed: Random seed for reproducibility
        """
        if n_bodies < 0:
            raise ValueError(f"n_bodies must be non-negative, got {n_bodies}")
        self.n_bodies = n_bodies
        self.seed = seed
        self.rng = make_rng(seed)

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial bodies."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass

"""Uniformly scattered random bodies."""

from typing import List

from gravity_sim.physics.body import Body
from gravity_sim.presets.base import Preset


class RandomField(Preset):
    """Bodies scattered over the visible world with small random drift."""

    def __init__(
        self,
        n_bodies: int = 5,
        seed: int = None,
        half_width: float = 600.0,
        half_height: float = 400.0,
        velocity_limit: float = 1.0,
        mass_limit: float = 10.0,
    ):
        """Initialize random field preset.

        Args:
            n_bodies: Number of bodies
            seed: Random seed
            half_width: Half of the world width
            half_height: Half of the world height
            velocity_limit: Width of the symmetric velocity range
            mass_limit: Masses are drawn from [1, mass_limit + 1)
        """
        super().__init__(n_bodies, seed)
        self.half_width = half_width
        self.half_height = half_height
        self.velocity_limit = velocity_limit
        self.mass_limit = mass_limit

    @property
    def name(self) -> str:
        return "random"

    def generate(self) -> List[Body]:
        return [
            Body.random(
                self.rng,
                self.half_width,
                self.half_height,
                velocity_limit=self.velocity_limit,
                mass_limit=self.mass_limit,
            )
            for _ in range(self.n_bodies)
        ]

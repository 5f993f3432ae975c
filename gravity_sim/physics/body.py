"""Body value type and constructors."""

import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

import numpy as np

Color = Tuple[int, int, int]


class BodyParseError(ValueError):
    """Raised when a save-file record cannot be turned into a Body."""


def mass_to_radius(mass: float) -> float:
    """Convert mass to radius so sizes stay consistent with mass."""
    return math.sqrt(mass)


def _color_channel(value: float) -> int:
    if not math.isfinite(value):
        raise BodyParseError(f"Color channel must be finite, got {value}")
    return min(max(int(value), 0), 255)


def random_color(rng: np.random.Generator) -> Color:
    """Draw a random RGB color, each channel uniform over [0, 255)."""
    r, g, b = rng.integers(0, 255, size=3)
    return int(r), int(g), int(b)


@dataclass(frozen=True)
class Body:
    """A point mass with a render radius and color.

    Bodies are immutable; every step produces new Body values for the
    next buffer instead of mutating the ones being read.

    Attributes:
        x, y: Position in world units
        x_vel, y_vel: Velocity in world units per unit time
        mass: Mass (> 0)
        radius: Collision/render radius, normally mass_to_radius(mass)
        color: RGB channels 0-255
    """
    x: float
    y: float
    x_vel: float
    y_vel: float
    mass: float
    radius: float
    color: Color = (255, 255, 255)

    @classmethod
    def create(
        cls,
        x: float,
        y: float,
        x_vel: float,
        y_vel: float,
        mass: float,
        color: Color = (255, 255, 255),
    ) -> "Body":
        """Create a body with radius derived from mass."""
        return cls(x, y, x_vel, y_vel, mass, mass_to_radius(mass), color)

    @classmethod
    def from_fields(
        cls,
        fields: Sequence[str],
        rng: Optional[np.random.Generator] = None,
    ) -> "Body":
        """Create a body from a save-file record.

        With 9 or more fields every attribute is taken literally:
        x, y, xVel, yVel, mass, radius, red, green, blue. This is the only
        path where radius may disagree with mass.

        With 5 to 8 fields only x, y, xVel, yVel, mass are read; the radius
        is derived and the color randomized.

        Args:
            fields: Record fields, all of which must parse as real numbers
            rng: Random generator for the color (default: fresh generator)

        Returns:
            New Body

        Raises:
            BodyParseError: Fewer than 5 fields, a field is not a number, or
                the mass is not a positive finite number
        """
        values = []
        for field in fields:
            try:
                values.append(float(field))
            except (TypeError, ValueError):
                raise BodyParseError(f"Cannot convert {field!r} to float") from None

        if len(values) >= 5 and not (math.isfinite(values[4]) and values[4] > 0):
            raise BodyParseError(f"Mass must be positive and finite, got {values[4]}")

        if len(values) >= 9:
            return cls(
                x=values[0],
                y=values[1],
                x_vel=values[2],
                y_vel=values[3],
                mass=values[4],
                radius=values[5],
                color=(
                    _color_channel(values[6]),
                    _color_channel(values[7]),
                    _color_channel(values[8]),
                ),
            )

        if len(values) >= 5:
            rng = rng if rng is not None else np.random.default_rng()
            return cls.create(*values[:5], color=random_color(rng))

        raise BodyParseError(
            f"Need at least five fields to create a body, got {len(values)}"
        )

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        half_width: float,
        half_height: float,
        velocity_limit: float = 1.0,
        mass_limit: float = 10.0,
    ) -> "Body":
        """Create a body with random parameters inside the visible world.

        Args:
            rng: Random generator
            half_width: Half of the world width; x is uniform in [-hw, hw)
            half_height: Half of the world height; y is uniform in [-hh, hh)
            velocity_limit: Velocity components are uniform in [-vl/2, vl/2)
            mass_limit: Mass is uniform in [1, mass_limit + 1)
        """
        mass = rng.uniform(0.0, 1.0) * mass_limit + 1
        return cls.create(
            x=rng.uniform(-half_width, half_width),
            y=rng.uniform(-half_height, half_height),
            x_vel=rng.uniform(0.0, 1.0) * velocity_limit - velocity_limit / 2,
            y_vel=rng.uniform(0.0, 1.0) * velocity_limit - velocity_limit / 2,
            mass=mass,
            color=random_color(rng),
        )

    def advanced(self, timescale: float) -> "Body":
        """Return a copy moved along its velocity for one timestep."""
        return replace(
            self,
            x=self.x + self.x_vel * timescale,
            y=self.y + self.y_vel * timescale,
        )

    def to_fields(self) -> Tuple:
        """Return the nine-field save-file record for this body."""
        return (
            self.x, self.y, self.x_vel, self.y_vel,
            self.mass, self.radius, *self.color,
        )


def distance_squared(a: Body, b: Body) -> float:
    """Squared distance between the centers of two bodies."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2

"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from gravity_sim.physics.body import Body
from gravity_sim.utils.config import ViewState

Bounds = Tuple[float, float, float, float]


def is_visible(body: Body, bounds: Bounds) -> bool:
    """Return False if the body's circle lies wholly outside ``bounds``.

    Args:
        body: Body to test
        bounds: World-space (x_min, x_max, y_min, y_max)
    """
    x_min, x_max, y_min, y_max = bounds
    return not (
        body.x + body.radius < x_min
        or body.x - body.radius > x_max
        or body.y + body.radius < y_min
        or body.y - body.radius > y_max
    )


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, bodies: Sequence[Body], view: ViewState, stepped: bool = True):
        """Render current frame.

        Args:
            bodies: Live bodies of the current buffer
            view: Camera, zoom and trail settings
            stepped: Whether the simulation advanced since the last frame
        """
        pass

    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass

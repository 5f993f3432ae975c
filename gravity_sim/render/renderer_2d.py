"""2D renderer using matplotlib."""

from typing import Callable, List, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from gravity_sim.physics.body import Body
from gravity_sim.render.base import Renderer, is_visible
from gravity_sim.utils.config import ViewState


class Renderer2D(Renderer):
    """Real-time renderer drawing bodies as filled circles.

    The axes show exactly the part of the world visible through the
    camera, with screen y growing downwards. With trails on, circles from
    earlier frames fade out instead of being cleared.
    """

    def __init__(
        self,
        screen_width: int = 1200,
        screen_height: int = 800,
        dpi: int = 100,
        pixel_decay_rate: int = 2,
    ):
        """Initialize 2D renderer.

        Args:
            screen_width: Window width in pixels (world units at zoom 1)
            screen_height: Window height in pixels
            dpi: Dots per inch
            pixel_decay_rate: Color units (of 255) a trail loses per frame
        """
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.dpi = dpi
        self.decay = pixel_decay_rate / 255.0

        self.fig: Optional[Figure] = None
        self.ax = None
        self.patches: List[Circle] = []
        self.initialized = False

    def _initialize(self):
        """Initialize plot if not already done."""
        if self.initialized:
            return
        # The default key map would steal the simulation controls
        for key in list(plt.rcParams):
            if key.startswith('keymap.'):
                plt.rcParams[key] = []

        self.fig, self.ax = plt.subplots(
            figsize=(self.screen_width / self.dpi, self.screen_height / self.dpi),
            dpi=self.dpi,
        )
        self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self.ax.set_facecolor('black')
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()

        plt.show(block=False)
        plt.pause(0.1)
        self.initialized = True

    def is_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            self.patches = []
            return False
        return True

    def connect_keys(self, callback: Callable[[str], object]):
        """Forward key presses (matplotlib key names) to ``callback``."""
        self._initialize()
        self.fig.canvas.mpl_connect(
            'key_press_event', lambda event: callback(event.key)
        )

    def _fade_trails(self, stepped: bool):
        kept = []
        for patch in self.patches:
            alpha = patch.get_alpha() - (self.decay if stepped else 0.0)
            if alpha <= 0:
                patch.remove()
                continue
            patch.set_alpha(alpha)
            kept.append(patch)
        self.patches = kept

    def render(self, bodies: Sequence[Body], view: ViewState, stepped: bool = True):
        """Render current frame."""
        self._initialize()

        if view.trail_decay:
            self._fade_trails(stepped)
        else:
            self.clear()

        bounds = view.visible_bounds(self.screen_width, self.screen_height)
        x_min, x_max, y_min, y_max = bounds
        self.ax.set_xlim(x_min, x_max)
        self.ax.set_ylim(y_max, y_min)

        for body in bodies:
            if not is_visible(body, bounds):
                continue
            patch = Circle(
                (body.x, body.y),
                body.radius,
                facecolor=tuple(c / 255.0 for c in body.color),
                edgecolor='none',
                alpha=1.0,
            )
            self.ax.add_patch(patch)
            self.patches.append(patch)

        self.fig.canvas.draw_idle()

    def clear(self):
        """Remove every drawn circle."""
        for patch in self.patches:
            patch.remove()
        self.patches = []

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.patches = []
            self.initialized = False

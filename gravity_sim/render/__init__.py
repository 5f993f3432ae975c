"""Rendering of the live body view."""

from gravity_sim.render.base import Renderer, is_visible
from gravity_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D", "is_visible"]

"""Rendering surfaces that consume draw commands."""

from bst_visualizer.renderers.base import Renderer
from bst_visualizer.renderers.svg import SvgRenderer, format_value

__all__ = ["Renderer", "SvgRenderer", "format_value"]

"""Layout module — turns a tree into drawable geometry."""

from bst_visualizer.layout.engine import edge_between, layout, spread
from bst_visualizer.layout.types import DrawCommand, DrawCommandSet, EdgeSegment, NodePlacement, Point

__all__ = [
    "DrawCommand",
    "DrawCommandSet",
    "EdgeSegment",
    "NodePlacement",
    "Point",
    "edge_between",
    "layout",
    "spread",
]

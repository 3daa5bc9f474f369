"""Incrementally build a binary search tree and draw it after every insertion."""

from bst_visualizer.api import layout_values, render_svg
from bst_visualizer.config import DEFAULT_CONFIG, LayoutConfig
from bst_visualizer.errors import BstVisualizerError, InvalidNumberError, InvariantViolation
from bst_visualizer.layout import DrawCommandSet, EdgeSegment, NodePlacement, layout, spread
from bst_visualizer.session import Session
from bst_visualizer.tree import Node, Tree, build_tree, check_invariants, insert, to_digraph
from bst_visualizer.validation import parse_number

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "BstVisualizerError",
    "DrawCommandSet",
    "EdgeSegment",
    "InvalidNumberError",
    "InvariantViolation",
    "LayoutConfig",
    "Node",
    "NodePlacement",
    "Session",
    "Tree",
    "build_tree",
    "check_invariants",
    "insert",
    "layout",
    "layout_values",
    "parse_number",
    "render_svg",
    "spread",
    "to_digraph",
]

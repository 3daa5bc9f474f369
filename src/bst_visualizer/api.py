"""Public API — build a tree from values and render it in one call."""

from __future__ import annotations

from collections.abc import Iterable

from bst_visualizer.config import DEFAULT_CONFIG, LayoutConfig
from bst_visualizer.layout import DrawCommandSet, layout
from bst_visualizer.renderers import SvgRenderer
from bst_visualizer.tree import Tree, build_tree


def layout_values(values: Iterable[float], config: LayoutConfig | None = None) -> DrawCommandSet:
    """Insert ``values`` into an empty tree and return its draw commands."""
    return layout(build_tree(values), config or DEFAULT_CONFIG)


def render_svg(values: Iterable[float] | Tree, config: LayoutConfig | None = None) -> str:
    """Render a tree, or the tree built from ``values``, to SVG."""
    cfg = config or DEFAULT_CONFIG
    tree = values if isinstance(values, Tree) else build_tree(values)
    return SvgRenderer(cfg).render(layout(tree, cfg))


__all__ = ["build_tree", "layout_values", "render_svg"]

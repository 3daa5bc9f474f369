"""Layout engine — depth-first coordinate assignment for a binary search tree.

The root sits at a fixed anchor. Every child is one ``level_gap`` below its
parent and shifted sideways by ``spread(level)``, where ``level`` is the
parent's depth:

    spread(level) = base_spread / (level + 1)

Each deeper level gets proportionally less horizontal room. The rule is
not collision-free: in skewed or deep trees, nodes several levels down a
long chain can overlap.
"""

from __future__ import annotations

import logging

from bst_visualizer.config import DEFAULT_CONFIG, LayoutConfig
from bst_visualizer.layout.types import DrawCommand, DrawCommandSet, EdgeSegment, NodePlacement
from bst_visualizer.tree import Node, Tree

logger = logging.getLogger(__name__)


def spread(level: int, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """Horizontal offset between a node at depth ``level`` and either child."""
    return config.base_spread / (level + 1)


def edge_between(x: float, y: float, child_x: float, child_y: float, radius: float) -> EdgeSegment:
    """Connector from the bottom of the parent's circle to the top of the child's."""
    return EdgeSegment(x1=x, y1=y + radius, x2=child_x, y2=child_y - radius)


def _place(root: Node, config: LayoutConfig) -> list[DrawCommand]:
    """Depth-first placement with an explicit stack.

    Each stack entry is (node, x, y, level, incoming edge). The right child
    is pushed before the left so the left subtree is emitted first.
    """
    out: list[DrawCommand] = []
    stack: list[tuple[Node, float, float, int, EdgeSegment | None]] = [
        (root, config.origin_x, config.origin_y, 0, None)
    ]
    while stack:
        node, x, y, level, incoming = stack.pop()
        if incoming is not None:
            out.append(incoming)
        out.append(NodePlacement(value=node.value, x=x, y=y, level=level))

        dx = spread(level, config)
        child_y = y + config.level_gap
        for child, child_x in ((node.right, x + dx), (node.left, x - dx)):
            if child is None:
                continue
            edge = edge_between(x, y, child_x, child_y, config.node_radius)
            stack.append((child, child_x, child_y, level + 1, edge))
    return out


def layout(tree: Tree, config: LayoutConfig = DEFAULT_CONFIG) -> DrawCommandSet:
    """Map ``tree`` to draw commands.

    Returns an empty set for the empty tree; otherwise exactly one
    placement per node and one edge per parent-child link, in pre-order.
    The output depends only on tree shape, values and ``config``.
    """
    if tree.root is None:
        return DrawCommandSet()

    result = DrawCommandSet(commands=tuple(_place(tree.root, config)))
    logger.debug("Laid out %d nodes and %d edges", len(result.nodes), len(result.edges))
    return result

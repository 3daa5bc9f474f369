"""Tests for the layout engine — coordinate assignment and draw-command emission.

Covers:
  - spread (per-level horizontal offset)
  - edge_between (boundary-to-boundary connectors)
  - layout (placement, emission order, counts, determinism)
  - DrawCommandSet / NodePlacement / EdgeSegment dataclasses
"""

from __future__ import annotations

import pytest

from bst_visualizer.config import DEFAULT_CONFIG, LayoutConfig
from bst_visualizer.layout import (
    DrawCommandSet,
    EdgeSegment,
    NodePlacement,
    Point,
    edge_between,
    layout,
    spread,
)
from bst_visualizer.tree import Tree, build_tree

X0 = DEFAULT_CONFIG.origin_x
Y0 = DEFAULT_CONFIG.origin_y
DY = DEFAULT_CONFIG.level_gap
R = DEFAULT_CONFIG.node_radius

# ─── Helpers ──────────────────────────────────────────────────────────────────


def positions(commands: DrawCommandSet) -> dict[float, tuple[float, float]]:
    """Map node value → (x, y)."""
    return {p.value: (p.x, p.y) for p in commands.nodes}


# ─── spread Tests ─────────────────────────────────────────────────────────────


class TestSpread:
    def test_root_level(self):
        """Level 0 uses the full base spread."""
        assert spread(0) == 150

    def test_shrinks_with_depth(self):
        """spread(level) = base / (level + 1)."""
        assert spread(1) == 75
        assert spread(2) == 50
        assert spread(3) == 37.5

    def test_strictly_decreasing(self):
        """Each deeper level gets less room."""
        values = [spread(level) for level in range(10)]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_custom_config(self):
        """base_spread comes from the config."""
        assert spread(1, LayoutConfig(base_spread=200)) == 100


# ─── edge_between Tests ───────────────────────────────────────────────────────


class TestEdgeBetween:
    def test_offsets_by_radius(self):
        """Edge starts below the parent centre and ends above the child centre."""
        e = edge_between(400, 50, 250, 130, 20)
        assert e == EdgeSegment(x1=400, y1=70, x2=250, y2=110)

    def test_points(self):
        """start/end expose the endpoints as Points."""
        e = edge_between(0, 0, 10, 100, 5)
        assert e.start == Point(0, 5)
        assert e.end == Point(10, 95)


# ─── layout Tests ─────────────────────────────────────────────────────────────


class TestLayout:
    def test_empty_tree(self):
        """Empty tree → empty command set."""
        result = layout(Tree.empty())
        assert result.is_empty
        assert result.nodes == ()
        assert result.edges == ()

    def test_single_node_at_anchor(self):
        """[5] — one placement at the root anchor, no edges."""
        result = layout(build_tree([5]))
        assert result.nodes == (NodePlacement(value=5, x=X0, y=Y0, level=0),)
        assert result.edges == ()

    def test_two_children(self):
        """[5, 3, 8] — children one level down, spread(0) to each side."""
        result = layout(build_tree([5, 3, 8]))
        pos = positions(result)
        assert pos[5] == (X0, Y0)
        assert pos[3] == (X0 - spread(0), Y0 + DY)
        assert pos[8] == (X0 + spread(0), Y0 + DY)
        assert len(result.edges) == 2

    def test_edges_touch_circle_boundaries(self):
        """[5, 3, 8] — edges run from the root's bottom to each child's top."""
        result = layout(build_tree([5, 3, 8]))
        assert result.edges == (
            EdgeSegment(x1=X0, y1=Y0 + R, x2=X0 - 150, y2=Y0 + DY - R),
            EdgeSegment(x1=X0, y1=Y0 + R, x2=X0 + 150, y2=Y0 + DY - R),
        )

    def test_ascending_chain(self):
        """[1, 2, 3, 4] — each node further right and down by a shrinking step."""
        pos = positions(layout(build_tree([1, 2, 3, 4])))
        assert pos[1] == (400, 50)
        assert pos[2] == (550, 130)
        assert pos[3] == (625, 210)
        assert pos[4] == (675, 290)

    def test_levels_recorded(self):
        """Each placement records its depth."""
        result = layout(build_tree([1, 2, 3, 4]))
        assert [p.level for p in result.nodes] == [0, 1, 2, 3]

    def test_pre_order_emission(self):
        """Node, then left edge + left subtree, then right edge + right subtree."""
        result = layout(build_tree([5, 3, 8, 1]))
        kinds = [
            (type(c).__name__, c.value if isinstance(c, NodePlacement) else None) for c in result.commands
        ]
        assert kinds == [
            ("NodePlacement", 5),
            ("EdgeSegment", None),
            ("NodePlacement", 3),
            ("EdgeSegment", None),
            ("NodePlacement", 1),
            ("EdgeSegment", None),
            ("NodePlacement", 8),
        ]

    def test_each_edge_ends_at_next_node(self):
        """Every edge is immediately followed by the child it leads to."""
        result = layout(build_tree([50, 30, 70, 20, 40, 60, 80]))
        cmds = result.commands
        for i, c in enumerate(cmds):
            if isinstance(c, EdgeSegment):
                child = cmds[i + 1]
                assert isinstance(child, NodePlacement)
                assert (c.x2, c.y2 + R) == (child.x, child.y)

    def test_counts(self):
        """|T| placements and |T| - 1 edges."""
        tree = build_tree([50, 30, 70, 20, 40, 60, 80, 35, 65])
        result = layout(tree)
        assert len(result.nodes) == len(tree)
        assert len(result.edges) == len(tree) - 1
        assert len(result) == 2 * len(tree) - 1

    def test_deterministic(self):
        """Two layouts of the same tree are identical."""
        tree = build_tree([50, 30, 70, 20, 40])
        assert layout(tree) == layout(tree)
        assert layout(tree) == layout(build_tree([50, 30, 70, 20, 40]))

    def test_long_sorted_run(self):
        """range(2000) — a degenerate chain lays out completely in pre-order."""
        tree = build_tree(range(2000))
        result = layout(tree)
        assert len(result.nodes) == 2000
        assert len(result.edges) == 1999
        assert [p.value for p in result.nodes] == list(range(2000))
        assert result.nodes[-1].level == 1999
        assert result.nodes[-1].y == Y0 + 1999 * DY

    def test_custom_config(self):
        """Anchor, spread and level gap follow the config."""
        cfg = LayoutConfig(origin_x=0, origin_y=0, base_spread=10, level_gap=5, node_radius=1)
        pos = positions(layout(build_tree([2, 1, 3]), cfg))
        assert pos == {2: (0, 0), 1: (-10, 5), 3: (10, 5)}

    def test_skewed_tree_may_overlap(self):
        """The halving rule is not collision-free: circles deep in the tree can overlap."""
        tree = build_tree([0, 100, 50, 75, 90, 200, 150, 125])
        pos = positions(layout(tree, LayoutConfig(origin_x=0)))
        # 90: +150 - 75 + 50 + 37.5; 125: +150 + 75 - 50 - 37.5
        assert pos[90] == (162.5, Y0 + 4 * DY)
        assert pos[125] == (137.5, Y0 + 4 * DY)
        assert abs(pos[90][0] - pos[125][0]) < 2 * R


# ─── Dataclass Tests ──────────────────────────────────────────────────────────


class TestDrawCommandSet:
    def test_default_empty(self):
        """DrawCommandSet defaults to no commands."""
        assert DrawCommandSet().commands == ()
        assert len(DrawCommandSet()) == 0

    def test_split_by_kind(self):
        """nodes/edges keep stream order within each kind."""
        a = NodePlacement(value=1, x=0, y=0)
        e = EdgeSegment(0, 1, 2, 3)
        b = NodePlacement(value=2, x=2, y=4)
        cs = DrawCommandSet(commands=(a, e, b))
        assert cs.nodes == (a, b)
        assert cs.edges == (e,)
        assert list(cs) == [a, e, b]

    def test_frozen(self):
        """Placements are immutable."""
        p = NodePlacement(value=1, x=0, y=0)
        with pytest.raises(AttributeError):
            p.x = 5  # type: ignore[misc]

    def test_center(self):
        """center returns the placement as a Point."""
        assert NodePlacement(value=1, x=3, y=4).center == Point(3, 4)

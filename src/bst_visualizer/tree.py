"""Tree model — persistent binary search tree with strict ordering.

Trees are immutable. ``insert`` copies only the nodes on the path from the
root to the new leaf and shares every untouched subtree with the previous
tree, so a tree handed out earlier never changes afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

import networkx as nx

from bst_visualizer.errors import InvariantViolation

logger = logging.getLogger(__name__)

# ─── Types ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Node:
    """A single stored value plus up to two children."""

    value: float
    left: Node | None = None
    right: Node | None = None


@dataclass(frozen=True)
class Tree:
    """Holds zero or one root Node."""

    root: Node | None = None

    @classmethod
    def empty(cls) -> Tree:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.root is None

    @property
    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path (-1 when empty)."""
        return _height(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in self.pre_order())

    def __iter__(self) -> Iterator[float]:
        return self.in_order()

    def __contains__(self, value: object) -> bool:
        return any(v == value for v in self.in_order())

    def in_order(self) -> Iterator[float]:
        """Yield values in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[Node]:
        """Yield nodes parent first, then the left subtree, then the right."""
        stack: list[Node] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def _height(node: Node | None) -> int:
    deepest = -1
    stack: list[tuple[Node, int]] = [(node, 0)] if node is not None else []
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (current.left, current.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


# ─── Insertion ────────────────────────────────────────────────────────────────


def _insert_node(root: Node | None, value: float) -> Node | None:
    """Return the new root, or ``root`` itself when ``value`` is already present."""
    path: list[tuple[Node, str]] = []
    node = root
    while node is not None:
        if value < node.value:
            path.append((node, "left"))
            node = node.left
        elif value > node.value:
            path.append((node, "right"))
            node = node.right
        else:
            return root

    # Copy the descent path bottom-up; siblings off the path are shared.
    rebuilt = Node(value)
    for parent, side in reversed(path):
        rebuilt = replace(parent, **{side: rebuilt})
    return rebuilt


def insert(tree: Tree, value: float) -> Tree:
    """Return a tree that also contains ``value``.

    Descends one child per step, comparing ``value`` with the current node:
    smaller goes left, larger goes right, and an absent slot receives a new
    leaf. An equal value ends the descent and the input tree is returned
    as is (the same object), without signalling anything.

    ``value`` must already be a finite, non-NaN number.
    """
    root = _insert_node(tree.root, value)
    if root is tree.root:
        logger.debug("Ignored duplicate value %r", value)
        return tree
    logger.debug("Inserted value %r", value)
    return Tree(root)


def build_tree(values: Iterable[float], tree: Tree | None = None) -> Tree:
    """Insert every value of ``values`` in order, starting from ``tree`` (or empty)."""
    result = tree if tree is not None else Tree.empty()
    for value in values:
        result = insert(result, value)
    return result


# ─── Invariant Checks ─────────────────────────────────────────────────────────


def to_digraph(tree: Tree) -> nx.DiGraph:
    """Convert a tree to a DiGraph keyed by node identity.

    Each graph node carries ``value`` and each edge carries ``side``
    ("left" or "right"). A node reachable twice shows up as a node with two
    parents, so the result is an arborescence exactly when the tree is a
    strict hierarchy.
    """
    g: nx.DiGraph = nx.DiGraph()
    if tree.root is None:
        return g

    seen: set[int] = set()
    stack: list[Node] = [tree.root]
    g.add_node(id(tree.root), value=tree.root.value)
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        for side, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            g.add_node(id(child), value=child.value)
            g.add_edge(id(node), id(child), side=side)
            stack.append(child)
    return g


def check_invariants(tree: Tree) -> None:
    """Raise ``InvariantViolation`` unless ``tree`` is a well-formed BST.

    Checks, in order: the child links form an arborescence (no cycles, no
    shared nodes), every left subtree holds only smaller values and every
    right subtree only larger ones, and no value appears twice.
    """
    g = to_digraph(tree)
    if g.number_of_nodes() == 0:
        return
    if not nx.is_arborescence(g):
        raise InvariantViolation("child links do not form a tree")

    root_id = id(tree.root)
    # Each node's value must lie strictly inside the open interval inherited
    # from its ancestors.
    bounds: dict[int, tuple[float, float]] = {root_id: (float("-inf"), float("inf"))}
    for parent, child in nx.dfs_edges(g, root_id):
        low, high = bounds[parent]
        pivot = g.nodes[parent]["value"]
        if g.edges[parent, child]["side"] == "left":
            bounds[child] = (low, pivot)
        else:
            bounds[child] = (pivot, high)

    for node_id, (low, high) in bounds.items():
        value = g.nodes[node_id]["value"]
        if not low < value < high:
            raise InvariantViolation(f"value {value!r} breaks ordering (expected between {low!r} and {high!r})")

    values = [g.nodes[n]["value"] for n in g.nodes]
    if len(values) != len(set(values)):
        raise InvariantViolation("duplicate values in tree")

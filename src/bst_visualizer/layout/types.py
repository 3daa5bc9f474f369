"""Layout IR — draw commands produced by the layout engine."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A 2D point in canvas pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class NodePlacement:
    """Centre of one node's circle and the value drawn inside it."""

    value: float
    x: float
    y: float
    level: int = 0

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class EdgeSegment:
    """A parent-child connector, from the parent's circle boundary to the child's."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)


DrawCommand = NodePlacement | EdgeSegment


@dataclass(frozen=True)
class DrawCommandSet:
    """Everything a rendering surface needs to draw one tree.

    ``commands`` is the pre-order emission stream: a node's placement, then
    for each present child (left first) the connecting edge followed by
    that child's own commands. ``nodes`` and ``edges`` are the same
    commands split by kind, each keeping stream order.
    """

    commands: tuple[DrawCommand, ...] = field(default_factory=tuple)

    @property
    def nodes(self) -> tuple[NodePlacement, ...]:
        return tuple(c for c in self.commands if isinstance(c, NodePlacement))

    @property
    def edges(self) -> tuple[EdgeSegment, ...]:
        return tuple(c for c in self.commands if isinstance(c, EdgeSegment))

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self.commands)

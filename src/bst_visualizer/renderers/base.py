"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from bst_visualizer.layout.types import DrawCommandSet


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, commands: DrawCommandSet) -> str:
        """Render a laid-out tree to an output string."""
        ...

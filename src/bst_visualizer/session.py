"""Session — the single owned tree of one interactive run."""

from __future__ import annotations

import logging

from bst_visualizer.config import DEFAULT_CONFIG, LayoutConfig
from bst_visualizer.errors import InvalidNumberError
from bst_visualizer.layout import DrawCommandSet, layout
from bst_visualizer.renderers import SvgRenderer
from bst_visualizer.tree import Tree, insert
from bst_visualizer.validation import parse_number

logger = logging.getLogger(__name__)


class Session:
    """Holds the current tree and replaces it on every accepted insertion.

    Attributes:
        tree: Current tree, empty at start.
        error: Message for the last rejected input, or None.
        history: Every tree state produced so far, oldest first. Trees are
            persistent, so earlier entries never change.
    """

    def __init__(self, config: LayoutConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.tree = Tree.empty()
        self.error: str | None = None
        self.history: list[Tree] = []
        self._renderer = SvgRenderer(config)

    def insert(self, value: float) -> Tree:
        self.tree = insert(self.tree, value)
        self.history.append(self.tree)
        return self.tree

    def submit(self, text: str) -> bool:
        """Validate ``text`` and insert it.

        Returns False and sets ``error`` when the text is not a number; the
        tree stays as it was. A duplicate value is accepted input and
        returns True with the tree unchanged.
        """
        try:
            value = parse_number(text)
        except InvalidNumberError as e:
            logger.info("Rejected input %r", text)
            self.error = str(e)
            return False
        self.error = None
        self.insert(value)
        return True

    def commands(self) -> DrawCommandSet:
        return layout(self.tree, self.config)

    def render(self) -> str:
        return self._renderer.render(self.commands())

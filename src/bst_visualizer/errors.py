"""Exception hierarchy for bst_visualizer."""

from __future__ import annotations


class BstVisualizerError(Exception):
    """Base class for every error raised by this package."""


class InvalidNumberError(BstVisualizerError, ValueError):
    """Raised when user text is not a finite real number."""

    MESSAGE = "Please enter a valid number"

    def __init__(self, text: str) -> None:
        super().__init__(self.MESSAGE)
        self.text = text


class InvariantViolation(BstVisualizerError):
    """Raised by ``check_invariants`` when a tree is not a well-formed BST."""

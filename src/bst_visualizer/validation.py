"""Validation of raw user text before it reaches the tree model."""

from __future__ import annotations

import math

from bst_visualizer.errors import InvalidNumberError


def parse_number(text: str) -> float:
    """Parse ``text`` as a finite real number.

    Surrounding whitespace is ignored. Empty text, digit-group underscores
    (``1_000``), text ``float()`` rejects, NaN and infinities raise
    ``InvalidNumberError``.
    """
    stripped = text.strip()
    if not stripped or "_" in stripped:
        raise InvalidNumberError(text)
    try:
        value = float(stripped)
    except ValueError as e:
        raise InvalidNumberError(text) from e
    if not math.isfinite(value):
        raise InvalidNumberError(text)
    return value

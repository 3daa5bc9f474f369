"""Geometry and canvas settings.

All values are in canvas pixels. ``LayoutConfig.from_env`` lets a caller
override any field through ``BST_VIZ_<FIELD>`` environment variables,
e.g. ``BST_VIZ_BASE_SPREAD=200``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)

ENV_PREFIX = "BST_VIZ_"


@dataclass(frozen=True)
class LayoutConfig:
    """Placement constants for the layout engine and the SVG canvas."""

    origin_x: float = 400  # root anchor
    origin_y: float = 50
    base_spread: float = 150  # horizontal offset of the root's children
    level_gap: float = 80  # vertical step per depth level
    node_radius: float = 20
    label_offset: float = 5  # baseline shift that centres a label in its circle
    canvas_width: int = 800
    canvas_height: int = 600

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LayoutConfig:
        """Build a config from ``BST_VIZ_*`` variables, keeping defaults for unset or bad values."""
        env = os.environ if environ is None else environ
        overrides: dict[str, float | int] = {}
        for f in fields(cls):
            key = f"{ENV_PREFIX}{f.name.upper()}"
            raw = env.get(key)
            if raw is None:
                continue
            cast = int if f.type in (int, "int") else float
            try:
                overrides[f.name] = cast(raw)
            except ValueError:
                logger.warning("Invalid %s value %r, using default %s", key, raw, f.default)
        return replace(cls(), **overrides)


DEFAULT_CONFIG = LayoutConfig()

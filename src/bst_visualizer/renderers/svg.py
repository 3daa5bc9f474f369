"""SVG renderer — renders draw commands to an SVG string."""

from __future__ import annotations

import math

from bst_visualizer.config import DEFAULT_CONFIG, LayoutConfig
from bst_visualizer.layout.types import DrawCommandSet, EdgeSegment, NodePlacement

# ─── Constants ──────────────────────────────────────────────────────────────

PLACEHOLDER = "Enter the first number"
FONT_SIZE = 16
FONT_FAMILY = "sans-serif"

_FILL_STROKE = 'fill="white" stroke="black"'


def _escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _font(size: int = FONT_SIZE) -> str:
    return f'font-family="{FONT_FAMILY}" font-size="{size}"'


def _num(v: float) -> str:
    """Format a coordinate without a trailing ``.0`` for whole numbers."""
    if float(v).is_integer():
        return str(int(v))
    return f"{v:.2f}".rstrip("0").rstrip(".")


# Whole numbers at or above this magnitude are written in exponent form.
EXPONENT_THRESHOLD = 1e16


def format_value(value: float) -> str:
    """Label text for a node value: ``5.0`` reads ``5``, ``2.5`` stays ``2.5``, ``1e300`` stays ``1e+300``."""
    if math.isfinite(value) and float(value).is_integer() and abs(value) < EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(float(value))


# ─── Element Rendering ──────────────────────────────────────────────────────


def _render_node(p: NodePlacement, config: LayoutConfig) -> str:
    cx, cy = _num(p.x), _num(p.y)
    label = _escape(format_value(p.value))
    return "\n".join(
        [
            f'<circle cx="{cx}" cy="{cy}" r="{_num(config.node_radius)}" {_FILL_STROKE}/>',
            f'<text x="{cx}" y="{_num(p.y + config.label_offset)}" text-anchor="middle" {_font()}>{label}</text>',
        ]
    )


def _render_edge(e: EdgeSegment) -> str:
    return f'<line x1="{_num(e.x1)}" y1="{_num(e.y1)}" x2="{_num(e.x2)}" y2="{_num(e.y2)}" stroke="black"/>'


def _render_placeholder(config: LayoutConfig) -> str:
    x = _num(config.canvas_width / 2)
    y = _num(config.canvas_height / 2)
    return f'<text x="{x}" y="{y}" text-anchor="middle" {_font()} fill="#666">{_escape(PLACEHOLDER)}</text>'


# ─── Public Renderer ────────────────────────────────────────────────────────


class SvgRenderer:
    """SVG renderer — consumes draw commands, produces an SVG string on a fixed canvas."""

    def __init__(self, config: LayoutConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def render(self, commands: DrawCommandSet) -> str:
        w, h = self.config.canvas_width, self.config.canvas_height
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
            f'<rect width="{w}" height="{h}" fill="white"/>',
        ]

        if commands.is_empty:
            parts.append(_render_placeholder(self.config))
        else:
            # Stream order: an edge always precedes the child it leads to.
            for cmd in commands:
                if isinstance(cmd, EdgeSegment):
                    parts.append(_render_edge(cmd))
                else:
                    parts.append(_render_node(cmd, self.config))

        parts.append("</svg>")
        return "\n".join(parts)

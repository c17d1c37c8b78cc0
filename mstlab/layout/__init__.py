"""Node placement algorithms for graph visualization."""

from .core import (
    LayoutOptions,
    LayoutType,
    apply_layout,
    circular_layout,
    grid_layout,
    hierarchical_layout,
    hierarchical_levels,
)
from .force import DEFAULT_FORCE_ITERATIONS, VISUAL_FORCE_ITERATIONS, force_directed_layout

__all__ = [
    "LayoutType",
    "LayoutOptions",
    "apply_layout",
    "circular_layout",
    "grid_layout",
    "hierarchical_layout",
    "hierarchical_levels",
    "force_directed_layout",
    "DEFAULT_FORCE_ITERATIONS",
    "VISUAL_FORCE_ITERATIONS",
]

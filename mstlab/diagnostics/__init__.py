"""Diagnostics and debugging utilities for mstlab."""

from .core import (
    assert_acyclic,
    check_kruskal_state,
    check_prim_state,
    is_acyclic,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_acyclic",
    "assert_acyclic",
    "check_kruskal_state",
    "check_prim_state",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

"""Comparison and execution-tracking drivers for the MST engines."""

from .history import DEFAULT_HISTORY_SIZE, ExecutionHistory, ExecutionRecord
from .session import ComparisonResult, ComparisonSession, Lane, Side, SyncMode

__all__ = [
    "ComparisonSession",
    "ComparisonResult",
    "Lane",
    "Side",
    "SyncMode",
    "ExecutionHistory",
    "ExecutionRecord",
    "DEFAULT_HISTORY_SIZE",
]

"""Transcript replay and tool call correlation."""

from .correlation import (
    CorrelationQueue,
    extract_tool_call_ids,
    resolve_call_id,
    result_call_id,
    synthesize_call_id,
)
from .history_replayer import HistoryReplayer, ReplayState, ReplayStats

__all__ = [
    "CorrelationQueue",
    "extract_tool_call_ids",
    "resolve_call_id",
    "result_call_id",
    "synthesize_call_id",
    "HistoryReplayer",
    "ReplayState",
    "ReplayStats",
]

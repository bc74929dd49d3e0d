"""Correlating replayed tool call starts with their results.

Function calls in a transcript may carry no id, an empty id, or an id that
differs from the one written on the matching ``tool_result`` record. Result
records are written after execution and are authoritative, so their ids are
collected up front and handed out to function calls in arrival order.
"""

import time
from collections import deque
from typing import Callable, Iterable, Optional, Tuple

from acp_replay.session.models import ChatRecord, RecordType


def result_call_id(record: ChatRecord) -> str:
    """The id a ``tool_result`` record is reported under."""
    result = record.tool_call_result
    if result and result.call_id:
        return result.call_id
    return record.uuid


def extract_tool_call_ids(records: Iterable[ChatRecord]) -> Tuple[str, ...]:
    """Collect one id per ``tool_result`` record, in transcript order."""
    return tuple(
        result_call_id(record)
        for record in records
        if record.type == RecordType.TOOL_RESULT
    )


def synthesize_call_id(
    tool_name: str, clock: Callable[[], float] = time.time
) -> str:
    """Last-resort id from the tool name and the current time in ms."""
    return f"{tool_name}-{int(clock() * 1000)}"


def resolve_call_id(
    embedded_id: Optional[str],
    queue_front: Optional[str],
    tool_name: str,
    clock: Callable[[], float] = time.time,
) -> str:
    """Choose the id for a replayed function call.

    The queued result id always wins, even over an embedded id, because only
    it is guaranteed to match the result update sent later. The embedded id
    is used once the queue is exhausted, and a synthesized id after that.

    Args:
        embedded_id: Id stored on the function call part, if any
        queue_front: Id popped from the correlation queue, if any
        tool_name: Name of the called tool
        clock: Time source for synthesized ids

    Returns:
        The call id to emit
    """
    if queue_front:
        return queue_front
    if embedded_id:
        return embedded_id
    return synthesize_call_id(tool_name, clock)


class CorrelationQueue:
    """Result ids awaiting their function call, consumed front to back."""

    def __init__(self, ids: Iterable[str] = ()):
        self._ids = deque(ids)

    @classmethod
    def from_records(cls, records: Iterable[ChatRecord]) -> "CorrelationQueue":
        return cls(extract_tool_call_ids(records))

    def pop(self) -> Optional[str]:
        """Remove and return the front id, or None when exhausted."""
        return self._ids.popleft() if self._ids else None

    def __len__(self) -> int:
        return len(self._ids)

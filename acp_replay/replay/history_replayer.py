"""Replaying a stored transcript as a live stream of session updates.

Replay goes through the same emitters as a live session, so a resumed
session renders exactly as it did originally.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from acp_replay.emitters.base import SessionContext
from acp_replay.emitters.message_emitter import MessageEmitter
from acp_replay.emitters.tool_call_emitter import (
    ToolCallEmitter,
    ToolCallResultParams,
    ToolCallStartParams,
)
from acp_replay.errors import ReplayInProgressError
from acp_replay.protocol.schema import Role
from acp_replay.session.models import ChatRecord, RecordType
from acp_replay.session.parts import (
    FunctionCallPart,
    FunctionResponsePart,
    Message,
    TextPart,
)

from .correlation import CorrelationQueue, resolve_call_id, result_call_id

logger = logging.getLogger(__name__)

_RECORD_ROLES = {
    RecordType.USER.value: Role.USER,
    RecordType.ASSISTANT.value: Role.ASSISTANT,
}


class ReplayState(Enum):
    """Phase of a replay invocation."""

    IDLE = "idle"  # Nothing replayed yet
    SCANNING = "scanning"  # Collecting result ids
    DISPATCHING = "dispatching"  # Emitting records in order
    DONE = "done"  # Last record emitted


@dataclass
class ReplayStats:
    """Counters describing one replay invocation."""

    total_records: int = 0
    replayed_records: int = 0
    skipped_records: int = 0
    queued_call_ids: int = 0
    remaining_call_ids: int = 0
    messages: int = 0
    tool_starts: int = 0
    tool_results: int = 0
    mismatched_call_ids: int = 0
    synthesized_call_ids: int = 0


class HistoryReplayer:
    """Replays chat records through the message and tool call emitters.

    A replayer may be reused for later resumes, but a single instance runs
    one replay at a time. All per-replay state (the correlation queue and
    the stats) lives for one ``replay`` call only.
    """

    def __init__(
        self,
        ctx: SessionContext,
        on_state_change: Optional[Callable[[ReplayState, ReplayStats], Any]] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the replayer.

        Args:
            ctx: Session to emit updates into
            on_state_change: Callback on each state transition (receives the
                new state and the stats so far)
            clock: Time source for synthesized call ids
        """
        self.message_emitter = MessageEmitter(ctx)
        self.tool_call_emitter = ToolCallEmitter(ctx)
        self.on_state_change = on_state_change
        self.clock = clock
        self.state = ReplayState.IDLE
        self._running = False

    async def replay(self, records: Sequence[ChatRecord]) -> ReplayStats:
        """Replay all records in order.

        Structurally incomplete records are skipped. Errors raised by the
        emitters propagate and end the replay.

        Args:
            records: Transcript records in stored order

        Returns:
            Stats for this replay

        Raises:
            ReplayInProgressError: If this replayer is already replaying
        """
        if self._running:
            raise ReplayInProgressError("A replay is already running on this replayer")

        self._running = True
        try:
            stats = ReplayStats(total_records=len(records))

            self._transition(ReplayState.SCANNING, stats)
            queue = CorrelationQueue.from_records(records)
            stats.queued_call_ids = len(queue)
            stats.remaining_call_ids = len(queue)

            self._transition(ReplayState.DISPATCHING, stats)
            for index, record in enumerate(records, start=1):
                logger.debug(
                    f"Replaying record {index}/{len(records)}: type={record.type}"
                )
                if await self._replay_record(record, queue, stats):
                    stats.replayed_records += 1
                else:
                    stats.skipped_records += 1
                stats.remaining_call_ids = len(queue)

            self._transition(ReplayState.DONE, stats)
            return stats
        finally:
            self._running = False

    def _transition(self, state: ReplayState, stats: ReplayStats) -> None:
        self.state = state
        logger.debug(
            f"Replay {state.value}: {stats.replayed_records}/{stats.total_records} "
            f"records, {stats.remaining_call_ids} queued call ids"
        )
        if self.on_state_change:
            self.on_state_change(state, stats)

    async def _replay_record(
        self, record: ChatRecord, queue: CorrelationQueue, stats: ReplayStats
    ) -> bool:
        """Replay one record; returns False if it was skipped."""
        if record.type == RecordType.TOOL_RESULT:
            return await self._replay_tool_result(record, stats)

        role = _RECORD_ROLES.get(record.type)
        if role is None or record.message is None:
            # System records (compression, telemetry, slash commands)
            return False

        await self._replay_content(record.message, role, queue, stats)
        return True

    async def _replay_content(
        self,
        message: Message,
        role: Role,
        queue: CorrelationQueue,
        stats: ReplayStats,
    ) -> None:
        for part in message.parts:
            if isinstance(part, TextPart):
                if part.text:
                    await self.message_emitter.emit_message(
                        part.text, role, part.thought
                    )
                    stats.messages += 1
            elif isinstance(part, FunctionCallPart):
                await self._replay_function_call(part, queue, stats)

    async def _replay_function_call(
        self, part: FunctionCallPart, queue: CorrelationQueue, stats: ReplayStats
    ) -> None:
        queue_front = queue.pop()

        if queue_front and part.call_id and part.call_id != queue_front:
            logger.debug(
                f"callId mismatch for {part.name}: message has {part.call_id}, "
                f"using queued id {queue_front}"
            )
            stats.mismatched_call_ids += 1

        call_id = resolve_call_id(part.call_id, queue_front, part.name, self.clock)

        if not queue_front and not part.call_id:
            logger.warning(f"No callId available for {part.name}, generated {call_id}")
            stats.synthesized_call_ids += 1

        await self.tool_call_emitter.emit_start(
            ToolCallStartParams(tool_name=part.name, call_id=call_id, args=part.args)
        )
        stats.tool_starts += 1

    async def _replay_tool_result(
        self, record: ChatRecord, stats: ReplayStats
    ) -> bool:
        if record.message is None or not record.message.parts:
            logger.debug(f"Skipping tool_result {record.uuid}: no message")
            return False

        result = record.tool_call_result
        await self.tool_call_emitter.emit_result(
            ToolCallResultParams(
                tool_name=self._tool_name_of(record.message),
                call_id=result_call_id(record),
                success=result.success if result else True,
                message=record.message.parts,
                result_display=result.result_display if result else None,
                # Arguments are not stored on tool_result records
                args=None,
                error=result.error if result else None,
            )
        )
        stats.tool_results += 1
        return True

    @staticmethod
    def _tool_name_of(message: Message) -> str:
        for part in message.parts:
            if isinstance(part, FunctionResponsePart) and part.name:
                return part.name
        return ""

"""Shared plumbing for protocol emitters."""

from dataclasses import dataclass
from typing import Awaitable, Callable

from acp_replay.protocol.schema import SessionNotification, SessionUpdate

UpdateSender = Callable[[SessionNotification], Awaitable[None]]


@dataclass
class SessionContext:
    """The session an emitter writes to.

    ``send_update`` is awaited for every update; its errors propagate to
    the caller unchanged.
    """

    session_id: str
    send_update: UpdateSender


class BaseEmitter:
    """Base class for emitters bound to one session."""

    def __init__(self, ctx: SessionContext):
        self.ctx = ctx

    async def _send_update(self, update: SessionUpdate) -> None:
        await self.ctx.send_update(
            SessionNotification(session_id=self.ctx.session_id, update=update)
        )

"""Emitter for user and agent message fragments."""

from typing import Union

from acp_replay.protocol.schema import (
    AgentMessageChunk,
    AgentThoughtChunk,
    Role,
    TextContent,
    UserMessageChunk,
)

from .base import BaseEmitter


class MessageEmitter(BaseEmitter):
    """Emits text as ``user_message_chunk``, ``agent_message_chunk`` or
    ``agent_thought_chunk`` updates."""

    async def emit_message(
        self, text: str, role: Union[Role, str], is_thought: bool = False
    ) -> None:
        """Emit one message fragment.

        Args:
            text: Fragment text
            role: "user" or "assistant"
            is_thought: Route to the thought channel instead of normal text

        Raises:
            ValueError: If role is not a known role
        """
        role = Role(role)
        content = TextContent(text=text)

        if is_thought:
            update = AgentThoughtChunk(content=content)
        elif role == Role.USER:
            update = UserMessageChunk(content=content)
        else:
            update = AgentMessageChunk(content=content)

        await self._send_update(update)


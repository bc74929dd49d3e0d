"""Agent Client Protocol schema and transports."""

from .schema import (
    PROTOCOL_VERSION,
    CLIENT_METHODS,
    Role,
    ToolKind,
    ToolCallStatus,
    TextContent,
    ContentToolCallContent,
    DiffToolCallContent,
    ToolCallLocation,
    UserMessageChunk,
    AgentMessageChunk,
    AgentThoughtChunk,
    ToolCall,
    ToolCallUpdate,
    SessionNotification,
    text_content,
)
from .transport import MemoryTransport, StdoutTransport, to_jsonrpc

__all__ = [
    "PROTOCOL_VERSION",
    "CLIENT_METHODS",
    "Role",
    "ToolKind",
    "ToolCallStatus",
    "TextContent",
    "ContentToolCallContent",
    "DiffToolCallContent",
    "ToolCallLocation",
    "UserMessageChunk",
    "AgentMessageChunk",
    "AgentThoughtChunk",
    "ToolCall",
    "ToolCallUpdate",
    "SessionNotification",
    "text_content",
    "MemoryTransport",
    "StdoutTransport",
    "to_jsonrpc",
]

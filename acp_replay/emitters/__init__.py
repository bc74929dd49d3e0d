"""Emitters that turn session activity into protocol updates."""

from .base import BaseEmitter, SessionContext
from .message_emitter import MessageEmitter
from .tool_call_emitter import (
    ToolCallEmitter,
    ToolCallStartParams,
    ToolCallResultParams,
    build_result_content,
)

__all__ = [
    "BaseEmitter",
    "SessionContext",
    "MessageEmitter",
    "ToolCallEmitter",
    "ToolCallStartParams",
    "ToolCallResultParams",
    "build_result_content",
]

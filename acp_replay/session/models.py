"""Data models for persisted chat transcripts."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .parts import Message, decode_message


class RecordType(str, Enum):
    """Types of transcript records."""

    USER = "user"  # User turn
    ASSISTANT = "assistant"  # Model turn (text, thoughts, function calls)
    TOOL_RESULT = "tool_result"  # Function response written after execution
    SYSTEM = "system"  # Compression markers, telemetry, slash commands


@dataclass
class ToolCallResult:
    """Outcome of a tool execution as stored alongside its response."""

    call_id: Optional[str] = None
    result_display: Any = None
    error: Any = None
    error_type: Optional[str] = None

    @property
    def success(self) -> bool:
        # Empty containers are still error payloads
        return self.error in (None, "", 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ToolCallResult":
        """Create from dictionary."""
        return cls(
            call_id=data.get("callId") or None,
            result_display=data.get("resultDisplay"),
            error=data.get("error"),
            error_type=data.get("errorType"),
        )


@dataclass
class ChatRecord:
    """A single transcript entry."""

    uuid: Optional[str]
    type: str
    message: Optional[Message] = None
    tool_call_result: Optional[ToolCallResult] = None
    session_id: Optional[str] = None
    parent_uuid: Optional[str] = None
    timestamp: Optional[str] = None
    subtype: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChatRecord":
        """Create from a stored JSON object.

        A ``tool_result`` record may omit its uuid when it carries a callId,
        since the callId is what the record is correlated by.

        Raises:
            ValueError: If the record lacks a type, or a uuid it needs
        """
        record_uuid = data.get("uuid") or None
        record_type = data.get("type")
        if not isinstance(record_type, str):
            raise ValueError("Chat record requires 'type'")

        result_data = data.get("toolCallResult")
        tool_call_result = (
            ToolCallResult.from_dict(result_data)
            if isinstance(result_data, dict)
            else None
        )

        identified_by_call_id = (
            record_type == RecordType.TOOL_RESULT
            and tool_call_result is not None
            and tool_call_result.call_id is not None
        )
        if not record_uuid and not identified_by_call_id:
            raise ValueError("Chat record requires 'uuid'")

        return cls(
            uuid=record_uuid,
            type=record_type,
            message=decode_message(data.get("message")),
            tool_call_result=tool_call_result,
            session_id=data.get("sessionId"),
            parent_uuid=data.get("parentUuid"),
            timestamp=data.get("timestamp"),
            subtype=data.get("subtype"),
        )

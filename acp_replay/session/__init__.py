"""Transcript models and loading."""

from .parts import (
    Message,
    Part,
    TextPart,
    FunctionCallPart,
    FunctionResponsePart,
    OtherPart,
    decode_message,
    decode_part,
)
from .models import ChatRecord, RecordType, ToolCallResult
from .transcript import load_transcript, session_file_for, session_id_of

__all__ = [
    "Message",
    "Part",
    "TextPart",
    "FunctionCallPart",
    "FunctionResponsePart",
    "OtherPart",
    "decode_message",
    "decode_part",
    "ChatRecord",
    "RecordType",
    "ToolCallResult",
    "load_transcript",
    "session_file_for",
    "session_id_of",
]

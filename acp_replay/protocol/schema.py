"""Agent Client Protocol models for ``session/update`` notifications.

Only the update variants produced by history replay are modelled. Field
names are snake_case in Python and camelCase on the wire.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PROTOCOL_VERSION = 1

CLIENT_METHODS = {
    "fs_read_text_file": "fs/read_text_file",
    "fs_write_text_file": "fs/write_text_file",
    "session_request_permission": "session/request_permission",
    "session_update": "session/update",
}


class Role(str, Enum):
    """Message author."""

    USER = "user"
    ASSISTANT = "assistant"


class ToolKind(str, Enum):
    """Category of a tool, used by clients to pick an icon and layout."""

    READ = "read"
    EDIT = "edit"
    DELETE = "delete"
    MOVE = "move"
    SEARCH = "search"
    EXECUTE = "execute"
    THINK = "think"
    FETCH = "fetch"
    SWITCH_MODE = "switch_mode"
    OTHER = "other"


class ToolCallStatus(str, Enum):
    """Lifecycle state of a tool call."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class ProtocolModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready wire shape."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class TextContent(ProtocolModel):
    type: Literal["text"] = "text"
    text: str


class ContentToolCallContent(ProtocolModel):
    type: Literal["content"] = "content"
    content: TextContent


class DiffToolCallContent(ProtocolModel):
    type: Literal["diff"] = "diff"
    path: str
    old_text: str = ""
    new_text: str


ToolCallContent = Annotated[
    Union[ContentToolCallContent, DiffToolCallContent],
    Field(discriminator="type"),
]


class ToolCallLocation(ProtocolModel):
    path: str
    line: Optional[int] = None


class UserMessageChunk(ProtocolModel):
    session_update: Literal["user_message_chunk"] = "user_message_chunk"
    content: TextContent


class AgentMessageChunk(ProtocolModel):
    session_update: Literal["agent_message_chunk"] = "agent_message_chunk"
    content: TextContent


class AgentThoughtChunk(ProtocolModel):
    session_update: Literal["agent_thought_chunk"] = "agent_thought_chunk"
    content: TextContent


class ToolCall(ProtocolModel):
    """Announces a new tool call."""

    session_update: Literal["tool_call"] = "tool_call"
    tool_call_id: str
    title: str
    kind: ToolKind
    status: ToolCallStatus
    content: Optional[List[ToolCallContent]] = None
    locations: Optional[List[ToolCallLocation]] = None
    raw_input: Optional[Any] = None


class ToolCallUpdate(ProtocolModel):
    """Updates an existing tool call; unset fields are left unchanged."""

    session_update: Literal["tool_call_update"] = "tool_call_update"
    tool_call_id: str
    title: Optional[str] = None
    kind: Optional[ToolKind] = None
    status: Optional[ToolCallStatus] = None
    content: Optional[List[ToolCallContent]] = None
    locations: Optional[List[ToolCallLocation]] = None
    raw_input: Optional[Any] = None
    raw_output: Optional[Any] = None


SessionUpdate = Annotated[
    Union[
        UserMessageChunk,
        AgentMessageChunk,
        AgentThoughtChunk,
        ToolCall,
        ToolCallUpdate,
    ],
    Field(discriminator="session_update"),
]


class SessionNotification(ProtocolModel):
    """Params of a ``session/update`` notification."""

    session_id: str
    update: SessionUpdate


def text_content(text: str) -> ContentToolCallContent:
    """Wrap plain text as tool call content."""
    return ContentToolCallContent(content=TextContent(text=text))

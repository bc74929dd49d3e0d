"""Tests for protocol models."""

from acp_replay.protocol.schema import (
    AgentThoughtChunk,
    DiffToolCallContent,
    SessionNotification,
    ToolCallLocation,
    ToolCallStatus,
    ToolCallUpdate,
    ToolKind,
    text_content,
)


def test_tool_call_update_wire_shape():
    update = ToolCallUpdate(
        tool_call_id="c1",
        status=ToolCallStatus.COMPLETED,
        kind=ToolKind.EDIT,
        content=[
            text_content("ok"),
            DiffToolCallContent(path="a.py", old_text="a", new_text="b"),
        ],
        locations=[ToolCallLocation(path="a.py")],
    )

    assert update.to_wire() == {
        "sessionUpdate": "tool_call_update",
        "toolCallId": "c1",
        "status": "completed",
        "kind": "edit",
        "content": [
            {"type": "content", "content": {"type": "text", "text": "ok"}},
            {"type": "diff", "path": "a.py", "oldText": "a", "newText": "b"},
        ],
        "locations": [{"path": "a.py"}],
    }


def test_notification_parses_from_wire():
    notification = SessionNotification.model_validate(
        {
            "sessionId": "s1",
            "update": {
                "sessionUpdate": "agent_thought_chunk",
                "content": {"type": "text", "text": "hmm"},
            },
        }
    )

    assert notification.session_id == "s1"
    assert isinstance(notification.update, AgentThoughtChunk)
    assert notification.update.content.text == "hmm"


def test_notification_round_trip_keeps_update_type():
    original = SessionNotification(
        session_id="s1",
        update=ToolCallUpdate(tool_call_id="c1", status=ToolCallStatus.FAILED),
    )

    parsed = SessionNotification.model_validate(original.to_wire())

    assert isinstance(parsed.update, ToolCallUpdate)
    assert parsed.to_wire() == original.to_wire()

"""Tests for chat record models."""

import pytest

from acp_replay.session.models import ChatRecord, RecordType, ToolCallResult
from acp_replay.session.parts import FunctionResponsePart


class TestToolCallResult:
    """Test ToolCallResult parsing."""

    def test_from_dict(self):
        result = ToolCallResult.from_dict(
            {
                "callId": "c1",
                "resultDisplay": "3 files",
                "error": None,
                "errorType": None,
            }
        )

        assert result.call_id == "c1"
        assert result.result_display == "3 files"
        assert result.success is True

    def test_error_marks_failure(self):
        result = ToolCallResult.from_dict(
            {"callId": "c1", "error": {"message": "boom"}, "errorType": "execution_failed"}
        )

        assert result.success is False
        assert result.error_type == "execution_failed"

    def test_empty_call_id_is_missing(self):
        assert ToolCallResult.from_dict({"callId": ""}).call_id is None

    @pytest.mark.parametrize("error", [{}, [], "boom", {"message": "x"}])
    def test_any_error_payload_is_failure(self, error):
        assert ToolCallResult(call_id="c1", error=error).success is False

    @pytest.mark.parametrize("error", [None, ""])
    def test_absent_error_is_success(self, error):
        assert ToolCallResult(call_id="c1", error=error).success is True


class TestChatRecord:
    """Test ChatRecord parsing."""

    def test_tool_result_record(self):
        record = ChatRecord.from_dict(
            {
                "uuid": "u1",
                "parentUuid": "u0",
                "sessionId": "s1",
                "timestamp": "2025-01-01T00:00:00.000Z",
                "type": "tool_result",
                "message": {
                    "role": "user",
                    "parts": [
                        {"functionResponse": {"name": "glob", "response": {"output": "a.py"}}}
                    ],
                },
                "toolCallResult": {"callId": "c1"},
            }
        )

        assert record.type == RecordType.TOOL_RESULT
        assert record.session_id == "s1"
        assert record.parent_uuid == "u0"
        assert record.tool_call_result.call_id == "c1"
        assert record.message.parts == (
            FunctionResponsePart(name="glob", response={"output": "a.py"}),
        )

    def test_system_record(self):
        record = ChatRecord.from_dict(
            {"uuid": "u1", "type": "system", "subtype": "chat_compression"}
        )

        assert record.type == RecordType.SYSTEM
        assert record.subtype == "chat_compression"
        assert record.message is None
        assert record.tool_call_result is None

    def test_unknown_type_is_kept(self):
        record = ChatRecord.from_dict({"uuid": "u1", "type": "telemetry"})

        assert record.type == "telemetry"

    def test_malformed_message_dropped(self):
        record = ChatRecord.from_dict(
            {"uuid": "u1", "type": "user", "message": {"parts": 42}}
        )

        assert record.message is None

    @pytest.mark.parametrize(
        "data",
        [
            {"type": "user"},
            {"uuid": "", "type": "user"},
            {"uuid": "u1"},
            {"uuid": "u1", "type": 7},
            {"type": "tool_result", "toolCallResult": {}},
            {"type": "tool_result", "toolCallResult": {"callId": ""}},
            {"type": "user", "toolCallResult": {"callId": "c1"}},
        ],
    )
    def test_missing_identity_rejected(self, data):
        with pytest.raises(ValueError):
            ChatRecord.from_dict(data)

    def test_tool_result_identified_by_call_id(self):
        record = ChatRecord.from_dict(
            {
                "type": "tool_result",
                "message": {"role": "user", "parts": [{"text": "done"}]},
                "toolCallResult": {"callId": "c1"},
            }
        )

        assert record.uuid is None
        assert record.tool_call_result.call_id == "c1"

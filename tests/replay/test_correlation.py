"""Tests for call id correlation."""

from acp_replay.replay.correlation import (
    CorrelationQueue,
    extract_tool_call_ids,
    resolve_call_id,
    result_call_id,
    synthesize_call_id,
)
from acp_replay.session.models import ChatRecord


def tool_result(uuid, call_id=None):
    data = {
        "uuid": uuid,
        "type": "tool_result",
        "message": {
            "role": "user",
            "parts": [{"functionResponse": {"name": "read_file", "response": {}}}],
        },
    }
    if call_id is not None:
        data["toolCallResult"] = {"callId": call_id}
    return ChatRecord.from_dict(data)


def user(uuid, text="hi"):
    return ChatRecord.from_dict(
        {"uuid": uuid, "type": "user", "message": {"role": "user", "parts": [{"text": text}]}}
    )


class TestExtractToolCallIds:
    """Test the pre-scan over tool_result records."""

    def test_empty_transcript(self):
        assert extract_tool_call_ids([]) == ()

    def test_preserves_transcript_order(self):
        records = [
            tool_result("u1", "c1"),
            user("u2"),
            tool_result("u3", "c3"),
            tool_result("u4", "c4"),
        ]

        assert extract_tool_call_ids(records) == ("c1", "c3", "c4")

    def test_falls_back_to_record_uuid(self):
        records = [tool_result("u1"), tool_result("u2", "c2"), tool_result("u3", "")]

        assert extract_tool_call_ids(records) == ("u1", "c2", "u3")

    def test_ignores_non_result_records(self):
        system = ChatRecord.from_dict({"uuid": "s1", "type": "system", "subtype": "chat_compression"})

        assert extract_tool_call_ids([user("u1"), system]) == ()

    def test_result_call_id(self):
        assert result_call_id(tool_result("u1", "abc")) == "abc"
        assert result_call_id(tool_result("u1")) == "u1"


class TestResolveCallId:
    """Test the call id precedence policy."""

    def test_queue_front_wins_over_embedded_id(self):
        assert resolve_call_id("wrong", "right", "read_file") == "right"

    def test_queue_front_used_without_embedded_id(self):
        assert resolve_call_id(None, "abc", "read_file") == "abc"

    def test_embedded_id_when_queue_exhausted(self):
        assert resolve_call_id("own-id", None, "read_file") == "own-id"

    def test_synthesized_when_nothing_available(self):
        call_id = resolve_call_id(None, None, "read_file", clock=lambda: 1700000000.5)

        assert call_id == "read_file-1700000000500"

    def test_empty_strings_count_as_missing(self):
        call_id = resolve_call_id("", "", "glob", clock=lambda: 2.0)

        assert call_id == "glob-2000"

    def test_synthesize_call_id(self):
        assert synthesize_call_id("edit", clock=lambda: 1.5) == "edit-1500"


class TestCorrelationQueue:
    """Test front-to-back consumption."""

    def test_pops_in_order_then_none(self):
        queue = CorrelationQueue(["a", "b"])

        assert len(queue) == 2
        assert queue.pop() == "a"
        assert queue.pop() == "b"
        assert queue.pop() is None
        assert len(queue) == 0

    def test_from_records(self):
        queue = CorrelationQueue.from_records([tool_result("u1", "x"), tool_result("u2")])

        assert queue.pop() == "x"
        assert queue.pop() == "u2"

    def test_queues_are_independent(self):
        ids = ["a", "b"]
        first = CorrelationQueue(ids)
        second = CorrelationQueue(ids)

        first.pop()

        assert len(second) == 2
        assert ids == ["a", "b"]

"""Tests for part decoding."""

from google.genai import types as genai_types

from acp_replay.session.parts import (
    FunctionCallPart,
    FunctionResponsePart,
    Message,
    OtherPart,
    TextPart,
    decode_message,
    decode_part,
)


class TestDecodePart:
    """Test narrowing genai parts to the closed variants."""

    def test_text(self):
        assert decode_part(genai_types.Part(text="hello")) == (TextPart("hello"),)

    def test_thought(self):
        part = genai_types.Part(text="pondering", thought=True)

        assert decode_part(part) == (TextPart("pondering", thought=True),)

    def test_function_call(self):
        part = genai_types.Part(
            function_call=genai_types.FunctionCall(
                name="read_file", id="call-1", args={"file_path": "a.py"}
            )
        )

        assert decode_part(part) == (
            FunctionCallPart(
                name="read_file", call_id="call-1", args={"file_path": "a.py"}
            ),
        )

    def test_function_call_without_id_or_args(self):
        part = genai_types.Part(function_call=genai_types.FunctionCall(name="glob"))

        (decoded,) = decode_part(part)

        assert decoded == FunctionCallPart(name="glob")
        assert decoded.call_id is None
        assert decoded.args == {}

    def test_function_call_empty_id_is_missing(self):
        part = genai_types.Part(function_call=genai_types.FunctionCall(name="glob", id=""))

        (decoded,) = decode_part(part)

        assert decoded.call_id is None

    def test_text_and_function_call_both_kept(self):
        part = genai_types.Part(
            text="Reading it now.",
            function_call=genai_types.FunctionCall(name="read_file", id="c1"),
        )

        assert decode_part(part) == (
            TextPart("Reading it now."),
            FunctionCallPart(name="read_file", call_id="c1"),
        )

    def test_function_response(self):
        part = genai_types.Part(
            function_response=genai_types.FunctionResponse(
                name="read_file", id="call-1", response={"output": "text"}
            )
        )

        assert decode_part(part) == (
            FunctionResponsePart(
                name="read_file", call_id="call-1", response={"output": "text"}
            ),
        )

    def test_other(self):
        part = genai_types.Part(
            inline_data=genai_types.Blob(mime_type="image/png", data=b"\x89PNG")
        )

        assert decode_part(part) == (OtherPart(kind="inline_data"),)

    def test_empty_part(self):
        assert decode_part(genai_types.Part()) == (OtherPart(),)


class TestDecodeMessage:
    """Test validating stored message payloads."""

    def test_none(self):
        assert decode_message(None) is None

    def test_camel_case_payload(self):
        message = decode_message(
            {
                "role": "model",
                "parts": [
                    {"text": "Reading."},
                    {"functionCall": {"name": "read_file", "args": {"file_path": "a"}}},
                ],
            }
        )

        assert message == Message(
            parts=(
                TextPart("Reading."),
                FunctionCallPart(name="read_file", args={"file_path": "a"}),
            ),
            role="model",
        )

    def test_missing_parts(self):
        assert decode_message({"role": "user"}) == Message(parts=(), role="user")

    def test_malformed_payload(self):
        assert decode_message({"role": "user", "parts": "not a list"}) is None

    def test_non_dict_payload(self):
        assert decode_message(["text"]) is None

    def test_invalid_part_keeps_siblings(self, caplog):
        message = decode_message(
            {
                "role": "model",
                "parts": [
                    {"text": "Let me look.", "someNewField": True},
                    {"functionCall": {"name": "read_file", "id": "c1"}},
                ],
            }
        )

        assert message == Message(
            parts=(
                OtherPart(kind="invalid"),
                FunctionCallPart(name="read_file", call_id="c1"),
            ),
            role="model",
        )
        assert "Skipping malformed message part 0" in caplog.text

    def test_non_object_part_is_invalid(self):
        message = decode_message({"role": "user", "parts": ["plain", {"text": "ok"}]})

        assert message.parts == (OtherPart(kind="invalid"), TextPart("ok"))

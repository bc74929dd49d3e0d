"""Emitter for tool call lifecycle updates."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from acp_replay.errors import get_error_message
from acp_replay.protocol.schema import (
    DiffToolCallContent,
    ToolCall,
    ToolCallStatus,
    ToolCallUpdate,
    text_content,
)
from acp_replay.session.parts import FunctionResponsePart, Part, TextPart

from .base import BaseEmitter
from .tool_presentation import build_title, extract_locations, resolve_tool_kind


@dataclass
class ToolCallStartParams:
    """A tool call that has begun executing."""

    tool_name: str
    call_id: str
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolCallResultParams:
    """The outcome of a tool call."""

    tool_name: str
    call_id: str
    success: bool
    message: Sequence[Part] = ()
    result_display: Any = None
    args: Optional[Dict[str, Any]] = None
    error: Any = None


def _response_text(response: Dict[str, Any]) -> str:
    """Flatten a function response payload to display text."""
    if "output" in response:
        value = response["output"]
    elif "error" in response:
        return get_error_message(response["error"])
    else:
        value = response

    if value is None or value == "" or value == {}:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def _is_file_diff(result_display: Any) -> bool:
    return isinstance(result_display, dict) and "fileDiff" in result_display


def build_result_content(
    message: Sequence[Part],
    result_display: Any = None,
    success: bool = True,
    error: Any = None,
) -> List[Any]:
    """Build ``tool_call_update`` content for a finished tool call.

    The display payload wins when present: a file diff becomes ``diff``
    content, a string becomes text. Otherwise the function response parts
    (and any text parts) of the message are shown. A failed call with
    nothing to show reports its error message.
    """
    content: List[Any] = []

    if _is_file_diff(result_display):
        content.append(
            DiffToolCallContent(
                path=result_display.get("fileName") or "",
                old_text=result_display.get("originalContent") or "",
                new_text=result_display.get("newContent") or "",
            )
        )
    elif isinstance(result_display, str) and result_display:
        content.append(text_content(result_display))
    else:
        for part in message:
            if isinstance(part, FunctionResponsePart):
                text = _response_text(part.response)
            elif isinstance(part, TextPart):
                text = part.text
            else:
                continue
            if text:
                content.append(text_content(text))

    if not content and not success and error:
        content.append(text_content(get_error_message(error)))

    return content


class ToolCallEmitter(BaseEmitter):
    """Emits ``tool_call`` for starts and ``tool_call_update`` for results."""

    async def emit_start(self, params: ToolCallStartParams) -> None:
        args = params.args or {}
        await self._send_update(
            ToolCall(
                tool_call_id=params.call_id,
                title=build_title(params.tool_name, args),
                kind=resolve_tool_kind(params.tool_name),
                status=ToolCallStatus.IN_PROGRESS,
                locations=extract_locations(args),
                raw_input=args,
            )
        )

    async def emit_result(self, params: ToolCallResultParams) -> None:
        fields: Dict[str, Any] = {}

        # Results replayed from disk may not know their tool; leave the
        # client's existing title and kind untouched in that case.
        if params.tool_name:
            fields["title"] = build_title(params.tool_name, params.args)
            fields["kind"] = resolve_tool_kind(params.tool_name)

        await self._send_update(
            ToolCallUpdate(
                tool_call_id=params.call_id,
                status=(
                    ToolCallStatus.COMPLETED
                    if params.success
                    else ToolCallStatus.FAILED
                ),
                content=build_result_content(
                    params.message,
                    params.result_display,
                    success=params.success,
                    error=params.error,
                ),
                raw_output=params.result_display,
                **fields,
            )
        )

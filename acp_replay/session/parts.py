"""Closed part types for transcript messages.

Transcript messages are stored in the Gemini ``Content`` wire shape. They are
validated with ``google.genai.types`` once at load time and narrowed to the
four variants below, so replay code matches on types instead of probing keys.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from google.genai import types
from pydantic import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextPart:
    """Plain text, or model reasoning when ``thought`` is set."""

    text: str
    thought: bool = False


@dataclass(frozen=True)
class FunctionCallPart:
    """A tool invocation requested by the model."""

    name: str
    call_id: Optional[str] = None
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FunctionResponsePart:
    """The response sent back to the model for a tool invocation."""

    name: str
    call_id: Optional[str] = None
    response: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OtherPart:
    """Any part replay does not render (inline data, code execution, ...).

    ``kind`` is the populated field name, ``"empty"`` or ``"invalid"``.
    """

    kind: str = "empty"


Part = Union[TextPart, FunctionCallPart, FunctionResponsePart, OtherPart]


@dataclass(frozen=True)
class Message:
    """Ordered parts of a single transcript message."""

    parts: Tuple[Part, ...] = ()
    role: Optional[str] = None


def decode_part(part: types.Part) -> Tuple[Part, ...]:
    """Narrow a genai Part to the closed part variants.

    A stored part may carry text next to a function call. Each populated
    field becomes its own variant, text first.
    """
    decoded = []

    if part.text is not None:
        decoded.append(TextPart(text=part.text, thought=bool(part.thought)))

    if part.function_call is not None:
        call = part.function_call
        decoded.append(
            FunctionCallPart(
                name=call.name or "",
                call_id=call.id or None,
                args=dict(call.args or {}),
            )
        )

    if part.function_response is not None:
        response = part.function_response
        decoded.append(
            FunctionResponsePart(
                name=response.name or "",
                call_id=response.id or None,
                response=dict(response.response or {}),
            )
        )

    if not decoded:
        kind = next((name for name, value in part if value is not None), "empty")
        decoded.append(OtherPart(kind=kind))

    return tuple(decoded)


def decode_message(raw: Any) -> Optional[Message]:
    """Validate a stored message and decode its parts.

    Parts are validated one at a time. A part that fails validation becomes
    ``OtherPart(kind="invalid")`` and the rest of the message is kept.

    Args:
        raw: The stored ``Content`` payload (camelCase or snake_case keys)

    Returns:
        Decoded Message, or None if the payload is absent or not a message
    """
    if raw is None:
        return None

    if not isinstance(raw, dict):
        logger.warning(f"Dropping message payload of type {type(raw).__name__}")
        return None

    raw_parts = raw.get("parts") or []
    role = raw.get("role")
    if not isinstance(raw_parts, list) or not isinstance(role, (str, type(None))):
        logger.warning("Dropping malformed message payload: bad 'parts' or 'role'")
        return None

    parts = []
    for index, raw_part in enumerate(raw_parts):
        try:
            part = types.Part.model_validate(raw_part)
        except ValidationError as e:
            logger.warning(f"Skipping malformed message part {index}: {e}")
            parts.append(OtherPart(kind="invalid"))
            continue
        parts.extend(decode_part(part))

    return Message(parts=tuple(parts), role=role)

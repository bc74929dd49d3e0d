"""How tool calls are presented to clients: kind, title and locations."""

from typing import Any, Dict, List, Optional

from acp_replay.protocol.schema import ToolCallLocation, ToolKind

# Tool name -> kind for the built-in tools of the Gemini/Qwen family of CLIs
_TOOL_KINDS: Dict[str, ToolKind] = {
    "read_file": ToolKind.READ,
    "read_many_files": ToolKind.READ,
    "write_file": ToolKind.EDIT,
    "edit": ToolKind.EDIT,
    "replace": ToolKind.EDIT,
    "delete_file": ToolKind.DELETE,
    "move_file": ToolKind.MOVE,
    "glob": ToolKind.SEARCH,
    "grep_search": ToolKind.SEARCH,
    "search_file_content": ToolKind.SEARCH,
    "list_directory": ToolKind.SEARCH,
    "google_search": ToolKind.SEARCH,
    "web_search": ToolKind.SEARCH,
    "run_shell_command": ToolKind.EXECUTE,
    "execute_command": ToolKind.EXECUTE,
    "web_fetch": ToolKind.FETCH,
    "fetch_url": ToolKind.FETCH,
    "save_memory": ToolKind.THINK,
    "todo_write": ToolKind.THINK,
    "exit_plan_mode": ToolKind.SWITCH_MODE,
}

# Argument keys naming a file the tool touches, in lookup order
_PATH_KEYS = ("file_path", "absolute_path", "path")

_MAX_COMMAND_LENGTH = 60
_MAX_PATH_LENGTH = 50


def resolve_tool_kind(tool_name: str) -> ToolKind:
    """Map a tool name to its protocol kind, defaulting to ``other``."""
    return _TOOL_KINDS.get(tool_name, ToolKind.OTHER)


def truncate_value(value: Any, max_length: int = 50) -> str:
    """Render an argument value compactly for a one-line title."""
    if value is None:
        return "null"

    if isinstance(value, str):
        if len(value) <= max_length:
            return f'"{value}"'
        return f'"{value[: max_length - 4]}..."'

    if isinstance(value, bool):
        return str(value).lower()

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        return f"[{len(value)} items]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        return f"{{{len(value)} keys}}"

    str_val = str(value)
    if len(str_val) <= max_length:
        return str_val
    return str_val[: max_length - 3] + "..."


def format_parameters_inline(
    parameters: Dict[str, Any], max_params: int = 2, max_value_length: int = 30
) -> str:
    """Format arguments as ``key: value | key: value``.

    Args:
        parameters: Tool arguments
        max_params: Maximum number of arguments to show
        max_value_length: Maximum length for each value

    Returns:
        Formatted string, empty when there are no arguments
    """
    if not parameters:
        return ""

    parts = []
    for i, (key, value) in enumerate(parameters.items()):
        if i >= max_params:
            parts.append(f"... {len(parameters) - max_params} more")
            break
        parts.append(f"{key}: {truncate_value(value, max_value_length)}")

    return " | ".join(parts)


def _truncate_from_end(value: str, max_length: int) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


def _truncate_from_start(value: str, max_length: int) -> str:
    if len(value) <= max_length:
        return value
    return "..." + value[-(max_length - 3) :]


def _get_string_param(parameters: Dict[str, Any], key: str) -> Optional[str]:
    value = parameters.get(key)
    return value if isinstance(value, str) and value else None


def get_tool_context_summary(
    tool_name: str, parameters: Dict[str, Any]
) -> Optional[str]:
    """Pick the single most telling argument for a tool call.

    Args:
        tool_name: Name of the tool
        parameters: Tool arguments

    Returns:
        Short string (e.g. "pytest tests/") or None if nothing stands out
    """
    if not parameters:
        return None

    kind = resolve_tool_kind(tool_name)

    if kind == ToolKind.EXECUTE:
        cmd = _get_string_param(parameters, "command")
        if cmd:
            # Multiline scripts collapse to their first line
            return _truncate_from_end(cmd.split("\n")[0], _MAX_COMMAND_LENGTH)

    if kind == ToolKind.FETCH:
        url = _get_string_param(parameters, "url") or _get_string_param(
            parameters, "prompt"
        )
        if url:
            return _truncate_from_end(url, _MAX_COMMAND_LENGTH)

    if kind == ToolKind.SEARCH:
        for key in ("pattern", "query"):
            term = _get_string_param(parameters, key)
            if term:
                return _truncate_from_end(term, _MAX_COMMAND_LENGTH)

    for key in _PATH_KEYS + ("directory",):
        path = _get_string_param(parameters, key)
        if path:
            return _truncate_from_start(path, _MAX_PATH_LENGTH)

    return None


def build_title(tool_name: str, parameters: Optional[Dict[str, Any]]) -> str:
    """Build the human-readable title of a tool call."""
    parameters = parameters or {}
    summary = get_tool_context_summary(tool_name, parameters)
    if summary:
        return f"{tool_name}: {summary}"

    inline = format_parameters_inline(parameters)
    if inline:
        return f"{tool_name} ({inline})"
    return tool_name


def extract_locations(
    parameters: Optional[Dict[str, Any]],
) -> Optional[List[ToolCallLocation]]:
    """Files a tool call touches, for clients that follow along in an editor."""
    if not parameters:
        return None

    for key in _PATH_KEYS:
        path = _get_string_param(parameters, key)
        if path:
            line = parameters.get("line")
            return [
                ToolCallLocation(
                    path=path, line=line if isinstance(line, int) else None
                )
            ]
    return None

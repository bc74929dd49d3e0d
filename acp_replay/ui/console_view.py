"""Human-readable rendering of replayed session updates."""

from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from acp_replay.protocol.schema import (
    AgentMessageChunk,
    AgentThoughtChunk,
    ContentToolCallContent,
    DiffToolCallContent,
    SessionNotification,
    ToolCall,
    ToolCallStatus,
    ToolCallUpdate,
    UserMessageChunk,
)

STATUS_ICONS = {
    ToolCallStatus.PENDING: "⏳",
    ToolCallStatus.IN_PROGRESS: "🔧",
    ToolCallStatus.COMPLETED: "✅",
    ToolCallStatus.FAILED: "❌",
}

# Longest tool output shown before truncation
MAX_OUTPUT_LENGTH = 1000


def _truncate(text: str, max_length: int = MAX_OUTPUT_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "... (truncated)"


class ConsoleTransport:
    """Renders notifications to a rich console as they arrive.

    Tool titles are remembered from ``tool_call`` so that later updates
    without a title still show which tool they belong to.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._titles: dict = {}

    async def send(self, notification: SessionNotification) -> None:
        self.render(notification)

    def render(self, notification: SessionNotification) -> None:
        update = notification.update

        if isinstance(update, UserMessageChunk):
            self.console.print(Text("You", style="bold cyan"))
            self.console.print(update.content.text)
        elif isinstance(update, AgentMessageChunk):
            self.console.print(Text("AI", style="bold green"))
            self.console.print(Markdown(update.content.text))
        elif isinstance(update, AgentThoughtChunk):
            self.console.print(Text(update.content.text, style="dim italic"))
        elif isinstance(update, ToolCall):
            self._titles[update.tool_call_id] = update.title
            self._print_tool_header(update.tool_call_id, update.title, update.status)
        elif isinstance(update, ToolCallUpdate):
            title = update.title or self._titles.get(update.tool_call_id, "tool")
            self._print_tool_header(update.tool_call_id, title, update.status)
            for item in update.content or []:
                self._print_tool_content(item)

    def _print_tool_header(
        self, call_id: str, title: str, status: Optional[ToolCallStatus]
    ) -> None:
        icon = STATUS_ICONS.get(status, "") if status else ""
        header = Text(f"{icon} {title}".strip(), style="bold yellow")
        header.append(f"  [{call_id}]", style="dim")
        self.console.print(header)

    def _print_tool_content(self, item) -> None:
        if isinstance(item, ContentToolCallContent):
            self.console.print(Text(_truncate(item.content.text)), style="dim")
        elif isinstance(item, DiffToolCallContent):
            self.console.print(Text(f"edited {item.path}", style="magenta"))

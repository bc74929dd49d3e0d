"""Sinks for ``session/update`` notifications."""

import asyncio
import json
import sys
from typing import Any, Dict, List, Optional, TextIO

from .schema import CLIENT_METHODS, SessionNotification


def to_jsonrpc(notification: SessionNotification) -> Dict[str, Any]:
    """Wrap a notification in a JSON-RPC 2.0 envelope."""
    return {
        "jsonrpc": "2.0",
        "method": CLIENT_METHODS["session_update"],
        "params": notification.to_wire(),
    }


class StdoutTransport:
    """Writes newline-delimited JSON-RPC notifications to a stream.

    Writes run in a worker thread so a slow consumer does not block the
    event loop; each ``send`` completes before the next one starts.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    async def send(self, notification: SessionNotification) -> None:
        line = json.dumps(to_jsonrpc(notification))
        await asyncio.to_thread(self._write_line_sync, line)

    def _write_line_sync(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()


class MemoryTransport:
    """Collects notifications in order."""

    def __init__(self):
        self.notifications: List[SessionNotification] = []

    async def send(self, notification: SessionNotification) -> None:
        self.notifications.append(notification)

    @property
    def updates(self) -> list:
        """The update payloads, without the session envelope."""
        return [n.update for n in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()

"""Error types and classification helpers."""

import errno
import json
from typing import Any


class ReplayInProgressError(RuntimeError):
    """Raised when a replayer is asked to replay while already replaying."""


class FatalError(Exception):
    """An error that should terminate the process with a specific exit code."""

    def __init__(self, message: str, exit_code: int):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class FatalInputError(FatalError):
    def __init__(self, message: str):
        super().__init__(message, 42)


class FatalConfigError(FatalError):
    def __init__(self, message: str):
        super().__init__(message, 52)


class FatalCancellationError(FatalError):
    def __init__(self, message: str):
        # Standard exit code for SIGINT
        super().__init__(message, 130)


def is_os_error(error: Any) -> bool:
    """Check whether an error carries an OS-level errno."""
    return isinstance(error, OSError) and error.errno is not None


def get_error_message(error: Any) -> str:
    """Extract a human-readable message from any error-like value.

    Args:
        error: An exception, an error payload (e.g. a dict loaded from a
            transcript), or any other value

    Returns:
        Best-effort message string, never raises
    """
    if is_os_error(error):
        code = errno.errorcode.get(error.errno, str(error.errno))
        if error.filename:
            return f"{code}: {error.strerror} for {error.filename}"
        return f"{code}: {error.strerror}"

    if isinstance(error, BaseException):
        return str(error)

    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str):
            return message
        try:
            return json.dumps(error)
        except (TypeError, ValueError):
            return "[Error object could not be serialized]"

    try:
        return str(error)
    except Exception:  # noqa: BLE001
        return "Failed to get error details"

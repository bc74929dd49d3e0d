"""Main entry point for acp-replay."""

import click
from pathlib import Path
from typing import Optional

from .config.settings_manager import VALID_FORMATS


def _configure_logging(debug: bool) -> None:
    """Send logs to stderr; stdout carries the protocol stream."""
    import logging
    import sys

    from .config.settings_manager import get_log_level_setting

    level = "DEBUG" if debug else get_log_level_setting()
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _resolve_session_file(
    transcript: Optional[Path], session_id: Optional[str], sessions_dir: Optional[Path]
) -> Path:
    from .config.settings_manager import get_sessions_dir_setting
    from .errors import FatalConfigError, FatalInputError
    from .session.transcript import session_file_for

    if transcript:
        return transcript
    if not session_id:
        raise FatalInputError("Provide a transcript path or --session-id")

    sessions_dir = sessions_dir or get_sessions_dir_setting()
    if sessions_dir.exists() and not sessions_dir.is_dir():
        raise FatalConfigError(
            f"Sessions directory is not a directory: {sessions_dir}"
        )
    return session_file_for(session_id, sessions_dir)


@click.command()
@click.argument(
    "transcript",
    required=False,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option(
    "--session-id",
    default=None,
    help="Replay <sessions-dir>/<session-id>.jsonl instead of a path"
)
@click.option(
    "--sessions-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory containing session transcripts"
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(VALID_FORMATS),
    default=None,
    help="jsonrpc: session/update notifications, one per line; pretty: rendered"
)
@click.option(
    "--stats",
    is_flag=True,
    help="Print replay statistics to stderr when done"
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging and show tracebacks"
)
def main(
    transcript: Optional[Path],
    session_id: Optional[str],
    sessions_dir: Optional[Path],
    output_format: Optional[str],
    stats: bool,
    debug: bool,
) -> None:
    """Replay a stored session transcript as Agent Client Protocol updates."""
    import asyncio
    import json
    import sys
    from dataclasses import asdict

    from .config.settings_manager import get_format_setting
    from .emitters.base import SessionContext
    from .errors import FatalCancellationError, FatalError, FatalInputError, get_error_message
    from .protocol.transport import StdoutTransport
    from .replay.history_replayer import HistoryReplayer
    from .session.transcript import load_transcript, session_id_of

    _configure_logging(debug)

    try:
        session_file = _resolve_session_file(transcript, session_id, sessions_dir)
        try:
            records = load_transcript(session_file)
        except FileNotFoundError as e:
            raise FatalInputError(str(e)) from e

        output_format = output_format or get_format_setting()
        if output_format == "pretty":
            from .ui.console_view import ConsoleTransport

            transport = ConsoleTransport()
        else:
            transport = StdoutTransport()

        ctx = SessionContext(
            session_id=session_id or session_id_of(records) or session_file.stem,
            send_update=transport.send,
        )
        result = asyncio.run(HistoryReplayer(ctx).replay(records))

        if stats:
            click.echo(json.dumps(asdict(result)), err=True)

    except KeyboardInterrupt:
        click.echo("\nExiting...", err=True)
        sys.exit(FatalCancellationError("Interrupted").exit_code)
    except FatalError as e:
        if debug:
            raise
        click.echo(click.style(f"Error: {e.message}", fg='red'), err=True)
        sys.exit(e.exit_code)
    except Exception as e:
        if debug:
            raise
        click.echo(click.style(f"Error: {get_error_message(e)}", fg='red'), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

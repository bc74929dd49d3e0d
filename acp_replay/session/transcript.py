"""Loading persisted transcripts from JSONL files."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from .models import ChatRecord

logger = logging.getLogger(__name__)

TRANSCRIPT_SUFFIX = ".jsonl"


def session_file_for(session_id: str, sessions_dir: Path) -> Path:
    """Get the transcript path for a session id."""
    return Path(sessions_dir) / f"{session_id}{TRANSCRIPT_SUFFIX}"


def load_transcript(session_file: Path) -> List[ChatRecord]:
    """Load a transcript, one chat record per line.

    Blank lines, unparseable JSON and records without a uuid or type are
    skipped with a warning; the remaining records keep their file order.

    Args:
        session_file: Path to the JSONL transcript

    Returns:
        Ordered list of chat records

    Raises:
        FileNotFoundError: If the transcript doesn't exist
    """
    session_file = Path(session_file)
    if not session_file.exists():
        raise FileNotFoundError(f"Session file not found: {session_file}")

    records: List[ChatRecord] = []
    with open(session_file, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue

            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"{session_file}:{line_number}: invalid JSON ({e})")
                continue

            if not isinstance(data, dict):
                logger.warning(f"{session_file}:{line_number}: not a JSON object")
                continue

            try:
                records.append(ChatRecord.from_dict(data))
            except ValueError as e:
                logger.warning(f"{session_file}:{line_number}: {e}")

    logger.debug(f"Loaded {len(records)} records from {session_file}")
    return records


def session_id_of(records: List[ChatRecord]) -> Optional[str]:
    """Return the first session id carried by the records, if any."""
    for record in records:
        if record.session_id:
            return record.session_id
    return None

"""Session replay tool for STARFIND LIVE."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.record_ingestion import RecordValidationError, normalize_record
from ..models.events import WaveRecord


def replay_session(filepath: str, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
    """Read a JSONL session log and return parsed events.

    Args:
        filepath: Path to a .jsonl session log file.
        event_type: Only return events of this type when given.

    Returns:
        List of parsed event dicts, in file order.

    Raises:
        FileNotFoundError: If the log file does not exist.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Session log not found: {filepath}")

    events: List[Dict[str, Any]] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            event = json.loads(line)
        except json.JSONDecodeError:
            continue  # Skip malformed lines
        if event_type is None or event.get("event_type") == event_type:
            events.append(event)

    return events


def last_wave_set(events: List[Dict[str, Any]]) -> List[WaveRecord]:
    """Rebuild the records of the most recent WAVE_SET in a replayed session.

    Items that no longer validate are dropped.
    """
    for event in reversed(events):
        if event.get("event_type") != "WAVE_SET":
            continue
        records: List[WaveRecord] = []
        for item in event.get("items", []):
            try:
                records.append(normalize_record(item))
            except RecordValidationError:
                continue
        return records
    return []

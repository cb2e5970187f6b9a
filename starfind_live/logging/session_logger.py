"""JSONL session logger for STARFIND LIVE."""

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from ..config.thresholds import LOG_DIR, LOG_LEVEL_DEFAULT
from ..models.events import WaveRecord, WaveTransitionEvent


class SessionLogger:
    """Writes session events to a JSONL file.

    In INTELLIGENCE_ONLY mode (default), session start/end, wave sets and
    lifecycle transitions are logged. In FULL mode, the raw announcement
    text is also logged.
    """

    def __init__(
        self,
        label: str = "live",
        log_level: str = LOG_LEVEL_DEFAULT,
        output_dir: str = LOG_DIR,
    ) -> None:
        self.label = label
        self.log_level = log_level
        self._dir = Path(output_dir)
        self._dir.mkdir(parents=True, exist_ok=True)

        ts = int(time.time())
        filename = f"starfind_live_session_{label}_{ts}.jsonl"
        self._filepath = self._dir / filename
        self._file: Optional[TextIO] = open(self._filepath, "a", encoding="utf-8")

    def _write_line(self, data: Dict[str, Any]) -> None:
        """Write a single JSON line to the log file."""
        if self._file and not self._file.closed:
            self._file.write(json.dumps(data, separators=(",", ":")) + "\n")
            self._file.flush()

    def log_session_start(self, config: Dict[str, Any]) -> None:
        """Log session start event (always logged regardless of level)."""
        self._write_line({
            "event_type": "SESSION_START",
            "timestamp": int(time.time()),
            "label": self.label,
            "config": config,
        })

    def log_announcement(self, text: str, timestamp: int) -> None:
        """Log raw flattened announcement text (only in FULL mode)."""
        if self.log_level != "FULL":
            return
        self._write_line({
            "event_type": "ANNOUNCEMENT",
            "timestamp": timestamp,
            "text": text,
        })

    def log_wave_set(self, records: List[WaveRecord], timestamp: int) -> None:
        """Log a parsed batch with its upcoming/current split."""
        items = [r.to_dict() for r in records]
        self._write_line({
            "event_type": "WAVE_SET",
            "timestamp": timestamp,
            "items": items,
            "upcoming": [i for i in items if i["status"] == "upcoming"],
            "current": [i for i in items if i["status"] == "current"],
        })

    def log_transition(self, event: WaveTransitionEvent) -> None:
        """Log a promotion or expiry."""
        self._write_line({
            "event_type": event.event_type,
            "timestamp": event.timestamp,
            "wave": event.wave.to_dict(),
            "details": event.details,
        })

    def log_session_end(self, reason: str) -> None:
        """Log session end event (always logged regardless of level)."""
        self._write_line({
            "event_type": "SESSION_END",
            "timestamp": int(time.time()),
            "reason": reason,
        })
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file and not self._file.closed:
            self._file.close()

    @property
    def filepath(self) -> Path:
        """Return the path to the log file."""
        return self._filepath

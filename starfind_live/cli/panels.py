"""Panel formatters for STARFIND LIVE CLI.

Formats the region map summary, the live wave feed and the event stream
into lists of display-ready strings.
"""

import math
import time
from typing import List, Optional

from ..config.thresholds import EXPIRED_DISPLAY_MINUTES, MAX_EVENT_BUFFER_BYTES, MAX_FEED_LINES
from ..models.board_state import RegionView
from ..models.events import WaveRecord, WaveTransitionEvent
from ..models.regions import STATUS_ACTIVE, STATUS_UPCOMING, Region

_STATUS_MARKER = {
    STATUS_ACTIVE: "[*]",
    STATUS_UPCOMING: "[~]",
}


def stage_label(size: int) -> str:
    """Name the size tier of a wave."""
    if size >= 9:
        return "Enormous"
    if size >= 7:
        return "Large"
    if size >= 5:
        return "Medium"
    if size >= 3:
        return "Small"
    return "Tiny"


def format_time_window(eta: Optional[int], now: int) -> str:
    """Describe an ETA relative to now, in whole minutes.

    Returns "Unknown", "Expired", "<n>m ago", "Now" or "in <n>m".
    """
    if eta is None:
        return "Unknown"
    # Half-up rounding, so -0.5 min reads "Now" rather than "1m ago"
    diff_min = math.floor((eta - now) / 60 + 0.5)
    if diff_min < -EXPIRED_DISPLAY_MINUTES:
        return "Expired"
    if diff_min < 0:
        return f"{abs(diff_min)}m ago"
    if diff_min == 0:
        return "Now"
    return f"in {diff_min}m"


def _format_time(ts: int) -> str:
    """Format unix timestamp as HH:MM:SS."""
    return time.strftime("%H:%M:%S", time.localtime(ts))


def _wave_title(wave: WaveRecord) -> str:
    return f"World {wave.world} • Size {wave.size} ({stage_label(wave.size)})"


class RegionPanel:
    """Formats the 7-region status summary."""

    def render(self, view: RegionView, current_time: int, max_lines: int = 10) -> List[str]:
        """Render one line per canonical region, in display order.

        Args:
            view: Current region view.
            current_time: Current timestamp.
            max_lines: Maximum lines to render.

        Returns:
            List of formatted display strings.
        """
        lines: List[str] = [" REGIONS", ""]

        for region in Region:
            status = view.status.get(region)
            marker = _STATUS_MARKER.get(status, "[ ]")
            meta = view.meta.get(region)
            extra = ""
            if meta is not None and meta.top_size is not None:
                extra = f" | Top: {meta.top_size}"
                if meta.soon_eta is not None:
                    extra += f" | {format_time_window(meta.soon_eta, current_time)}"
            lines.append(f" {marker} {region.value:<20}{extra}")

        lines.append(" [*] active  [~] upcoming  [ ] idle")

        while len(lines) < max_lines:
            lines.append("")
        return lines[:max_lines]


class FeedPanel:
    """Formats the upcoming/current wave lists."""

    def __init__(self, max_per_list: int = MAX_FEED_LINES) -> None:
        self.max_per_list = max_per_list

    def render(self, view: RegionView, current_time: int, max_lines: int = 20) -> List[str]:
        lines: List[str] = [
            f" LIVE FEED | Upcoming: {len(view.upcoming)} | Current: {len(view.current)}",
            "",
        ]

        if not view.upcoming and not view.current:
            lines.append(" No live star data yet.")

        if view.upcoming:
            lines.append(f" Upcoming ({len(view.upcoming)}):")
            for wave in view.upcoming[: self.max_per_list]:
                lines.append(f"   {_wave_title(wave)}")
                lines.append(
                    f"     {wave.region.value} | ETA {_format_time(wave.eta)} "
                    f"({format_time_window(wave.eta, current_time)})"
                )

        if view.current:
            lines.append(f" Current ({len(view.current)}):")
            for wave in view.current[: self.max_per_list]:
                lines.append(f"   {_wave_title(wave)}")
                lines.append(
                    f"     {wave.region.value} | Active since {_format_time(wave.eta)}"
                )

        while len(lines) < max_lines:
            lines.append("")
        return lines[:max_lines]


class EventPanel:
    """Formats scrolling event stream."""

    def __init__(self, buffer_size: int = 100) -> None:
        self._events: List[str] = []
        self._buffer_size = buffer_size
        self._buffer_bytes: int = 0
        self._max_buffer_bytes: int = MAX_EVENT_BUFFER_BYTES

    def add_transition(self, event: WaveTransitionEvent) -> None:
        """Add a promotion or expiry to the stream."""
        ts = _format_time(event.timestamp)
        wave = event.wave
        label = "PROMOTED" if event.event_type == "WAVE_PROMOTED" else "EXPIRED"
        self._append(f"[{ts}] {label}: W{wave.world} S{wave.size} {wave.region.value}")

    def add_wave_set(self, records: List[WaveRecord], timestamp: int) -> None:
        """Add a summary line for a freshly ingested batch."""
        ts = _format_time(timestamp)
        upcoming = sum(1 for r in records if r.status == "upcoming")
        current = len(records) - upcoming
        self._append(f"[{ts}] WAVE SET: {len(records)} waves ({upcoming} upcoming, {current} current)")

    def add_info(self, message: str, timestamp: Optional[int] = None) -> None:
        """Add an informational message to the stream."""
        ts = _format_time(int(time.time()) if timestamp is None else timestamp)
        self._append(f"[{ts}] {message}")

    def render(self, max_lines: int = 10) -> List[str]:
        """Render most recent events.

        Returns:
            List of formatted event strings (newest at bottom).
        """
        lines = [" EVENT STREAM", ""]
        recent = self._events[-(max_lines - 2):] if max_lines > 2 else []
        for ev in recent:
            lines.append(f" {ev}")
        while len(lines) < max_lines:
            lines.append("")
        return lines[:max_lines]

    def _append(self, event_str: str) -> None:
        """Append event and enforce both count and byte caps."""
        event_bytes = len(event_str.encode("utf-8", errors="replace"))
        self._events.append(event_str)
        self._buffer_bytes += event_bytes

        # Evict oldest until both caps satisfied
        while self._events and (
            len(self._events) > self._buffer_size
            or self._buffer_bytes > self._max_buffer_bytes
        ):
            removed = self._events.pop(0)
            self._buffer_bytes -= len(removed.encode("utf-8", errors="replace"))

    @property
    def events(self) -> List[str]:
        """Buffered event lines, oldest first."""
        return list(self._events)

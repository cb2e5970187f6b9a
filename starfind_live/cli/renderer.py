"""Terminal rendering engine for STARFIND LIVE CLI.

Renders adaptive split-screen display with region status (left),
live wave feed (right), and scrolling event stream (bottom).
"""

import os
import sys
import time
from typing import List, Optional

from ..models.board_state import RegionView
from ..models.events import WaveRecord, WaveTransitionEvent
from ..models.regions import STATUS_ACTIVE, STATUS_UPCOMING
from .layout import calculate_layout
from .panels import EventPanel, FeedPanel, RegionPanel


def _get_terminal_size() -> tuple:
    """Get terminal dimensions, with fallback."""
    try:
        size = os.get_terminal_size()
        return size.columns, size.lines
    except (OSError, ValueError):
        return 120, 40


class CLIRenderer:
    """Renders adaptive split-screen terminal display."""

    def __init__(self) -> None:
        self.region_panel = RegionPanel()
        self.feed_panel = FeedPanel()
        self.event_panel = EventPanel()

    def add_transition(self, event: WaveTransitionEvent) -> None:
        """Add a promotion/expiry to the event stream."""
        self.event_panel.add_transition(event)

    def add_wave_set(self, records: List[WaveRecord], timestamp: int) -> None:
        """Add a parsed batch summary to the event stream."""
        self.event_panel.add_wave_set(records, timestamp)

    def add_info(self, message: str, timestamp: Optional[int] = None) -> None:
        """Add informational message to event stream."""
        self.event_panel.add_info(message, timestamp)

    def render_frame(self, view: RegionView, current_time: int) -> str:
        """Render a complete display frame.

        Args:
            view: Current region view.
            current_time: Current timestamp.

        Returns:
            Complete frame as a single string ready for terminal output.
        """
        cols, rows = _get_terminal_size()
        layout = calculate_layout(cols, rows)

        output_lines: List[str] = []

        # Header
        output_lines.extend(self._render_header(view, current_time, cols))

        # Side-by-side panels: regions (left) | feed (right)
        panel_height = max(layout["region_panel"], layout["feed_panel"])
        left_width = cols // 2 - 1
        right_width = cols - left_width - 3  # 3 for border + separator

        region_lines = self.region_panel.render(view, current_time, panel_height)
        feed_lines = self.feed_panel.render(view, current_time, panel_height)

        # Top border
        output_lines.append(
            "+" + "-" * left_width + "+" + "-" * right_width + "+"
        )

        # Combine side-by-side
        for i in range(panel_height):
            left = region_lines[i] if i < len(region_lines) else ""
            right = feed_lines[i] if i < len(feed_lines) else ""
            left = left[:left_width].ljust(left_width)
            right = right[:right_width].ljust(right_width)
            output_lines.append(f"|{left}|{right}|")

        # Middle border
        output_lines.append(
            "+" + "-" * left_width + "+" + "-" * right_width + "+"
        )

        # Event stream (full width)
        event_lines = self.event_panel.render(layout["event_stream"])
        event_width = cols - 2
        output_lines.append("+" + "-" * event_width + "+")
        for line in event_lines:
            output_lines.append("|" + line[:event_width].ljust(event_width) + "|")
        output_lines.append("+" + "-" * event_width + "+")

        return "\n".join(output_lines)

    def _render_header(self, view: RegionView, current_time: int, cols: int) -> List[str]:
        """Render the header bar."""
        active = sum(1 for s in view.status.values() if s == STATUS_ACTIVE)
        upcoming = sum(1 for s in view.status.values() if s == STATUS_UPCOMING)
        clock = time.strftime("%H:%M:%S", time.localtime(current_time))

        header_text = (
            f" STARFIND LIVE | {clock} | Regions active: {active} | upcoming: {upcoming} "
        )
        border = "=" * (cols - 2)

        return [
            "+" + border + "+",
            "|" + header_text.ljust(cols - 2) + "|",
            "+" + border + "+",
            "",
        ]

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()

    def display(self, frame: str) -> None:
        """Write frame to terminal (move cursor to top, overwrite)."""
        sys.stdout.write("\033[H")
        sys.stdout.write(frame)
        sys.stdout.flush()

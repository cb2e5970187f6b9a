"""Main event processing loop for STARFIND LIVE.

Orchestrates all stages in real-time:
1. Poll Discord -> flattened announcement texts
2. Parse text -> WaveRecords
3. Ingest batch into the wave board (full replace)
4. Tick the lifecycle engine on a fixed interval (promote/expire)
5. Log events to JSONL
6. Aggregate regions and update CLI renderer
"""

import time
from typing import Any, Dict, Iterable, List, Optional

from ..cli.renderer import CLIRenderer
from ..config.thresholds import TICK_INTERVAL
from ..core.announcement_parser import parse_announcement_text
from ..core.record_ingestion import RecordValidationError, normalize_record
from ..core.region_aggregator import RegionAggregator
from ..core.wave_clock import WaveClock
from ..core.wave_lifecycle import WaveLifecycleEngine
from ..integrations.discord_client import DiscordClient
from ..logging.session_logger import SessionLogger
from ..models.board_state import RegionView, WaveBoard
from ..models.events import WaveRecord, WaveTransitionEvent


class LiveProcessor:
    """Owns the wave board and drives parse, tick and display."""

    def __init__(
        self,
        discord_client: Optional[DiscordClient],
        session_logger: SessionLogger,
        cli_renderer: CLIRenderer,
        refresh_rate: float = 5.0,
        tick_interval: int = TICK_INTERVAL,
        clock: Optional[WaveClock] = None,
    ) -> None:
        self.discord_client = discord_client
        self.session_logger = session_logger
        self.renderer = cli_renderer
        self.refresh_rate = refresh_rate
        self.tick_interval = tick_interval

        self.clock = clock or WaveClock()

        self.engine = WaveLifecycleEngine()
        self.aggregator = RegionAggregator()
        self.board = WaveBoard()

        # Tracking
        self._last_refresh: Optional[int] = None
        self._last_tick: Optional[int] = None
        self._running = False

    def run(self) -> None:
        """Main event loop: poll -> parse -> tick -> display.

        Runs until interrupted (Ctrl+C) or shutdown() is called.
        """
        self._running = True
        self.session_logger.log_session_start({
            "channels": self.discord_client.channel_ids if self.discord_client else [],
            "refresh_rate": self.refresh_rate,
            "tick_interval": self.tick_interval,
            "mode": "live" if self.discord_client else "demo",
        })

        self.renderer.clear_screen()
        self.renderer.add_info("Session started, watching for wave announcements...", self.clock.now())

        try:
            while self._running:
                if self.discord_client:
                    for text in self.discord_client.poll_texts():
                        self.process_text(text)

                self.maybe_tick()

                if self._should_refresh():
                    self._refresh_display()

                time.sleep(self.refresh_rate)

        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    def run_demo(self, demo_texts: List[str]) -> None:
        """Run with pre-built announcement texts instead of live Discord polling.

        Parses every text, refreshes the display, then idles with ticks
        running so promotions and expiries still show up.
        """
        self._running = True
        self.session_logger.log_session_start({
            "mode": "demo",
            "tick_interval": self.tick_interval,
        })

        self.renderer.clear_screen()
        self.renderer.add_info("DEMO MODE - Parsing simulated announcements...", self.clock.now())

        for text in demo_texts:
            self.process_text(text)

        self._refresh_display()

        self.renderer.add_info("DEMO MODE - All announcements parsed. Press Ctrl+C to exit.", self.clock.now())
        self._refresh_display()

        # Idle display loop
        try:
            while self._running:
                time.sleep(1.0)
                self.maybe_tick()
                self._refresh_display()
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    def process_text(self, text: str) -> List[WaveRecord]:
        """Parse one announcement and replace the board with its waves.

        A text with no wave headers leaves the board as it was.

        Returns:
            The parsed records (possibly empty).
        """
        now = self.clock.now()
        self.session_logger.log_announcement(text, now)

        records = parse_announcement_text(text, now=now)
        if not records:
            return records

        self._ingest(records, now)
        return records

    def ingest_wave_set(self, items: Iterable[Dict[str, Any]]) -> List[WaveRecord]:
        """Replace the board with a wave_set payload received from a relay.

        Items that fail validation are skipped and reported on the event
        stream.

        Returns:
            The records that were ingested.
        """
        now = self.clock.now()
        records: List[WaveRecord] = []
        for item in items:
            try:
                records.append(normalize_record(item))
            except RecordValidationError as e:
                self.renderer.add_info(f"Skipped invalid wave: {e}", now)
        self._ingest(records, now)
        return records

    def _ingest(self, records: List[WaveRecord], now: int) -> None:
        self.engine.ingest(self.board, records, now)
        self.session_logger.log_wave_set(records, now)
        self.renderer.add_wave_set(records, now)

    def tick(self) -> List[WaveTransitionEvent]:
        """Run one lifecycle tick at clock-now and report transitions."""
        now = self.clock.now()
        self._last_tick = now
        events = self.engine.tick(self.board, now)
        for event in events:
            self.session_logger.log_transition(event)
            self.renderer.add_transition(event)
        return events

    def maybe_tick(self) -> List[WaveTransitionEvent]:
        """Tick if tick_interval seconds have passed since the last tick."""
        now = self.clock.now()
        if self._last_tick is None or now - self._last_tick >= self.tick_interval:
            return self.tick()
        return []

    def view(self) -> RegionView:
        """Current region status, metadata and wave lists."""
        return self.aggregator.build_view(self.board)

    def _should_refresh(self) -> bool:
        """Check if enough time has elapsed for a display refresh."""
        now = self.clock.now()
        if self._last_refresh is None or now - self._last_refresh >= self.refresh_rate:
            self._last_refresh = now
            return True
        return False

    def _refresh_display(self) -> None:
        """Render and display the current frame at clock-now."""
        frame = self.renderer.render_frame(self.view(), self.clock.now())
        self.renderer.display(frame)

    def shutdown(self) -> None:
        """Clean shutdown: stop the loop, close logger."""
        self._running = False
        self.session_logger.log_session_end("user_shutdown")

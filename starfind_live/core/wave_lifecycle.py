"""Wave lifecycle engine for STARFIND LIVE.

Per-wave state machine:

    upcoming -> current -> (removed)

Promotion fires once the ETA has passed; expiry drops a current wave
EXPIRY_WINDOW seconds after its ETA. Nothing ever moves back to upcoming.
"""

from typing import Iterable, List

from ..config.thresholds import EXPIRY_WINDOW
from ..models.board_state import WaveBoard
from ..models.events import WaveRecord, WaveTransitionEvent


class WaveLifecycleEngine:
    """Ingests parsed batches into a WaveBoard and ages it on each tick."""

    def __init__(self, expiry_window: int = EXPIRY_WINDOW) -> None:
        self.expiry_window = expiry_window

    def ingest(self, board: WaveBoard, records: Iterable[WaveRecord], now: int) -> None:
        """Replace the board contents with a newly parsed batch.

        The newest batch fully replaces both lists; nothing is merged
        across batches. Both lists are swapped in one step so a tick never
        sees a half-replaced board.
        """
        records = list(records)
        upcoming = [r for r in records if r.status == "upcoming"]
        current = [r for r in records if r.status == "current"]
        board.upcoming, board.current = upcoming, current
        board.last_ingest_at = now

    def tick(self, board: WaveBoard, now: int) -> List[WaveTransitionEvent]:
        """Promote due upcoming waves, then expire stale current waves.

        Args:
            board: Engine state to age in place.
            now: Current time (epoch seconds).

        Returns:
            Transition events in the order they were applied. Empty when
            nothing was due.
        """
        events: List[WaveTransitionEvent] = []

        still_upcoming: List[WaveRecord] = []
        promoted: List[WaveRecord] = []
        for wave in board.upcoming:
            if wave.eta <= now:
                promoted.append(wave.promoted())
            else:
                still_upcoming.append(wave)
        for wave in promoted:
            events.append(WaveTransitionEvent(
                timestamp=now,
                event_type="WAVE_PROMOTED",
                wave=wave,
                details={"late_by_s": now - wave.eta},
            ))
        board.upcoming = still_upcoming
        current = board.current + promoted

        # Inclusive: a wave exactly expiry_window past its ETA is removed
        kept: List[WaveRecord] = []
        for wave in current:
            if wave.eta + self.expiry_window <= now:
                events.append(WaveTransitionEvent(
                    timestamp=now,
                    event_type="WAVE_EXPIRED",
                    wave=wave,
                    details={"age_s": now - wave.eta},
                ))
            else:
                kept.append(wave)
        board.current = kept
        board.last_tick_at = now

        return events

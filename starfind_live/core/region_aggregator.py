"""Region aggregation for STARFIND LIVE.

Derives per-region status and summary metadata from the live board.
Recomputed from scratch on every call; holds no state.
"""

from typing import Dict, Iterable, Tuple

from ..models.board_state import RegionView, WaveBoard
from ..models.events import WaveRecord
from ..models.regions import (
    STATUS_ACTIVE,
    STATUS_IDLE,
    STATUS_UPCOMING,
    Region,
    RegionMeta,
)


class RegionAggregator:
    """Builds RegionView snapshots for display."""

    def region_status(
        self,
        upcoming: Iterable[WaveRecord],
        current: Iterable[WaveRecord],
    ) -> Dict[Region, str]:
        """Status per region: active beats upcoming beats idle."""
        status = {region: STATUS_IDLE for region in Region}
        for wave in current:
            status[wave.region] = STATUS_ACTIVE
        for wave in upcoming:
            if status[wave.region] == STATUS_IDLE:
                status[wave.region] = STATUS_UPCOMING
        return status

    def region_meta(
        self,
        upcoming: Iterable[WaveRecord],
        current: Iterable[WaveRecord],
    ) -> Dict[Region, RegionMeta]:
        """Largest size and earliest absolute ETA per region."""
        meta = {region: RegionMeta() for region in Region}
        for wave in [*upcoming, *current]:
            m = meta[wave.region]
            if m.top_size is None or wave.size > m.top_size:
                m.top_size = wave.size
            if m.soon_eta is None or wave.eta < m.soon_eta:
                m.soon_eta = wave.eta
        return meta

    def aggregate(
        self,
        upcoming: Iterable[WaveRecord],
        current: Iterable[WaveRecord],
    ) -> Tuple[Dict[Region, str], Dict[Region, RegionMeta]]:
        """Return (status, meta) for the given live collections."""
        upcoming = list(upcoming)
        current = list(current)
        return (
            self.region_status(upcoming, current),
            self.region_meta(upcoming, current),
        )

    def build_view(self, board: WaveBoard) -> RegionView:
        """Snapshot the board, copying the lists so the view stays read-only."""
        status, meta = self.aggregate(board.upcoming, board.current)
        return RegionView(
            status=status,
            meta=meta,
            upcoming=list(board.upcoming),
            current=list(board.current),
        )

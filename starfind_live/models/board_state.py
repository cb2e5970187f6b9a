"""Live wave board state for STARFIND LIVE."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .events import WaveRecord
from .regions import Region, RegionMeta


@dataclass
class WaveBoard:
    """Owned engine state: the two live collections.

    Created at startup, mutated only by WaveLifecycleEngine.ingest/tick,
    discarded at shutdown. Both lists keep insertion order.
    """

    upcoming: List[WaveRecord] = field(default_factory=list)
    current: List[WaveRecord] = field(default_factory=list)

    last_ingest_at: Optional[int] = None
    last_tick_at: Optional[int] = None

    def all_waves(self) -> List[WaveRecord]:
        """Upcoming then current, the order the aggregator sees them."""
        return [*self.upcoming, *self.current]

    def is_empty(self) -> bool:
        return not self.upcoming and not self.current


@dataclass
class RegionView:
    """Read-only snapshot handed to the display collaborator."""

    status: Dict[Region, str]
    meta: Dict[Region, RegionMeta]
    upcoming: List[WaveRecord] = field(default_factory=list)
    current: List[WaveRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "status": {r.value: s for r, s in self.status.items()},
            "meta": {r.value: m.to_dict() for r, m in self.meta.items()},
            "upcoming": [w.to_dict() for w in self.upcoming],
            "current": [w.to_dict() for w in self.current],
        }

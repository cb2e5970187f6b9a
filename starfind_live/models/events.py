"""Event data models for STARFIND LIVE."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Literal

from .regions import Region


def format_iso(ts: int) -> str:
    """Format epoch seconds as a UTC ISO-8601 string with a Z suffix."""
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


@dataclass(frozen=True)
class WaveRecord:
    """One detected wave (shooting star) at a world.

    Records are immutable; promotion produces a copy with a new status.
    """

    world: int
    size: int  # Tier 1..10
    region: Region
    eta: int  # Unix epoch seconds, absolute
    status: Literal["upcoming", "current"]

    def promoted(self) -> "WaveRecord":
        """Return a copy marked current."""
        return replace(self, status="current")

    def to_dict(self) -> dict:
        return {
            "world": self.world,
            "size": self.size,
            "region": self.region.value,
            "eta": self.eta,
            "etaISO": format_iso(self.eta),
            "status": self.status,
        }


@dataclass
class WaveTransitionEvent:
    """Lifecycle transition of a single wave.

    PROMOTED: upcoming -> current once the ETA has passed.
    EXPIRED: current -> removed once the expiry window has passed.
    """

    timestamp: int
    event_type: Literal["WAVE_PROMOTED", "WAVE_EXPIRED"]
    wave: WaveRecord
    details: dict = field(default_factory=dict)

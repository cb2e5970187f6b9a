"""Canonical region models for STARFIND LIVE."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

# Region display status values
STATUS_IDLE = "idle"
STATUS_UPCOMING = "upcoming"
STATUS_ACTIVE = "active"


class Region(str, Enum):
    """The 7 fixed map groupings. Definition order is display order."""

    ASGARNIA = "Asgarnia"
    KANDARIN = "Kandarin"
    KHARIDIAN_DESERT = "Kharidian Desert"
    MISTHALIN = "Misthalin"
    PISC_GNOME_TIRANNWN = "Pisc/Gnome/Tirannwn"
    FREM_LUNAR = "Frem/Lunar"
    WILDERNESS = "Wilderness"


@dataclass
class RegionMeta:
    """Summary of the live waves in one region."""

    top_size: Optional[int] = None
    soon_eta: Optional[int] = None  # Earliest absolute ETA (epoch seconds)

    def to_dict(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        if self.top_size is not None:
            out["topSize"] = self.top_size
        if self.soon_eta is not None:
            out["soonEta"] = self.soon_eta
        return out

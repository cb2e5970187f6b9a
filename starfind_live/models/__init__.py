"""Data models for STARFIND LIVE."""
from .regions import Region, RegionMeta, STATUS_ACTIVE, STATUS_IDLE, STATUS_UPCOMING
from .events import WaveRecord, WaveTransitionEvent
from .board_state import RegionView, WaveBoard

__all__ = [
    "Region",
    "RegionMeta",
    "STATUS_ACTIVE",
    "STATUS_IDLE",
    "STATUS_UPCOMING",
    "WaveRecord",
    "WaveTransitionEvent",
    "RegionView",
    "WaveBoard",
]

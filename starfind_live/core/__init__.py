"""Core logic for STARFIND LIVE."""
from .time_resolver import resolve_relative_minutes
from .region_classifier import classify_region
from .announcement_parser import parse_announcement_text
from .record_ingestion import RecordValidationError, normalize_record
from .wave_clock import WaveClock
from .wave_lifecycle import WaveLifecycleEngine
from .region_aggregator import RegionAggregator

__all__ = [
    "resolve_relative_minutes",
    "classify_region",
    "parse_announcement_text",
    "RecordValidationError",
    "normalize_record",
    "WaveClock",
    "WaveLifecycleEngine",
    "RegionAggregator",
]

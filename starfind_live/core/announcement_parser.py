"""Announcement text parsing for STARFIND LIVE.

Turns one flattened announcement blob into WaveRecords. Announcements
look like:

    Size 10 • World 75
    Asgarnia • 33 minutes ago (06:51)

Each header line is paired with the line right after it. Lines that are
not headers are skipped, so headers may be interleaved with other text.
"""

import re
import time
from typing import List, Optional, Tuple

from ..config.thresholds import MAX_WAVE_SIZE, MAX_WORLD, MIN_WAVE_SIZE, MIN_WORLD, MINUTE
from ..models.events import WaveRecord
from .region_classifier import classify_region
from .time_resolver import resolve_relative_minutes

HEADER_PATTERN = re.compile(
    r"Size\s+(\d{1,2})\s*[•·|\-]\s*World\s*(\d{1,3})(?!\d)", re.IGNORECASE
)
_DETAIL_SEPARATOR = re.compile(r"[•·]")


def split_lines(text: str) -> List[str]:
    """Split into trimmed, non-empty lines, preserving order."""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def parse_header(line: str) -> Optional[Tuple[int, int]]:
    """Match a "Size N • World W" header.

    Returns:
        (size, world), or None if the line is not a header or its values
        fall outside the accepted size/world bounds.
    """
    m = HEADER_PATTERN.search(line)
    if not m:
        return None
    size = int(m.group(1))
    world = int(m.group(2))
    if not (MIN_WAVE_SIZE <= size <= MAX_WAVE_SIZE):
        return None
    if not (MIN_WORLD <= world <= MAX_WORLD):
        return None
    return size, world


def split_detail(line: str) -> Tuple[str, str]:
    """Split a detail line into (region_part, time_part), empty when missing."""
    parts = [p.strip() for p in _DETAIL_SEPARATOR.split(line or "")]
    region_part = parts[0] if parts else ""
    time_part = parts[1] if len(parts) > 1 else ""
    return region_part, time_part


def parse_announcement_text(text: str, now: Optional[int] = None) -> List[WaveRecord]:
    """Parse a flattened announcement into wave records.

    Never raises; text without headers yields an empty list. A header
    directly followed by another header gets an empty detail line (default
    region, no offset) instead of swallowing the next header.

    Args:
        text: Newline-joined message body plus embed text.
        now: Reference time (epoch seconds). Defaults to wallclock.

    Returns:
        WaveRecords in header-encounter order.
    """
    if now is None:
        now = int(time.time())

    lines = split_lines(text)
    items: List[WaveRecord] = []

    for i, line in enumerate(lines):
        header = parse_header(line)
        if header is None:
            continue
        size, world = header

        detail = lines[i + 1] if i + 1 < len(lines) else ""
        if HEADER_PATTERN.search(detail):
            detail = ""

        region_part, time_part = split_detail(detail)
        region = classify_region(region_part)
        rel_min = resolve_relative_minutes(time_part)

        # Unresolvable offset means "now"
        eta = now + (rel_min or 0) * MINUTE
        status = "current" if rel_min is not None and rel_min <= 0 else "upcoming"

        items.append(WaveRecord(
            world=world,
            size=size,
            region=region,
            eta=eta,
            status=status,
        ))

    return items

"""Adaptive layout calculation for STARFIND LIVE CLI.

Calculates panel heights based on terminal dimensions with
breakpoints for large/medium/small/minimal modes.
"""

from typing import Dict

# Fixed allocations
HEADER_ROWS = 4
REGION_ROWS = 10  # Title + blank + 7 regions + legend
MIN_EVENT_ROWS = 5
BORDER_OVERHEAD = 6  # Top/bottom borders + separators


def calculate_layout(cols: int, rows: int) -> Dict[str, int]:
    """Calculate panel heights based on terminal dimensions.

    The region panel (left) always shows all 7 regions; the feed panel
    (right) grows with the terminal.

    Args:
        cols: Terminal width in columns.
        rows: Terminal height in rows.

    Returns:
        Dict with keys: header, region_panel, feed_panel, event_stream, cols.
    """
    available = rows - HEADER_ROWS - BORDER_OVERHEAD

    if rows >= 50:
        feed_h = 24
    elif rows >= 40:
        feed_h = 18
    elif rows >= 30:
        feed_h = 14
    else:
        feed_h = REGION_ROWS

    panel_h = max(REGION_ROWS, feed_h)
    event_h = max(MIN_EVENT_ROWS, available - panel_h)

    # Small terminal: give the event stream its minimum back from the feed
    if panel_h + event_h > available + MIN_EVENT_ROWS:
        feed_h = max(REGION_ROWS, available - MIN_EVENT_ROWS)
        event_h = MIN_EVENT_ROWS

    return {
        "header": HEADER_ROWS,
        "region_panel": REGION_ROWS,
        "feed_panel": feed_h,
        "event_stream": event_h,
        "cols": cols,
    }

"""Injected time source for STARFIND LIVE.

Every "now" the parser, lifecycle engine and display use comes from one
WaveClock, so replays and tests can drive time deterministically.

Live mode: returns wallclock epoch seconds.
Manual mode: returns a settable time, advanced explicitly.
"""

import time
from typing import Optional


class WaveClock:
    """Wallclock or manually driven epoch-seconds clock."""

    def __init__(self, manual: bool = False, start: Optional[int] = None) -> None:
        self._manual = manual
        self._manual_now: int = int(time.time()) if start is None else int(start)

    def now(self) -> int:
        """Return the current time.

        Returns:
            Wallclock seconds in live mode, the set time in manual mode.
        """
        if self._manual:
            return self._manual_now
        return int(time.time())

    def set(self, ts: int) -> None:
        """Jump a manual clock to an absolute time.

        Raises:
            RuntimeError: If the clock is in live mode.
        """
        if not self._manual:
            raise RuntimeError("Cannot set a live clock")
        self._manual_now = int(ts)

    def advance(self, seconds: int) -> int:
        """Move a manual clock forward and return the new time."""
        self.set(self._manual_now + int(seconds))
        return self._manual_now

    @property
    def manual(self) -> bool:
        """True when time only moves via set()/advance()."""
        return self._manual

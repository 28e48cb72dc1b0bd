"""Time series: an ordered sequence of candles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterator, List, Optional

from techan.candle import Candle


@dataclass
class TimeSeries:
    """Candles kept in chronological order."""

    candles: List[Candle] = field(default_factory=list)

    def add_candle(self, candle: Candle) -> bool:
        """Append ``candle`` if it does not start before the last candle ends.

        Returns True if the candle was added.
        """
        if candle is None:
            raise ValueError("error adding Candle: candle cannot be None")
        last = self.last_candle()
        if last is None or candle.period.since(last.period) >= timedelta(0):
            self.candles.append(candle)
            return True
        return False

    def get_candle(self, index: int) -> Candle:
        """The candle at ``index``."""
        if index < 0:
            raise IndexError(f"candle index out of range: {index}")
        return self.candles[index]

    def first_candle(self) -> Optional[Candle]:
        """The first candle, or None when empty."""
        return self.candles[0] if self.candles else None

    def last_candle(self) -> Optional[Candle]:
        """The last candle, or None when empty."""
        return self.candles[-1] if self.candles else None

    def last_index(self) -> int:
        """Index of the last candle (-1 when empty)."""
        return len(self.candles) - 1

    def __len__(self) -> int:
        return len(self.candles)

    def __iter__(self) -> Iterator[Candle]:
        return iter(self.candles)
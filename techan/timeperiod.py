"""Time periods with a start and an end."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

SIMPLE_DATE_TIME_FORMAT = "%m/%d/%YT%H:%M:%S"
SIMPLE_DATE_FORMAT = "%m/%d/%Y"

# Rendered widths of the two formats, e.g. "01/02/2006T15:04:05" and "01/02/2006".
_DATE_TIME_WIDTH = 19
_DATE_WIDTH = 10


class TimePeriodParseError(ValueError):
    """Raised when a time range string cannot be parsed."""


@dataclass(frozen=True)
class TimePeriod:
    """A span of time between ``start`` and ``end``."""

    start: datetime
    end: datetime

    @classmethod
    def spanning(cls, start: datetime, duration: timedelta) -> "TimePeriod":
        """A period starting at ``start`` and lasting ``duration``."""
        return cls(start, start + duration)

    def length(self) -> timedelta:
        """Duration of the period."""
        return self.end - self.start

    def since(self, other: "TimePeriod") -> timedelta:
        """Time elapsed between the end of ``other`` and the start of this period."""
        return self.start - other.end

    def format(self, layout: str) -> str:
        """Render as ``start -> end`` using a strftime layout."""
        return f"{self.start.strftime(layout)} -> {self.end.strftime(layout)}"

    def advance(self, iterations: int) -> "TimePeriod":
        """Shift the period forwards (or backwards) by whole multiples of its length."""
        shift = self.length() * iterations
        return TimePeriod(self.start + shift, self.end + shift)

    def __str__(self) -> str:
        return self.format(SIMPLE_DATE_TIME_FORMAT)


def _parse_time(text: str, layout: str) -> datetime:
    try:
        return datetime.strptime(text, layout).replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise TimePeriodParseError(f"could not parse time string {text}") from exc


def parse(timerange: str) -> TimePeriod:
    """Parse ``START:END`` or ``START:`` (open-ended, up to now).

    Both parts use either ``SIMPLE_DATE_TIME_FORMAT`` or ``SIMPLE_DATE_FORMAT``.
    """
    size = len(timerange)
    if size == _DATE_TIME_WIDTH * 2 + 1:
        layout, width, has_end = SIMPLE_DATE_TIME_FORMAT, _DATE_TIME_WIDTH, True
    elif size == _DATE_TIME_WIDTH + 1:
        layout, width, has_end = SIMPLE_DATE_TIME_FORMAT, _DATE_TIME_WIDTH, False
    elif size == _DATE_WIDTH * 2 + 1:
        layout, width, has_end = SIMPLE_DATE_FORMAT, _DATE_WIDTH, True
    elif size == _DATE_WIDTH + 1:
        layout, width, has_end = SIMPLE_DATE_FORMAT, _DATE_WIDTH, False
    else:
        raise TimePeriodParseError(f"could not parse timerange string {timerange}")

    start = _parse_time(timerange[:width], layout)
    if has_end:
        end = _parse_time(timerange[width + 1 :], layout)
    else:
        end = datetime.now().astimezone()
    return TimePeriod(start, end)
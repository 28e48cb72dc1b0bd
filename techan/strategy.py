"""Strategies: when to enter and when to exit a position."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from techan.rules import Rule
from techan.tradingrecord import TradingRecord


class Strategy(ABC):
    """Desired entry and exit behaviour."""

    @abstractmethod
    def should_enter(self, index: int, record: Optional[TradingRecord]) -> bool:
        """True if a position should be opened at ``index``."""

    @abstractmethod
    def should_exit(self, index: int, record: Optional[TradingRecord]) -> bool:
        """True if the open position should be closed at ``index``."""


@dataclass
class RuleStrategy(Strategy):
    """A strategy driven by an entry rule, an exit rule and an unstable period.

    No position is entered or exited at an index up to and including
    ``unstable_period``.
    """

    entry_rule: Optional[Rule] = None
    exit_rule: Optional[Rule] = None
    unstable_period: int = 0

    def should_enter(self, index: int, record: Optional[TradingRecord]) -> bool:
        """True past the unstable period, with no position held, when the entry rule holds."""
        if self.entry_rule is None:
            raise ValueError("entry rule cannot be None")
        if index > self.unstable_period and record.current_position.is_new():
            return self.entry_rule.is_satisfied(index, record)
        return False

    def should_exit(self, index: int, record: Optional[TradingRecord]) -> bool:
        """True past the unstable period, with a position open, when the exit rule holds."""
        if self.exit_rule is None:
            raise ValueError("exit rule cannot be None")
        if index > self.unstable_period and record.current_position.is_open():
            return self.exit_rule.is_satisfied(index, record)
        return False
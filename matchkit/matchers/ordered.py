"""Matchers for ordered comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from matchkit.reporting import comparator, failure_report


@dataclass
class GreaterThanMatcher:
    """Matches a value greater than the expected value."""

    expected: Any

    def match(self, got: Any, *args: Any) -> bool:
        cmp = comparator(args)
        if cmp is not None:
            return bool(cmp(got, self.expected))
        return got > self.expected

    def on_test_failure(self, got: Any, *args: Any) -> list[str]:
        return failure_report("greater than", self.expected, got, *args)


@dataclass
class LessThanMatcher:
    """Matches a value less than the expected value."""

    expected: Any

    def match(self, got: Any, *args: Any) -> bool:
        cmp = comparator(args)
        if cmp is not None:
            return bool(cmp(self.expected, got))
        return got < self.expected

    def on_test_failure(self, got: Any, *args: Any) -> list[str]:
        return failure_report("less than", self.expected, got, *args)
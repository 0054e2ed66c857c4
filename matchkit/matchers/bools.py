"""Matcher for boolean values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from matchkit.reporting import ToNotMatch, is_set, value_as_string


@dataclass(frozen=True)
class BooleanMatcher:
    """Matches a bool against an expected bool."""

    expected: bool

    def match(self, got: bool, *args: Any) -> bool:
        return self.expected == got

    def on_test_failure(self, got: bool, *args: Any) -> str:
        if is_set(args, ToNotMatch(True)):
            return f"did not expect {value_as_string(self.expected)}"
        return f"expected {value_as_string(self.expected)}, got {value_as_string(bool(got))}"
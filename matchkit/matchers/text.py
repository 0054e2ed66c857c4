"""Matchers for strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from matchkit.errors import InvalidArgumentError
from matchkit.reporting import CaseSensitive, ToNotMatch, is_set, value_as_string


@dataclass
class ContainsMatcher:
    """Matches a string containing the expected substring."""

    expected: str

    def __post_init__(self) -> None:
        if not self.expected:
            raise InvalidArgumentError("a non-empty string is required")

    def match(self, got: str, *args: Any) -> bool:
        if is_set(args, CaseSensitive(False)):
            return self.expected.lower() in got.lower()
        return self.expected in got

    def on_test_failure(self, got: str, *args: Any) -> list[str]:
        if is_set(args, ToNotMatch(True)):
            return [
                "expected: string not containing: " + value_as_string(self.expected, *args),
                "got     : " + value_as_string(got, *args),
                "             " + "^" * len(self.expected),
            ]
        return [
            "expected: string containing: " + value_as_string(self.expected, *args),
            "got     : " + value_as_string(got, *args),
        ]


@dataclass
class RegexMatcher:
    """Matches a string containing a match for a regular expression."""

    expected: Any

    def __post_init__(self) -> None:
        pattern = getattr(self.expected, "pattern", self.expected)
        if not pattern:
            raise InvalidArgumentError("a regular expression is required")
        if isinstance(self.expected, str):
            try:
                self.expected = re.compile(self.expected)
            except re.error as exc:
                raise InvalidArgumentError(str(exc)) from exc

    def match(self, got: str, *args: Any) -> bool:
        return self.expected.search(got) is not None

    def on_test_failure(self, got: str, *args: Any) -> list[str]:
        pattern = value_as_string(self.expected.pattern, *args)
        if is_set(args, ToNotMatch(True)):
            found = self.expected.search(got)
            return [
                "expected: string with no match for: " + pattern,
                "got     : " + value_as_string(got, *args),
                "matched : " + value_as_string(found.group(0) if found else "", *args),
            ]
        return [
            "expected: string containing match for: " + pattern,
            "got     : " + value_as_string(got, *args),
        ]
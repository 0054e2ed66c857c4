"""Equality matchers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from matchkit.reporting import ToNotMatch, comparator, is_set, value_as_string


def _describe(value: Any, *args: Any) -> str:
    if value is None:
        return "nil"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return repr(value)
    return value_as_string(value, *args)


def _equal(expected: Any, got: Any, args: tuple) -> bool:
    method = getattr(expected, "equal", None)
    if callable(method):
        return bool(method(got))
    cmp = comparator(args)
    if cmp is not None:
        return bool(cmp(expected, got))
    return expected == got


@dataclass
class DeepMatcher:
    """Matches a value structurally equal to the expected value."""

    expected: Any

    def match(self, got: Any, *args: Any) -> bool:
        return _equal(self.expected, got, args)

    def on_test_failure(self, got: Any, *args: Any) -> list[str]:
        if is_set(args, ToNotMatch(True)):
            return ["expected to not equal: " + _describe(got, *args)]
        ef = _describe(self.expected, *args)
        gf = _describe(got, *args)
        if len(ef) < 10 and len(gf) < 10:
            return [f"expected {ef}, got {gf}"]
        return [f"expected: {ef}", f"got     : {gf}"]


@dataclass
class EqualMatcher(DeepMatcher):
    """Matches a value equal to the expected value."""

    def match(self, got: Any, *args: Any) -> bool:
        return _equal(self.expected, got, args)

    def on_test_failure(self, got: Any, *args: Any) -> list[str]:
        return DeepMatcher.on_test_failure(self, got, *args)
"""Matchers for context mappings (any mapping, including contextvars.Context)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from matchkit.reporting import QuotedStrings, ToNotMatch, comparator, is_set, value_as_string


def _typed(value: Any) -> str:
    return f"{type(value).__name__}({value_as_string(value, QuotedStrings(False))})"


@dataclass
class KeyMatcher:
    """Matches a context holding a value for the expected key."""

    expected: Any

    def match(self, ctx: Mapping, *args: Any) -> bool:
        return ctx.get(self.expected) is not None

    def on_test_failure(self, *args: Any) -> list[str]:
        if is_set(args, ToNotMatch(True)):
            return [
                f"unexpected key: {_typed(self.expected)}",
                "  key should not be present in context",
            ]
        return [
            f"expected key: {_typed(self.expected)}",
            "  key not present in context",
        ]


@dataclass
class ValueMatcher:
    """Matches a context holding the expected value for a key."""

    key: Any
    expected: Any

    def match(self, ctx: Mapping, *args: Any) -> bool:
        value = ctx.get(self.key)
        if value is None or not isinstance(value, type(self.expected)):
            return False
        cmp = comparator(args)
        if cmp is not None:
            return bool(cmp(value, self.expected))
        return value == self.expected

    def on_test_failure(self, ctx: Mapping, *args: Any) -> list[str]:
        got = ctx.get(self.key)
        if got is None:
            return [f"context value: {_typed(self.key)}:", "  key not present in context"]

        result = [f"context value: {_typed(self.key)}"]
        if is_set(args, ToNotMatch(True)):
            result.append(
                "  key was not expected to have value: " + value_as_string(self.expected, *args)
            )
            return result

        got_type = type(got).__name__
        exp_type = type(self.expected).__name__
        if got_type != exp_type:
            return result + ["  expected value of type: " + exp_type, "  got: " + got_type]
        return result + [
            "  expected: " + value_as_string(self.expected, *args),
            "  got     : " + value_as_string(got, *args),
        ]
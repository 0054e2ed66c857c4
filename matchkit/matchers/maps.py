"""Matchers for mappings."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from matchkit.reporting import (
    AnyOrder,
    CaseSensitive,
    PrefixInlineWithFirstItem,
    ToNotMatch,
    append_to_report,
    comparator,
    is_set,
    value_as_string,
)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _append_map(report: list[str], prefix: str, mapping: Mapping, args: tuple) -> list[str]:
    """Return ``report`` extended with the entries of ``mapping``, sorted by rendered key."""
    if not mapping:
        return report + [prefix + " <empty map>"]

    entries = sorted(
        ((value_as_string(k, *args), v) for k, v in mapping.items()),
        key=lambda entry: entry[0],
    )
    result = report + [prefix]
    inline = (*args, PrefixInlineWithFirstItem(True))
    for key, value in entries:
        if value is None or _is_sequence(value):
            result = append_to_report(result, value, f"  {key} =>", *inline)
        else:
            result.append(f"  {key} => {value_as_string(value, *args)}")
    return result


def _sequences_equal(a: Sequence | None, b: Sequence | None, args: tuple) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if len(a) != len(b):
        return False
    if not a:
        return True

    eq = operator.eq
    if isinstance(a[0], str) and is_set(args, CaseSensitive(False)):

        def eq(x: Any, y: Any) -> bool:
            return str(x).lower() == str(y).lower()

    if not is_set(args, AnyOrder()):
        return all(eq(x, y) for x, y in zip(a, b))

    matched: set[int] = set()
    for x in a:
        for j, y in enumerate(b):
            if j not in matched and eq(x, y):
                matched.add(j)
                break
    return len(matched) == len(a)


def _values_equal(expected: Any, got: Any, args: tuple) -> bool:
    method = getattr(expected, "equal", None)
    if callable(method):
        return bool(method(got))

    cmp = comparator(args)
    if cmp is None and (_is_sequence(expected) or _is_sequence(got)):
        return _sequences_equal(expected, got, args)

    if (
        isinstance(expected, str)
        and isinstance(got, str)
        and is_set(args, CaseSensitive(False))
    ):
        expected, got = expected.lower(), got.lower()

    if cmp is not None:
        return bool(cmp(expected, got))
    return expected == got


def _contains_map(got: Mapping, wanted: Mapping, args: tuple) -> bool:
    if not wanted:
        return not got
    return all(
        key in got and _values_equal(value, got[key], args)
        for key, value in wanted.items()
    )


@dataclass
class ContainsMapMatcher:
    """Matches a mapping holding every entry of the expected mapping."""

    expected: Mapping

    def match(self, got: Mapping, *args: Any) -> bool:
        if len(self.expected) > len(got):
            return False
        return _contains_map(got, self.expected, args)

    def on_test_failure(self, got: Mapping, *args: Any) -> list[str]:
        if is_set(args, ToNotMatch(True)):
            return _append_map([], "expected: map not containing:", self.expected, args)
        result = _append_map([], "expected: map containing:", self.expected, args)
        return _append_map(result, "got:", got, args)


@dataclass
class EqualMapMatcher:
    """Matches a mapping with exactly the entries of the expected mapping."""

    expected: Mapping

    def match(self, got: Mapping, *args: Any) -> bool:
        if len(self.expected) != len(got):
            return False
        return _contains_map(got, self.expected, args)

    def on_test_failure(self, got: Mapping, *args: Any) -> list[str]:
        inverted = is_set(args, ToNotMatch(True))
        if not self.expected and inverted:
            return ["unexpected: <empty map>"]
        if not self.expected:
            result = _append_map([], "expected:", self.expected, args)
            return _append_map(result, "got:", got, args)
        if inverted:
            return _append_map([], "expected: map not equal to:", self.expected, args)
        result = _append_map([], "expected map:", self.expected, args)
        return _append_map(result, "got:", got, args)
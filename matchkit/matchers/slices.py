"""Matchers for lists and other sequences."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from matchkit.reporting import (
    CaseSensitive,
    ExactOrder,
    ToNotMatch,
    append_to_report,
    comparator,
    is_set,
    value_as_string,
)

Compare = Callable[[Any, Any], bool]


def _compare_func(args: tuple) -> Compare:
    cmp = comparator(args)
    return cmp if cmp is not None else operator.eq


def _find(items: Sequence[Any], target: Any, start: int, cmp: Compare) -> int:
    """Index of the first item at or after ``start`` matching ``target``, or -1."""
    return next(
        (i for i, item in enumerate(items[start:], start) if cmp(item, target)),
        -1,
    )


def _type_name(got: Sequence[Any], *hints: Any) -> str:
    """Describe a sequence type, e.g. ``list[int]``, for failure reports."""
    samples = [*list(got)[:1], *hints]
    container = type(got).__name__
    if samples:
        return f"{container}[{type(samples[0]).__name__}]"
    return container


def contains_items(items: Sequence[Any], target: Sequence[Any], cmp: Compare) -> bool:
    """True if ``items`` holds every element of ``target``, in any order.

    Duplicates in ``target`` must be matched by as many duplicates in ``items``.
    """
    remaining = list(target)
    for item in items:
        for i, wanted in enumerate(remaining):
            if cmp(item, wanted):
                del remaining[i]
                break
    return not remaining


def contains_slice(items: Sequence[Any], target: Sequence[Any], cmp: Compare) -> bool:
    """True if ``items`` holds ``target`` as a contiguous run, in order."""
    items = list(items)
    target = list(target)
    if not target:
        return True
    start = 0
    while (ix := _find(items, target[0], start, cmp)) != -1:
        if ix + len(target) > len(items):
            return False
        if all(cmp(item, wanted) for item, wanted in zip(items[ix:], target)):
            return True
        start = ix + 1
    return False


@dataclass
class ContainsItemMatcher:
    """Matches a sequence holding at least one item equal to the expected item."""

    expected: Any

    def _case_insensitive(self, args: tuple) -> bool:
        return isinstance(self.expected, str) and is_set(args, CaseSensitive(False))

    def match(self, got: Sequence[Any], *args: Any) -> bool:
        cmp = _compare_func(args)
        if self._case_insensitive(args):
            base = cmp

            def cmp(a: Any, b: Any) -> bool:
                return base(a.lower(), b.lower())

        return _find(list(got), self.expected, 0, cmp) != -1

    def on_test_failure(self, got: Sequence[Any], *args: Any) -> list[str]:
        cond = "not containing" if is_set(args, ToNotMatch(True)) else "containing"
        head = (
            f"expected: {_type_name(got, self.expected)} {cond}: "
            + value_as_string(self.expected, *args)
        )
        result = append_to_report([head], list(got), "got:", *args)
        if self._case_insensitive(args):
            result.append("(case insensitive comparison)")
        return result


@dataclass
class ContainsItemsMatcher:
    """Matches a sequence holding all expected items, in any order."""

    expected: Sequence[Any]

    def match(self, got: Sequence[Any], *args: Any) -> bool:
        return contains_items(got, self.expected, _compare_func(args))

    def on_test_failure(self, got: Sequence[Any], *args: Any) -> list[str]:
        cond = "not containing items" if is_set(args, ToNotMatch(True)) else "containing items"
        name = _type_name(got, *list(self.expected)[:1])
        result = append_to_report([], list(self.expected), f"expected: {name} {cond}:", *args)
        return append_to_report(result, list(got), "got:", *args)


@dataclass
class ContainsSliceMatcher:
    """Matches a sequence holding the expected items as a contiguous run."""

    expected: Sequence[Any]

    def match(self, got: Sequence[Any], *args: Any) -> bool:
        return contains_slice(got, self.expected, _compare_func(args))

    def on_test_failure(self, got: Sequence[Any], *args: Any) -> list[str]:
        cond = "not containing slice" if is_set(args, ToNotMatch(True)) else "containing slice"
        name = _type_name(got, *list(self.expected)[:1])
        result = append_to_report([], list(self.expected), f"expected: {name} {cond}:", *args)
        return append_to_report(result, list(got), "got:", *args)


@dataclass
class EqualSliceMatcher:
    """Matches a sequence with the same items as the expected one.

    Order is significant unless ExactOrder(False) or AnyOrder() is given.
    """

    expected: Sequence[Any]

    def match(self, got: Sequence[Any], *args: Any) -> bool:
        got = list(got)
        expected = list(self.expected)
        if not got and not expected:
            return True
        if len(got) != len(expected):
            return False
        cmp = _compare_func(args)
        if is_set(args, ExactOrder(False)):
            return contains_items(got, expected, cmp)
        return contains_slice(got, expected, cmp)

    def on_test_failure(self, got: Sequence[Any], *args: Any) -> list[str]:
        inverted = is_set(args, ToNotMatch(True))
        cond = "not equal to" if inverted else "equal to"
        name = _type_name(got, *list(self.expected)[:1])
        result = append_to_report([], list(self.expected), f"expected: {name} {cond}:", *args)
        if inverted:
            return result
        return append_to_report(result, list(got), "got:", *args)
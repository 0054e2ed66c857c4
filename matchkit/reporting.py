"""Matcher options and helpers for formatting failure reports."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence


@dataclass(frozen=True)
class ToNotMatch:
    """Marks that a failure report is for an inverted (to_not) expectation."""

    value: bool = True


@dataclass(frozen=True)
class CaseSensitive:
    """Whether string comparisons are case sensitive."""

    value: bool = True


@dataclass(frozen=True)
class QuotedStrings:
    """Whether strings are quoted in failure reports."""

    value: bool = True


@dataclass(frozen=True)
class ExactOrder:
    """Whether the order of items in sequences is significant."""

    value: bool = True


@dataclass(frozen=True)
class AnyOrder:
    """Order of items in sequences is not significant."""


@dataclass(frozen=True)
class PrefixInlineWithFirstItem:
    """Render the first item of a list on the same line as its prefix."""

    value: bool = True


@dataclass(frozen=True)
class FailureReport:
    """A function providing a custom failure report."""

    fn: Callable[..., Any] = field(compare=False)

    def on_test_failure(self, *args: Any) -> list[str]:
        result = self.fn(*args)
        if isinstance(result, str):
            return [result]
        return list(result)


@dataclass(frozen=True)
class OnFailure:
    """A fixed message to report when an expectation fails."""

    message: str

    def on_test_failure(self, *args: Any) -> list[str]:
        return [self.message]


def is_set(opts: Iterable[Any], option: Any) -> bool:
    """Return True if an option equal to ``option`` is present in ``opts``."""
    opts = list(opts)
    if any(o == option for o in opts):
        return True
    if option == ExactOrder(False):
        return any(isinstance(o, AnyOrder) for o in opts)
    if isinstance(option, AnyOrder):
        return ExactOrder(False) in opts
    return False


def get(opts: Iterable[Any], kind: Any) -> Any:
    """Return the first option that is an instance of ``kind``, or None."""
    return next((o for o in opts if isinstance(o, kind)), None)


def comparator(opts: Iterable[Any]) -> Callable[[Any, Any], bool] | None:
    """Return the first custom comparison function in ``opts``, or None."""
    return next(
        (o for o in opts if callable(o) and not isinstance(o, type)),
        None,
    )


def _format(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format(v) for v in value) + "]"
    if isinstance(value, dict):
        pairs = [_format(k) + ":" + _format(v) for k, v in value.items()]
        return "map[" + " ".join(pairs) + "]"
    return str(value)


def value_as_string(value: Any, *args: Any) -> str:
    """Format a value for a report; strings are quoted unless QuotedStrings(False)."""
    if isinstance(value, str) and not is_set(args, QuotedStrings(False)):
        return json.dumps(str(value), ensure_ascii=False)
    return _format(value)


def _item_formatter(quote: bool) -> Callable[[Any], str]:
    if quote:
        return lambda item: json.dumps(item, ensure_ascii=False)
    return _format


def append_to_report(report: Sequence[str], items: Any, prefix: str, *args: Any) -> list[str]:
    """Return ``report`` extended with lines listing ``items`` under ``prefix``."""
    result = list(report)
    if items is None:
        return result + [prefix + " nil"]
    if isinstance(items, (str, bytes)) or not isinstance(items, (list, tuple, bytearray)):
        return result + [prefix + " <not a slice>"]
    if not items:
        return result + [prefix + " <empty slice>"]

    quote = isinstance(items[0], str) and not is_set(args, QuotedStrings(False))
    fmt = _item_formatter(quote)

    if is_set(args, PrefixInlineWithFirstItem(True)):
        indent = " " * (len(prefix) + 1)
        result.append(prefix + " | " + fmt(items[0]))
        result.extend(indent + "| " + fmt(item) for item in items[1:])
        return result

    result.append(prefix)
    result.extend("| " + fmt(item) for item in items)
    return result


def failure_report(cond: str, expected: Any, got: Any, *args: Any) -> list[str]:
    """Two-line report for a comparison condition such as 'greater than'."""
    if is_set(args, ToNotMatch(True)):
        cond = "not " + cond
    return [
        "expected: " + cond + " " + value_as_string(expected, *args),
        "got     : " + value_as_string(got, *args),
    ]
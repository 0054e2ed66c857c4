"""Checks that a value is empty, empty-or-None, or not empty."""

from __future__ import annotations

import queue
from collections.abc import Mapping, Sized
from dataclasses import dataclass
from typing import Any, Sequence

from matchkit.errors import TestFailure, invalid_test
from matchkit.reporting import (
    FailureReport,
    OnFailure,
    PrefixInlineWithFirstItem,
    append_to_report,
    get,
    value_as_string,
)

_BUILTIN_KINDS: tuple[tuple[type | tuple[type, ...], str], ...] = (
    (str, "string"),
    ((bytes, bytearray), "slice"),
    (list, "slice"),
    (tuple, "array"),
    ((set, frozenset), "set"),
    (Mapping, "map"),
)

_LENGTH_METHODS = ("count", "len", "length")


@dataclass(frozen=True)
class LengthResult:
    """What is known about the length of a value."""

    has_length: bool = False
    text: str = ""
    is_zero: bool = False
    is_nil: bool = False
    method: str = ""
    type_name: str = ""


def _sized(n: int, method: str, type_name: str = "") -> LengthResult:
    return LengthResult(
        has_length=True,
        text=str(n),
        is_zero=n == 0,
        method=method,
        type_name=type_name,
    )


def _length_from_method(value: Any) -> LengthResult | None:
    for name in _LENGTH_METHODS:
        fn = getattr(value, name, None)
        if not callable(fn):
            continue
        try:
            n = fn()
        except TypeError:
            continue
        if isinstance(n, int) and not isinstance(n, bool):
            return _sized(n, name)
    return None


def length_of(value: Any) -> LengthResult:
    """Determine the length of a value, if it has one.

    Built-in containers are measured with len(); queues with qsize().
    Other objects are measured with a zero-argument count(), len() or
    length() method returning an int, or failing that with __len__.
    """
    if value is None:
        return LengthResult(is_nil=True)
    for kinds, type_name in _BUILTIN_KINDS:
        if isinstance(value, kinds):
            return _sized(len(value), "len", type_name)
    if isinstance(value, (queue.Queue, queue.SimpleQueue)):
        return _sized(value.qsize(), "len", "chan")
    by_method = _length_from_method(value)
    if by_method is not None:
        return by_method
    if isinstance(value, Sized):
        return _sized(len(value), "len")
    return LengthResult()


def _failure(name: str, report: str | Sequence[str]) -> TestFailure:
    if isinstance(report, str):
        if not report:
            report = []
        elif name:
            return TestFailure(f"{name}: {report}")
        else:
            return TestFailure(report)
    lines = list(report)
    if not lines:
        return TestFailure(f"test failed ({name})" if name else "test failed")
    if name:
        return TestFailure([f"{name}:"] + ["  " + line for line in lines])
    return TestFailure(lines)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(v, str) for v in value)


@dataclass
class EmptinessChecks:
    """Emptiness expectations on a subject value."""

    subject: Any
    name: str = ""

    def _err(self, report: str | Sequence[str]) -> None:
        raise _failure(self.name, report)

    def _empty_report(self, result: LengthResult, or_nil: bool, args: tuple) -> list[str]:
        got = self.subject
        if _is_string_list(got):
            return append_to_report(
                ["expected: <empty []string>"],
                got,
                "got:",
                *args,
                PrefixInlineWithFirstItem(True),
            )
        if not or_nil and result.is_nil:
            if not result.type_name:
                return ["expected: <empty>", "got     : nil"]
            return [
                f"expected: <empty {result.type_name}>",
                f"got     : nil {result.type_name}",
            ]
        if result.type_name == "string":
            return ["expected: <empty string>", "got     : " + value_as_string(got, *args)]
        size = f"got     : {result.method}() == {result.text}"
        if not result.type_name:
            return ["expected: <empty>", size]
        return [f"expected: <empty {result.type_name}>", size]

    def _is_empty(self, or_nil: bool, args: tuple) -> None:
        result = length_of(self.subject)
        if or_nil and result.is_nil:
            return

        type_name = type(self.subject).__name__
        if not result.has_length and not result.is_nil:
            if or_nil:
                invalid_test(
                    "IsEmptyOrNil: requires a value that is a slice, channel, or map, or is of",
                    "              a type that implements a Count(), Len(), or Length() function",
                    "              returning an int, int64, uint, or uint64.",
                    "",
                    f"              A value of type {type_name} does not meet these criteria.",
                )
            invalid_test(
                "IsEmpty: requires a value that is a string, array, slice, channel or map,",
                "         or is of a type that implements a Count(), Len(), or Length()",
                "         function returning an int, int64, uint, or uint64.",
                "",
                f"         A value of type {type_name} does not meet these criteria.",
            )

        if not result.is_zero:
            custom = get(args, (FailureReport, OnFailure))
            if custom is not None:
                self._err(custom.on_test_failure(False))
            self._err(self._empty_report(result, or_nil, args))

    def is_empty(self, *args: Any) -> None:
        """Fail unless the subject is empty; None is not considered empty."""
        self._is_empty(False, args)

    def is_empty_or_nil(self, *args: Any) -> None:
        """Fail unless the subject is empty or None."""
        self._is_empty(True, args)

    def is_not_empty(self, *args: Any) -> None:
        """Fail unless the subject has a length greater than zero."""
        result = length_of(self.subject)
        if not result.has_length:
            invalid_test(
                "IsNotEmpty: requires a value of type string, array, slice, channel or map,",
                "            or a type that implements a Count(), Len(), or Length() function",
                "            returning int, int64, uint, or uint64.",
                "",
                f"            A value of type {type(self.subject).__name__} does not meet "
                "these criteria.",
            )
        if not result.is_zero:
            return

        custom = get(args, (FailureReport, OnFailure))
        if custom is not None:
            self._err(custom.on_test_failure(False))
        if result.type_name == "string":
            self._err("expected: <non-empty string>")
        if not result.type_name:
            self._err(f"expected: {result.method}() > 0")
        self._err(f"expected: <non-empty {result.type_name}>, {result.method}() > 0")
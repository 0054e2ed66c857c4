"""Matching of values recovered from raised exceptions (panics)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from matchkit.reporting import ToNotMatch, comparator, is_set, value_as_string

NIL_RECOVERED = "nil (did not panic)"


class _NoPanicExpected:
    def __repr__(self) -> str:
        return "NO_PANIC_EXPECTED"


NO_PANIC_EXPECTED = _NoPanicExpected()
"""Sentinel expected value meaning that no panic at all is expected."""


def _is_error_spec(value: Any) -> bool:
    return isinstance(value, BaseException) or (
        isinstance(value, type) and issubclass(value, BaseException)
    )


def _error_is(got: Any, target: Any) -> bool:
    """True if ``got`` or any exception in its cause/context chain is ``target``."""
    seen: set[int] = set()
    while isinstance(got, BaseException) and id(got) not in seen:
        if got is target or (isinstance(target, type) and isinstance(got, target)):
            return True
        seen.add(id(got))
        got = got.__cause__ or got.__context__
    return False


def _typed(value: Any, args: tuple) -> str:
    return f"{type(value).__name__}({value_as_string(value, *args)})"


@dataclass(frozen=True)
class PanicExpected:
    """The value expected to be recovered from a panic."""

    r: Any = None


@dataclass
class RecoveredValueMatcher:
    """Matches an actually recovered value ``r`` against a PanicExpected."""

    r: Any = None
    got: Any = field(default=None, init=False)
    expected: Any = field(default=None, init=False)

    def match(self, target: PanicExpected, *args: Any) -> bool:
        self.got = self.r
        self.expected = target.r

        if self.expected is NO_PANIC_EXPECTED or self.expected is None:
            return self.got is None

        if _is_error_spec(self.expected):
            return _error_is(self.got, self.expected)

        if self.got is not None and not isinstance(self.got, type(self.expected)):
            return False

        cmp = comparator(args)
        if cmp is not None:
            return bool(cmp(self.expected, self.got))
        return self.expected == self.got

    def on_test_failure(self, *args: Any) -> list[str]:
        if self.got is None:
            return [
                f"expected panic: {_typed(self.expected, args)}",
                "  recovered   : " + NIL_RECOVERED,
            ]
        if self.expected is None or self.expected is NO_PANIC_EXPECTED:
            return ["unexpected panic:", f"  recovered: {_typed(self.got, args)}"]
        if is_set(args, ToNotMatch(True)):
            return [
                f"expected: panic with {_typed(self.expected, args)}: should not have occurred"
            ]
        return [
            "unexpected panic:",
            f"  expected : {_typed(self.expected, args)}",
            f"  recovered: {_typed(self.got, args)}",
        ]
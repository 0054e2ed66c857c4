"""Checks that an error or a raised exception (panic) did or did not occur."""

from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

from matchkit.errors import InvalidTestError, TestFailure, invalid_test
from matchkit.matchers.panics import NO_PANIC_EXPECTED, PanicExpected, RecoveredValueMatcher
from matchkit.reporting import FailureReport, OnFailure, ToNotMatch, get, value_as_string

_PANIC_NIL_MESSAGE = "DidNotOccur: may not be used with Panic(nil); did you mean NilPanic()?"


@contextmanager
def _recovering(
    check: Callable[[RecoveredValueMatcher], None],
) -> Iterator[RecoveredValueMatcher]:
    """Run a block, capture any exception it raises, then apply ``check``.

    Test failures raised inside the block are never captured.
    """
    matcher = RecoveredValueMatcher()
    try:
        yield matcher
    except (TestFailure, InvalidTestError):
        raise
    except Exception as exc:
        matcher.r = exc
    check(matcher)


def _failure(name: str, report: str | Sequence[str]) -> TestFailure:
    if isinstance(report, str):
        if not report:
            report = []
        else:
            return TestFailure(f"{name}: {report}" if name else report)
    lines = list(report)
    if not lines:
        return TestFailure(f"test failed ({name})" if name else "test failed")
    if name:
        return TestFailure([f"{name}:"] + ["  " + line for line in lines])
    return TestFailure(lines)


@dataclass
class OccurrenceChecks:
    """Expectations about whether an error or a panic occurred.

    For a PanicExpected subject the checks return a context manager; the
    block it guards is the code that is expected to raise (or not raise).
    The context manager yields the matcher that records the recovered value.
    For an error subject the check is made immediately.
    """

    subject: Any
    name: str = ""

    def _err(self, report: str | Sequence[str]) -> None:
        raise _failure(self.name, report)

    def did_occur(self, *args: Any) -> AbstractContextManager[RecoveredValueMatcher] | None:
        """Expect the subject error to be set, or the guarded block to raise it."""
        subject = self.subject
        if isinstance(subject, PanicExpected):

            def check(matcher: RecoveredValueMatcher) -> None:
                if not matcher.match(subject, *args):
                    self._err(matcher.on_test_failure())

            return _recovering(check)

        if isinstance(subject, BaseException):
            return None
        if subject is None:
            self._err("expected error, got nil")
        invalid_test("test.DidOccur: may only be used with Panic() or error values")
        return None

    def _check_no_panic(
        self, expected: PanicExpected, matcher: RecoveredValueMatcher, args: tuple
    ) -> None:
        invalid = expected.r is NO_PANIC_EXPECTED
        if invalid and matcher.r is None:
            invalid_test(_PANIC_NIL_MESSAGE)

        if matcher.match(expected, *args) and expected.r is not None:
            self._err(matcher.on_test_failure(*args, ToNotMatch(True)))

        if matcher.r is not None:
            unexpected = RecoveredValueMatcher(matcher.r)
            unexpected.match(PanicExpected(None))
            report = unexpected.on_test_failure(*args)
            if invalid:
                invalid_test(_PANIC_NIL_MESSAGE, *report)
            self._err(report)

    def did_not_occur(self, *args: Any) -> AbstractContextManager[RecoveredValueMatcher] | None:
        """Expect the subject error to be None, or the guarded block not to raise."""
        subject = self.subject
        if isinstance(subject, PanicExpected):
            return _recovering(lambda matcher: self._check_no_panic(subject, matcher, args))

        if isinstance(subject, BaseException):
            custom = get(args, (FailureReport, OnFailure))
            if custom is not None:
                self._err(custom.on_test_failure(True))
            self._err(
                [
                    "expected: <no error>",
                    f"got     : {type(subject).__name__}({value_as_string(subject, *args)})",
                ]
            )
        if subject is None:
            return None
        invalid_test("test.DidNotOccur: may only be used with Panic() or error values")
        return None
"""Expectations: the entry point for testing a value against matchers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence

from matchkit.emptiness import EmptinessChecks
from matchkit.errors import TestFailure, invalid_test
from matchkit.matchers.equality import DeepMatcher
from matchkit.occurrence import OccurrenceChecks
from matchkit.reporting import (
    FailureReport,
    OnFailure,
    QuotedStrings,
    ToNotMatch,
    get,
    value_as_string,
)

# Types whose values can never be None in the sense of an unset reference.
_NOT_NILABLE = (bool, int, float, complex, str, bytes, tuple)


class Matcher(Protocol):
    """Anything with a match(got, *args) method can be used with to()/to_not()."""

    def match(self, got: Any, *args: Any) -> bool: ...


class Mock(Protocol):
    """A mock whose expectations can be checked and which can be reset."""

    def expectations_were_met(self) -> BaseException | None: ...

    def reset(self) -> None: ...


def _plain(value: Any) -> str:
    return value_as_string(value, QuotedStrings(False))


def _takes_subject(fn: Callable[..., Any]) -> bool:
    """True if a failure-report method expects the subject as its first argument."""
    func = getattr(fn, "__func__", fn)
    code = getattr(func, "__code__", None)
    if code is None:
        return False
    count = code.co_argcount - (1 if hasattr(fn, "__self__") else 0)
    return count > 0


def _expected_of(matcher: Any) -> Any:
    """The expected value held by a matcher, or None if it does not expose one."""
    if dataclasses.is_dataclass(matcher) and any(
        f.name == "expected" for f in dataclasses.fields(matcher)
    ):
        return matcher.expected
    attr = getattr(matcher, "expected", None)
    if callable(attr):
        return attr()
    return attr


def _is_nilable(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, _NOT_NILABLE):
        return False
    return not (dataclasses.is_dataclass(value) and not isinstance(value, type))


def _error_is(got: Any, target: Any) -> bool:
    """True if ``got`` or an exception in its cause/context chain is ``target``."""
    seen: set[int] = set()
    while isinstance(got, BaseException) and id(got) not in seen:
        if got is target or (isinstance(target, type) and isinstance(got, target)):
            return True
        seen.add(id(got))
        got = got.__cause__ or got.__context__
    return False


def _is_error_spec(value: Any) -> bool:
    return isinstance(value, BaseException) or (
        isinstance(value, type) and issubclass(value, BaseException)
    )


@dataclass
class Expectation(EmptinessChecks, OccurrenceChecks):
    """An expectation about a subject value, optionally named."""

    subject: Any
    name: str = ""

    def _fail_empty(self) -> None:
        raise TestFailure(f"test failed ({self.name})" if self.name else "test failed")

    def _err(self, msg: Any) -> None:
        """Fail with a report given as None, a string or a list of lines."""
        if msg is None:
            self._fail_empty()
        if isinstance(msg, str):
            if not msg:
                self._fail_empty()
            raise TestFailure(f"{self.name}: {msg}" if self.name else msg)
        if isinstance(msg, (list, tuple)):
            lines = [str(line) for line in msg]
            if not lines:
                self._fail_empty()
            if self.name:
                raise TestFailure([f"{self.name}:"] + ["  " + line for line in lines])
            raise TestFailure(lines)
        self._err(f"test failed with: {_plain(msg)}")

    def _errf(self, fmt: str, *args: Any) -> None:
        """Fail with a single formatted line, prefixed by the name if there is one."""
        text = fmt % args if args else fmt
        raise TestFailure(f"{self.name}: {text}" if self.name else text)

    def _fail(self, matcher: Any, args: tuple) -> None:
        reporter = get(args, (FailureReport, OnFailure))
        if reporter is None:
            reporter = matcher

        on_failure = getattr(reporter, "on_test_failure", None)
        if callable(on_failure):
            if _takes_subject(on_failure):
                report = on_failure(self.subject, *args)
            else:
                report = on_failure(*args)
            self._err([report] if isinstance(report, str) else list(report))

        exp = _expected_of(matcher)
        format_value = getattr(reporter, "format_value", None)
        if callable(format_value):
            ef = format_value(exp, *args)
            gf = format_value(self.subject, *args)
        else:
            ef = _plain(exp)
            gf = _plain(self.subject)

        if exp is None:
            self._errf("got %s", gf)
        if len(ef) < 10 and len(gf) < 10:
            self._errf("expected %s, got %s", ef, gf)
        self._err([f"expected: {ef}", f"got     : {gf}"])

    def to(self, matcher: Matcher | None, *args: Any) -> None:
        """Fail unless the matcher matches the subject."""
        if matcher is None:
            invalid_test("test.To: a matcher must be specified")
        if not matcher.match(self.subject, *args):
            self._fail(matcher, args)

    def to_not(self, matcher: Matcher, *args: Any) -> None:
        """Fail if the matcher matches the subject."""
        if matcher.match(self.subject, *args):
            self._fail(matcher, (*args, ToNotMatch(True)))

    def is_(self, expected: Any, *args: Any) -> None:
        """Fail unless the subject is the expected value (or error)."""
        if expected is None:
            self.is_nil()
            return
        if self.subject is None:
            self._errf("expected %s, got nil", _plain(expected))
        if _is_error_spec(expected) and isinstance(self.subject, BaseException):
            if not _error_is(self.subject, expected):
                raise TestFailure(
                    [
                        f"expected error: {_plain(expected)}",
                        f"got           : {_plain(self.subject)}",
                    ]
                )
            return
        Expectation(self.subject, self.name).to(DeepMatcher(expected), *args)

    def is_nil(self, *args: Any) -> None:
        """Fail unless the subject is None; a non-nilable subject is an invalid test."""
        got = self.subject
        if got is None:
            return
        if not _is_nilable(got):
            invalid_test(f"test.IsNil: values of type '{type(got).__name__}' are not nilable")

        custom = get(args, (FailureReport, OnFailure))
        if custom is not None:
            self._err(custom.on_test_failure(True))
        if isinstance(got, BaseException):
            self._errf("expected nil, got error: %s", _plain(got))
        self._errf("expected nil, got %s", repr(got))

    def is_not_nil(self, *args: Any) -> None:
        """Fail if the subject is None."""
        if self.subject is not None:
            return
        custom = get(args, (FailureReport, OnFailure))
        if custom is not None:
            self._err(custom.on_test_failure(True))
        self._errf("expected not nil, got nil")


def expect(value: Any, *args: Any) -> Expectation:
    """Create an expectation for a value; a string option names it."""
    name = next((a for a in args if isinstance(a, str)), "")
    return Expectation(value, name)


def expectations_were_met(mock: Mock, *args: Any) -> None:
    """Fail if the mock reports unmet expectations; the mock is always reset."""
    try:
        err = mock.expectations_were_met()
        opts: Sequence[Any] = args if err is None else (*args, OnFailure(str(err)))
        expect(err, *args).is_nil(*opts)
    finally:
        mock.reset()


def after_using(obj: Any, name: str, value: Any) -> Callable[[], None]:
    """Replace ``obj.name`` with ``value``; return a function restoring the original."""
    original = getattr(obj, name)
    setattr(obj, name, value)

    def restore() -> None:
        setattr(obj, name, original)

    return restore
"""Error types raised by matchers, expectations and fakes."""

from __future__ import annotations


class MatchkitError(Exception):
    """Base class for all errors raised by the package."""

    description = "matchkit error"

    def __init__(self, detail: str = "") -> None:
        message = f"{self.description}: {detail}" if detail else self.description
        super().__init__(message)
        self.detail = detail


class InvalidArgumentError(MatchkitError):
    """An argument supplied to a matcher or helper is not valid."""

    description = "invalid argument"


class InvalidOperationError(MatchkitError):
    """An operation was attempted that is not valid in the current state."""

    description = "invalid operation"


class NotNilableError(MatchkitError):
    """A value of a type that cannot be nil was tested for nil."""

    description = "values of this type are not nilable"


class ExpectationsNotMetError(MatchkitError):
    """A mock or fake did not see the calls that were expected of it."""

    description = "expectations not met"


class TestFailure(AssertionError):
    """An expectation was not met; carries the lines of the failure report."""

    __test__ = False

    def __init__(self, lines: list[str] | str) -> None:
        self.lines = [lines] if isinstance(lines, str) else list(lines)
        super().__init__("\n".join(self.lines))


class InvalidTestError(MatchkitError):
    """A test was written in a way that cannot produce a meaningful result."""

    description = "<== INVALID TEST"

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        text = "\n".join(lines)
        Exception.__init__(self, self.description + ("\n" + text if text else ""))
        self.detail = text


def invalid_test(*args: str) -> None:
    """Raise InvalidTestError with the given lines as its explanation."""
    raise InvalidTestError(*args)
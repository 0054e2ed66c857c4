"""A simple fake result holder for faked functions and methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from matchkit.errors import InvalidOperationError


@dataclass
class FakeResult:
    """A result value and/or error to be returned by a fake.

    If ``result_type`` is given, only values of that type (or exceptions)
    are accepted by :meth:`returns`.
    """

    result: Any = None
    err: BaseException | None = None
    result_type: type | None = None

    def reset(self) -> None:
        """Clear the result and the error."""
        self.result = None
        self.err = None

    def returns(self, *args: Any) -> None:
        """Set the result and/or error from the given values.

        At most one result and one exception may be given; anything else
        raises InvalidOperationError.
        """
        result_set = False
        err_set = False
        for value in args:
            if isinstance(value, BaseException):
                if err_set:
                    raise InvalidOperationError("only one error value may be specified")
                err_set = True
                self.err = value
            elif self.result_type is None or isinstance(value, self.result_type):
                if result_set:
                    raise InvalidOperationError("only one result value (R) may be specified")
                result_set = True
                self.result = value
            else:
                raise InvalidOperationError(
                    f"{type(value).__name__}: only values of type "
                    f"{self.result_type.__name__} or error may be specified"
                )
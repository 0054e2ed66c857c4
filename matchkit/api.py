"""Convenience constructors for the common matchers, and boolean shortcuts."""

from __future__ import annotations

from typing import Any, Hashable, Mapping, Sequence

from matchkit.errors import invalid_test
from matchkit.expect import expect
from matchkit.matchers.bools import BooleanMatcher
from matchkit.matchers.byteseq import EqualBytesMatcher
from matchkit.matchers.contexts import KeyMatcher, ValueMatcher
from matchkit.matchers.equality import DeepMatcher, EqualMatcher
from matchkit.matchers.maps import ContainsMapMatcher, EqualMapMatcher


def be_false() -> BooleanMatcher:
    """A matcher that fails unless the value is False."""
    return BooleanMatcher(False)


def be_true() -> BooleanMatcher:
    """A matcher that fails unless the value is True."""
    return BooleanMatcher(True)


def expect_false(got: Any, *args: Any) -> None:
    """Fail unless ``got`` is false; a string option names the expectation."""
    expect(bool(got), *args).to(be_false(), *args)


def expect_true(got: Any, *args: Any) -> None:
    """Fail unless ``got`` is true; a string option names the expectation."""
    expect(bool(got), *args).to(be_true(), *args)


def equal_bytes(want: Sequence[int]) -> EqualBytesMatcher:
    """A matcher comparing a byte sequence, reporting differences as hex."""
    return EqualBytesMatcher(want)


def have_context_key(key: Hashable) -> KeyMatcher:
    """A matcher that fails unless a context holds a value for ``key``."""
    return KeyMatcher(key)


def have_context_value(key: Hashable, value: Any) -> ValueMatcher:
    """A matcher that fails unless a context holds ``value`` for ``key``."""
    return ValueMatcher(key, value)


def equal(want: Any) -> EqualMatcher:
    """A matcher for a value equal to ``want``.

    An ``equal`` method on the expected value, or a comparison function
    given as an option, takes precedence over ``==``.
    """
    return EqualMatcher(want)


def deep_equal(want: Any) -> DeepMatcher:
    """A matcher for a value structurally equal to ``want``."""
    return DeepMatcher(want)


def keys_of_map(mapping: Mapping) -> list:
    """The keys of a mapping as a list, for use with sequence matchers."""
    return list(mapping.keys())


def values_of_map(mapping: Mapping) -> list:
    """The values of a mapping as a list, for use with sequence matchers."""
    return list(mapping.values())


def contain_map(want: Mapping | None) -> ContainsMapMatcher:
    """A matcher for a mapping holding every entry of ``want``.

    A None or empty ``want`` makes for an invalid test.
    """
    if want is None:
        invalid_test(
            "ContainMap() called with nil map.",
            "Did you mean Expect(map).IsNil() or Expect(map).IsEmpty()?",
        )
    if not want:
        invalid_test(
            "ContainMap() called with empty map.",
            "Did you mean Expect(map).To(EqualMap(<empty map>)) or Expect(map).IsEmpty()?",
        )
    return ContainsMapMatcher(want)


def contain_map_entry(key: Hashable, value: Any) -> ContainsMapMatcher:
    """A matcher for a mapping holding ``value`` under ``key``."""
    return ContainsMapMatcher({key: value})


def equal_map(want: Mapping) -> EqualMapMatcher:
    """A matcher for a mapping with exactly the entries of ``want``."""
    return EqualMapMatcher(want)
# matchkit

Expectations and matchers for tests. An expectation wraps a value, a
matcher decides whether that value is what you wanted, and when it is
not you get a short, readable failure report.

matchkit has no dependencies beyond the standard library.

## Installing

```
pip install matchkit
```

To run the package's own tests:

```
pip install "matchkit[test]"
pytest
```

## Expectations

```python
from matchkit.expect import expect
from matchkit.api import equal, deep_equal, be_true, expect_false

expect(42).to(equal(42))
expect([1, 2, 3]).to(deep_equal([1, 2, 3]))
expect(True).to(be_true())
expect_false(False)
```

A failed expectation raises `matchkit.errors.TestFailure`, a subclass of
`AssertionError`, so pytest and unittest report it like any failed
assertion. Its message holds the report, and its `lines` attribute holds
the report line by line:

```
expected: "the lord of the rings"
got     : "the hobbit"
```

The first string passed to `expect` after the value names the
expectation, and the name is put in front of the report:

```python
expect(value, "user count").to(equal(3))
```

`Expectation` offers:

- `to(matcher, *options)` and `to_not(matcher, *options)`
- `is_(expected)`: `None` checks for `None`; an exception instance or
  class checks the subject exception, following its `__cause__` and
  `__context__` chain; anything else is compared with `deep_equal`
- `is_nil()` and `is_not_nil()`
- `is_empty()`, `is_empty_or_nil()` and `is_not_empty()`, for strings,
  lists, tuples, bytes, sets, mappings, `queue.Queue`, objects with a
  `count()`, `len()` or `length()` method returning an int, and other
  sized objects
- `did_occur()` and `did_not_occur()`, described below

A test written the wrong way, such as calling `is_nil()` on an `int` or
`is_empty()` on a value with no length, raises
`matchkit.errors.InvalidTestError` rather than passing or failing quietly.

## Exceptions (panics)

To check that a block raises, wrap the expected value in
`matchkit.matchers.panics.PanicExpected` and use the context manager
returned by `did_occur()` or `did_not_occur()`:

```python
from matchkit.expect import expect
from matchkit.matchers.panics import PanicExpected

with expect(PanicExpected(ValueError)).did_occur():
    int("not a number")

with expect(PanicExpected()).did_not_occur():
    int("42")
```

The expected value may be an exception class, an exception instance, or
any other value compared with `==` (or with a comparison function given
as an option). For a plain exception subject, `did_occur()` passes if it
is an exception and `did_not_occur()` passes if it is `None`.

## Matchers

Constructors in `matchkit.api`:

- Booleans: `be_true()`, `be_false()`, and the shortcuts
  `expect_true(got)` and `expect_false(got)`
- Equality: `equal(want)` and `deep_equal(want)`; an `equal` method on
  the expected value, or a comparison function option, is used before `==`
- Bytes: `equal_bytes(want)` reports where the bytes differ and marks them:

  ```
  bytes not equal:
    differences at: [1, 2]
  expected: 01 03 02
          |    ** **
  got     : 01 02 03
  ```

- Mappings: `contain_map(want)`, `contain_map_entry(key, value)`,
  `equal_map(want)`, and `keys_of_map` / `values_of_map` for using
  sequence matchers on a mapping's keys or values
- Context mappings (any mapping with `get`, including
  `contextvars.Context`): `have_context_key(key)`,
  `have_context_value(key, value)`

Matcher classes used directly:

- `matchkit.matchers.ordered`: `GreaterThanMatcher`, `LessThanMatcher`
- `matchkit.matchers.text`: `ContainsMatcher` (substring) and
  `RegexMatcher` (pattern string or compiled pattern); an empty or
  invalid expected value raises `InvalidArgumentError`
- `matchkit.matchers.slices`: `ContainsItemMatcher`,
  `ContainsItemsMatcher`, `ContainsSliceMatcher`, `EqualSliceMatcher`

```python
from matchkit.matchers.slices import EqualSliceMatcher
from matchkit.reporting import AnyOrder

expect([2, 1]).to(EqualSliceMatcher([1, 2]), AnyOrder())
```

Any object with a `match(got, *options)` method can be passed to `to()`.
If it also has `on_test_failure`, that supplies the report; otherwise
the report is built from its `expected` value.

## Options

Options from `matchkit.reporting` go after the matcher:

- `CaseSensitive(False)`: compare strings ignoring case
- `ExactOrder(False)` or `AnyOrder()`: order of sequence items does not matter
- `QuotedStrings(False)`: do not quote strings in reports
- `FailureReport(fn)`: `fn` returns the report lines
- `OnFailure(message)`: a fixed report message

```python
from matchkit.reporting import CaseSensitive, FailureReport

expect({"a": "Ford"}).to(contain_map({"a": "ford"}), CaseSensitive(False))
expect(True).to(be_false(), FailureReport(lambda *_: ["custom failure report"]))
```

A plain function of two arguments passed as an option replaces the
default comparison.

## Fakes and helpers

- `matchkit.fake.FakeResult` holds a canned `result` and `err`.
  `returns(*values)` sets them, raising `InvalidOperationError` for a
  second result, a second exception, or a value not of `result_type`;
  `reset()` clears them.
- `matchkit.expect.after_using(obj, name, value)` replaces an attribute
  and returns a function that puts the old value back.
- `matchkit.expect.expectations_were_met(mock)` calls the mock's
  `expectations_were_met()`, fails if it returns an exception, and
  always calls the mock's `reset()`.

## What matchkit does not do

matchkit only checks values and raises. It does not run tests, group
them into scenarios, capture their output or provide a command line;
use pytest or unittest for that. Apart from `FakeResult` it has no mocks:
there is nothing that records calls or checks the arguments they were
made with.
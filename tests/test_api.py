import pytest

from matchkit.api import (
    be_false,
    be_true,
    contain_map,
    contain_map_entry,
    deep_equal,
    equal,
    equal_bytes,
    equal_map,
    expect_false,
    expect_true,
    have_context_key,
    have_context_value,
    keys_of_map,
    values_of_map,
)
from matchkit.errors import InvalidTestError, TestFailure
from matchkit.expect import expect
from matchkit.reporting import FailureReport


def custom_report(*_):
    return ["custom failure report"]


class Key(int):
    pass


class AlwaysEqual:
    def equal(self, other):
        return True


# booleans


def test_expect_false_passes_for_false_and_fails_for_true():
    expect_false(False)
    with pytest.raises(TestFailure) as info:
        expect_false(True)
    assert info.value.lines == ["expected false, got true"]


def test_expect_true_passes_for_true_and_fails_for_false():
    expect_true(True)
    with pytest.raises(TestFailure) as info:
        expect_true(False)
    assert info.value.lines == ["expected true, got false"]


def test_be_matchers_match():
    assert be_false().match(False) is True
    assert be_false().match(True) is False
    assert be_true().match(True) is True
    assert be_true().match(False) is False


def test_to_not_be_false_when_true_and_be_true_when_false():
    expect(True).to_not(be_false())
    expect(False).to_not(be_true())
    with pytest.raises(TestFailure) as info:
        expect(False).to_not(be_false())
    assert info.value.lines == ["did not expect false"]


def test_expect_false_with_name():
    with pytest.raises(TestFailure) as info:
        expect_false(True, "this will fail")
    assert info.value.lines == ["this will fail:", "  expected false, got true"]


def test_expect_true_with_name():
    with pytest.raises(TestFailure) as info:
        expect_true(False, "this will fail")
    assert info.value.lines == ["this will fail:", "  expected true, got false"]


@pytest.mark.parametrize("fn, value", [(expect_false, True), (expect_true, False)])
def test_expect_bool_with_custom_failure_report(fn, value):
    with pytest.raises(TestFailure) as info:
        fn(value, FailureReport(custom_report))
    assert info.value.lines == ["custom failure report"]


@pytest.mark.parametrize("fn, value", [(expect_false, True), (expect_true, False)])
def test_expect_bool_with_name_and_custom_failure_report(fn, value):
    with pytest.raises(TestFailure) as info:
        fn(value, "this will fail", FailureReport(custom_report))
    assert info.value.lines == ["this will fail:", "  custom failure report"]


@pytest.mark.parametrize("matcher, value", [(be_false(), True), (be_true(), False)])
def test_be_matchers_with_custom_failure_report(matcher, value):
    with pytest.raises(TestFailure) as info:
        expect(value).to(matcher, FailureReport(custom_report))
    assert info.value.lines == ["custom failure report"]


# bytes


def test_equal_bytes_match():
    assert equal_bytes(b"\x01\x02\x03").match(b"\x01\x02\x03") is True
    assert equal_bytes([1, 2, 3]).match(bytearray([1, 2, 3])) is True
    assert equal_bytes(b"\x03\x02\x01").match(b"\x01\x02\x03") is False


def test_to_not_equal_bytes_when_not_equal():
    expect(b"\x01\x02\x03").to_not(equal_bytes(b"\x03\x02\x01"))
    with pytest.raises(TestFailure) as info:
        expect(b"\x01\x02\x03").to_not(equal_bytes(b"\x01\x02\x03"))
    assert info.value.lines == ["unexpected: []byte should not be equal"]


def test_equal_bytes_custom_failure_report():
    with pytest.raises(TestFailure) as info:
        expect(b"\x01").to(equal_bytes(b"\x02"), FailureReport(custom_report))
    assert info.value.lines == ["custom failure report"]


def test_equal_bytes_report():
    with pytest.raises(TestFailure) as info:
        expect(b"\x01\x02\x03").to(equal_bytes(b"\x01\x03\x02"))
    assert info.value.lines == [
        "bytes not equal:",
        "  differences at: [1, 2]",
        "expected: 01 03 02",
        "        |    ** **",
        "got     : 01 02 03",
    ]


# contexts


CTX = {"key": "value"}


def test_context_key_present():
    assert have_context_key("key").match(CTX) is True
    expect(CTX).to(have_context_key("key"))


def test_context_key_not_present():
    with pytest.raises(TestFailure):
        expect(CTX).to(have_context_key("other-key"))


def test_context_value_present():
    assert have_context_value("key", "value").match(CTX) is True
    expect(CTX).to(have_context_value("key", "value"))


@pytest.mark.parametrize(
    "key, value", [("other-key", "value"), ("key", "other value")]
)
def test_context_value_missing_or_different(key, value):
    with pytest.raises(TestFailure):
        expect(CTX).to(have_context_value(key, value))


def test_have_context_key_example():
    ctx = {Key(57): "varieties"}
    expect(ctx).to(have_context_key(Key(57)))
    expect(ctx).to_not(have_context_key(Key(58)))
    with pytest.raises(TestFailure) as info:
        expect(ctx).to(have_context_key(Key(58)))
    assert info.value.lines == [
        "expected key: Key(58)",
        "  key not present in context",
    ]


def test_have_context_value_example():
    ctx = {Key(57): "varieties"}
    expect(ctx).to(have_context_value(Key(57), "varieties"))
    expect(ctx).to_not(have_context_value(Key(56), "varieties"))
    expect(ctx).to_not(have_context_value(Key(57), "flavours"))
    with pytest.raises(TestFailure) as info:
        expect(ctx).to(have_context_value(Key(57), "flavours"))
    assert info.value.lines == [
        "context value: Key(57)",
        '  expected: "flavours"',
        '  got     : "varieties"',
    ]


# equality


def test_equal_and_not_equal():
    assert equal(1).match(1) is True
    assert equal(2).match(1) is False
    expect(1).to_not(equal(2))


def test_deep_equal_and_not_deep_equal():
    assert deep_equal(b"\x01").match(b"\x01") is True
    assert deep_equal(b"\x02").match(b"\x01") is False
    expect(b"\x01").to_not(deep_equal(b"\x02"))


def test_equal_example():
    with pytest.raises(TestFailure) as info:
        expect(1).to(equal(2))
    assert info.value.lines == ["expected 2, got 1"]

    with pytest.raises(TestFailure) as info:
        expect("the hobbit").to(equal("the lord of the rings"))
    assert info.value.lines == [
        'expected: "the lord of the rings"',
        'got     : "the hobbit"',
    ]


def test_deep_equal_example():
    with pytest.raises(TestFailure) as info:
        expect([1, 2, 3]).to(deep_equal([1, 2, 4]))
    assert info.value.lines == ["expected [1 2 4], got [1 2 3]"]

    with pytest.raises(TestFailure) as info:
        expect([1, 1, 2, 3, 5]).to(deep_equal([1, 2, 4, 8, 16]))
    assert info.value.lines == [
        "expected: [1 2 4 8 16]",
        "got     : [1 1 2 3 5]",
    ]


def test_equal_uses_equal_method_of_expected():
    matcher = equal(AlwaysEqual())
    assert matcher.match(42) is True


# maps


SUT = {"ford": 42, "arthur": 23}


def test_keys_of_map():
    assert sorted(keys_of_map(SUT)) == ["arthur", "ford"]


def test_values_of_map():
    assert sorted(values_of_map(SUT)) == [23, 42]


def test_contain_map():
    matcher = contain_map({"arthur": 23, "ford": 42})
    assert matcher.match({"ford": 42, "arthur": 23, "marvin": 2}) is True
    assert matcher.match({"ford": 42}) is False


def test_contain_map_with_none():
    with pytest.raises(InvalidTestError) as info:
        contain_map(None)
    assert info.value.lines == [
        "ContainMap() called with nil map.",
        "Did you mean Expect(map).IsNil() or Expect(map).IsEmpty()?",
    ]


def test_contain_map_with_empty_map():
    with pytest.raises(InvalidTestError) as info:
        contain_map({})
    assert info.value.lines == [
        "ContainMap() called with empty map.",
        "Did you mean Expect(map).To(EqualMap(<empty map>)) or Expect(map).IsEmpty()?",
    ]


def test_contain_map_entry():
    assert contain_map_entry("ford", 42).match(SUT) is True
    assert contain_map_entry("ford", 43).match(SUT) is False
    assert contain_map_entry("ford", 42).expected == {"ford": 42}


def test_equal_map():
    assert equal_map({"ford": 42, "arthur": 23}).match(SUT) is True
    assert equal_map({"ford": 42}).match(SUT) is False
    expect(SUT).to(equal_map({"ford": 42, "arthur": 23}))
    with pytest.raises(TestFailure):
        expect(SUT).to(equal_map({"ford": 42}))
from matchkit.reporting import (
    AnyOrder,
    CaseSensitive,
    ExactOrder,
    FailureReport,
    OnFailure,
    PrefixInlineWithFirstItem,
    QuotedStrings,
    ToNotMatch,
    append_to_report,
    comparator,
    failure_report,
    get,
    is_set,
    value_as_string,
)


def test_nil_slice():
    assert append_to_report([], None, "prefix:") == ["prefix: nil"]


def test_empty_slice():
    assert append_to_report([], [], "prefix:") == ["prefix: <empty slice>"]


def test_non_empty_slice():
    assert append_to_report([], ["a", "b", "c"], "prefix:") == [
        "prefix:",
        '| "a"',
        '| "b"',
        '| "c"',
    ]


def test_non_empty_slice_inline():
    result = append_to_report([], ["a", "b", "c"], "prefix:", PrefixInlineWithFirstItem(True))
    assert result == [
        'prefix: | "a"',
        '        | "b"',
        '        | "c"',
    ]


def test_not_a_slice():
    assert append_to_report([], "not a slice", "prefix:") == ["prefix: <not a slice>"]


def test_unquoted_and_existing_report_kept():
    assert append_to_report(["x"], ["a"], "p:", QuotedStrings(False)) == ["x", "p:", "| a"]


def test_is_set_and_any_order():
    assert is_set([ToNotMatch()], ToNotMatch(True))
    assert not is_set([CaseSensitive(True)], CaseSensitive(False))
    assert is_set([AnyOrder()], ExactOrder(False))
    assert is_set([ExactOrder(False)], AnyOrder())


def test_get_and_comparator():
    report = OnFailure("custom")
    assert get(["name", report], OnFailure) is report
    assert get([], OnFailure) is None
    fn = lambda a, b: True  # noqa: E731
    assert comparator(["name", ToNotMatch(), fn]) is fn
    assert comparator([ToNotMatch()]) is None


def test_failure_report_options():
    assert FailureReport(lambda *a: ["custom failure report"]).on_test_failure() == [
        "custom failure report"
    ]
    assert OnFailure("custom error report").on_test_failure(True) == ["custom error report"]


def test_value_as_string():
    assert value_as_string("abc") == '"abc"'
    assert value_as_string("abc", QuotedStrings(False)) == "abc"
    assert value_as_string(None) == "nil"
    assert value_as_string([1, 2, 4]) == "[1 2 4]"


def test_failure_report():
    assert failure_report("greater than", 2, 1) == ["expected: greater than 2", "got     : 1"]
    assert failure_report("less than", 2, 1, ToNotMatch()) == [
        "expected: not less than 2",
        "got     : 1",
    ]
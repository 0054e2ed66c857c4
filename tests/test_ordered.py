from matchkit.matchers.ordered import GreaterThanMatcher, LessThanMatcher
from matchkit.reporting import ToNotMatch


def test_greater_than():
    assert GreaterThanMatcher(1).match(2)
    assert not GreaterThanMatcher(2).match(2)
    assert GreaterThanMatcher(2).on_test_failure(2) == ["expected: greater than 2", "got     : 2"]
    assert GreaterThanMatcher(2).on_test_failure(1) == ["expected: greater than 2", "got     : 1"]
    assert GreaterThanMatcher(1).on_test_failure(2, ToNotMatch()) == [
        "expected: not greater than 1",
        "got     : 2",
    ]
    assert GreaterThanMatcher(2).match(1, lambda a, b: True)


def test_less_than():
    assert LessThanMatcher(2).match(1)
    assert not LessThanMatcher(2).match(2)
    assert LessThanMatcher(2).on_test_failure(2) == ["expected: less than 2", "got     : 2"]
    assert LessThanMatcher(1).on_test_failure(2) == ["expected: less than 1", "got     : 2"]
    assert LessThanMatcher(2).on_test_failure(1, ToNotMatch()) == [
        "expected: not less than 2",
        "got     : 1",
    ]
    assert LessThanMatcher(1).match(2, lambda a, b: True)
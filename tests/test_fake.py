import pytest

from matchkit.errors import InvalidOperationError
from matchkit.fake import FakeResult


def test_reset_clears_result_and_error():
    sut = FakeResult(result=42, err=ValueError("faked error"))
    sut.reset()
    assert sut == FakeResult()


def test_returns_value():
    sut = FakeResult(result_type=int)
    sut.returns(42)
    assert sut == FakeResult(result=42, result_type=int)


def test_returns_error():
    sut = FakeResult(result_type=int)
    err = ValueError("fake error")
    sut.returns(err)
    assert sut.err is err
    assert sut.result is None


def test_returns_result_and_error():
    sut = FakeResult(result_type=int)
    err = ValueError("fake error")
    sut.returns(42, err)
    assert sut == FakeResult(result=42, err=err, result_type=int)


def test_multiple_result_values():
    sut = FakeResult(result_type=int)
    with pytest.raises(InvalidOperationError) as info:
        sut.returns(1, 2)
    assert "only one result value" in str(info.value)


def test_multiple_error_values():
    sut = FakeResult(result_type=int)
    err = ValueError("fake error")
    with pytest.raises(InvalidOperationError) as info:
        sut.returns(err, err)
    assert "only one error value" in str(info.value)


def test_invalid_type():
    sut = FakeResult(result_type=int)
    with pytest.raises(InvalidOperationError) as info:
        sut.returns("invalid type")
    assert str(info.value) == (
        "invalid operation: str: only values of type int or error may be specified"
    )


def test_untyped_fake_accepts_any_result():
    sut = FakeResult()
    sut.returns("anything")
    assert sut.result == "anything"
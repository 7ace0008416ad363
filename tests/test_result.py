import pytest

from extbasics.result import (
    ERROR_NET,
    FAIL,
    OK,
    Result,
    TypedResult,
    error_code_to_string,
)


def test_error_code_to_string_known_and_unknown():
    assert error_code_to_string(ERROR_NET) == "network error"
    assert error_code_to_string(FAIL) == ""
    assert error_code_to_string(OK) == ""


def test_default_result_is_ok():
    res = Result()
    assert res.ok()
    assert not res.fail()
    assert bool(res) is True
    assert res.message == ""
    assert res.code == OK


def test_failed_result():
    res = Result(FAIL, "broken")
    assert res.fail()
    assert not res
    assert res.message == "broken"
    assert res.is_code(FAIL)
    assert not res.is_code(OK)


def test_lazy_message_from_code():
    res = Result(ERROR_NET)
    assert res.message == "network error"


def test_explicit_message_wins_over_code():
    res = Result(ERROR_NET, "custom")
    assert res.message == "custom"


def test_reset_defaults_and_returns_self():
    res = Result(FAIL, "broken")
    returned = res.reset()
    assert returned is res
    assert res.ok()
    assert res.message == ""


def test_reset_with_code_and_message():
    res = Result()
    res.reset(ERROR_NET, "down")
    assert res.code == ERROR_NET
    assert res.message == "down"


def test_reset_from_other_result():
    source = Result(FAIL, "from other")
    res = Result().reset(source)
    assert res == source


def test_typed_result_keeps_value_on_reset():
    res = TypedResult([1, 2, 3])
    res.reset(FAIL, "failed")
    assert res.value == [1, 2, 3]
    assert res.fail()
    assert res.message == "failed"


def test_typed_result_reset_from_other_typed_result_keeps_value():
    res = TypedResult("mine")
    other = TypedResult("theirs", ERROR_NET)
    res.reset(other)
    assert res.value == "mine"
    assert res.code == ERROR_NET
    assert res.message == "network error"


def test_typed_result_holds_same_object():
    payload = {"a": 1}
    res = TypedResult(payload)
    assert res.value is payload


def test_to_result_with_bool_value():
    res = TypedResult(True, FAIL, "bad")
    converted = res.to_result()
    assert converted.value is True
    assert converted.code == FAIL
    assert converted.message == "bad"


def test_to_result_with_non_bool_value():
    converted = TypedResult("text").to_result()
    assert converted.value is False
    assert converted.ok()


def test_success_constructor():
    res = TypedResult.success("value")
    assert res.ok()
    assert res.value == "value"


def test_error_constructor_code_first():
    res = TypedResult.error(ERROR_NET)
    assert res.fail()
    assert res.code == ERROR_NET
    assert res.message == "network error"


def test_error_constructor_message_first():
    res = TypedResult.error("went wrong")
    assert res.code == FAIL
    assert res.message == "went wrong"


def test_error_constructor_default():
    res = TypedResult.error()
    assert res.code == FAIL
    assert res.value is None


@pytest.mark.parametrize(
    "left, right, equal",
    [
        (TypedResult(1), TypedResult(1), True),
        (TypedResult(1), TypedResult(2), False),
        (TypedResult(1, FAIL), TypedResult(1), False),
    ],
)
def test_typed_result_equality(left, right, equal):
    assert (left == right) is equal
import pytest

from pyapplicative import Either, Just, Left, Right, attempt, curry2, \
    either, lift_a2

from .helpers import add


def create_user(email, name):
    return {"email": email, "name": name}


def test_of_and_fail():
    assert Either.of(1) == Right(1)
    assert Either.fail("bad") == Left("bad")


def test_lift_a2_over_rights():
    assert lift_a2(create_user, Either.of("a@b.com"), Either.of("name")) \
        == Right({"email": "a@b.com", "name": "name"})


def test_failure_short_circuits_and_keeps_payload(spy):
    result = lift_a2(spy, Either.fail("invalid email"), Either.of("name"))
    assert result == Either.fail("invalid email")
    assert spy.calls == []


def test_failure_in_value_position_is_returned_unchanged(spy):
    failure = Left(object())
    assert Right(spy).ap(failure) is failure
    assert spy.calls == []


def test_function_side_failure_wins():
    assert Left("first").ap(Left("second")) == Left("first")
    assert lift_a2(add, Left("first"), Left("second")) == Left("first")


def test_left_passes_through_map_and_bind(spy):
    failure = Left("nope")
    assert failure.map(spy) is failure
    assert failure.bind(spy) is failure
    assert spy.calls == []


def test_operators():
    assert (curry2(add) & Right(1)) * Right(2) == Right(3)
    assert Right(2) >> (lambda x: Right(x + 1)) == Right(3)


def test_ap_rejects_other_family():
    with pytest.raises(TypeError):
        Right(lambda x: x).ap(Just(1))
    with pytest.raises(TypeError):
        Left("e").ap(Just(1))


def test_either_fold():
    assert either(len, str, Left("abc")) == 3
    assert either(len, str, Right(12)) == "12"
    with pytest.raises(TypeError):
        either(len, str, Just(1))


def test_attempt_catches_exceptions():
    assert attempt(int, "12") == Right(12)
    result = attempt(int, "x")
    assert result.is_left
    assert isinstance(result.l, ValueError)


def test_flags_and_repr():
    assert Right(1).is_right and not Right(1).is_left
    assert Left(1).is_left
    assert repr(Left("e")) == "Left('e')"
    assert repr(Right(2)) == "Right(2)"


def test_invalid_email_fails_user_creation():
    assert lift_a2(create_user, Either.fail("invalid email"),
                   Either.of("name")) == Either.fail("invalid email")

import pytest

from pyapplicative import Errors, Left, Right, V, lift_a3


def make_user(email, name, age):
    return (email, name, age)


def test_valid_operands_apply():
    assert lift_a3(make_user, V.of("a@b.com"), V.of("ann"), V.of(30)) \
        == V.of(("a@b.com", "ann", 30))


def test_errors_accumulate_in_order(spy):
    result = lift_a3(spy, V.invalid(Errors.single("bad email")),
                     V.of("ann"), V.invalid(Errors.single("bad age")))
    assert result == V.invalid(Errors(("bad email", "bad age")))
    assert list(result.to_either().l) == ["bad email", "bad age"]
    assert spy.calls == []


def test_single_error_is_kept():
    result = V.of(lambda x: x).ap(V.invalid(Errors.single("only")))
    assert not result.is_valid()
    assert result.to_either() == Left(Errors.single("only"))


def test_apply_second_accumulates():
    first = V.invalid(Errors.single("a"))
    second = V.invalid(Errors.single("b"))
    assert len((first ^ second).to_either().l) == 2


def test_valid_to_either():
    assert V.of(1).is_valid()
    assert V.of(1).to_either() == Right(1)


def test_ap_rejects_other_family():
    with pytest.raises(TypeError):
        V.of(lambda x: x).ap(Right(1))

from pyapplicative import Either, Just, Left, Maybe, Nothing, Right, ap


def test_ap_function_applies_wrapped_function():
    assert ap(Just(lambda x: x * 3), Just(4)) == Just(12)
    assert ap(Right(str), Right(7)) == Right("7")


def test_ap_function_short_circuits(spy):
    assert ap(Just(spy), Nothing) is Nothing
    assert ap(Nothing, Just(1)) is Nothing
    assert ap(Right(spy), Left("no")) == Left("no")
    assert ap(Left("first"), Right(1)) == Left("first")
    assert spy.calls == []


def test_pure_is_of():
    assert Maybe.pure(1) == Maybe.of(1) == Just(1)
    assert Either.pure("x") == Either.of("x") == Right("x")

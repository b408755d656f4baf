import pytest

from pyapplicative import IO, Just, curry2, lift_a2, lift_a3

from .helpers import add


def sign_in(email, password, remember):
    return f"{email}:{password}:{remember}"


def test_lift_a3_signs_in_when_run():
    result = lift_a3(sign_in, IO.of("a@b.com"), IO.of("pw"), IO.of(False))
    assert result.run() == sign_in("a@b.com", "pw", False)


def test_nothing_runs_until_run_is_called():
    effects = []
    read = lambda name: IO(lambda: effects.append(name) or name)
    combined = lift_a2(add, read("left"), read("right"))
    assert effects == []
    assert combined.run() == "leftright"
    assert effects == ["left", "right"]


def test_start_game_from_storage():
    storage = {"player1": "toby", "player2": "sally"}
    get_from_cache = lambda key: IO.from_callable(storage.__getitem__, key)
    game = lambda p1, p2: f"{p1} vs {p2}"
    start_game = lift_a2(game)
    assert start_game(get_from_cache("player1"),
                      get_from_cache("player2")).run() == "toby vs sally"


def test_failure_propagates_without_calling_function(spy):
    error = LookupError("missing")
    def boom():
        raise error
    combined = (curry2(spy) & IO.of(1)) * IO(boom)
    with pytest.raises(LookupError) as excinfo:
        combined.run()
    assert excinfo.value is error
    assert spy.calls == []


def test_function_side_failure_skips_argument():
    effects = []
    def boom():
        raise RuntimeError("fn failed")
    arg = IO(lambda: effects.append("arg"))
    with pytest.raises(RuntimeError, match="fn failed"):
        IO(boom).ap(arg).run()
    assert effects == []


def test_bind_and_alias():
    io = IO.of(2) >> (lambda x: IO.of(x * 21))
    assert io.run() == 42
    assert io.unsafe_perform_io() == 42


def test_running_twice_repeats_effect():
    counter = []
    io = IO(lambda: counter.append(1) or len(counter))
    assert io.run() == 1
    assert io.run() == 2


def test_ap_rejects_other_family():
    with pytest.raises(TypeError):
        IO.of(lambda x: x).ap(Just(1))

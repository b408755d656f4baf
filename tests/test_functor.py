from pyapplicative import Identity, Just, compose, compose_all, identity, map


def test_map_delegates_to_container():
    assert map(lambda x: x + 1, Just(1)) == Just(2)


def test_ampersand_is_map():
    assert ((lambda x: x * 2) & Identity(4)) == Identity(8)


def test_identity_returns_argument():
    marker = object()
    assert identity(marker) is marker


def test_compose_applies_right_function_first():
    inc = lambda x: x + 1
    double = lambda x: x * 2
    assert compose(inc, double)(5) == 11
    assert compose(double, inc)(5) == 12


def test_compose_all():
    assert compose_all(str, lambda x: x + 1, abs)(-4) == "5"
    assert compose_all()(7) == 7

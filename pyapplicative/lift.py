"""
Fixed-arity lifting helpers.

lift_aN takes a plain N-argument function and N containers of the same
family, maps the curried function over the first container and applies
the result to the others in order. Each helper is itself curried, so

    safe_add = lift_a2(add)
    safe_add(Maybe.of(2), Maybe.of(3))   # Just(5)
"""
from typing import Any, Callable

from .curry import curried, curry


@curried(3)
def lift_a2(f: Callable[[Any, Any], Any], fa, fb):
    """Lifts a binary function over two applicatives."""
    return (curry(f, 2) & fa) * fb

@curried(4)
def lift_a3(f: Callable[[Any, Any, Any], Any], fa, fb, fc):
    """Lifts a ternary function over three applicatives."""
    return (curry(f, 3) & fa) * fb * fc

@curried(5)
def lift_a4(f: Callable[[Any, Any, Any, Any], Any], fa, fb, fc, fd):
    """Lifts a four-argument function over four applicatives."""
    return (curry(f, 4) & fa) * fb * fc * fd

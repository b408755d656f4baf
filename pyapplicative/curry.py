"""
Currying with an explicitly declared arity.

Chained ap calls feed a function one argument at a time, so a
multi-argument function has to be staged as a function awaiting N more
arguments. The arity is always declared by the caller; signatures are
never inspected.
"""
from functools import update_wrapper
from typing import Any, Callable, TypeVar

X = TypeVar('X')
Y = TypeVar('Y')
Z = TypeVar('Z')
W = TypeVar('W')

class Curried:
    """
    A function awaiting `arity` more positional arguments.

    Calling it with fewer arguments returns a new Curried holding the
    arguments received so far; supplying the last one calls the wrapped
    function.
    """
    def __init__(self, func: Callable[..., Any], arity: int,
                 args: tuple[Any, ...] = ()):
        if arity < 1:
            raise ValueError(f"Arity must be at least 1, got {arity}")
        update_wrapper(self, func)
        self.func = func
        self.name = getattr(func, "__name__", type(func).__name__)
        self.arity = arity
        self.args = args

    def __call__(self, *args: Any) -> Any:
        if not args:
            raise TypeError(f"{self.name} called without arguments, "
                            f"expects {self.arity} more")
        if len(args) > self.arity:
            raise TypeError(f"{self.name} expects at most {self.arity} "
                            f"more arguments, got {len(args)}")
        collected = self.args + args
        if len(args) == self.arity:
            return self.func(*collected)
        return Curried(self.func, self.arity - len(args), collected)

    def __repr__(self):
        return f"Curried({self.name}, arity={self.arity}, args={self.args!r})"


def curry(f: Callable[..., Any], arity: int) -> Curried:
    """Curry a function of `arity` arguments."""
    return Curried(f, arity)

def curry2(f: Callable[[X, Y], Z]) -> Callable[[X], Callable[[Y], Z]]:
    """Curry a binary function into two unary functions."""
    return Curried(f, 2)

def curry3(f: Callable[[X, Y, Z], W]) \
    -> Callable[[X], Callable[[Y], Callable[[Z], W]]]:
    """Curry a ternary function into three unary functions."""
    return Curried(f, 3)

def curried(arity: int) -> Callable[[Callable[..., Any]], Curried]:
    """Decorator form of curry."""
    return lambda f: Curried(f, arity)

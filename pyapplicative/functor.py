""" Abstract base class for Functor """
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)

class Functor[A](ABC):
    """Base class for Functor instances.

    To implement a functor instance, create a sub-class of Functor and
    override the map method ensuring that the functor laws hold:

        container.map(identity) == container
        container.map(f).map(g) == container.map(compose(g, f))
    """

    def __rand__(self, other: Callable[[A], B]) -> "Functor[B]":
        """Defines the right-hand side of the map operation (f & fa)."""
        return map(other, self)

    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Applies a function to the value inside the Functor."""

def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the value inside the functor
    'f' using its map method."""
    return f.map(fn)

def identity(x):
    """
    Returns the argument unchanged.
    """
    return x

def compose(f: Callable, g: Callable) -> Callable:
    """
    Composes two functions f and g into a single function.
    """
    return lambda x: f(g(x))

def compose_all(*fns: Callable) -> Callable:
    """Composes any number of functions, right to left."""
    result: Callable = identity
    for fn in fns:
        result = compose(result, fn)
    return result

"""
Pointed and Applicative functor base classes for pyapplicative.

A Pointed functor can wrap a bare value in its minimal context (`of`).
An Applicative is a pointed functor that can also apply a function held in
one context to a value held in another context of the same family (`ap`).

    Just(add2) * Just(3)        # Just(5)
    (add & Just(2)) * Just(3)   # Just(5), with add curried
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from .functor import Functor

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')

class Pointed[T](ABC):
    """
    Base class for types that can lift a bare value into their context.
    """
    @classmethod
    @abstractmethod
    def of(cls, value: T) -> Pointed[T]:
        """
        Wraps a value in the minimal context of this type.
        """

    @classmethod
    def pure(cls, value: T) -> Pointed[T]:
        """Alias of `of`."""
        return cls.of(value)


class Applicative[T](Functor[T], Pointed[T]):
    """
    Base class for Applicative functors, providing pure, map,
    and applicative application.

    Sub-classes must make sure that the identity, homomorphism,
    interchange and composition laws hold, and that a failed or empty
    operand on either side short-circuits without calling the function.
    """
    @abstractmethod
    def ap(self: Applicative[Callable[[U], V]], other: Applicative[U]) \
        -> Applicative[V]:
        """
        Applies the function wrapped in this Applicative context to the value
        in another Applicative context.
        """

    def __mul__(self: Applicative[Callable[[U], V]], other: Applicative[U]) \
        -> Applicative[V]:
        """
        Enables using the * operator for applicative application.
        """
        return self.ap(other)

    def apply_first(self, other: Applicative[U]) -> Applicative[T]:
        """
        Combines both contexts, keeping the value of the first.
        """
        return ((lambda a: lambda _: a) & self) * other

    def apply_second(self, other: Applicative[U]) -> Applicative[U]:
        """
        Combines both contexts, keeping the value of the second.
        """
        return ((lambda _: lambda b: b) & self) * other

    def __xor__(self, other: Applicative[U]) -> Applicative[U]:
        """
        Overrides the ^ operator to use apply_second.
        """
        return self.apply_second(other)


def ap(f, other):
    """Applies the function inside the applicative 'f' to the value
    inside the applicative 'other'."""
    return f.ap(other)

def ensure_same_family(this: Any, other: Any, family: type) -> None:
    """
    Raises TypeError when 'other' does not belong to the same container
    family as 'this'. ap never changes the container family.
    """
    if not isinstance(other, family):
        raise TypeError(f"Cannot apply {type(this).__name__} "
                        f"to {type(other).__name__}")

"""
Implementation of Either: a value that is either a failure payload (Left)
or a success (Right).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .applicative import ensure_same_family
from .chain import Chain, ap_from_bind

L = TypeVar("L")
R = TypeVar("R")
S = TypeVar("S")
T = TypeVar("T")


class Either[R](Chain[R]):
    """
    Base class of Left and Right.
    """

    @classmethod
    def of(cls, value: S) -> Right[S]:
        """
        Wraps a value in the Right context.
        """
        return Right(value)

    @classmethod
    def fail(cls, error: L) -> Left[L]:
        """
        Wraps a failure payload in the Left context.
        """
        return Left(error)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    @property
    def is_left(self) -> bool:
        return not self.is_right


@dataclass(frozen=True)
class Left[L](Either[Any]):
    """
    Represents a left value in an Either type.
    Map, ap and bind pass it through untouched.
    """
    l: L

    def map(self, f: Callable) -> Left[L]:
        return self

    def ap(self, other: Either[Any]) -> Left[L]:
        ensure_same_family(self, other, Either)
        return self

    def bind(self, m: Callable) -> Left[L]:
        return self

    def __repr__(self):
        """String representation of the Left."""
        return f"Left({self.l!r})"

@dataclass(frozen=True)
class Right[R](Either[R]):
    """
    Represents a right value in an Either type.
    """
    r: R

    def map(self, f: Callable[[R], S]) -> Right[S]:
        return Right(f(self.r))

    def ap(self: Right[Callable[[S], T]], other: Either[S]) -> Either[T]:
        """Applies the function wrapped in Right to another Either value."""
        ensure_same_family(self, other, Either)
        return ap_from_bind(self, other, Either)

    def bind(self, m: Callable[[R], Either[S]]) -> Either[S]:
        """
        Chains computations by passing the value inside Right to function m.
        """
        return m(self.r)

    def __repr__(self):
        """String representation of the Right."""
        return f"Right({self.r!r})"


def either(on_left: Callable[[L], T], on_right: Callable[[R], T],
           e: Either[R]) -> T:
    """Folds an Either into a single value."""
    match e:
        case Left(l):
            return on_left(l)
        case Right(r):
            return on_right(r)
        case _:
            raise TypeError(f"Expected Either, got {type(e).__name__}")

def attempt(f: Callable[..., R], *args: Any) -> Either[R]:
    """
    Calls f, catching any exception it raises as a Left.
    """
    try:
        return Right(f(*args))
    except Exception as exc:  # pylint: disable=broad-exception-caught
        return Left(exc)

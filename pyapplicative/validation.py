"""
Implements purescript-like Validation applicative in Python
"""
from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from typing import Self, TypeVar, cast

from .applicative import Applicative, ensure_same_family
from .either import Either, Left, Right
from .semigroup import Semigroup

S = TypeVar('S')
T = TypeVar('T')

Valid = Right
Invalid = Left
type Validity[E, R] = Invalid[E] | Valid[R]


@dataclass(frozen=True)
class Errors:
    """Semigroup of error messages, kept in the order they were found."""
    messages: tuple[str, ...]

    @classmethod
    def single(cls, message: str) -> Errors:
        return cls((message,))

    def append(self, other: Self) -> Self:
        return type(self)(self.messages + other.messages)

    def __iter__(self):
        return iter(self.messages)

    def __len__(self):
        return len(self.messages)


@dataclass(frozen=True)
class V[E: Semigroup, R](Applicative[R]):
    """
    Applicative validation type that accumulates errors.
    Not a monad: a bind could not keep going after the first error.
    """
    either: Either[R]

    @property
    def validity(self) -> Validity[E, R]:
        """ Access underlying Either value """
        return cast(Validity[E, R], self.either)

    def map(self, f: Callable[[R], S]) -> V[E, S]:
        """ Functor map delegated to Either """
        return V(self.either.map(f))

    def ap(self: V[E, Callable[[S], T]], other: V[E, S]) -> V[E, T]:
        """ Apply accumulates errors in Left, applies function in Right """
        ensure_same_family(self, other, V)
        match self.validity, other.validity:
            case Valid(f), Valid(x):
                return V(Valid(f(x)))
            case Valid(_), Invalid(err):
                return V(Invalid(err))
            case Invalid(err), Valid(_):
                return V(Invalid(err))
            case Invalid(err1), Invalid(err2):
                return V(Invalid(cast(Semigroup, err1).append(err2)))
        raise TypeError(f"Malformed validation: {self!r} * {other!r}")

    @classmethod
    def of(cls, value: T) -> V[E, T]:
        """ Wraps a value in a successful Validation """
        _result: V[E, T] = V(Valid(value))
        return _result

    @classmethod
    def invalid(cls, error: E) -> V[E, R]:
        """ Wraps an error in a failed Validation """
        _result: V[E, R] = V(Invalid(error))
        return _result

    def is_valid(self) -> bool:
        """ Returns True if the Validation is valid (i.e., contains a Right) """
        return isinstance(self.either, Valid)

    def to_either(self) -> Either[R]:
        """ Forgets accumulation; returns the underlying Either """
        return self.either

    def __repr__(self):
        return f"V({self.either!r})"

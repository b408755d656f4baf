""" Implementation of Maybe in Python."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TypeVar

from .applicative import ensure_same_family
from .chain import Chain, ap_from_bind

B = TypeVar("B")
C = TypeVar("C")


class Maybe[A](Chain[A]):
    """
    An optional value: either Just a value or Nothing.
    Nothing absorbs every map, ap and bind without calling the function.
    """

    @classmethod
    def of(cls, value: B) -> Just[B]:
        """Wraps a value in the Just context."""
        return Just(value)

    @classmethod
    def from_nullable(cls, value: B | None) -> Maybe[B]:
        """Nothing for None, Just otherwise."""
        return Nothing if value is None else Just(value)

    @property
    def is_just(self) -> bool:
        return isinstance(self, Just)

    @property
    def is_nothing(self) -> bool:
        return not self.is_just


class _Nothing(Maybe):
    """The empty Maybe. Use the Nothing singleton."""

    def map(self, f: Callable) -> _Nothing:
        return Nothing

    def ap(self, other: Maybe) -> _Nothing:
        ensure_same_family(self, other, Maybe)
        return Nothing

    def bind(self, m: Callable) -> _Nothing:
        return Nothing

    def __repr__(self):
        """String representation of Nothing."""
        return "Nothing"

# singleton instance
Nothing: _Nothing = _Nothing()

@dataclass(frozen=True)
class Just[A](Maybe[A]):
    a: A

    def map(self, f: Callable[[A], B]) -> Just[B]:
        return Just(f(self.a))

    def ap(self: Just[Callable[[B], C]], other: Maybe[B]) -> Maybe[C]:
        """Applies a function wrapped in Just to a value wrapped in Maybe."""
        ensure_same_family(self, other, Maybe)
        return ap_from_bind(self, other, Maybe)

    def bind(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return m(self.a)

    def __repr__(self):
        """String representation of the Just."""
        return f"Just({self.a!r})"


def from_maybe(default: B, m: Maybe[B]) -> B:
    """Extracts the value from a Maybe, or returns a default value."""
    match m:
        case Just(value):
            return value
        case _:
            return default

def maybe(default: C, f: Callable[[B], C], m: Maybe[B]) -> C:
    """Applies f to the value in Just, or returns the default for Nothing."""
    return from_maybe(default, m.map(f))

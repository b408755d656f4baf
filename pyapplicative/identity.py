""" Identity container: the plainest applicative, no effect at all """
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TypeVar

from .applicative import ensure_same_family
from .chain import Chain

B = TypeVar("B")
C = TypeVar("C")

@dataclass(frozen=True)
class Identity[A](Chain[A]):
    """Wraps exactly one value."""
    a: A

    @classmethod
    def of(cls, value: B) -> Identity[B]:
        return cls(value)

    def map(self, f: Callable[[A], B]) -> Identity[B]:
        return Identity(f(self.a))

    def ap(self: Identity[Callable[[B], C]], other: Identity[B]) \
        -> Identity[C]:
        ensure_same_family(self, other, Identity)
        return Identity(self.a(other.a))

    def bind(self, m: Callable[[A], Identity[B]]) -> Identity[B]:
        return m(self.a)

    def extract(self) -> A:
        """Returns the wrapped value."""
        return self.a

    def __repr__(self):
        return f"Identity({self.a!r})"

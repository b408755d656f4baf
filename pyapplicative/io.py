"""
IO: a deferred synchronous effect.

Nothing runs while an IO is built, mapped or applied; the effect happens
when `run` is called. A failing effect raises, and that exception is the
failure payload: it propagates unchanged through map, ap and bind.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Callable, TypeVar

from .applicative import ensure_same_family
from .chain import Chain, ap_from_bind

B = TypeVar("B")
C = TypeVar("C")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IO[A](Chain[A]):
    """
    Carrier for a synchronous effectful computation producing an A.
    """
    thunk: Callable[[], A]

    @classmethod
    def of(cls, value: B) -> IO[B]:
        """
        Lift a pure value into IO; running it has no effect.
        """
        return cls(lambda: value)

    @classmethod
    def from_callable(cls, f: Callable[..., B], *args: Any) -> IO[B]:
        """Defers the call f(*args) until the IO is run."""
        return cls(lambda: f(*args))

    def map(self, f: Callable[[A], B]) -> IO[B]:
        """
        Functor map: transforms the result of the computation using f.
        """
        return IO(lambda: f(self.run()))

    def ap(self: IO[Callable[[B], C]], other: IO[B]) -> IO[C]:
        """
        Runs this IO for the function, then other for its argument.
        """
        ensure_same_family(self, other, IO)
        return ap_from_bind(self, other, IO)

    def bind(self, m: Callable[[A], IO[B]]) -> IO[B]:
        """
        Chains computations by passing the result to m, which returns
        the next IO.
        """
        return IO(lambda: m(self.run()).run())

    def run(self) -> A:
        """Performs the effect and returns its result."""
        logger.debug("Running IO %s", getattr(self.thunk, "__qualname__",
                                              self.thunk))
        return self.thunk()

    unsafe_perform_io = run

    def __repr__(self):
        return "IO(<deferred>)"

""" chain (monadic bind) base class
"""
from abc import abstractmethod
from typing import Any, Callable, TypeVar

from .applicative import Applicative

A = TypeVar('A')
B = TypeVar('B')

class Chain[A](Applicative[A]):
    """
    Applicative extended with bind and right-shift operations.
    Unlike ap, bind sequences: the second computation is only built
    once the value of the first is known.
    """
    def __rshift__(self, m: Callable[[A], Any]) -> Any:
        """ Override >> operator """
        return self.bind(m)

    @abstractmethod
    def bind(self, m: Callable[[A], Any]) -> Any:
        """
        Chains computations by passing the value inside the Chain to m.
        """

def compose_kleisli(g: Callable[[B], Any], f: Callable[[A], Any]) \
    -> Callable[[A], Any]:
    """
    Composes two Kleisli functions: first f, then g.
    """
    return lambda x: f(x).bind(g)

def ap_from_bind(mf, mx, mtype):
    """
    Used to implement apply in terms of bind
    The binds provide the monadic logic that would need to be replicated
    in both bind and apply
    """
    return \
        mf >> (lambda f:
        mx >> (lambda x:
        mtype.of(f(x))
        ))

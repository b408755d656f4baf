"""
traverse and sequence over plain Python iterables
"""
from typing import Any, Callable, Iterable

from .curry import curry2
from .functor import identity


def _snoc(xs: tuple, x: Any) -> tuple:
    return xs + (x,)

def traverse(of: Callable[[Any], Any], f: Callable[[Any], Any],
             xs: Iterable[Any]) -> Any:
    """
    Applies f to each element and collects the results into a single
    container holding a tuple. Effects are combined left to right with ap,
    so the container's failure policy decides what a failed element does.
    'of' is the pointed constructor of the target family, needed for the
    empty case.
    """
    snoc = curry2(_snoc)
    acc = of(())
    for x in xs:
        acc = (snoc & acc) * f(x)
    return acc

def sequence(of: Callable[[Any], Any], containers: Iterable[Any]) -> Any:
    """
    Turns an iterable of containers into a container of a tuple.
    """
    return traverse(of, identity, containers)

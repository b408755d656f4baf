"""
Checkers for the functor and applicative laws.

Each checker builds both sides of one law for a container family and
compares them with `eq`. Plain `==` works for the data containers; for
IO and Task pass an `eq` that runs both sides first, e.g.

    check_identity(IO, IO.of(3), eq=lambda a, b: a.run() == b.run())
"""
from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass, field
import logging
import operator
from typing import Any

from rich.console import Console
from rich.table import Table

from .config import load_settings
from .curry import curry2
from .functor import compose, identity

logger = logging.getLogger(__name__)

type Eq = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class LawResult:
    """Outcome of checking one law for one family."""
    law: str
    family: str
    holds: bool


@dataclass(frozen=True)
class LawSamples:
    """
    Operands for a full law check.
    u and v hold functions such that compose(u, v) is defined,
    w holds a value v can take, x is a value f and u can take.
    """
    f: Callable[[Any], Any]
    x: Any
    u: Any
    v: Any
    w: Any
    g: Callable[[Any], Any] = field(default=identity)


@dataclass(frozen=True)
class LawReport:
    """Results of a batch of law checks."""
    results: tuple[LawResult, ...]

    @property
    def holds(self) -> bool:
        return all(r.holds for r in self.results)

    @property
    def failures(self) -> tuple[LawResult, ...]:
        return tuple(r for r in self.results if not r.holds)

    def render(self, width: int | None = None) -> str:
        """
        Returns a printable table of the results.
        """
        if width is None:
            width = load_settings()["report_width"]
        table = Table(title="Law checks")
        table.add_column("Family")
        table.add_column("Law")
        table.add_column("Result")
        for r in self.results:
            table.add_row(r.family, r.law, "holds" if r.holds else "VIOLATED")
        console = Console(width=width)
        with console.capture() as capture:
            console.print(table)
        return capture.get()


def _result(law: str, family: type, holds: bool) -> LawResult:
    if not holds:
        logger.warning("%s violates the %s law", family.__name__, law)
    return LawResult(law, family.__name__, holds)

def check_map_identity(family: type, fa: Any,
                       eq: Eq = operator.eq) -> LawResult:
    """fa.map(identity) == fa"""
    return _result("map identity", family, eq(fa.map(identity), fa))

def check_map_composition(family: type, fa: Any, f: Callable, g: Callable,
                          eq: Eq = operator.eq) -> LawResult:
    """fa.map(f).map(g) == fa.map(compose(g, f))"""
    return _result("map composition", family,
                   eq(fa.map(f).map(g), fa.map(compose(g, f))))

def check_identity(family: type, v: Any, eq: Eq = operator.eq) -> LawResult:
    """of(identity).ap(v) == v"""
    return _result("identity", family, eq(family.of(identity).ap(v), v))

def check_homomorphism(family: type, f: Callable, x: Any,
                       eq: Eq = operator.eq) -> LawResult:
    """of(f).ap(of(x)) == of(f(x))"""
    return _result("homomorphism", family,
                   eq(family.of(f).ap(family.of(x)), family.of(f(x))))

def check_interchange(family: type, u: Any, x: Any,
                      eq: Eq = operator.eq) -> LawResult:
    """u.ap(of(x)) == of(lambda fn: fn(x)).ap(u)"""
    return _result("interchange", family,
                   eq(u.ap(family.of(x)),
                      family.of(lambda fn: fn(x)).ap(u)))

def check_composition(family: type, u: Any, v: Any, w: Any,
                      eq: Eq = operator.eq) -> LawResult:
    """of(compose).ap(u).ap(v).ap(w) == u.ap(v.ap(w))"""
    lhs = family.of(curry2(compose)).ap(u).ap(v).ap(w)
    return _result("composition", family, eq(lhs, u.ap(v.ap(w))))

def check_applicative_laws(family: type, samples: LawSamples,
                           eq: Eq = operator.eq) -> LawReport:
    """
    Checks both functor laws and all four applicative laws for a family.
    """
    return LawReport((
        check_map_identity(family, samples.w, eq),
        check_map_composition(family, samples.w, samples.f, samples.g, eq),
        check_identity(family, samples.w, eq),
        check_homomorphism(family, samples.f, samples.x, eq),
        check_interchange(family, samples.u, samples.x, eq),
        check_composition(family, samples.u, samples.v, samples.w, eq),
    ))

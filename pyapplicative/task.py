"""
Task: an asynchronous effect built on asyncio.

A Task holds a factory for an awaitable and starts nothing until it is
run or awaited. Applying one Task to another starts both operands at the
same time; only the function application waits for both results. This is
what ap gives over bind, which cannot build the second computation before
the first has produced its value.

    slow_user = Task.from_coroutine_function(fetch_user, 1)
    slow_posts = Task.from_coroutine_function(fetch_posts, 1)
    page = lift_a2(render, slow_user, slow_posts).run()

A Task fails by raising. Rejection payloads that are not exceptions travel
inside a Rejected exception and come back out unchanged.
"""
from __future__ import annotations
import asyncio
from dataclasses import dataclass
import logging
from typing import Any, Awaitable, Callable, Generator, TypeVar

from .applicative import ensure_same_family
from .chain import Chain
from .either import Either, Left, Right

B = TypeVar("B")
C = TypeVar("C")

logger = logging.getLogger(__name__)


class Rejected(Exception):
    """A Task failure carrying a payload that is not itself an exception."""
    def __init__(self, payload: Any):
        super().__init__(payload)
        self.payload = payload


def _as_exception(payload: Any) -> BaseException:
    return payload if isinstance(payload, BaseException) else Rejected(payload)


async def _settle(futures: list[asyncio.Future]) -> None:
    """Cancels unfinished operands and marks every failure as retrieved."""
    stragglers = [f for f in futures if not f.done()]
    for f in stragglers:
        f.cancel()
    if stragglers:
        logger.debug("Cancelled %d pending operand(s)", len(stragglers))
        await asyncio.gather(*stragglers, return_exceptions=True)
    for f in futures:
        if f.done() and not f.cancelled():
            f.exception()


@dataclass(frozen=True)
class Task[A](Chain[A]):
    """
    Lazy asynchronous computation producing an A.
    """
    fork: Callable[[], Awaitable[A]]

    @classmethod
    def of(cls, value: B) -> Task[B]:
        """An already resolved Task."""
        async def resolved() -> B:
            return value
        return cls(resolved)

    @classmethod
    def rejected(cls, payload: Any) -> Task[Any]:
        """A Task that fails with the given payload."""
        async def rejecting() -> Any:
            raise _as_exception(payload)
        return cls(rejecting)

    @classmethod
    def from_coroutine_function(cls, f: Callable[..., Awaitable[B]],
                                *args: Any) -> Task[B]:
        """Defers the call f(*args) until the Task is run."""
        return cls(lambda: f(*args))

    def map(self, f: Callable[[A], B]) -> Task[B]:
        async def mapped() -> B:
            return f(await self.fork())
        return Task(mapped)

    def ap(self: Task[Callable[[B], C]], other: Task[B]) -> Task[C]:
        """
        Starts both Tasks concurrently and applies the function once both
        have resolved. The first failure cancels the other operand.
        """
        ensure_same_family(self, other, Task)

        async def applied() -> C:
            futures: list[asyncio.Future] = []
            try:
                futures.append(asyncio.ensure_future(self.fork()))
                futures.append(asyncio.ensure_future(other.fork()))
                logger.debug("Started both operands of Task.ap")
                await asyncio.wait(futures,
                                   return_when=asyncio.FIRST_EXCEPTION)
                # function side first, so it wins when both have failed
                for future in futures:
                    if future.done() and not future.cancelled() \
                            and future.exception() is not None:
                        raise future.exception()  # type: ignore[misc]
                fn_future, value_future = futures
                return fn_future.result()(value_future.result())
            finally:
                await _settle(futures)
        return Task(applied)

    def bind(self, m: Callable[[A], Task[B]]) -> Task[B]:
        """
        Sequential composition: m builds the next Task only after this
        one resolved.
        """
        async def chained() -> B:
            return await m(await self.fork()).fork()
        return Task(chained)

    def to_either(self) -> Task[Either[A]]:
        """
        A Task that always resolves: Right with the result, or Left with
        the rejection payload.
        """
        async def settled() -> Either[A]:
            try:
                return Right(await self.fork())
            except Rejected as exc:
                return Left(exc.payload)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                return Left(exc)
        return Task(settled)

    async def _run(self) -> A:
        return await self.fork()

    def run(self) -> A:
        """Runs the Task to completion on a fresh event loop."""
        return asyncio.run(self._run())

    def __await__(self) -> Generator[Any, None, A]:
        return self._run().__await__()

    def __repr__(self):
        return "Task(<deferred>)"

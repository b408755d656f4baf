"""
The Semigroup protocol: anything with an associative append.

V combines the payloads of two invalid operands with append, so an error
type only has to provide it. Errors in validation.py is the stock one.
"""

from typing import Protocol, Self


class Semigroup(Protocol):
    """Error payloads that V can accumulate.

    append must be associative, a.append(b).append(c) equal to
    a.append(b.append(c)), or the applicative composition law breaks for V.
    """

    def append(self, other: Self) -> Self:
        """Returns self followed by other."""
        ...

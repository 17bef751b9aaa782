"""
Logical combinators over membership degrees.

AND is the fuzzy minimum, OR the fuzzy maximum and NOT the complement. AND
and OR accept either two degrees or a single iterable of degrees:

    AND(a, b)
    AND([a, b, c])
    OR(f.fx for f in group)
"""

from typing import Iterable, Union

Degrees = Union[float, Iterable[float]]


def _degrees(name: str, args: tuple) -> list:
    if len(args) == 2:
        return list(args)
    if len(args) == 1 and not isinstance(args[0], (int, float)):
        fxs = list(args[0])
        if not fxs:
            raise ValueError(f"{name} of an empty sequence is undefined")
        return fxs
    raise TypeError(f"{name} takes two degrees or one iterable of degrees")


def AND(*args: Degrees) -> float:
    """Fuzzy AND: the minimum of the given degrees."""
    return min(_degrees("AND", args))


def OR(*args: Degrees) -> float:
    """Fuzzy OR: the maximum of the given degrees."""
    return max(_degrees("OR", args))


def NOT(fx: float) -> float:
    """Fuzzy NOT: 1 - fx. Out of range values are not clamped."""
    return 1 - fx

"""
Fuzzifies crisp input values into membership degrees using trapezoidal shapes.

A MembershipFunction maps a physical value (x) to a degree of membership (fx)
in [0, 1]. The four boundaries of the trapezoid determine its shape:

    Trapezoidal when x1 < x2 < x3 < x4
    Triangular  when x2 == x3
    Step edge   when x1 == x2 or x3 == x4
    Open left   when x1 == MIN_X
    Open right  when x4 == MAX_X

The most recent degree is kept on the function so that rule truth functions
can read it later without recomputing. The stored degree is shared mutable
state: fuzzify and rule evaluation are expected to run on a single thread.
"""

import logging
import math
import sys
from typing import Iterable, Iterator, List, Tuple

fuzzifier_log = logging.getLogger("fuzzifier")

# Representable extremes of float, used for open shoulders. Spans between
# them overflow to inf, so ramps are computed on halved values in that case.
MIN_X = -sys.float_info.max
MAX_X = sys.float_info.max


def _fraction(lo: float, x: float, hi: float) -> float:
    # (x - lo) / (hi - lo), halving first when the span overflows float.
    span = hi - lo
    if math.isinf(span):
        return (x * 0.5 - lo * 0.5) / (hi * 0.5 - lo * 0.5)
    return (x - lo) / span


class InvalidShapeError(ValueError):
    """Raised when membership boundaries are not in ascending order."""


def check_shape(x1: float, x2: float, x3: float, x4: float) -> None:
    """
    Validates that the four boundaries are ascending.

    Raises:
        InvalidShapeError: If x2 < x1, x3 < x2 or x4 < x3.
    """
    if x2 < x1 or x3 < x2 or x4 < x3:
        raise InvalidShapeError(
            f"Membership thresholds must be ascending, got [{x1}, {x2}, {x3}, {x4}]"
        )


class MembershipFunction:
    """
    A trapezoidal membership function with a stored current degree.

    Attributes:
        fx (float): The degree computed by the last fuzzify call, NaN before
            the first call.
    """

    def __init__(
        self,
        x1: float = MIN_X,
        x2: float = 0.0,
        x3: float = 0.0,
        x4: float = MAX_X,
    ) -> None:
        """
        Initializes the membership function.

        Args:
            x1 (float): Left valley, where the degree starts rising from 0.
            x2 (float): Left peak, where the degree reaches 1.
            x3 (float): Right peak, where the degree starts falling from 1.
            x4 (float): Right valley, where the degree returns to 0.

        Raises:
            InvalidShapeError: If the boundaries are not ascending.
        """
        check_shape(x1, x2, x3, x4)
        self._x1 = x1
        self._x2 = x2
        self._x3 = x3
        self._x4 = x4
        self.fx = math.nan

    @property
    def x1(self) -> float:
        return self._x1

    @property
    def x2(self) -> float:
        return self._x2

    @property
    def x3(self) -> float:
        return self._x3

    @property
    def x4(self) -> float:
        return self._x4

    @property
    def shape(self) -> Tuple[float, float, float, float]:
        """The boundaries as an (x1, x2, x3, x4) tuple."""
        return (self._x1, self._x2, self._x3, self._x4)

    def _reshape(self, x1: float, x2: float, x3: float, x4: float) -> None:
        # Bulk rewrite used by the peak builder once it has validated the shape.
        self._x1, self._x2, self._x3, self._x4 = x1, x2, x3, x4

    def fuzzify(self, x: float) -> float:
        """
        Maps the physical value x to a degree of membership.

        Args:
            x (float): The crisp input value.

        Returns:
            float: Degree of membership (0.0 to 1.0), also stored in fx.
        """
        if x <= self._x1:
            fx = 0.0
        elif x <= self._x2:
            fx = _fraction(self._x1, x, self._x2)
        elif x <= self._x3:
            fx = 1.0
        elif x <= self._x4:
            fx = 1.0 - _fraction(self._x3, x, self._x4)
        else:
            fx = 0.0
        self.fx = fx
        return fx

    def __repr__(self) -> str:
        return (
            f"MembershipFunction({self._x1!r}, {self._x2!r}, "
            f"{self._x3!r}, {self._x4!r}, fx={self.fx!r})"
        )


class MembershipGroup:
    """
    Applies one physical value to several membership functions.

    The group holds references, so the same functions can be read afterwards
    by rules.
    """

    def __init__(self, functions: Iterable[MembershipFunction]) -> None:
        self.functions: List[MembershipFunction] = list(functions)

    def fuzzify(self, x: float) -> None:
        """Fuzzifies x with every function in the group, in order."""
        for function in self.functions:
            function.fuzzify(x)
        fuzzifier_log.debug(
            "Fuzzified x= %.3f -> %s", x, [f"{f.fx:.3f}" for f in self.functions]
        )

    def __len__(self) -> int:
        return len(self.functions)

    def __iter__(self) -> Iterator[MembershipFunction]:
        return iter(self.functions)

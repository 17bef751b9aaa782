"""
Fuzzy IF/THEN rules.

A Rule pairs a crisp output value with a truth function. The truth function
is a zero-argument callable that reads membership degrees at the time it is
called, typically a lambda over one or more MembershipFunction objects:

    generous = Rule(25.0, lambda: OR(service_excellent.fx, food_delicious.fx))

Because the lambda captures the functions themselves rather than their
degrees, re-fuzzifying the inputs changes what the rule reports. Inputs must
be fuzzified before the rules are defuzzified.
"""

import logging
from typing import Callable

rule_engine_log = logging.getLogger("rule_engine")


class Rule:
    """
    A Mamdani rule with a crisp consequent.

    Attributes:
        x (float): The physical value that equates to the rule output.
        truth (Callable[[], float]): Returns the rule's current firing strength.
    """

    def __init__(self, x: float, truth: Callable[[], float]) -> None:
        self.x = x
        self.truth = truth

    def evaluate(self) -> float:
        """Returns the rule's firing strength for the current input degrees."""
        fx = self.truth()
        rule_engine_log.debug("Rule x= %.3f W= %.3f", self.x, fx)
        return fx

    def __repr__(self) -> str:
        return f"Rule(x={self.x!r}, truth={self.truth!r})"

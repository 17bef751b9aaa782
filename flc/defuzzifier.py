"""
Computes the final crisp output from a set of fuzzy rules.

This module implements centroid defuzzification for a Mamdani-type system:
the output is the firing-strength-weighted average of each rule's crisp
value.
"""

import logging
import math
from typing import Iterable

from flc.rule_engine import Rule

defuzzifier_log = logging.getLogger("defuzzifier")
WZ_log = logging.getLogger("WZ_engine")


def defuzzify_by_centroid(rules: Iterable[Rule]) -> float:
    """
    Defuzzifies rules back to a physical value by the centroid method.

    The output is calculated as:
        x = (Σ(Wi * Zi)) / (Σ Wi)
    where Wi is the firing strength and Zi is the crisp output of rule i.

    Args:
        rules (Iterable[Rule]): The rules to aggregate, evaluated in order.

    Returns:
        float: The crisp output. Returns 0 when both sums are zero, which
            covers an empty rule set and a set where no rule fired.
    """
    numerator = 0.0
    denominator = 0.0

    for i, rule in enumerate(rules):
        w = rule.evaluate()
        numerator += w * rule.x
        denominator += w
        WZ_log.debug("Rule# %d W= %.3f, Z= %.3f, W*Z= %.3f", i, w, rule.x, w * rule.x)

    if numerator == 0 and denominator == 0:
        defuzzifier_log.debug("No rule fired. Outputting 0.")
        return 0.0
    if denominator == 0:
        # Only reachable with out of range degrees; follow IEEE division.
        defuzzifier_log.warning("Sum of firing strengths is zero, numerator %.4f.", numerator)
        return math.copysign(math.inf, numerator)

    return numerator / denominator


class Defuzzifier:
    """Performs centroid defuzzification and logs each result."""

    def __init__(self):
        defuzzifier_log.info("Defuzzifier initialized.")

    def defuzzify(self, rules: Iterable[Rule]) -> float:
        """
        Calculates the final crisp output value.

        Args:
            rules (Iterable[Rule]): The rules to aggregate.

        Returns:
            float: The centroid of the rule outputs, 0 if no rule fired.
        """
        rules = list(rules)
        output = defuzzify_by_centroid(rules)
        defuzzifier_log.debug(
            "Defuzzified output: %.4f (from %d rules)", output, len(rules)
        )
        return output

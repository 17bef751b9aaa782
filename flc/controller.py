"""
A tipping controller built from the fuzzy primitives.

This module wires membership functions, rules and the centroid defuzzifier
into a complete controller that computes a tip percentage from a service
rating and, optionally, a food rating (both 1 to 5 stars):

    IF service was poor OR food was rancid THEN tip is low
    IF service was ok THEN tip is average
    IF service was excellent OR food was delicious THEN tip is generous

With only a service rating the food terms are left out of the rules.
"""

import logging
from typing import Any, Dict, List, Optional

from flc.defuzzifier import Defuzzifier
from flc.fuzzifier import MAX_X, MIN_X, MembershipFunction, MembershipGroup
from flc.logic import OR
from flc.rule_engine import Rule

controller_log = logging.getLogger("controller")

DEFAULT_TIPS = {"low": 7.5, "average": 15.0, "generous": 25.0}


class TipController:
    """
    Computes a tip percentage from service and food star ratings.

    Attributes:
        service (MembershipGroup): poor, ok and excellent service.
        food (MembershipGroup): rancid and delicious food.
        defuzzifier (Defuzzifier): The defuzzifier instance.
    """

    def __init__(self, tips: Optional[Dict[str, Any]] = None):
        """
        Initializes the membership functions and rules.

        Args:
            tips (Dict[str, Any], optional): Tip percentages keyed by 'low',
                'average' and 'generous'. Missing keys use DEFAULT_TIPS.
        """
        tips = {**DEFAULT_TIPS, **(tips or {})}
        self.low_tip = float(tips["low"])
        self.average_tip = float(tips["average"])
        self.generous_tip = float(tips["generous"])

        self.service_excellent = MembershipFunction(3, 5, 5, MAX_X)
        self.service_ok = MembershipFunction(1, 3, 3, 5)
        self.service_poor = MembershipFunction(MIN_X, 1, 1, 3)
        self.service = MembershipGroup(
            [self.service_poor, self.service_ok, self.service_excellent]
        )

        self.food_delicious = MembershipFunction(3, 5, 5, MAX_X)
        self.food_rancid = MembershipFunction(MIN_X, 1, 1, 3)
        self.food = MembershipGroup([self.food_rancid, self.food_delicious])

        self.service_rules: List[Rule] = [
            Rule(self.generous_tip, lambda: self.service_excellent.fx),
            Rule(self.average_tip, lambda: self.service_ok.fx),
            Rule(self.low_tip, lambda: self.service_poor.fx),
        ]
        self.service_food_rules: List[Rule] = [
            Rule(
                self.low_tip,
                lambda: OR(self.service_poor.fx, self.food_rancid.fx),
            ),
            Rule(self.average_tip, lambda: self.service_ok.fx),
            Rule(
                self.generous_tip,
                lambda: OR(self.service_excellent.fx, self.food_delicious.fx),
            ),
        ]

        self.defuzzifier = Defuzzifier()
        controller_log.info(
            "Tip controller initialized (low= %.2f, average= %.2f, generous= %.2f).",
            self.low_tip, self.average_tip, self.generous_tip,
        )

    def compute_tip(self, service: float, food: Optional[float] = None) -> float:
        """
        Executes one full fuzzify, evaluate and defuzzify cycle.

        Args:
            service (float): Service rating in stars.
            food (float, optional): Food rating in stars. When omitted only
                the service rules are used.

        Returns:
            float: The tip percentage.
        """
        controller_log.debug("--- Tip Cycle Start (service= %s, food= %s) ---", service, food)

        self.service.fuzzify(service)
        if food is None:
            rules = self.service_rules
        else:
            self.food.fuzzify(food)
            rules = self.service_food_rules

        tip = self.defuzzifier.defuzzify(rules)
        controller_log.debug("--- Tip Cycle End (tip= %.4f) ---", tip)
        return tip

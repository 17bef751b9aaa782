import logging
import math

import pytest

from flc.defuzzifier import Defuzzifier, defuzzify_by_centroid
from flc.fuzzifier import MembershipFunction
from flc.rule_engine import Rule


@pytest.fixture
def defuzzifier():
    return Defuzzifier()


def test_defuzzify_by_centroid():
    rules = [Rule(10, lambda: 0.5), Rule(30, lambda: 0.5)]
    assert defuzzify_by_centroid(rules) == 20


def test_defuzzify_weighted_case():
    # Sum(W*Z) = (0.8 * 0.5) + (0.2 * -0.3) = 0.4 - 0.06 = 0.34
    # Sum(W) = 0.8 + 0.2 = 1.0
    rules = [Rule(0.5, lambda: 0.8), Rule(-0.3, lambda: 0.2)]
    assert defuzzify_by_centroid(rules) == pytest.approx(0.34, abs=1e-9)


def test_defuzzify_no_rules():
    assert defuzzify_by_centroid([]) == 0.0


def test_defuzzify_zero_firing_strength():
    rules = [Rule(0.5, lambda: 0.0), Rule(-0.3, lambda: 0.0)]
    assert defuzzify_by_centroid(rules) == 0.0


def test_zero_outputs_with_firing_rules():
    rules = [Rule(0.0, lambda: 0.7)]
    assert defuzzify_by_centroid(rules) == 0.0


def test_output_is_not_clamped():
    rules = [Rule(250.0, lambda: 1.0)]
    assert defuzzify_by_centroid(rules) == 250.0


def test_cancelling_degrees_follow_ieee_division():
    rules = [Rule(10.0, lambda: 0.5), Rule(20.0, lambda: -0.5)]
    assert defuzzify_by_centroid(rules) == -math.inf


def test_truth_evaluated_at_defuzzification():
    mf = MembershipFunction(0, 1, 1, 2)
    rules = [Rule(10.0, lambda: mf.fx), Rule(30.0, lambda: 1.0 - mf.fx)]
    mf.fuzzify(1.0)
    assert defuzzify_by_centroid(rules) == 10.0
    mf.fuzzify(2.0)
    assert defuzzify_by_centroid(rules) == 30.0


def test_accepts_generator():
    rules = (Rule(x, lambda: 1.0) for x in (1.0, 2.0, 3.0))
    assert defuzzify_by_centroid(rules) == pytest.approx(2.0)


def test_defuzzifier_class(defuzzifier):
    rules = [Rule(10, lambda: 0.25), Rule(30, lambda: 0.75)]
    assert defuzzifier.defuzzify(rules) == pytest.approx(25.0)
    assert defuzzifier.defuzzify(iter([])) == 0.0


def test_rules_are_logged(caplog):
    rules = [Rule(10, lambda: 0.5), Rule(30, lambda: 0.5)]
    with caplog.at_level(logging.DEBUG, logger="WZ_engine"):
        defuzzify_by_centroid(rules)
    messages = [r.getMessage() for r in caplog.records if r.name == "WZ_engine"]
    assert len(messages) == 2
    assert messages[0].startswith("Rule# 0 W= 0.500, Z= 10.000")

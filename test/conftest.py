# test/conftest.py
import logging

import pytest

from flc.fuzzifier import MAX_X, MIN_X, MembershipFunction, MembershipGroup
from utils.logger import LOGGER_NAMES, set_cycle_index


@pytest.fixture
def service_functions():
    """Poor, ok and excellent service over a 1-5 star rating."""
    excellent = MembershipFunction(3, 5, 5, MAX_X)
    ok = MembershipFunction(1, 3, 3, 5)
    poor = MembershipFunction(MIN_X, 1, 1, 3)
    return poor, ok, excellent


@pytest.fixture
def service_group(service_functions):
    return MembershipGroup(service_functions)


@pytest.fixture
def reset_loggers():
    """Undo setup_logging so later tests can use caplog again."""
    yield
    for name in LOGGER_NAMES:
        log = logging.getLogger(name)
        for h in list(log.handlers):
            log.removeHandler(h)
            h.close()
        log.propagate = True
        log.setLevel(logging.NOTSET)
    set_cycle_index(-1)

import pytest

from flc.fuzzifier import MAX_X, MIN_X, InvalidShapeError, MembershipFunction
from flc.peaks import PeakDefinition, define_inputs_by_peaks


def test_define_inputs_by_peaks():
    f0 = MembershipFunction()
    f1 = MembershipFunction()
    results = define_inputs_by_peaks(
        -4,
        [PeakDefinition(f0, -3, -2), PeakDefinition(f1, 0, 1)],
        7,
    )
    assert results[0] is f0
    assert results[1] is f1
    assert f0.shape == (-4, -3, -2, 0)
    assert f1.shape == (-2, 0, 1, 7)


def test_does_not_fuzzify():
    f0 = MembershipFunction()
    define_inputs_by_peaks(0, [PeakDefinition(f0, 1, 2)], 3)
    assert f0.shape == (0, 1, 2, 3)
    assert f0.fx != f0.fx  # still NaN


def test_adjacent_slopes_cross_midway():
    low, mid, high = MembershipFunction(), MembershipFunction(), MembershipFunction()
    define_inputs_by_peaks(
        MIN_X,
        [PeakDefinition(low, 0, 0), PeakDefinition(mid, 2, 2), PeakDefinition(high, 4, 4)],
        MAX_X,
    )
    assert low.shape == (MIN_X, 0, 0, 2)
    assert mid.shape == (0, 2, 2, 4)
    assert high.shape == (2, 4, 4, MAX_X)

    for x in (0.5, 1.0, 1.5, 2.5, 3.0, 3.5):
        total = low.fuzzify(x) + mid.fuzzify(x) + high.fuzzify(x)
        assert total == pytest.approx(1.0)
    assert low.fuzzify(1.0) == pytest.approx(0.5)
    assert mid.fuzzify(1.0) == pytest.approx(0.5)


def test_empty_definitions():
    assert define_inputs_by_peaks(0, [], 1) == []


def test_non_ascending_peaks_raise_without_mutation():
    f0 = MembershipFunction()
    f1 = MembershipFunction()
    with pytest.raises(InvalidShapeError):
        define_inputs_by_peaks(
            -1,
            [PeakDefinition(f0, 2, 3), PeakDefinition(f1, 0, 1)],
            5,
        )
    assert f0.shape == (MIN_X, 0.0, 0.0, MAX_X)
    assert f1.shape == (MIN_X, 0.0, 0.0, MAX_X)


@pytest.mark.parametrize(
    "start, x2, x3, end",
    [
        (2, 1, 3, 4),  # start valley above the peak
        (0, 3, 1, 4),  # peak given as x2 > x3
        (0, 1, 3, 2),  # end valley below the peak
    ],
)
def test_invalid_single_peak(start, x2, x3, end):
    with pytest.raises(InvalidShapeError):
        define_inputs_by_peaks(start, [PeakDefinition(MembershipFunction(), x2, x3)], end)

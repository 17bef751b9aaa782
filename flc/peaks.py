"""
Defines adjacent membership functions from their peaks only.

Given the peaks (x2, x3) of each function, the valleys (x1, x4) are inferred
so that the slopes of adjacent functions cross in the middle and reach zero
at the neighbouring peaks:

    x1 of function i = x3 of function i-1 (start_valley for the first)
    x4 of function i = x2 of function i+1 (end_valley for the last)

Use MIN_X as start_valley for an open left shoulder and MAX_X as end_valley
for an open right shoulder.
"""

import logging
from typing import List, Sequence

from flc.fuzzifier import MembershipFunction, check_shape

peaks_log = logging.getLogger("peaks")


class PeakDefinition:
    """
    The peak of one membership function.

    Attributes:
        function (MembershipFunction): The function whose shape is set.
        x2 (float): Left peak.
        x3 (float): Right peak.
    """

    def __init__(self, function: MembershipFunction, x2: float, x3: float) -> None:
        self.function = function
        self.x2 = x2
        self.x3 = x3


def define_inputs_by_peaks(
    start_valley: float,
    peak_defs: Sequence[PeakDefinition],
    end_valley: float,
) -> List[MembershipFunction]:
    """
    Sets the shape of each function in peak_defs from the peaks.

    Peaks must be given in ascending order. All shapes are derived and
    validated before any function is modified.

    Args:
        start_valley (float): x1 of the first function.
        peak_defs (Sequence[PeakDefinition]): One definition per function.
        end_valley (float): x4 of the last function.

    Returns:
        List[MembershipFunction]: The functions from peak_defs, reshaped in place.

    Raises:
        InvalidShapeError: If any derived shape is not ascending.
    """
    shapes = []
    last_peak = start_valley
    for i, peak in enumerate(peak_defs):
        if i < len(peak_defs) - 1:
            x4 = peak_defs[i + 1].x2
        else:
            x4 = end_valley
        shape = (last_peak, peak.x2, peak.x3, x4)
        check_shape(*shape)
        shapes.append(shape)
        last_peak = peak.x3

    for peak, shape in zip(peak_defs, shapes):
        peak.function._reshape(*shape)
        peaks_log.debug("Defined membership shape %s", shape)

    return [peak.function for peak in peak_defs]

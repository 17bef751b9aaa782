import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from flc.fuzzifier import MembershipFunction
from utils.plot_membership_shapes import plot_membership_functions, sample_membership


def test_sample_membership_restores_degree():
    mf = MembershipFunction(0, 1, 1, 2)
    mf.fuzzify(0.5)
    ys = sample_membership(mf, np.linspace(0.0, 2.0, 5))
    assert ys == pytest.approx([0.0, 0.5, 1.0, 0.5, 0.0])
    assert mf.fx == pytest.approx(0.5)


def test_plot_saves_png(tmp_path, service_functions):
    poor, ok, excellent = service_functions
    fig, filename = plot_membership_functions(
        {"Poor": poor, "Ok": ok, "Excellent": excellent},
        "Service",
        (0.0, 6.0),
        points=[(3.5, 0.75)],
        save=True,
        output_dir=str(tmp_path),
        show=False,
    )
    assert filename is not None
    assert (tmp_path / "service_membership_functions.png").exists()
    assert len(fig.axes[0].lines) == 3
    plt.close(fig)

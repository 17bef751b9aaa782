import os
from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from flc.fuzzifier import MembershipFunction


def sample_membership(function: MembershipFunction, xs: Iterable[float]) -> np.ndarray:
    """
    Evaluates a membership function over xs.

    The function's stored degree is restored afterwards so that sampling does
    not disturb rules that read it.
    """
    saved_fx = function.fx
    try:
        return np.array([function.fuzzify(float(x)) for x in xs])
    finally:
        function.fx = saved_fx


def plot_membership_functions(
    functions: Dict[str, MembershipFunction],
    title: str,
    x_range: Tuple[float, float],
    points: Optional[Sequence[Tuple[float, float]]] = None,
    save: bool = False,
    output_dir: str = "plots",
    show: bool = True,
    samples: int = 401,
):
    """
    Plot membership functions over x_range.
    Optionally overlay points as red dots.
    Args:
        functions (dict): Label -> MembershipFunction
        title (str): Title of the plot
        x_range (tuple): (low, high) physical values to sample
        points (list of (x, y)): Points to overlay (optional)
        save (bool): Whether to save the plot as a PNG
        output_dir (str): Directory to save the plot
        show (bool): Whether to open the plot window
        samples (int): Number of sample points across x_range
    Returns:
        The matplotlib figure, and the saved path if save is set.
    """
    xs = np.linspace(x_range[0], x_range[1], samples)
    fig = plt.figure(figsize=(8, 4))
    for label, function in functions.items():
        ys = sample_membership(function, xs)
        plt.plot(xs, ys, label=label)
        plt.fill_between(xs, ys, alpha=0.1)

    # Overlay points if given
    if points is not None and len(points) > 0:
        x, y = zip(*points)
        plt.scatter(
            x,
            y,
            color="red",
            s=30,
            marker="o",
            edgecolors="black",
            linewidths=0.8,
            label="(Input, FX)",
            zorder=10,
        )

    plt.title(f"Membership Functions – {title}")
    plt.xlabel("Physical Value")
    plt.ylabel("Membership Degree")
    plt.ylim(-0.05, 1.05)
    plt.grid(True)
    plt.legend()
    plt.tight_layout()

    filename = None
    if save:
        os.makedirs(output_dir, exist_ok=True)
        filename = os.path.join(output_dir, f"{title.lower()}_membership_functions.png")
        fig.savefig(filename)
        print(f"Saved plot to: {filename}")

    if show:
        plt.show()
    return fig, filename

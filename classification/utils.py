"""
Utility functions: seeding and plotting.
"""

import random
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import torch  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from scalargrad.nn import Module  # noqa: E402

from classification.logger import Logger  # noqa: E402


def set_seed(random_seed: int) -> None:
    """Set random seeds for reproducible experiments.

    Seeds Python's random module, PyTorch and NumPy. Networks should still be
    given their own ``random.Random(seed)`` so their initialization does not
    depend on whatever consumed the global stream before them.

    Args:
        random_seed (int): Seed value to use for all random number generators
    """
    random.seed(random_seed)
    torch.manual_seed(random_seed)
    np.random.seed(random_seed)


def scatter_figure(inputs: Sequence[Sequence[float]], targets: Sequence[float]) -> Figure:
    """Scatter the two feature columns, colored by label."""
    points = np.asarray(inputs, dtype=float)
    fig, ax = plt.subplots()
    ax.scatter(points[:, 0], points[:, 1], c=np.asarray(targets), cmap="jet", s=20)
    ax.set_xlabel("x0")
    ax.set_ylabel("x1")
    ax.set_title("Samples")
    return fig


def decision_boundary_figure(
    model: Module,
    inputs: Sequence[Sequence[float]],
    targets: Sequence[float],
    resolution: int = 50,
) -> Figure:
    """Contour of model(x)[0] > 0 over a grid covering the samples, with the samples on top.

    Every grid point builds and discards a small graph, so keep the
    resolution modest.
    """
    points = np.asarray(inputs, dtype=float)
    x0_min, x0_max = points[:, 0].min() - 1, points[:, 0].max() + 1
    x1_min, x1_max = points[:, 1].min() - 1, points[:, 1].max() + 1
    xx, yy = np.meshgrid(
        np.linspace(x0_min, x0_max, resolution), np.linspace(x1_min, x1_max, resolution)
    )
    zz = np.array(
        [model([float(a), float(b)])[0].value > 0 for a, b in zip(xx.ravel(), yy.ravel())]
    ).reshape(xx.shape).astype(float)

    fig, ax = plt.subplots()
    ax.contourf(xx, yy, zz, cmap="Spectral", alpha=0.8)
    ax.scatter(points[:, 0], points[:, 1], c=np.asarray(targets), cmap="jet", s=20)
    ax.set_xlim(x0_min, x0_max)
    ax.set_ylim(x1_min, x1_max)
    ax.set_title("Decision boundary")
    return fig


def plot_results(
    model: Module,
    inputs: Sequence[Sequence[float]],
    targets: Sequence[float],
    tensorboard_log_dir: str,
    run_name: str,
) -> None:
    """Log the sample scatter and the decision boundary to TensorBoard.

    Args:
        model (Module): Trained network
        inputs (Sequence[Sequence[float]]): Two-feature sample rows
        targets (Sequence[float]): +1/-1 labels
        tensorboard_log_dir (str): Directory for TensorBoard logs
        run_name (str): Name for this visualization run
    """
    logger = Logger(log_dir=tensorboard_log_dir, run_name=run_name)
    for tag, fig in (
        ("samples", scatter_figure(inputs, targets)),
        ("decision_boundary", decision_boundary_figure(model, inputs, targets)),
    ):
        logger.log_figure(f"plots/{run_name}/{tag}", fig)
        plt.close(fig)
    logger.close()

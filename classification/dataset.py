"""
Copyright (c) 2025. All rights reserved.
"""

"""
Dataset utilities for two-class point classification.

Samples live in two headerless CSV files that share a leading index column:

    features: index,x0,x1
    labels:   index,label      (label is +1 or -1)

The engine only ever sees plain floats; turning them into Values is left to
the training loop.
"""

import os
import tempfile
from os import PathLike
from typing import List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from torch.utils.data import Dataset


class MoonsDataset(Dataset):
    """Point classification dataset backed by a feature CSV and a label CSV.

    Attributes:
        features (List[List[float]]): One feature row per sample
        labels (List[float]): One +1/-1 label per sample
    """

    def __init__(self, x_csv: Union[str, PathLike], y_csv: Union[str, PathLike]) -> None:
        """Load features and labels.

        Args:
            x_csv (Union[str, PathLike]): Feature file, rows "index,x0,x1,..."
            y_csv (Union[str, PathLike]): Label file, rows "index,label"

        Raises:
            FileNotFoundError: If either file doesn't exist
            ValueError: If the files hold a different number of samples
        """
        super().__init__()
        x_frame = pd.read_csv(x_csv, header=None, index_col=0)
        y_frame = pd.read_csv(y_csv, header=None, index_col=0)
        if len(x_frame) != len(y_frame):
            raise ValueError(
                f"Feature and label files have different sizes: {len(x_frame)} vs {len(y_frame)}"
            )
        self.features: List[List[float]] = x_frame.astype(float).values.tolist()
        self.labels: List[float] = y_frame.iloc[:, 0].astype(float).tolist()

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, index: int) -> Tuple[List[float], float]:
        return self.features[index], self.labels[index]


def generate_moons_data(
    num_samples: int = 100,
    noise: float = 0.1,
    random_seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Generate two interleaving half circles.

    The first half of the samples lies on the upper moon with label -1, the
    rest on the lower, shifted moon with label +1.

    Args:
        num_samples: Total number of points
        noise: Standard deviation of gaussian noise added to every coordinate
        random_seed: Seed for reproducibility

    Returns:
        Tuple of (features [num_samples, 2], labels [num_samples])
    """
    rng = np.random.default_rng(random_seed)
    n_outer = num_samples // 2
    n_inner = num_samples - n_outer

    outer = np.linspace(0, np.pi, n_outer)
    inner = np.linspace(0, np.pi, n_inner)
    features = np.vstack(
        [
            np.column_stack([np.cos(outer), np.sin(outer)]),
            np.column_stack([1 - np.cos(inner), 0.5 - np.sin(inner)]),
        ]
    )
    labels = np.concatenate([-np.ones(n_outer), np.ones(n_inner)])

    if noise > 0:
        features = features + rng.normal(scale=noise, size=features.shape)

    return features, labels


def generate_data_as_csv(
    features: np.ndarray,
    labels: np.ndarray,
    x_path: Union[str, PathLike],
    y_path: Union[str, PathLike],
) -> None:
    """Write features and labels in the two-file indexed CSV layout."""
    pd.DataFrame(np.asarray(features)).to_csv(x_path, header=False)
    pd.DataFrame(np.asarray(labels)).to_csv(y_path, header=False)


def prepare_data(features: np.ndarray, labels: np.ndarray) -> Tuple[MoonsDataset, str, str]:
    """Round-trip arrays through temporary CSV files into a dataset.

    Returns:
        Tuple[MoonsDataset, str, str]: Tuple containing:
            - MoonsDataset: Loaded dataset
            - str: Path to the temporary feature file (caller must delete)
            - str: Path to the temporary label file (caller must delete)
    """
    x_fd, x_path = tempfile.mkstemp(suffix="_X.csv")
    y_fd, y_path = tempfile.mkstemp(suffix="_y.csv")
    os.close(x_fd)
    os.close(y_fd)
    try:
        generate_data_as_csv(features, labels, x_path, y_path)
        dataset = MoonsDataset(x_path, y_path)
    except Exception:
        os.remove(x_path)
        os.remove(y_path)
        raise
    return dataset, x_path, y_path

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Configuration dataclasses for binary classification experiments.

This module groups experiment parameters into small dataclasses, one per
concern, so the CLI, the experiment orchestrator and the tests can all build
the same structure without passing loose keyword arguments around.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TrainConfig:
    """
    Configuration for training loop parameters.

    Attributes:
        epochs (int): Number of full passes over the dataset
        custom_loss (str): Data loss type ("hinge" or "mse")
        optimizer (str): Optimizer algorithm ("sgd")
        lr (float): Initial learning rate
        lr_scheduler (str): Learning rate schedule ("linear" or "constant")
        alpha (float): L2 regularization strength applied to all parameters
        log_every_k_steps (int): Logging frequency in epochs

    Example:
        train_config = TrainConfig(
            epochs=100,
            custom_loss="hinge",
            optimizer="sgd",
            lr=1.0,
            lr_scheduler="linear",
        )
    """
    epochs: int                 # Number of training epochs
    custom_loss: str            # Loss function type
    optimizer: str              # Optimizer algorithm
    lr: float                   # Learning rate
    lr_scheduler: str           # Learning rate scheduler
    alpha: float = 1e-4         # L2 regularization strength
    log_every_k_steps: int = 10  # Logging frequency (every k epochs)


@dataclass
class DataConfig:
    """
    Configuration for data loading or generation.

    When both ``x_csv`` and ``y_csv`` are set the samples are read from disk,
    otherwise ``num_samples`` two-moons points are generated.

    Attributes:
        x_csv (Optional[str]): Feature file with rows "index,x0,x1"
        y_csv (Optional[str]): Label file with rows "index,label" (labels +1/-1)
        num_samples (int): Number of generated samples
        noise (float): Standard deviation of the gaussian noise on generated points
        fix_random_seed (bool): Whether to seed every random source
        random_seed (int): Seed used when fix_random_seed is set
    """
    x_csv: Optional[str] = None
    y_csv: Optional[str] = None
    num_samples: int = 100
    noise: float = 0.1
    fix_random_seed: bool = False
    random_seed: int = 1337


@dataclass
class ModelConfig:
    """
    MLP architecture.

    Attributes:
        name (str): Model name used in run names
        nin (int): Number of input features
        nouts (List[int]): Output size of every layer, last one is the score
    """
    name: str = "mlp"
    nin: int = 2
    nouts: List[int] = field(default_factory=lambda: [16, 16, 1])


@dataclass
class ExperimentConfig:
    """
    Complete experiment configuration combining all parameter groups.

    Attributes:
        type (str): Experiment type, used as run name prefix
        name (Optional[str]): Run name; generated from the settings when None
        train_config (TrainConfig): Training loop configuration
        data (DataConfig): Data configuration
        model (ModelConfig): Model architecture configuration
    """
    type: str                   # Experiment type
    name: Optional[str]         # Experiment run name
    train_config: TrainConfig   # Training configuration
    data: DataConfig            # Data configuration
    model: ModelConfig          # Model architecture configuration

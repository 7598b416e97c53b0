"""
Copyright (c) 2025. All rights reserved.
"""

"""
Training utilities for scalar-Value networks.

This module provides the gradient descent optimizer, learning rate schedules,
and the full-dataset training loop used by classification experiments.
There is no batching: every epoch builds one graph over all samples,
runs a single reverse pass and takes one step.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from scalargrad import Value
from scalargrad.nn import Module

from classification.logger import Logger
from classification.loss_functions import LossFunction, l2_regularization

logger = logging.getLogger(__name__)


class SGD:
    """Plain gradient descent: value -= lr * grad.

    Attributes:
        params (List[Value]): Parameters updated by ``step``
        lr (float): Current learning rate, rewritten by schedulers
    """

    def __init__(self, params: Sequence[Value], lr: float) -> None:
        self.params = list(params)
        self.lr = lr

    def zero_grad(self) -> None:
        for p in self.params:
            p.zero_grad()

    def step(self) -> None:
        for p in self.params:
            p.value -= self.lr * p.grad


class ConstantLR:
    """Leave the optimizer's learning rate unchanged."""

    def __init__(self, optimizer: SGD) -> None:
        self.optimizer = optimizer

    def step(self) -> None:
        pass


class LinearDecayLR:
    """Decay the learning rate linearly from ``start_lr`` towards ``end_factor * start_lr``.

    After k calls to ``step`` the rate is start_lr * (1 - (1 - end_factor) * k / total_steps).
    With the default end_factor of 0.1 that is the classic 1.0 - 0.9 * k / n.
    """

    def __init__(self, optimizer: SGD, total_steps: int, start_lr: float, end_factor: float = 0.1) -> None:
        self.optimizer = optimizer
        self.total_steps = max(total_steps, 1)
        self.start_lr = start_lr
        self.end_factor = end_factor
        self.last_step = 0
        self.optimizer.lr = start_lr

    def step(self) -> None:
        self.last_step += 1
        k = min(self.last_step, self.total_steps)
        self.optimizer.lr = self.start_lr * (1 - (1 - self.end_factor) * k / self.total_steps)


@dataclass
class TrainContext:
    """
    Configuration container for training parameters.

    Attributes:
        epochs (int): Number of training epochs
        optimizer (SGD): Optimizer over the model parameters
        lr_scheduler: Learning rate scheduler exposing ``step()``
        loss_criterion (LossFunction): Data loss over (scores, targets)
        tensorboard_log_dir (str): Directory for TensorBoard logs
        alpha (float): L2 regularization strength (default: 1e-4)
        run_name (Optional[str]): Name for this training run (default: None)
        log_every_k_steps (int): Frequency of logging in epochs (default: 10)
    """

    epochs: int  # Number of training epochs
    optimizer: SGD  # Optimizer instance
    lr_scheduler: object  # Learning rate scheduler
    loss_criterion: LossFunction  # Loss function
    tensorboard_log_dir: str  # Directory for TensorBoard logs
    alpha: float = 1e-4  # L2 regularization strength
    run_name: Optional[str] = None  # Name for this training run
    log_every_k_steps: int = 10  # Frequency of logging (every k epochs)


def compute_loss(
    model: Module,
    train_context: TrainContext,
    inputs: Sequence[Sequence[float]],
    targets: Sequence[float],
) -> Tuple[Value, float]:
    """Forward pass over the whole dataset.

    Returns:
        Tuple[Value, float]: Total loss (data loss plus L2 term) and accuracy in [0, 1]
    """
    scores = [model(x)[0] for x in inputs]
    data_loss = train_context.loss_criterion(scores, targets)
    total_loss = data_loss
    if train_context.alpha:
        total_loss = data_loss + l2_regularization(model.parameters(), train_context.alpha)
    correct = sum((y > 0) == (s.value > 0) for s, y in zip(scores, targets))
    return total_loss, correct / len(targets)


def train_model(
    model: Module,
    train_context: TrainContext,
    inputs: Sequence[Sequence[float]],
    targets: Sequence[float],
) -> Tuple[float, float]:
    """
    Train a model with full-dataset gradient descent.

    Args:
        model (Module): Network to train
        train_context (TrainContext): Configuration object with training parameters
        inputs (Sequence[Sequence[float]]): Feature rows
        targets (Sequence[float]): Labels

    Returns:
        Tuple[float, float]: Final (loss, accuracy) after training
    """
    tb_logger = Logger(train_context.tensorboard_log_dir, train_context.run_name)
    logger.info(
        "Training %s with %d parameters on %d samples",
        model, len(model.parameters()), len(targets),
    )

    for epoch in range(train_context.epochs):
        # forward pass
        loss, accuracy = compute_loss(model, train_context, inputs, targets)

        # backward pass
        train_context.optimizer.zero_grad()
        loss.backward()
        current_lr = train_context.optimizer.lr
        train_context.optimizer.step()
        train_context.lr_scheduler.step()

        if (epoch + 1) % train_context.log_every_k_steps == 0:
            tb_logger.log_scalars(
                {
                    "train_loss": loss.value,
                    "accuracy": accuracy,
                    "learning_rate": current_lr,
                },
                step=epoch + 1,
            )
            logger.info(
                f"Epoch {epoch+1}/{train_context.epochs}, Loss: {loss.value:.4f}, "
                f"Accuracy: {accuracy * 100:.1f}%, LR: {current_lr:.6f}"
            )

    tb_logger.close()

    final_loss, final_accuracy = compute_loss(model, train_context, inputs, targets)
    return final_loss.value, final_accuracy


def predict_model(model: Module, inputs: Sequence[Sequence[float]]) -> List[float]:
    """Score every input row with the first output of ``model``."""
    return [model(x)[0].value for x in inputs]


def get_optimizer(optimizer_type: str, lr: float, model: Module) -> SGD:
    if optimizer_type == "sgd":
        return SGD(model.parameters(), lr=lr)
    else:
        raise ValueError("Unsupported Optimizer Type")


def get_lr_scheduler(lr_scheduler_type: str, optimizer: SGD, epochs: int, lr: float):
    if lr_scheduler_type == "linear":
        return LinearDecayLR(optimizer, total_steps=epochs, start_lr=lr)
    elif lr_scheduler_type == "constant":
        return ConstantLR(optimizer)
    else:
        raise ValueError("Unsupported Learning Rate Scheduler Type")

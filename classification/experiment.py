"""
Copyright (c) 2025. All rights reserved.
"""

"""
Experiment management for scalar-Value classifier training.

The Experiment class ties the pieces together: it loads or generates data,
builds the MLP with a seeded random source, sets up the optimizer, schedule
and loss, runs training, and writes plots and a checkpoint into the logs
directory.
"""

import datetime
import logging
import os
import random
from typing import List, Optional

import torch

from scalargrad.nn import MLP
from scalargrad.visualize import draw_dot

from classification.configs import ExperimentConfig
from classification.dataset import MoonsDataset, generate_moons_data, prepare_data
from classification.logger import Logger
from classification.loss_functions import get_loss_function
from classification.train import (
    TrainContext,
    compute_loss,
    get_lr_scheduler,
    get_optimizer,
    predict_model,
    train_model,
)
from classification.utils import plot_results, set_seed

logger = logging.getLogger(__name__)


class Experiment:
    """
    Complete experiment orchestrator for binary classification.

    Attributes:
        config (ExperimentConfig): Experiment configuration
        model (MLP): Network under training
        train_context (TrainContext): Optimizer, schedule and loss settings
        inputs (List[List[float]]): Feature rows
        targets (List[float]): +1/-1 labels
    """

    def __init__(self, config: ExperimentConfig, logs_dir: str = "logs") -> None:
        """
        Initialize experiment with given configuration.

        Args:
            config (ExperimentConfig): Complete experiment configuration
            logs_dir (str): Directory for TensorBoard output and checkpoints
        """
        self.config = config

        self.logs_dir = logs_dir
        os.makedirs(self.logs_dir, exist_ok=True)

        if self.config.data.fix_random_seed:
            set_seed(self.config.data.random_seed)
            self.rng = random.Random(self.config.data.random_seed)
        else:
            self.rng = random.Random()

        self.inputs, self.targets = self.load_data()
        self.model = self.define_model()
        self.train_context = self.define_train_context(self.model)

        self.train_loss: Optional[float] = None
        self.accuracy: Optional[float] = None

    def load_data(self):
        """Read the configured CSV files, or generate two-moons samples."""
        data = self.config.data
        if data.x_csv and data.y_csv:
            dataset = MoonsDataset(data.x_csv, data.y_csv)
        else:
            if data.num_samples < 1:
                raise ValueError(f"num_samples must be positive, got {data.num_samples}")
            seed = data.random_seed if data.fix_random_seed else None
            features, labels = generate_moons_data(data.num_samples, data.noise, seed)
            dataset, x_path, y_path = prepare_data(features, labels)
            os.remove(x_path)
            os.remove(y_path)
        if len(dataset) == 0:
            raise ValueError("Dataset is empty")
        logger.info("Loaded %d samples", len(dataset))
        return dataset.features, dataset.labels

    def define_model(self) -> MLP:
        model_config = self.config.model
        return MLP(model_config.nin, model_config.nouts, rng=self.rng)

    def define_train_context(self, model: MLP) -> TrainContext:
        """
        Create and configure the training context with optimizer and schedule.

        Generates a run name from the settings when the config has none.

        Args:
            model (MLP): The model instance for which to create training context

        Returns:
            TrainContext: Configured training context with all necessary components
        """
        train_config = self.config.train_config
        if train_config.log_every_k_steps < 1:
            raise ValueError(
                f"log_every_k_steps must be at least 1, got {train_config.log_every_k_steps}"
            )
        optimizer = get_optimizer(
            optimizer_type=train_config.optimizer,
            lr=train_config.lr,
            model=model,
        )
        lr_scheduler = get_lr_scheduler(
            lr=train_config.lr,
            lr_scheduler_type=train_config.lr_scheduler,
            optimizer=optimizer,
            epochs=train_config.epochs,
        )

        if self.config.name is None:
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            self.config.name = (
                f"{self.config.type}_{self.config.model.name}_{train_config.optimizer}_"
                f"{train_config.lr_scheduler}_{train_config.epochs}_"
                f"{train_config.custom_loss}_{timestamp}"
            )

        return TrainContext(
            epochs=train_config.epochs,
            optimizer=optimizer,
            lr_scheduler=lr_scheduler,
            loss_criterion=get_loss_function(train_config.custom_loss),
            tensorboard_log_dir=self.logs_dir,
            alpha=train_config.alpha,
            run_name=self.config.name,
            log_every_k_steps=train_config.log_every_k_steps,
        )

    def train(self) -> None:
        self.train_loss, self.accuracy = train_model(
            self.model, self.train_context, self.inputs, self.targets
        )
        logger.info(
            "Finished %s: loss %.4f, accuracy %.1f%%",
            self.config.name, self.train_loss, self.accuracy * 100,
        )
        self.save()

    def predict(self) -> List[float]:
        return predict_model(self.model, self.inputs)

    def plot_results(self) -> None:
        """Log sample scatter and decision boundary figures to TensorBoard."""
        if self.config.model.nin == 2:
            plot_results(
                self.model,
                self.inputs,
                self.targets,
                self.train_context.tensorboard_log_dir,
                self.train_context.run_name,
            )

    def log_graph(self) -> str:
        """Log the DOT source of the loss graph for the first sample.

        Returns:
            str: The DOT text
        """
        loss, _ = compute_loss(self.model, self.train_context, self.inputs[:1], self.targets[:1])
        loss.backward()
        source = draw_dot(loss).source
        self.model.zero_grad()
        tb_logger = Logger(self.logs_dir, self.config.name)
        tb_logger.log_text("graph/loss", source)
        tb_logger.close()
        return source

    def save(self) -> None:
        """
        Save experiment checkpoint including parameter values and final metrics.
        """
        checkpoint = {
            "config": self.config,
            "parameters": [p.value for p in self.model.parameters()],
            "train_loss": self.train_loss,
            "accuracy": self.accuracy,
        }
        torch.save(checkpoint, os.path.join(self.logs_dir, self.config.name + ".ckpt"))

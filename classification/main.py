"""
Copyright (c) 2025. All rights reserved.
"""

"""
CLI for training a scalar-Value MLP classifier on two-class point data.
"""

import argparse
import logging
from typing import List, Optional

from classification.configs import DataConfig, ExperimentConfig, ModelConfig, TrainConfig
from classification.experiment import Experiment


def parse_layer_sizes(value: str) -> List[int]:
    """Parse comma-separated string into integer list.

    Converts string like '16,16,1' into [16, 16, 1] for layer output sizes.

    Args:
        value (str): Comma-separated string of integers

    Returns:
        List[int]: List of parsed integer values

    Raises:
        ValueError: If any value in the string cannot be converted to int
    """
    return [int(x.strip()) for x in value.split(",")]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Train a scalar autograd MLP classifier")
    parser.add_argument(
        "--run_name", type=str, default=None, help="Name for this training run in TensorBoard logs."
    )
    parser.add_argument(
        "--logs_dir", type=str, default="logs", help="Directory for TensorBoard logs and checkpoints."
    )
    # Train Loop
    parser.add_argument(
        "--epochs", type=int, default=100, help="Number of epochs to train a model. Default is 100."
    )
    parser.add_argument(
        "--custom_loss",
        type=str,
        default="hinge",
        help="Loss function to use for training loop: hinge or mse. Default is hinge.",
    )
    ## Optimizer and Learning Rate
    parser.add_argument(
        "--optimizer", type=str, default="sgd", help="Type of optimizer to use. Default is SGD."
    )
    parser.add_argument(
        "--lr", type=float, default=1.0, help="Initial learning rate for training. Default is 1.0"
    )
    parser.add_argument(
        "--lr_scheduler",
        type=str,
        default="linear",
        help="LR schedule: linear (decay to 10%% of lr) or constant. Default is linear.",
    )
    parser.add_argument(
        "--alpha", type=float, default=1e-4, help="L2 regularization strength. Default is 1e-4."
    )
    parser.add_argument(
        "--log_every_k_steps", type=int, default=10, help="Log metrics every k epochs. Default is 10."
    )
    # Data
    parser.add_argument("--x_csv", type=str, default=None, help="Feature CSV with rows index,x0,x1.")
    parser.add_argument("--y_csv", type=str, default=None, help="Label CSV with rows index,label.")
    parser.add_argument(
        "--num_samples",
        type=int,
        default=100,
        help="Number of generated two-moons samples when no CSV files are given.",
    )
    parser.add_argument(
        "--noise", type=float, default=0.1, help="Noise level of generated samples. Default is 0.1."
    )
    parser.add_argument(
        "--fix_random_seed",
        action="store_true",
        help="Fix random seeds for finding consistencies between runs.",
    )
    parser.add_argument("--random_seed", type=int, default=1337, help="Seed used with --fix_random_seed.")
    # Model
    parser.add_argument(
        "--layer_sizes",
        type=parse_layer_sizes,
        default=[16, 16, 1],
        help="Output size of each MLP layer as comma-separated values (e.g., '16,16,1').",
    )
    parser.add_argument(
        "--plot", action="store_true", help="Log scatter and decision boundary plots to TensorBoard."
    )
    parser.add_argument(
        "--log_level", type=str, default="INFO", help="Python logging level. Default is INFO."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> Experiment:
    args: argparse.Namespace = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper()))

    experiment_config: ExperimentConfig = ExperimentConfig(
        type="classification",
        name=args.run_name,
        train_config=TrainConfig(
            epochs=args.epochs,
            custom_loss=args.custom_loss,
            optimizer=args.optimizer,
            lr=args.lr,
            lr_scheduler=args.lr_scheduler,
            alpha=args.alpha,
            log_every_k_steps=args.log_every_k_steps,
        ),
        data=DataConfig(
            x_csv=args.x_csv,
            y_csv=args.y_csv,
            num_samples=args.num_samples,
            noise=args.noise,
            fix_random_seed=args.fix_random_seed,
            random_seed=args.random_seed,
        ),
        model=ModelConfig(name="mlp", nin=2, nouts=args.layer_sizes),
    )

    experiment: Experiment = Experiment(experiment_config, logs_dir=args.logs_dir)

    # Train
    experiment.train()

    # Create and log visualization plots
    if args.plot:
        experiment.plot_results()

    return experiment


if __name__ == "__main__":
    main()

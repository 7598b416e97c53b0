"""
Copyright (c) 2025. All rights reserved.
"""

"""
TensorBoard logging utilities for training runs.

This module provides a Logger class that wraps PyTorch's SummaryWriter to
log training metrics and figures to TensorBoard, echoing scalars to the
console for immediate feedback.
"""

from typing import Optional, Union

from matplotlib.figure import Figure
from torch.utils.tensorboard import SummaryWriter


class Logger:
    """
    TensorBoard logging wrapper for training runs.

    Provides convenient methods to log scalars and matplotlib figures
    to TensorBoard while also providing console output.
    """

    def __init__(self, log_dir: str, run_name: Optional[str] = None):
        """
        Initialize the Logger with TensorBoard SummaryWriter.

        Args:
            log_dir (str): Base directory for TensorBoard logs
            run_name (str, optional): Name for this specific run. Creates subdirectory if provided.
        """
        if run_name:
            self.log_dir = f"{log_dir}/{run_name}"
        else:
            self.log_dir = log_dir
        self.writer = SummaryWriter(self.log_dir)

    def log_scalars(self, scalar_dict: dict[str, Union[int, float]], step: int = 0) -> None:
        """
        Log scalar values to TensorBoard and print to console.

        Args:
            scalar_dict (dict): Dictionary of metric names and values
            step (int): Global step number for TensorBoard timeline
        """
        for k, v in scalar_dict.items():
            self.writer.add_scalar(k, v, step)

        print(", ".join(f"{k}:{v}" for k, v in scalar_dict.items()))

    def log_figure(self, tag: str, fig: Figure, step: int = 0) -> None:
        """
        Log matplotlib figure to TensorBoard.

        Args:
            tag (str): Name/tag for the figure in TensorBoard
            fig (Figure): Matplotlib figure object to log
            step (int): Global step number for TensorBoard timeline
        """
        self.writer.add_figure(tag, fig, step)

    def log_text(self, tag: str, text: str, step: int = 0) -> None:
        """Log a block of text, e.g. the DOT source of a graph."""
        self.writer.add_text(tag, text, step)

    def close(self) -> None:
        """
        Close the TensorBoard writer and flush any remaining data.
        """
        self.writer.close()

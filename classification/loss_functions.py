"""
Loss function utilities: Hinge, MSE and L2 regularization over scalar Values.

Losses are ordinary graph construction: each one combines model scores and
targets with engine primitives and returns a single Value to call
``backward()`` on.
"""

from typing import Callable, List, Sequence

from scalargrad import Value

LossFunction = Callable[[Sequence[Value], Sequence[float]], Value]


def _mean(terms: List[Value]) -> Value:
    total = Value(0.0)
    for t in terms:
        total = total + t
    return total / len(terms)


def hinge_loss(scores: Sequence[Value], targets: Sequence[float]) -> Value:
    """Max-margin loss mean(relu(1 - y * score)) for labels in {-1, +1}.

    A sample stops contributing gradient once it is on the right side of
    the boundary with margin at least 1.
    """
    return _mean([(1 - y * score).relu() for score, y in zip(scores, targets)])


def mse_loss(scores: Sequence[Value], targets: Sequence[float]) -> Value:
    """Mean squared error mean((score - y)^2)."""
    return _mean([(score - y) ** 2 for score, y in zip(scores, targets)])


def l2_regularization(parameters: Sequence[Value], alpha: float) -> Value:
    """Weight decay term alpha * sum(p^2) over all parameters."""
    total = Value(0.0)
    for p in parameters:
        total = total + p * p
    return alpha * total


def get_loss_function(custom_loss: str) -> LossFunction:
    """Factory function for data loss functions.

    Args:
        custom_loss (str): Loss function identifier. Supported values:
                          - 'hinge': Max-margin loss for +1/-1 labels
                          - 'mse': Mean Squared Error

    Returns:
        LossFunction: Callable taking (scores, targets) and returning a Value

    Raises:
        ValueError: If unsupported loss function identifier is provided

    Example:
        loss_fn = get_loss_function('hinge')
        loss = loss_fn(scores, labels)
    """
    if custom_loss == "hinge":
        return hinge_loss
    elif custom_loss == "mse":
        return mse_loss
    else:
        raise ValueError(
            f"Unsupported loss function: {custom_loss}. "
            f"Supported functions: hinge, mse"
        )

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Graph node storage and the backward-rule registry.

A Node is the unit of the expression graph. It never computes anything by
itself: the primitive that creates it records which operation produced it
(``op``) and the operands it consumed (``parents``), and the reverse pass
looks up the matching rule in ``BACKWARD_RULES`` to push gradient into those
operands.

Classes:
    Op: Tags for every primitive the engine knows how to differentiate
    Node: Mutable scalar record shared by all handles that point at it

Functions:
    register_backward: Decorator binding a backward rule to an Op
"""

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:
    from scalargrad.value import Value


class Op(str, Enum):
    """Operation tag carried by every node.

    The string value is the label shown by graph renderers.
    """

    VAL = "val"
    ADD = "+"
    SUB = "-"
    NEG = "neg"
    MUL = "*"
    POW = "pow"
    EXP = "exp"
    TANH = "tanh"
    RELU = "relu"


BackwardRule = Callable[["Node"], None]

BACKWARD_RULES: Dict[Op, BackwardRule] = {}


def register_backward(op: Op) -> Callable[[BackwardRule], BackwardRule]:
    """Register ``func`` as the backward rule for nodes produced by ``op``.

    Args:
        op (Op): Operation tag the rule belongs to

    Returns:
        Callable: Decorator returning the rule unchanged

    Example:
        @register_backward(Op.NEG)
        def _neg_backward(out: Node) -> None:
            (a,) = out.parents
            a.grad -= out.grad
    """

    def decorator(func: BackwardRule) -> BackwardRule:
        BACKWARD_RULES[op] = func
        return func

    return decorator


@register_backward(Op.VAL)
def _leaf_backward(out: "Node") -> None:
    pass


class Node:
    """Scalar record in the expression graph.

    Attributes:
        value (float): Current scalar value, updated in place by optimizers
        grad (float): Gradient accumulator, zero until a reverse pass runs
        op (Op): Primitive that produced this node (Op.VAL for leaves)
        parents (Tuple[Value, ...]): Operand handles in construction order
        label (str): Optional human readable name
        exponent (Optional[float]): Constant exponent for Op.POW nodes
    """

    __slots__ = ("value", "grad", "op", "parents", "label", "exponent")

    def __init__(
        self,
        value: float,
        op: Op = Op.VAL,
        parents: Tuple["Value", ...] = (),
        label: str = "",
        exponent: Optional[float] = None,
    ) -> None:
        self.value = float(value)
        self.grad = 0.0
        self.op = op
        self.parents = tuple(parents)
        self.label = label
        self.exponent = exponent

    def run_backward(self) -> None:
        """Push this node's gradient into its parents using the rule for its op."""
        BACKWARD_RULES[self.op](self)

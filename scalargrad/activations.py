"""
Copyright (c) 2025. All rights reserved.
"""

"""
Activation primitives: tanh, relu

Both rules reuse the forward result instead of recomputing from the input:
d/dx tanh(x) = 1 - tanh²(x), and the relu gate is open exactly when the
output is positive.
"""

import math

from scalargrad.node import Node, Op, register_backward
from scalargrad.value import Value


def tanh(a: Value) -> Value:
    """Hyperbolic tangent, output in [-1, 1]."""
    return Value._from_node(Node(math.tanh(a.value), op=Op.TANH, parents=(a,)))


@register_backward(Op.TANH)
def _tanh_backward(out: Node) -> None:
    (a,) = out.parents
    a.grad += out.grad * (1 - out.value**2)


def relu(a: Value) -> Value:
    """Rectified linear unit max(0, x). A nan input stays nan."""
    x = a.value
    return Value._from_node(Node(x if not x < 0 else 0.0, op=Op.RELU, parents=(a,)))


@register_backward(Op.RELU)
def _relu_backward(out: Node) -> None:
    (a,) = out.parents
    a.grad += out.grad * (1.0 if out.value > 0 else 0.0)

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Arithmetic primitives with their backward rules.

Functions: add, sub, neg, mul, div, power, exp

Each primitive computes the forward value from its operands, records the
operands as parents of a new node, and registers (once, at import time) the
rule that pushes the new node's gradient back into those operands. Division
is not a primitive of its own: it is ``a * b**-1``, so it reuses the product
and power rules.

Degenerate inputs are not rejected. A zero divisor, a negative base under a
fractional exponent or an overflowing exponential yields inf/nan, which then
flows through the rest of the graph like any other number.
"""

import math
from typing import Optional

from scalargrad.node import Node, Op, register_backward
from scalargrad.value import Value


def _is_odd_integer(k: float) -> bool:
    return float(k).is_integer() and int(k) % 2 == 1


def float_pow(base: float, k: float) -> float:
    """IEEE-style ``base ** k`` that returns inf/nan instead of raising.

    ``math.pow`` raises on poles, domain errors and overflow, and the builtin
    ``**`` returns a complex number for a negative base under a fractional
    exponent. Neither is acceptable inside a graph of real scalars.
    """
    try:
        return math.pow(base, k)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(k) else math.inf
    except ValueError:
        if base == 0.0:
            return math.copysign(math.inf, base) if _is_odd_integer(k) else math.inf
        return math.nan


def _make(value: float, op: Op, *parents: Value, exponent: Optional[float] = None) -> Value:
    return Value._from_node(Node(value, op=op, parents=parents, exponent=exponent))


def add(a: Value, b: Value) -> Value:
    return _make(a.value + b.value, Op.ADD, a, b)


@register_backward(Op.ADD)
def _add_backward(out: Node) -> None:
    a, b = out.parents
    a.grad += out.grad
    b.grad += out.grad


def sub(a: Value, b: Value) -> Value:
    return _make(a.value - b.value, Op.SUB, a, b)


@register_backward(Op.SUB)
def _sub_backward(out: Node) -> None:
    a, b = out.parents
    a.grad += out.grad
    b.grad -= out.grad


def neg(a: Value) -> Value:
    return _make(-a.value, Op.NEG, a)


@register_backward(Op.NEG)
def _neg_backward(out: Node) -> None:
    (a,) = out.parents
    a.grad -= out.grad


def mul(a: Value, b: Value) -> Value:
    return _make(a.value * b.value, Op.MUL, a, b)


@register_backward(Op.MUL)
def _mul_backward(out: Node) -> None:
    a, b = out.parents
    a.grad += out.grad * b.value
    b.grad += out.grad * a.value


def power(a: Value, k: float) -> Value:
    """Raise ``a`` to the constant exponent ``k``.

    The exponent is stored on the node, not in the graph, so it receives no
    gradient.

    Args:
        a (Value): Base
        k (float): Constant real exponent

    Returns:
        Value: New node holding a.value ** k
    """
    k = float(k)
    return _make(float_pow(a.value, k), Op.POW, a, exponent=k)


@register_backward(Op.POW)
def _pow_backward(out: Node) -> None:
    (a,) = out.parents
    k = out.exponent
    a.grad += out.grad * k * float_pow(a.value, k - 1)


def div(a: Value, b: Value) -> Value:
    return mul(a, power(b, -1))


def exp(a: Value) -> Value:
    try:
        value = math.exp(a.value)
    except OverflowError:
        value = math.inf
    return _make(value, Op.EXP, a)


@register_backward(Op.EXP)
def _exp_backward(out: Node) -> None:
    (a,) = out.parents
    # d/dx e^x = e^x, which is the forward result
    a.grad += out.grad * out.value

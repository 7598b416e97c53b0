"""
Copyright (c) 2025. All rights reserved.
"""

"""
Caller-facing handle over a graph node.

Every arithmetic expression written against ``Value`` objects builds the
expression graph as a side effect. A ``Value`` is only a reference: copying
it, storing it in a list or passing it to a function never duplicates the
underlying node, so a leaf used in several places accumulates gradient from
all of them.

Classes:
    Value: Shared reference to a Node with operator overloads

Functions:
    lift: Wrap a plain number into a fresh leaf, pass handles through
"""

from numbers import Real
from typing import Tuple, Union

from scalargrad.node import Node, Op

Operand = Union["Value", float, int]


class Value:
    """Handle to a scalar node in the expression graph.

    Two handles are equal when they point at the same node, regardless of
    the numbers they hold. This is what graph traversal and parameter
    bookkeeping rely on; compare ``.value`` to compare numbers.

    Example:
        a = Value(2.0, label="a")
        b = Value(-3.0, label="b")
        c = a * b + a
        c.backward()
        print(a.grad)  # b + 1 = -2.0
    """

    __slots__ = ("_node",)

    def __init__(self, value: float = 0.0, label: str = "") -> None:
        self._node = Node(value, label=label)

    @classmethod
    def _from_node(cls, node: Node) -> "Value":
        handle = cls.__new__(cls)
        handle._node = node
        return handle

    @property
    def value(self) -> float:
        return self._node.value

    @value.setter
    def value(self, value: float) -> None:
        self._node.value = float(value)

    @property
    def grad(self) -> float:
        return self._node.grad

    @grad.setter
    def grad(self, grad: float) -> None:
        self._node.grad = float(grad)

    def zero_grad(self) -> None:
        self._node.grad = 0.0

    @property
    def op(self) -> str:
        """Tag of the primitive that produced this node ("val" for leaves)."""
        return self._node.op.value

    @property
    def label(self) -> str:
        return self._node.label

    @label.setter
    def label(self, label: str) -> None:
        self._node.label = label

    def with_label(self, label: str) -> "Value":
        """Set the label and return this handle, for use inside expressions."""
        self._node.label = label
        return self

    @property
    def parents(self) -> Tuple["Value", ...]:
        return self._node.parents

    @property
    def node(self) -> Node:
        return self._node

    def _backward(self) -> None:
        self._node.run_backward()

    def backward(self) -> None:
        """Run the reverse pass with this value as the root.

        Gradients are accumulated, not overwritten: zero them between
        independent passes (see ``scalargrad.nn.Module.zero_grad``).
        """
        graph.backward(self)

    def exp(self) -> "Value":
        return simple.exp(self)

    def tanh(self) -> "Value":
        return activations.tanh(self)

    def relu(self) -> "Value":
        return activations.relu(self)

    def __add__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.add(self, lift(other))

    def __radd__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.add(lift(other), self)

    def __sub__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.sub(self, lift(other))

    def __rsub__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.sub(lift(other), self)

    def __mul__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.mul(self, lift(other))

    def __rmul__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.mul(lift(other), self)

    def __truediv__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.div(self, lift(other))

    def __rtruediv__(self, other: Operand) -> "Value":
        if not _is_operand(other):
            return NotImplemented
        return simple.div(lift(other), self)

    def __neg__(self) -> "Value":
        return simple.neg(self)

    def __pow__(self, exponent: float) -> "Value":
        if isinstance(exponent, Value):
            raise TypeError("Exponent must be a constant number, not a Value")
        if not isinstance(exponent, Real):
            return NotImplemented
        return simple.power(self, exponent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        text = f"Value(value={self._node.value:.4f}, grad={self._node.grad:.4f})"
        if self._node.label:
            text += f" | {self._node.label}"
        return text


def _is_operand(other: object) -> bool:
    return isinstance(other, (Value, Real))


def lift(x: Operand) -> Value:
    """Return ``x`` unchanged if it is a Value, otherwise a new leaf holding it."""
    if isinstance(x, Value):
        return x
    return Value(float(x))


# Primitive modules build Values themselves, so they are bound after the class.
from scalargrad import activations, graph, simple  # noqa: E402

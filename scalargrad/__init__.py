"""
Copyright (c) 2025. All rights reserved.
"""

"""
Scalar reverse-mode automatic differentiation.

Modules:
    node: Graph node storage and the backward-rule registry
    value: Caller-facing Value handle with operator overloads
    simple: Arithmetic primitives (add, sub, neg, mul, div, power, exp)
    activations: Activation primitives (tanh, relu)
    graph: Topological ordering and the reverse pass
    nn: Neuron, Layer and MLP built from Values
    visualize: Graphviz rendering of expression graphs
"""

from .value import Value, lift
from .activations import relu, tanh
from .graph import backward, topological_order
from .nn import MLP, Layer, Module, Neuron
from .node import Op
from .simple import add, div, exp, mul, neg, power, sub

__version__ = "1.0.0"

__all__ = [
    # Graph values
    "Value",
    "lift",
    "Op",
    # Primitives
    "add",
    "sub",
    "neg",
    "mul",
    "div",
    "power",
    "exp",
    "tanh",
    "relu",
    # Reverse pass
    "topological_order",
    "backward",
    # Networks
    "Module",
    "Neuron",
    "Layer",
    "MLP",
]

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Neural network building blocks on top of scalar Values: Neuron, Layer, MLP

These modules only build graphs out of existing primitives; they introduce
no backward rules of their own. Their job is to own the trainable leaves and
hand them out as one flat list through ``parameters()``.
"""

import random
from typing import List, Optional, Sequence, Union

from scalargrad.value import Operand, Value, lift


class Module:
    """Base class for anything that owns trainable Values."""

    def parameters(self) -> List[Value]:
        return []

    def zero_grad(self) -> None:
        """Reset the gradient of every parameter.

        The reverse pass accumulates, so this has to run between optimization
        steps or the next step sees stale gradients.
        """
        for p in self.parameters():
            p.zero_grad()


class Neuron(Module):
    """Single tanh unit: tanh(b + w1*x1 + ... + wn*xn).

    Attributes:
        w (List[Value]): One weight per input, uniform in [-1, 1]
        b (Value): Bias, uniform in [-1, 1]
    """

    def __init__(self, nin: int, rng: Optional[random.Random] = None) -> None:
        """Create a neuron with ``nin`` inputs.

        Args:
            nin (int): Fan-in
            rng (random.Random, optional): Source for the initial weights.
                Pass a seeded instance for reproducible networks.
        """
        rng = rng if rng is not None else random.Random()
        self.w = [Value(rng.uniform(-1, 1)) for _ in range(nin)]
        self.b = Value(rng.uniform(-1, 1))

    def __call__(self, x: Sequence[Operand]) -> Value:
        if len(x) != len(self.w):
            raise ValueError(f"Neuron expects {len(self.w)} inputs, got {len(x)}")
        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * lift(xi)
        return act.tanh()

    def parameters(self) -> List[Value]:
        return self.w + [self.b]

    def __repr__(self) -> str:
        return f"TanhNeuron({len(self.w)})"


class Layer(Module):
    """``nout`` independent neurons applied to the same input vector."""

    def __init__(self, nin: int, nout: int, rng: Optional[random.Random] = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.neurons = [Neuron(nin, rng) for _ in range(nout)]

    def __call__(self, x: Sequence[Operand]) -> List[Value]:
        return [n(x) for n in self.neurons]

    def parameters(self) -> List[Value]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self) -> str:
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """Multi-layer perceptron.

    MLP(2, [16, 16, 1]) is Input(2) -> Layer(2->16) -> Layer(16->16) ->
    Layer(16->1). Calling it always returns a list, one Value per output
    neuron of the last layer.
    """

    def __init__(self, nin: int, nouts: List[int], rng: Optional[random.Random] = None) -> None:
        if not nouts:
            raise ValueError("MLP needs at least one layer size")
        rng = rng if rng is not None else random.Random()
        sz = [nin] + list(nouts)
        self.layers = [Layer(sz[i], sz[i + 1], rng) for i in range(len(nouts))]

    def __call__(self, x: Sequence[Union[Value, float]]) -> List[Value]:
        for layer in self.layers:
            x = layer(x)
        return list(x)

    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self) -> str:
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"

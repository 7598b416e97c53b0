"""
Demonstration of the scalar autograd engine on a small mixed expression.

Builds the expression

    c = a + b
    d = a * b + b^3
    c += c + 1
    d += d * 2 + relu(b + a)
    e = c - d
    f = e^2
    g = f / 2 + 10 / f

from a = -4 and b = 2, runs a single reverse pass from g, and prints every
labelled value with its gradient. With ``--dot PATH`` the graph is also
written out in Graphviz format.
"""

import argparse
from typing import Dict, Optional

from scalargrad.value import Value
from scalargrad.visualize import draw_dot


def build_expression() -> Dict[str, Value]:
    """Build the demo graph and return its named nodes (leaves included)."""
    a = Value(-4.0, label="a")
    b = Value(2.0, label="b")
    c = a + b
    d = a * b + b**3
    c += c + 1
    d += d * 2 + (b + a).relu()
    e = (c - d).with_label("e")
    f = (e**2).with_label("f")
    g = (f / 2 + 10 / f).with_label("g")
    return {"a": a, "b": b, "c": c.with_label("c"), "d": d.with_label("d"), "e": e, "f": f, "g": g}


def main(argv: Optional[list] = None) -> Dict[str, Value]:
    parser = argparse.ArgumentParser(description="Run the scalargrad demo expression")
    parser.add_argument("--dot", type=str, default=None, help="Write the graph as DOT text to this path")
    args = parser.parse_args(argv)

    values = build_expression()
    values["g"].backward()

    for name, v in values.items():
        print(f"{name}: value={v.value:.4f}, grad={v.grad:.4f}")

    if args.dot:
        with open(args.dot, "w") as f:
            f.write(draw_dot(values["g"]).source)
        print(f"Graph written to {args.dot}")
    return values


if __name__ == "__main__":
    main()

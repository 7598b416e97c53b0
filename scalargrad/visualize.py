"""
Copyright (c) 2025. All rights reserved.
"""

"""
Render an expression graph as a Graphviz digraph.

Every node becomes a record vertex showing its label, value and gradient.
Every non-leaf node additionally gets an operation vertex, with edges
operand -> operation -> result, so the picture reads like the expression.
"""

from typing import TYPE_CHECKING, List, Set, Tuple

from graphviz import Digraph

if TYPE_CHECKING:
    from scalargrad.value import Value


def trace(root: "Value") -> Tuple[List["Value"], List[Tuple["Value", "Value"]]]:
    """Collect every node and every (operand, result) edge under ``root``.

    Nodes are returned in depth-first discovery order, edges in the order
    their operands are stored, so the rendered source is stable.
    """
    nodes: List["Value"] = []
    edges: List[Tuple["Value", "Value"]] = []
    seen: Set["Value"] = {root}
    stack = [root]
    while stack:
        v = stack.pop()
        nodes.append(v)
        for parent in v.parents:
            edges.append((parent, v))
        for parent in reversed(v.parents):
            if parent not in seen:
                seen.add(parent)
                stack.append(parent)
    return nodes, edges


_RECORD_SPECIAL = str.maketrans({c: "\\" + c for c in "\\{}|<>"})


def escape_record_label(text: str) -> str:
    """Backslash-escape the characters Graphviz treats as record structure."""
    return text.translate(_RECORD_SPECIAL)


def _value_id(v: "Value") -> str:
    return f"value_node_{id(v.node)}"


def _op_id(v: "Value") -> str:
    return f"op_node_{id(v.node)}"


def draw_dot(root: "Value", rankdir: str = "LR") -> Digraph:
    """Build a Graphviz description of the graph under ``root``.

    Args:
        root (Value): Output node of the expression
        rankdir (str): Graphviz layout direction, "LR" or "TB"

    Returns:
        Digraph: Graph object; ``.source`` holds the DOT text and ``.render()``
                 writes an image when the Graphviz binaries are installed
    """
    dot = Digraph(format="svg", graph_attr={"rankdir": rankdir})
    nodes, edges = trace(root)
    for n in nodes:
        fields = [escape_record_label(n.label)] if n.label else []
        fields += [f"value={n.value:.4f}", f"grad={n.grad:.4f}"]
        dot.node(name=_value_id(n), label="{ " + " | ".join(fields) + " }", shape="record")
        if n.parents:
            dot.node(name=_op_id(n), label=n.op)
            dot.edge(_op_id(n), _value_id(n))
    for operand, result in edges:
        dot.edge(_value_id(operand), _op_id(result))
    return dot

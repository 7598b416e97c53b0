"""
Copyright (c) 2025. All rights reserved.
"""

"""
Topological ordering and the reverse pass.

Functions:
    topological_order: Root-first ordering of every node reachable from a root
    backward: Seed the root gradient and apply each node's backward rule
"""

import logging
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from scalargrad.value import Value

logger = logging.getLogger(__name__)


def topological_order(root: "Value") -> List["Value"]:
    """Order the graph under ``root`` so that every node precedes its parents.

    Depth-first search over ``parents`` in their stored order. A node is
    marked visited on first encounter and emitted once all of its parents
    have been emitted; the emitted (parents-first) sequence is reversed
    before returning. The traversal keeps its own stack, so long chains
    such as a sum over thousands of terms do not hit the recursion limit.

    Args:
        root (Value): Output node of the expression

    Returns:
        List[Value]: Each reachable node exactly once, root first, leaves last

    Example:
        x = Value(3.0)
        y = x * x + x
        order = topological_order(y)
        # order[0] is y, x appears after both x * x and y
    """
    order: List["Value"] = []
    visited = {root}
    stack = [(root, iter(root.parents))]
    while stack:
        node, pending = stack[-1]
        for parent in pending:
            if parent not in visited:
                visited.add(parent)
                stack.append((parent, iter(parent.parents)))
                break
        else:
            stack.pop()
            order.append(node)
    order.reverse()
    return order


def backward(root: "Value") -> None:
    """Compute d(root)/d(node) for every node reachable from ``root``.

    The root gradient is set to 1 and every rule runs in root-first order,
    so a node's gradient is complete (all consumers have contributed) by the
    time its own rule forwards it upstream. Existing gradients are not
    cleared: running twice without zeroing accumulates.

    Args:
        root (Value): Output node of the expression
    """
    order = topological_order(root)
    logger.debug("Reverse pass over %d nodes", len(order))
    root.grad = 1.0
    for node in order:
        node._backward()

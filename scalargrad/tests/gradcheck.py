"""
Finite-difference gradient checking shared by the engine tests.
"""

from typing import Callable, List, Sequence

from scalargrad import Value

ScalarFunction = Callable[[List[Value]], Value]


def analytic_grads(f: ScalarFunction, xs: Sequence[float]) -> List[float]:
    leaves = [Value(x) for x in xs]
    f(leaves).backward()
    return [leaf.grad for leaf in leaves]


def numeric_grads(f: ScalarFunction, xs: Sequence[float], h: float = 1e-6) -> List[float]:
    """Central differences (f(x + h) - f(x - h)) / 2h, one input at a time."""
    grads = []
    for i in range(len(xs)):
        up = list(xs)
        down = list(xs)
        up[i] += h
        down[i] -= h
        f_up = f([Value(x) for x in up]).value
        f_down = f([Value(x) for x in down]).value
        grads.append((f_up - f_down) / (2 * h))
    return grads


def assert_gradients_match(test_case, f: ScalarFunction, xs: Sequence[float], rel_tol: float = 1e-4) -> None:
    """Fail ``test_case`` unless the reverse pass agrees with finite differences."""
    for i, (a, n) in enumerate(zip(analytic_grads(f, xs), numeric_grads(f, xs))):
        scale = max(1.0, abs(a), abs(n))
        test_case.assertLessEqual(
            abs(a - n),
            rel_tol * scale,
            msg=f"d/dx{i} at {list(xs)}: analytic {a}, numeric {n}",
        )

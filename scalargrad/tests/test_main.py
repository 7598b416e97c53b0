"""
Copyright (c) 2025. All rights reserved.
"""

"""
End-to-end tests for the demo expression and its command line entry point.
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

import torch

# Add repository root to path to import scalargrad
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from scalargrad.main import build_expression, main


class TestDemoExpression(unittest.TestCase):
    """Test cases for the demo expression"""

    def test_values_and_gradients(self):
        values = build_expression()
        values["g"].backward()
        self.assertAlmostEqual(values["g"].value, 101 / 18)
        self.assertAlmostEqual(values["a"].grad, 244 / 27)
        self.assertAlmostEqual(values["b"].grad, 1342 / 27)

    def test_matches_torch(self):
        values = build_expression()
        values["g"].backward()

        a = torch.tensor([-4.0], dtype=torch.double, requires_grad=True)
        b = torch.tensor([2.0], dtype=torch.double, requires_grad=True)
        c = a + b
        d = a * b + b**3
        c = c + c + 1
        d = d + d * 2 + (b + a).relu()
        e = c - d
        f = e**2
        g = f / 2.0 + 10.0 / f
        g.backward()

        self.assertAlmostEqual(values["g"].value, g.item(), places=10)
        self.assertAlmostEqual(values["a"].grad, a.grad.item(), places=10)
        self.assertAlmostEqual(values["b"].grad, b.grad.item(), places=10)

    def test_labels(self):
        values = build_expression()
        for name, v in values.items():
            self.assertEqual(v.label, name)


class TestMain(unittest.TestCase):
    """Test cases for the command line entry point"""

    def test_prints_every_value(self):
        out = io.StringIO()
        with redirect_stdout(out):
            values = main([])
        text = out.getvalue()
        for name in values:
            self.assertIn(f"{name}: value=", text)
        self.assertIn("g: value=5.6111, grad=1.0000", text)

    def test_writes_dot_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "graph.dot")
            with redirect_stdout(io.StringIO()):
                main(["--dot", path])
            self.assertTrue(os.path.exists(path))
            with open(path) as f:
                source = f.read()
            self.assertIn("digraph", source)
            self.assertIn("{ g | value=5.6111 | grad=1.0000 }", source)


if __name__ == "__main__":
    unittest.main()

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Test suite for the scalargrad engine.

Covers the primitive forward values and backward rules, graph ordering and
the reverse pass, the network building blocks and graph rendering. Reference
gradients come from finite differences and from PyTorch float64 autograd.
"""

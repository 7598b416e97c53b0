"""
Copyright (c) 2025. All rights reserved.
"""

"""
Unit tests for the optimizer, learning rate schedules, losses and training loop.
"""

import os
import random
import sys
import tempfile
import unittest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from scalargrad import MLP, Value

from classification.loss_functions import get_loss_function, hinge_loss, l2_regularization, mse_loss
from classification.train import (
    SGD,
    ConstantLR,
    LinearDecayLR,
    TrainContext,
    compute_loss,
    get_lr_scheduler,
    get_optimizer,
    predict_model,
    train_model,
)


class TestSGD(unittest.TestCase):
    """Test suite for SGD optimizer."""

    def test_step(self):
        p = Value(1.0)
        p.grad = 0.5
        SGD([p], lr=0.1).step()

        self.assertAlmostEqual(p.value, 0.95)

    def test_zero_grad(self):
        params = [Value(1.0), Value(2.0)]
        for p in params:
            p.grad = 3.0
        SGD(params, lr=0.1).zero_grad()

        self.assertEqual([p.grad for p in params], [0.0, 0.0])


class TestSchedulers(unittest.TestCase):
    """Test suite for learning rate schedules."""

    def test_constant(self):
        optimizer = SGD([], lr=0.3)
        scheduler = ConstantLR(optimizer)
        for _ in range(5):
            scheduler.step()

        self.assertEqual(optimizer.lr, 0.3)

    def test_linear_decay(self):
        """lr goes 1.0 - 0.9 * k / n and stops at 10% of the start"""
        optimizer = SGD([], lr=1.0)
        scheduler = LinearDecayLR(optimizer, total_steps=10, start_lr=1.0)
        rates = []
        for _ in range(12):
            scheduler.step()
            rates.append(optimizer.lr)

        self.assertAlmostEqual(rates[0], 0.91)
        self.assertAlmostEqual(rates[4], 0.55)
        self.assertAlmostEqual(rates[9], 0.1)
        self.assertAlmostEqual(rates[11], 0.1)

    def test_factories(self):
        model = MLP(2, [1], random.Random(0))
        optimizer = get_optimizer("sgd", lr=0.5, model=model)

        self.assertIsInstance(optimizer, SGD)
        self.assertEqual(len(optimizer.params), 3)
        self.assertIsInstance(get_lr_scheduler("linear", optimizer, epochs=5, lr=0.5), LinearDecayLR)
        self.assertIsInstance(get_lr_scheduler("constant", optimizer, epochs=5, lr=0.5), ConstantLR)

    def test_factory_errors(self):
        model = MLP(2, [1], random.Random(0))
        with self.assertRaises(ValueError):
            get_optimizer("adam", lr=0.5, model=model)
        with self.assertRaises(ValueError):
            get_lr_scheduler("cosine", SGD([], lr=0.5), epochs=5, lr=0.5)


class TestLossFunctions(unittest.TestCase):
    """Test suite for loss functions."""

    def test_hinge(self):
        """Only samples inside the margin contribute"""
        scores = [Value(2.0), Value(0.5), Value(-0.5)]
        loss = hinge_loss(scores, [1.0, 1.0, 1.0])
        loss.backward()

        self.assertAlmostEqual(loss.value, (0.0 + 0.5 + 1.5) / 3)
        self.assertEqual(scores[0].grad, 0.0)
        self.assertAlmostEqual(scores[1].grad, -1 / 3)

    def test_mse(self):
        scores = [Value(1.0), Value(-2.0)]
        loss = mse_loss(scores, [0.0, -1.0])

        self.assertAlmostEqual(loss.value, 1.0)

    def test_l2(self):
        params = [Value(1.0), Value(-2.0)]
        loss = l2_regularization(params, alpha=0.5)
        loss.backward()

        self.assertAlmostEqual(loss.value, 2.5)
        self.assertAlmostEqual(params[1].grad, -2.0)

    def test_get_loss_function(self):
        self.assertIs(get_loss_function("hinge"), hinge_loss)
        self.assertIs(get_loss_function("mse"), mse_loss)
        with self.assertRaises(ValueError):
            get_loss_function("cross_entropy")


class TestTrainLoop(unittest.TestCase):
    """Test suite for compute_loss and train_model."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.inputs = [[1.0, 1.0], [1.5, 0.5], [-1.0, -1.0], [-0.5, -1.5]]
        self.targets = [1.0, 1.0, -1.0, -1.0]
        self.model = MLP(2, [4, 1], random.Random(0))

    def tearDown(self):
        self.temp_dir.cleanup()

    def make_context(self, epochs=20, alpha=0.0, lr=0.1):
        optimizer = SGD(self.model.parameters(), lr=lr)
        return TrainContext(
            epochs=epochs,
            optimizer=optimizer,
            lr_scheduler=ConstantLR(optimizer),
            loss_criterion=mse_loss,
            tensorboard_log_dir=self.temp_dir.name,
            alpha=alpha,
            run_name="unit",
            log_every_k_steps=5,
        )

    def test_compute_loss_accuracy(self):
        loss, accuracy = compute_loss(self.model, self.make_context(), self.inputs, self.targets)
        scores = predict_model(self.model, self.inputs)
        expected = sum((s > 0) == (y > 0) for s, y in zip(scores, self.targets)) / 4

        self.assertIsInstance(loss, Value)
        self.assertEqual(accuracy, expected)

    def test_compute_loss_adds_regularization(self):
        plain, _ = compute_loss(self.model, self.make_context(alpha=0.0), self.inputs, self.targets)
        regularized, _ = compute_loss(self.model, self.make_context(alpha=0.1), self.inputs, self.targets)
        penalty = 0.1 * sum(p.value**2 for p in self.model.parameters())

        self.assertAlmostEqual(regularized.value - plain.value, penalty)

    def test_train_model_reduces_loss(self):
        context = self.make_context()
        initial, _ = compute_loss(self.model, context, self.inputs, self.targets)
        final_loss, final_accuracy = train_model(self.model, context, self.inputs, self.targets)

        self.assertLess(final_loss, initial.value)
        self.assertGreaterEqual(final_accuracy, 0.0)
        self.assertLessEqual(final_accuracy, 1.0)
        self.assertTrue(os.path.isdir(os.path.join(self.temp_dir.name, "unit")))

    def test_predict_model(self):
        scores = predict_model(self.model, self.inputs)

        self.assertEqual(len(scores), 4)
        self.assertTrue(all(isinstance(s, float) for s in scores))


if __name__ == "__main__":
    unittest.main()

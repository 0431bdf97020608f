import unittest

import numpy as np

from ffbp.activation import dsigmoid, identity, sigmoid


class TestActivation(unittest.TestCase):

    def test_sigmoid(self):
        x = np.linspace(-10, 10, 41)
        np.testing.assert_allclose(sigmoid(x), 1.0 / (1.0 + np.exp(-x)))
        self.assertEqual(sigmoid(0.0), 0.5)

    def test_sigmoid_range(self):
        y = sigmoid(np.linspace(-30, 30, 101))
        self.assertTrue((y > 0).all())
        self.assertTrue((y < 1).all())

    def test_dsigmoid_from_output(self):
        x = np.linspace(-5, 5, 21)
        y = sigmoid(x)
        h = 1e-6
        numerical = (sigmoid(x + h) - sigmoid(x - h)) / (2 * h)
        np.testing.assert_allclose(dsigmoid(y), numerical, atol=1e-8)

    def test_identity(self):
        np.testing.assert_array_equal(identity([1, -2.5]), [1.0, -2.5])

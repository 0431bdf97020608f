import unittest

import numpy as np

from ffbp.score_functions import (
    classification_accuracy, mean_squared_error, sum_squared_error)


class TestScoreFunctions(unittest.TestCase):

    def test_sum_squared_error(self):
        outputs = np.array([[0.2, 0.9], [0.5, 0.5]])
        targets = np.array([[0.0, 1.0], [1.0, 0.0]])

        expected = 0.5 * (0.04 + 0.01 + 0.25 + 0.25)
        self.assertAlmostEqual(sum_squared_error(outputs, targets), expected)

    def test_mean_squared_error(self):
        outputs = np.array([1.0, 2.0, 3.0])
        targets = np.array([1.0, 0.0, 4.0])

        self.assertAlmostEqual(mean_squared_error(outputs, targets), 5. / 3)
        self.assertEqual(mean_squared_error([], []), 0.0)

    def test_classification_accuracy(self):
        outputs = np.array([[0.1], [0.8], [0.6], [0.3]])
        targets = np.array([[0.0], [1.0], [0.0], [0.0]])

        self.assertEqual(classification_accuracy(outputs, targets), 0.75)
        self.assertEqual(
            classification_accuracy(outputs, targets, threshold=0.7), 1.0)

    def test_classification_accuracy_all_outputs_must_agree(self):
        outputs = np.array([[0.9, 0.1], [0.9, 0.9]])
        targets = np.array([[1.0, 0.0], [1.0, 0.0]])

        self.assertEqual(classification_accuracy(outputs, targets), 0.5)

    def test_shape_mismatch(self):
        with self.assertRaises(ValueError):
            sum_squared_error(np.zeros((2, 1)), np.zeros((2, 2)))
        with self.assertRaises(ValueError):
            classification_accuracy(np.zeros(3), np.zeros(2))

import unittest

import numpy as np

from ffbp import NeuralNetwork
from ffbp.data import sine, xor
from ffbp.score_functions import classification_accuracy, mean_squared_error


class TestXorConvergence(unittest.TestCase):

    def test_xor(self):
        examples = xor.make_dataset()
        n_seeds = 10
        converged = []

        # A 2-2-1 network can land in a local minimum for an unlucky
        # initialization, so several seeds are tried.
        for seed in range(n_seeds):
            net = NeuralNetwork(2, 2, 1, random_state=seed)
            errors = net.train(examples, iterations=2000,
                               learning_rate=0.5, momentum_factor=0.1)

            self.assertEqual(len(errors), 2000)

            if errors[-1] < 0.05:
                converged.append((net, errors))

        self.assertGreater(len(converged), 0)

        for net, errors in converged:
            self.assertLess(errors[-1], errors[0])
            self.assertEqual(
                net.score(examples, score_func=classification_accuracy), 1.0)


class TestRegression(unittest.TestCase):

    def test_single_target_outside_sigmoid_range(self):
        net = NeuralNetwork(1, 1, 1, regression=True, random_state=1234)
        examples = [([0.5], [5.0])]

        errors = net.train(examples, iterations=2000,
                           learning_rate=0.05, momentum_factor=0.1)

        output = net.predict([0.5])[0]

        self.assertLess(abs(output - 5.0), 1e-3)
        self.assertLess(errors[-1], errors[0])

    def test_sine(self):
        rs = np.random.RandomState(1234)
        examples = sine.make_dataset(n=20, random_state=rs)
        net = NeuralNetwork(1, 6, 1, regression=True, random_state=rs)

        initial = net.score(examples, score_func=mean_squared_error)
        net.train(examples, iterations=500,
                  learning_rate=0.02, momentum_factor=0.5)
        final = net.score(examples, score_func=mean_squared_error)

        self.assertLess(final, initial)


if __name__ == '__main__':
    unittest.main()

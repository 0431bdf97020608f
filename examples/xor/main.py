import numpy as np

from ffbp import NeuralNetwork
from ffbp.core.logger import setup_logging
from ffbp.data import xor
from ffbp.score_functions import classification_accuracy


setup_logging(filename='xor-log.txt')

random_state = np.random.RandomState(1234)

examples = xor.make_dataset()

# Two inputs, two hidden units, one sigmoid output.
net = NeuralNetwork(2, 2, 1, regression=False, random_state=random_state)

errors = net.train(examples, iterations=1000,
                   learning_rate=0.5, momentum_factor=0.1)

print("Initial error: %.5f, final error: %.5f" % (errors[0], errors[-1]))

net.evaluate(examples)

print("Accuracy: %.2f" % net.score(examples,
                                   score_func=classification_accuracy))

""" Activation functions for the hidden and output units
"""
import numpy
from scipy.special import expit


def sigmoid(x):
    """ The logistic function, 1 / (1 + exp(-x))
    """
    return expit(x)


def dsigmoid(y):
    """ Derivative of the logistic function expressed in terms of its
    output value, i.e., `y = sigmoid(x)`
    """
    return y * (1.0 - y)


def identity(x):
    return numpy.asarray(x, dtype=numpy.float64)

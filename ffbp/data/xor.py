import numpy


XOR_INPUTS = ((0., 0.), (0., 1.), (1., 0.), (1., 1.))


def make_dataset():
    """
    Make the four example exclusive-or dataset.

    Returns
    -------
    examples: list of (ndarray, ndarray)
        Each item is an `(inputs, targets)` pair with inputs of length 2
        and targets of length 1.
    """
    return [
        (numpy.array(inputs), numpy.array([float(inputs[0] != inputs[1])]))
        for inputs in XOR_INPUTS
    ]

import numpy


def _validate(outputs, targets):
    outputs = numpy.asarray(outputs, dtype=numpy.float64)
    targets = numpy.asarray(targets, dtype=numpy.float64)

    if outputs.shape != targets.shape:
        msg = "`outputs` shape {} doesn't match `targets` shape {}"
        raise ValueError(msg.format(outputs.shape, targets.shape))

    return outputs, targets


def sum_squared_error(outputs, targets):
    """ Half the sum of squared differences between `targets` and
    `outputs`. For a single example this is the error returned by
    :meth:`ffbp.core.network.NeuralNetwork.back_propagate`.
    """
    outputs, targets = _validate(outputs, targets)
    diff = targets - outputs
    return 0.5 * float((diff * diff).sum())


def mean_squared_error(outputs, targets):
    """ The mean over all components of the squared differences
    """
    outputs, targets = _validate(outputs, targets)

    if outputs.size == 0:
        return 0.0

    diff = targets - outputs
    return float((diff * diff).mean())


def classification_accuracy(outputs, targets, threshold=0.5):
    """ Fraction of examples (rows) whose outputs, thresholded at
    `threshold`, all agree with the thresholded targets
    """
    outputs, targets = _validate(outputs, targets)

    if outputs.ndim == 1:
        outputs = outputs.reshape(-1, 1)
        targets = targets.reshape(-1, 1)

    if outputs.shape[0] == 0:
        # No examples to get wrong, so call it perfect rather than nil.
        return 1.0

    agree = (outputs > threshold) == (targets > threshold)

    return float(agree.all(axis=1).mean())

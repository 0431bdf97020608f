import logging

import numpy
from sklearn.utils import check_random_state


logger = logging.getLogger(__name__)


def make_dataset(n=50, low=0.0, high=2*numpy.pi, noise=0.0,
                 random_state=None):
    """
    Make a regression dataset sampling the sine curve.

    Parameters
    ----------
    n: int, default=50
        The number of examples.

    low,high: float, default=0,2*pi
        The interval from which the inputs are uniformly sampled.

    noise: float, default=0
        Standard deviation of the Gaussian noise added to the targets.

    random_state: None, int, or numpy.random.RandomState, default=None
        Include for reproducible results.

    Returns
    -------
    examples: list of (ndarray, ndarray)
        Each item is an `(inputs, targets)` pair, both of length 1. The
        examples are sorted by input value.
    """
    if n < 1:
        msg = "`n` must be a positive integer (got {})"
        raise ValueError(msg.format(n))
    if high <= low:
        msg = "`high` ({}) should be greater than `low` ({})"
        raise ValueError(msg.format(high, low))

    random_state = check_random_state(random_state)

    x = numpy.sort(random_state.uniform(low, high, size=n))
    y = numpy.sin(x)

    if noise > 0:
        y += noise * random_state.randn(n)

    logger.debug("Created sine dataset with {} examples".format(n))

    return [(numpy.array([xi]), numpy.array([yi])) for xi, yi in zip(x, y)]
